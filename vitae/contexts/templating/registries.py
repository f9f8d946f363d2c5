"""
Fragment Registry

Loads and caches the Jinja2 fragment templates that give each resume section
its fixed HTML shape.
"""

import os
from functools import lru_cache
from pathlib import Path
from typing import Dict

from dotenv import load_dotenv
from jinja2 import Environment, FileSystemLoader, StrictUndefined, Template, TemplateNotFound

load_dotenv()
TYPES_PATH = Path(os.getenv("VITAE_FRAGMENT_TYPES_PATH", Path(__file__).parent / "types"))

FRAGMENT_FILENAME = "fragment.html.jinja"


class FragmentRegistry:
    """
    Registry for loading and caching per-section Jinja2 fragment templates.

    Fragments are stored in contexts/templating/types/{section}/fragment.html.jinja
    and use custom delimiters so they can never emit resume placeholders:
    - Variable: <<< var >>>
    - Block: <%% block %%> / <%% endblock %%>
    """

    def __init__(self, types_base_path: Path = None, escape: bool = False):
        """
        Initialize the fragment registry.

        Args:
            types_base_path: Base path for section directories. Defaults to
                           VITAE_FRAGMENT_TYPES_PATH from environment
            escape: HTML-escape every interpolated value
        """
        if types_base_path is None:
            types_base_path = TYPES_PATH

        self.types_base_path = Path(types_base_path)
        self.escape = escape
        self._cache: Dict[str, Template] = {}

        self.env = Environment(
            loader=FileSystemLoader(str(self.types_base_path)),
            # Catches typos in fragment templates
            undefined=StrictUndefined,
            autoescape=escape,
            variable_start_string="<<<",
            variable_end_string=">>>",
            block_start_string="<%%",
            block_end_string="%%>",
            comment_start_string="<#",
            comment_end_string="#>",
            trim_blocks=True,
            lstrip_blocks=True,
            keep_trailing_newline=False,
        )

    def get_template(self, section: str) -> Template:
        """
        Get a fragment template by section name, loading and caching it if necessary.

        Args:
            section: Name of the section (e.g., 'experience')

        Returns:
            Jinja2 Template object

        Raises:
            TemplateNotFound: If fragment file doesn't exist
            TemplateSyntaxError: If fragment has Jinja2 syntax errors
        """
        if section in self._cache:
            return self._cache[section]

        template_path = f"{section}/{FRAGMENT_FILENAME}"

        try:
            template = self.env.get_template(template_path)
        except TemplateNotFound as e:
            raise TemplateNotFound(
                f"Fragment not found for section '{section}' at {self.types_base_path / template_path}"
            ) from e

        self._cache[section] = template
        return template

    def get_template_path(self, section: str) -> Path:
        """Get the file path for a section's fragment template."""
        return self.types_base_path / section / FRAGMENT_FILENAME

    def clear_cache(self):
        """Clear the template cache."""
        self._cache.clear()

    def is_cached(self, section: str) -> bool:
        """Check if a fragment template is in the cache."""
        return section in self._cache


@lru_cache(maxsize=None)
def get_fragment_registry(escape: bool = False) -> FragmentRegistry:
    """Shared registry for the packaged fragments (one per escape mode)."""
    return FragmentRegistry(escape=escape)
