"""
Template library and resume session.

A ResumeSession owns everything that used to be implicit orchestrator state:
the loaded template bodies, the currently selected template name, and the last
resume data set by the caller. Each render recomputes the HTML from scratch.
"""

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Callable, Dict, List, Mapping, Optional, Sequence, Union

from dotenv import load_dotenv

from vitae.contexts.templating.composer import render, unresolved_placeholders
from vitae.contexts.templating.exceptions import (
    MissingDataError,
    TemplateLoadError,
    TemplateNotFoundError,
)
from vitae.contexts.templating.logger import (
    _log_debug,
    _log_error,
    _log_info,
    log_render_result,
    log_templates_loaded,
)
from vitae.contexts.templating.resume_data_structure import ResumeRecord, coerce_resume

load_dotenv()
TEMPLATES_PATH = Path(os.getenv("VITAE_TEMPLATES_PATH", Path(__file__).parent / "templates"))

DEFAULT_TEMPLATE_NAMES = ("template1", "template2")
DEFAULT_TEMPLATE = "template1"

TemplateFetcher = Callable[[str], str]


def read_template_file(name: str) -> str:
    """Read a named template from VITAE_TEMPLATES_PATH (e.g., template1 -> template1.html)."""
    return (TEMPLATES_PATH / f"{name}.html").read_text(encoding="utf-8")


def load_templates(
    names: Sequence[str] = DEFAULT_TEMPLATE_NAMES, fetch: TemplateFetcher = read_template_file
) -> Dict[str, str]:
    """
    Retrieve template documents with a caller-supplied fetch callable.

    All templates load or none do.

    Args:
        names: Template names to load
        fetch: Callable returning the template text for a name

    Returns:
        Dict of template name -> template text

    Raises:
        TemplateLoadError: If any fetch fails
    """
    templates = {}
    for name in names:
        try:
            templates[name] = fetch(name)
        except Exception as e:
            _log_error(f"Error loading templates: {e}")
            raise TemplateLoadError(name, original_error=e) from e

    log_templates_loaded(templates)
    return templates


@dataclass
class ResumeSession:
    """
    Rendering session with explicit ownership of templates, selection and data.

    Attributes:
        templates: Template name -> template text
        current_template: Name used by generate_html()
        resume_data: Last data set via set_resume_data()
        escape: HTML-escape resume values when rendering
    """

    templates: Dict[str, str] = field(default_factory=dict)
    current_template: str = DEFAULT_TEMPLATE
    resume_data: Optional[ResumeRecord] = None
    escape: bool = False

    @classmethod
    def initialize(
        cls,
        names: Sequence[str] = DEFAULT_TEMPLATE_NAMES,
        fetch: TemplateFetcher = read_template_file,
        escape: bool = False,
    ) -> "ResumeSession":
        """
        Create a session with its templates loaded.

        Raises:
            TemplateLoadError: If any template cannot be retrieved
        """
        return cls(templates=load_templates(names, fetch), escape=escape)

    def set_resume_data(self, data: Union[ResumeRecord, Mapping[str, Any], str]) -> None:
        """Set the resume data from a record, parsed JSON, or JSON text."""
        self.resume_data = coerce_resume(data)

    def set_template(self, template_name: str) -> bool:
        """
        Select the template used for rendering.

        Unknown names are logged and leave the current selection unchanged.

        Returns:
            True if the template was selected
        """
        if template_name not in self.templates:
            error = TemplateNotFoundError(template_name, available=self.templates)
            _log_error(str(error))
            return False

        self.current_template = template_name
        _log_debug(f"Template selected: {template_name}")
        return True

    def add_template(self, template_name: str, template_html: str) -> None:
        """Register a custom template under a name (replacing any existing one)."""
        self.templates[template_name] = template_html
        _log_info(f"Custom template added: {template_name}")

    def available_templates(self) -> List[str]:
        return list(self.templates)

    def generate_html(self) -> str:
        """
        Render the current template with the current data.

        Raises:
            MissingDataError: If no data is set or templates are not loaded
        """
        if self.resume_data is None:
            raise MissingDataError("Resume data not set. Call set_resume_data() first.")
        if self.current_template not in self.templates:
            raise MissingDataError(
                f"Template {self.current_template} not loaded. Call initialize() first."
            )

        html = render(self.templates[self.current_template], self.resume_data, escape=self.escape)
        log_render_result(self.current_template, html, unresolved_placeholders(html))
        return html
