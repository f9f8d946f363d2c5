"""
Template Composer

Substitutes resume data into an HTML template in a single pass. Scalar fields
and rendered sections are collected into one placeholder -> replacement map,
which is then applied by scanning the template once. Replacements are never
rescanned, so a value that happens to contain "{{...}}" stays literal.

Placeholder policy:
- Scalar placeholders are always replaced (absent values become "")
- Section placeholders are replaced only when the section has entries
- Unknown placeholders are left untouched
"""

import re
from typing import Any, Dict, List, Mapping, Union

from vitae.contexts.templating.exceptions import MissingDataError
from vitae.contexts.templating.fields import scalar_fields
from vitae.contexts.templating.registries import FragmentRegistry
from vitae.contexts.templating.resume_data_structure import ResumeRecord, coerce_resume
from vitae.contexts.templating.sections import render_sections

PLACEHOLDER_PATTERN = re.compile(r"\{\{(\w+)\}\}")


def build_substitutions(
    record: ResumeRecord, escape: bool = False, registry: FragmentRegistry = None
) -> Dict[str, str]:
    """
    Resolve every placeholder the record can fill.

    Order: scalar fields, then sections (links, experience, projects, education,
    skills, languages, certifications, achievements, volunteer).
    """
    substitutions = scalar_fields(record, escape=escape)
    substitutions.update(render_sections(record, escape=escape, registry=registry))
    return substitutions


def substitute(template: str, substitutions: Mapping[str, str]) -> str:
    """
    Replace each known placeholder in one left-to-right scan.

    Args:
        template: Template text containing {{name}} placeholders
        substitutions: Placeholder name -> replacement

    Returns:
        Text with known placeholders replaced and unknown ones kept verbatim
    """

    def _replace(match: re.Match) -> str:
        name = match.group(1)
        if name in substitutions:
            return substitutions[name]
        return match.group(0)

    return PLACEHOLDER_PATTERN.sub(_replace, template)


def render(
    template: str,
    data: Union[ResumeRecord, Mapping[str, Any], str, None],
    escape: bool = False,
    registry: FragmentRegistry = None,
) -> str:
    """
    Render a resume template with data.

    Args:
        template: HTML template text
        data: ResumeRecord, parsed resume JSON, or JSON text
        escape: HTML-escape resume values before insertion
        registry: Fragment registry override (tests, custom fragment sets)

    Returns:
        Rendered HTML

    Raises:
        MissingDataError: If data is None or JSON text decoding to null
        TypeError: If data is not a resume object
        TemplateRenderError: If a section fragment fails to render

    Example:
        >>> render("<h1>{{name}}</h1>", {"personalInfo": {"name": "Ann Lee"}})
        '<h1>Ann Lee</h1>'
    """
    record = coerce_resume(data)
    if record is None:
        raise MissingDataError("Resume data not set. Call set_resume_data() first.")

    return substitute(template, build_substitutions(record, escape=escape, registry=registry))


def find_placeholders(template: str) -> List[str]:
    """List distinct placeholder names in order of first appearance."""
    seen = {}
    for match in PLACEHOLDER_PATTERN.finditer(template):
        seen.setdefault(match.group(1), None)
    return list(seen)


def unresolved_placeholders(html: str) -> List[str]:
    """Placeholders still present after rendering (empty sections, unknown names)."""
    return find_placeholders(html)
