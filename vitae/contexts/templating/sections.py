"""
Section renderer.

Expands each repeatable resume section into concatenated HTML fragments, one
fragment per entry in input order. Sections with no entries produce no
replacement, so their placeholders stay in the rendered document.
"""

from typing import Any, Callable, Dict, List, Sequence, Tuple

from jinja2 import TemplateError

from vitae.contexts.templating.exceptions import TemplateRenderError
from vitae.contexts.templating.registries import FragmentRegistry, get_fragment_registry
from vitae.contexts.templating.resume_data_structure import ResumeRecord

# (placeholder, fragment directory, entry selector) in substitution order
SECTIONS: Tuple[Tuple[str, str, Callable[[ResumeRecord], Sequence[Any]]], ...] = (
    ("professionalLinks", "professional_links", lambda r: r.professional_links),
    ("experience", "experience", lambda r: r.experience),
    ("projects", "projects", lambda r: r.projects),
    ("education", "education", lambda r: r.education),
    ("skillsGrouped", "skills_grouped", lambda r: r.skills.grouped),
    ("skillsFlat", "skills_flat", lambda r: r.skills.flat),
    ("languages", "languages", lambda r: r.languages),
    ("certifications", "certifications", lambda r: r.certifications),
    ("achievements", "achievements", lambda r: r.achievements),
    ("volunteer", "volunteer", lambda r: r.volunteer),
)

SECTION_PLACEHOLDERS = tuple(placeholder for placeholder, _, _ in SECTIONS)


def render_entries(section: str, entries: Sequence[Any], registry: FragmentRegistry) -> str:
    """
    Render one fragment per entry and concatenate them.

    Args:
        section: Fragment directory name (e.g., 'experience')
        entries: Section entries in display order
        registry: Registry supplying the fragment template

    Returns:
        Concatenated HTML

    Raises:
        TemplateRenderError: If the fragment template fails to load or render
    """
    try:
        template = registry.get_template(section)
        fragments: List[str] = [template.render(entry=entry) for entry in entries]
    except TemplateError as e:
        raise TemplateRenderError(
            f"Failed to render {section} fragment",
            section=section,
            template_path=registry.get_template_path(section),
            original_error=e,
        ) from e

    return "\n".join(fragments)


def render_sections(
    record: ResumeRecord, escape: bool = False, registry: FragmentRegistry = None
) -> Dict[str, str]:
    """
    Render every populated section of a resume.

    Args:
        record: Resume being rendered
        escape: HTML-escape entry values (ignored when registry is given)
        registry: Fragment registry override

    Returns:
        Dict of placeholder name -> rendered HTML, in substitution order.
        Empty sections are omitted.
    """
    if registry is None:
        registry = get_fragment_registry(escape)

    rendered = {}
    for placeholder, section, select in SECTIONS:
        entries = select(record)
        if not entries:
            continue
        rendered[placeholder] = render_entries(section, entries, registry)

    return rendered
