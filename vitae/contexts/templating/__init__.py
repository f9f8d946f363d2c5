"""
Templating Context

Responsibilities:
- Represents resume data (ResumeRecord) built from resume JSON
- Substitutes scalar fields and section fragments into HTML templates
- Loads named templates and tracks the caller's template selection

Owns: Resume data model, placeholder substitution, section fragment shapes
Never: Measures layout or produces PDFs
"""

from vitae.contexts.templating.composer import (
    find_placeholders,
    render,
    unresolved_placeholders,
)
from vitae.contexts.templating.exceptions import (
    InvalidResumeDataError,
    MissingDataError,
    TemplateLoadError,
    TemplateNotFoundError,
    TemplateRenderError,
)
from vitae.contexts.templating.resume_data_structure import ResumeRecord, coerce_resume
from vitae.contexts.templating.session import ResumeSession, load_templates
from vitae.contexts.templating.validator import validate_resume_data

__all__ = [
    # Rendering
    "render",
    "find_placeholders",
    "unresolved_placeholders",
    # Session and template library
    "ResumeSession",
    "load_templates",
    # Data
    "ResumeRecord",
    "coerce_resume",
    "validate_resume_data",
    # Errors
    "MissingDataError",
    "TemplateNotFoundError",
    "TemplateLoadError",
    "TemplateRenderError",
    "InvalidResumeDataError",
]
