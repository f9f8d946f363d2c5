"""
Field substitution for scalar resume placeholders.

Values are inserted verbatim unless escape=True. Callers rendering untrusted
input must opt in to escaping.
"""

from typing import Dict

from markupsafe import escape as html_escape

from vitae.contexts.templating.resume_data_structure import ResumeRecord

# Placeholder name -> PersonalInfo attribute
PERSONAL_INFO_FIELDS = {
    "name": "name",
    "title": "title",
    "email": "email",
    "phone": "phone",
    "location": "location",
    "website": "website",
    "initials": "initials",
}

SCALAR_PLACEHOLDERS = tuple(PERSONAL_INFO_FIELDS) + ("summary",)


def scalar_fields(record: ResumeRecord, escape: bool = False) -> Dict[str, str]:
    """
    Map every scalar placeholder to its resolved value.

    Absent fields resolve to the empty string, so scalar placeholders are
    always substituted.

    Args:
        record: Resume being rendered
        escape: HTML-escape values

    Returns:
        Dict of placeholder name -> replacement text
    """
    values = {
        placeholder: getattr(record.personal_info, attribute)
        for placeholder, attribute in PERSONAL_INFO_FIELDS.items()
    }
    values["summary"] = record.summary

    if escape:
        return {name: str(html_escape(value)) for name, value in values.items()}
    return values
