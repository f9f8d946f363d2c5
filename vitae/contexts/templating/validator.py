"""Pre-render checks for caller-supplied resume data."""

from typing import Any, Mapping

from vitae.contexts.templating.exceptions import InvalidResumeDataError

REQUIRED_FIELDS = ("personalInfo", "summary", "experience")
REQUIRED_PERSONAL_INFO = ("name", "email")


def validate_resume_data(data: Mapping[str, Any]) -> bool:
    """
    Check that resume JSON carries the fields a complete resume needs.

    Rendering itself tolerates missing data; this is an opt-in gate for callers
    that want to reject incomplete resumes before generating output.

    Args:
        data: Parsed resume JSON (camelCase keys)

    Returns:
        True if valid

    Raises:
        InvalidResumeDataError: Listing the missing fields
    """
    if not isinstance(data, Mapping):
        raise InvalidResumeDataError(f"Resume data must be an object, got {type(data).__name__}")

    missing = [name for name in REQUIRED_FIELDS if not data.get(name)]
    if missing:
        raise InvalidResumeDataError(f"Missing required fields: {', '.join(missing)}", missing)

    personal_info = data["personalInfo"]
    missing = [f"personalInfo.{name}" for name in REQUIRED_PERSONAL_INFO if not personal_info.get(name)]
    if missing:
        raise InvalidResumeDataError("Name and email are required in personalInfo", missing)

    return True
