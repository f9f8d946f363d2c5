"""Custom exceptions for templating context."""

from pathlib import Path
from typing import Optional


class MissingDataError(ValueError):
    """Raised when a render is attempted before resume data (or templates) are set."""

    pass


class TemplateNotFoundError(KeyError):
    """
    Raised when an unknown template name is requested.

    Attributes:
        template_name: Requested name
        available: Names that were available at the time
    """

    def __init__(self, template_name: str, available=()):
        self.template_name = template_name
        self.available = list(available)
        super().__init__(template_name)

    def __str__(self) -> str:
        return f"Template {self.template_name} not found (available: {self.available})"


class TemplateLoadError(Exception):
    """
    Exception raised when retrieving a template document fails.

    Attributes:
        template_name: Template being loaded
        original_error: The error raised by the fetch callable
    """

    def __init__(self, template_name: str, original_error: Optional[Exception] = None):
        self.template_name = template_name
        self.original_error = original_error

        message = f"Error loading template {template_name}"
        if original_error:
            message += f": {original_error}"
        super().__init__(message)


class TemplateRenderError(Exception):
    """
    Exception raised when a section fragment fails to render.

    Attributes:
        message: Error description
        section: Name of the section being rendered
        template_path: Path to the fragment template file
        original_error: The original Jinja2 error
    """

    def __init__(
        self,
        message: str,
        section: Optional[str] = None,
        template_path: Optional[Path] = None,
        original_error: Optional[Exception] = None,
    ):
        self.message = message
        self.section = section
        self.template_path = template_path
        self.original_error = original_error

        parts = [message]

        if section and template_path:
            parts.append(f"\nTemplate: {template_path}")
            parts.append(f"Section: {section}")

        if original_error:
            parts.append(f"\nOriginal error: {str(original_error)}")

        super().__init__("\n".join(parts))


class InvalidResumeDataError(ValueError):
    """
    Exception raised when resume data is missing required fields.

    Attributes:
        missing: Names of the missing fields
    """

    def __init__(self, message: str, missing=()):
        self.missing = list(missing)
        super().__init__(message)
