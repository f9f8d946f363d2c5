"""Custom exceptions for rendering context."""

from typing import Optional


class RasterizationError(Exception):
    """
    Raised when PDF generation fails.

    Covers rasterizer failures and staged content missing its resume container.
    Always raised after the staging container has been removed.

    Attributes:
        filename: Output file being generated
        original_error: The underlying rasterizer error, if any
    """

    def __init__(
        self,
        message: str,
        filename: Optional[str] = None,
        original_error: Optional[Exception] = None,
    ):
        self.message = message
        self.filename = filename
        self.original_error = original_error

        parts = [message]
        if filename:
            parts.append(f"File: {filename}")
        if original_error:
            parts.append(f"Original error: {original_error}")

        super().__init__("\n".join(parts))
