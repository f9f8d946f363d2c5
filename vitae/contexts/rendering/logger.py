"""
Rendering context logger.

Provides logging interface for rendering context with automatic [render] prefix.
All rendering modules should import from this module, not from utils.logger directly.
"""

from pathlib import Path

from loguru import logger

from vitae.utils.logger import setup_logger as _setup_logger

CONTEXT_PREFIX = "[render]"


def setup_rendering_logger(log_dir: Path, page_mode: str = None) -> Path:
    """
    Setup logger for rendering context.

    Args:
        log_dir: Directory for this rendering session
        page_mode: Page mode used for this session (provenance only)

    Returns:
        Path to log file
    """
    return _setup_logger(
        context_name="render",
        log_dir=log_dir,
        provenance={"Page mode": page_mode},
    )


# Wrapper functions with automatic [render] prefix


def _log_info(message: str) -> None:
    """Log info message with [render] prefix."""
    logger.info(f"{CONTEXT_PREFIX} {message}")


def _log_success(message: str) -> None:
    """Log success message with [render] prefix."""
    logger.success(f"{CONTEXT_PREFIX} {message}")


def _log_error(message: str) -> None:
    """Log error message with [render] prefix."""
    logger.error(f"{CONTEXT_PREFIX} {message}")


def _log_warning(message: str) -> None:
    """Log warning message with [render] prefix."""
    logger.warning(f"{CONTEXT_PREFIX} {message}")


def _log_debug(message: str) -> None:
    """Log debug message with [render] prefix."""
    logger.debug(f"{CONTEXT_PREFIX} {message}")


# High-level rendering-specific logging helpers


def log_generation_start(filename: str, mode: str) -> None:
    """Log start of PDF generation."""
    _log_info(f"Generating PDF: {filename}")
    _log_debug(f"  Page mode: {mode}")


def log_geometry(width_px: float, height_px: float, geometry) -> None:
    """Log measured content size and the page computed from it."""
    _log_debug(f"  Content: {width_px:.0f}x{height_px:.0f}px")
    _log_debug(
        f"  Page: {geometry.width_mm:.1f}x{geometry.height_mm:.1f}mm "
        f"(scale {geometry.scale:.3f}, ~{geometry.estimated_pages} page(s))"
    )


def log_generation_result(
    result,  # GenerationResult
    elapsed_time: float,
) -> None:
    """
    Log a successful generation.

    Args:
        result: GenerationResult from PdfGenerator.generate()
        elapsed_time: Time taken to generate
    """
    _log_success(f"PDF generated successfully ({elapsed_time:.2f}s)")
    _log_info(f"  PDF: {result.pdf_path}")
    if result.page_count is None:
        _log_warning("  Could not read page count from PDF")
    else:
        _log_debug(f"  Pages: {result.page_count}")


def log_generation_failure(filename: str, error: Exception, elapsed_time: float) -> None:
    """Log a failed generation (the staging container is already removed)."""
    _log_error(f"Error generating PDF {filename} ({elapsed_time:.2f}s)")
    _log_error(f"  {error}")
