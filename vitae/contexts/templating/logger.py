"""
Templating context logger.

Provides logging interface for templating context with automatic [template] prefix.
All templating modules should import from this module, not from utils.logger directly.
"""

from pathlib import Path

from loguru import logger

from vitae.utils.logger import setup_logger as _setup_logger

CONTEXT_PREFIX = "[template]"


def setup_templating_logger(log_dir: Path, template_name: str = None) -> Path:
    """
    Setup logger for templating context.

    Args:
        log_dir: Directory for this templating session
        template_name: Template selected for this session (provenance only)

    Returns:
        Path to log file
    """
    return _setup_logger(
        context_name="template",
        log_dir=log_dir,
        provenance={"Template": template_name},
    )


# Wrapper functions with automatic [template] prefix


def _log_info(message: str) -> None:
    """Log info message with [template] prefix."""
    logger.info(f"{CONTEXT_PREFIX} {message}")


def _log_success(message: str) -> None:
    """Log success message with [template] prefix."""
    logger.success(f"{CONTEXT_PREFIX} {message}")


def _log_error(message: str) -> None:
    """Log error message with [template] prefix."""
    logger.error(f"{CONTEXT_PREFIX} {message}")


def _log_warning(message: str) -> None:
    """Log warning message with [template] prefix."""
    logger.warning(f"{CONTEXT_PREFIX} {message}")


def _log_debug(message: str) -> None:
    """Log debug message with [template] prefix."""
    logger.debug(f"{CONTEXT_PREFIX} {message}")


# High-level templating-specific logging helpers


def log_templates_loaded(names) -> None:
    """Log the set of templates available after initialization."""
    _log_success(f"Templates loaded: {', '.join(names)}")


def log_render_result(template_name: str, html: str, unresolved) -> None:
    """
    Log outcome of a render pass.

    Args:
        template_name: Template that was rendered
        html: Rendered document
        unresolved: Placeholders still present in the output
    """
    _log_debug(f"Rendered {template_name} ({len(html)} chars)")
    if unresolved:
        _log_warning(f"  Placeholders left in place: {', '.join(unresolved)}")
