"""
Session logging for vitae commands.

Each command run gets its own log directory holding one log file per context.
The file opens with a provenance header recording how the run was invoked and
which VITAE_* settings were in effect, so a PDF can be traced back to the
templates, presets and settle time that produced it.

Context-specific wrappers live in contexts/{context}/logger.py.
"""

import os
import sys
from pathlib import Path
from typing import Any, Dict, Optional

from dotenv import load_dotenv
from loguru import logger

from vitae import __version__

load_dotenv()

# Environment settings read across contexts; reported in every provenance header
SETTINGS = (
    "VITAE_TEMPLATES_PATH",
    "VITAE_FRAGMENT_TYPES_PATH",
    "VITAE_PDF_PRESETS_PATH",
    "VITAE_OUTPUT_PATH",
    "VITAE_LOGS_PATH",
    "VITAE_SETTLE_MS",
)

FILE_FORMAT = "{time:YYYY-MM-DD HH:mm:ss} | {level: <7} | {message}"
CONSOLE_FORMAT = "{time:HH:mm:ss} | <level>{level: <7}</level> | <level>{message}</level>"


def active_settings() -> Dict[str, str]:
    """VITAE_* settings as seen by this process ("default" where unset)."""
    return {name: os.getenv(name, "default") for name in SETTINGS}


def setup_logger(
    context_name: str,
    log_dir: Path,
    provenance: Optional[Dict[str, Any]] = None,
    console_level: str = "INFO",
) -> Path:
    """
    Route loguru output for one command run.

    Replaces any existing sinks with a DEBUG file sink in log_dir and a
    colorized console sink, then writes the provenance header.

    Args:
        context_name: Context identifier, also the log file stem ("render", "template")
        log_dir: Directory for this run (e.g., outs/logs/render_20261018_142501)
        provenance: Run-specific entries for the header; None values are skipped
        console_level: Minimum level echoed to stdout

    Returns:
        Path to log file
    """
    log_dir.mkdir(exist_ok=True, parents=True)
    log_file = log_dir / f"{context_name}.log"

    logger.remove()
    logger.add(log_file, format=FILE_FORMAT, level="DEBUG")
    logger.add(sys.stdout, format=CONSOLE_FORMAT, level=console_level, colorize=True)

    log_provenance(context_name, provenance)
    return log_file


def log_provenance(context_name: str, provenance: Optional[Dict[str, Any]] = None) -> None:
    """Write the run header: invocation, vitae version, VITAE_* settings, then run entries."""
    header: Dict[str, Any] = {
        "Context": context_name,
        "Command": " ".join(sys.argv),
        "Working directory": Path.cwd(),
        "Python": sys.version.split()[0],
        "vitae": __version__,
        **active_settings(),
        **(provenance or {}),
    }

    logger.info("=" * 80)
    for key, value in header.items():
        if value is not None:
            logger.info(f"{key}: {value}")
    logger.info("=" * 80)
