"""Timestamp helpers for log and output directory names."""

from datetime import datetime


def now() -> str:
    """Current local time as a directory-safe stamp (e.g., 20261018_142501)."""
    return datetime.now().strftime("%Y%m%d_%H%M%S")
