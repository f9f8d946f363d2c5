"""
Shared utilities for vitae.

Common functionality used across contexts:
- Logger setup
- Timestamps
- PDF inspection
"""

from vitae.utils.pdf_processing import page_count
from vitae.utils.timestamp import now

__all__ = ["page_count", "now"]
