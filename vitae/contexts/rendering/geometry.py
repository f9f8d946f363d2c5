"""
Page geometry for PDF output.

Pure sizing functions: given the measured pixel size of rendered resume
content, compute the page the rasterizer should print to. Two modes:

- SINGLE_PAGE: A4 width, height grown to fit the whole document on one page
- FIXED_A4: standard A4 pages, content scaled down to fit the printable width
  and paginated by the rasterizer
"""

import math
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple

# 96 px per inch, 25.4 mm per inch
PX_TO_MM = 0.264583

A4_WIDTH_MM = 210.0
A4_HEIGHT_MM = 297.0

# Extra height added below single-page content
PAGE_PADDING_MM = 10.0
MIN_CONTENT_HEIGHT_MM = 1.0

# top, right, bottom, left
DEFAULT_MARGINS_MM = (5.0, 5.0, 5.0, 5.0)


class PageMode(str, Enum):
    SINGLE_PAGE = "single_page"
    FIXED_A4 = "a4"


@dataclass(frozen=True)
class PageGeometry:
    """
    Output page specification.

    Attributes:
        width_mm: Page width
        height_mm: Page height
        margins_mm: (top, right, bottom, left) margins
        scale: Content scale factor applied by the rasterizer
        page_format: Named format ("a4") or None for a custom size
        orientation: "portrait" or "landscape"
        paginated: Whether content may flow onto multiple pages
        content_width_mm: Measured content width
        content_height_mm: Measured content height
        estimated_pages: Expected page count
    """

    width_mm: float
    height_mm: float
    margins_mm: Tuple[float, float, float, float] = DEFAULT_MARGINS_MM
    scale: float = 1.0
    page_format: Optional[str] = None
    orientation: str = "portrait"
    paginated: bool = False
    content_width_mm: float = 0.0
    content_height_mm: float = 0.0
    estimated_pages: int = 1

    @property
    def printable_width_mm(self) -> float:
        return self.width_mm - self.margins_mm[1] - self.margins_mm[3]

    @property
    def printable_height_mm(self) -> float:
        return self.height_mm - self.margins_mm[0] - self.margins_mm[2]


def px_to_mm(px: float) -> float:
    """Convert CSS pixels to millimeters."""
    return px * PX_TO_MM


def _fit_scale(content_width_mm: float, printable_width_mm: float) -> float:
    """Scale that fits content to the printable width without enlarging it."""
    if content_width_mm > printable_width_mm:
        return printable_width_mm / content_width_mm
    return 1.0


def single_page_geometry(
    content_width_px: float,
    content_height_px: float,
    margins_mm: Tuple[float, float, float, float] = DEFAULT_MARGINS_MM,
) -> PageGeometry:
    """
    One continuous page exactly tall enough for the content.

    Height is the content height (at least 1mm) plus a fixed 10mm padding.
    Content wider than the printable width is scaled down to fit it.

    Example:
        single_page_geometry(794, 1000)  # 210mm x ~274.58mm
    """
    content_width_mm = px_to_mm(content_width_px)
    content_height_mm = max(px_to_mm(content_height_px), MIN_CONTENT_HEIGHT_MM)
    printable_width = A4_WIDTH_MM - margins_mm[1] - margins_mm[3]

    return PageGeometry(
        width_mm=A4_WIDTH_MM,
        height_mm=content_height_mm + PAGE_PADDING_MM,
        margins_mm=margins_mm,
        scale=_fit_scale(content_width_mm, printable_width),
        page_format=None,
        paginated=False,
        content_width_mm=content_width_mm,
        content_height_mm=content_height_mm,
        estimated_pages=1,
    )


def fixed_page_geometry(
    content_width_px: float,
    content_height_px: float,
    margins_mm: Tuple[float, float, float, float] = DEFAULT_MARGINS_MM,
) -> PageGeometry:
    """
    Standard A4 pages with content scaled to the printable width.

    Content narrower than the printable width is not enlarged (scale <= 1).
    """
    content_width_mm = px_to_mm(content_width_px)
    content_height_mm = max(px_to_mm(content_height_px), MIN_CONTENT_HEIGHT_MM)

    printable_width = A4_WIDTH_MM - margins_mm[1] - margins_mm[3]
    printable_height = A4_HEIGHT_MM - margins_mm[0] - margins_mm[2]

    scale = _fit_scale(content_width_mm, printable_width)

    pages = max(1, math.ceil(round(content_height_mm * scale / printable_height, 6)))

    return PageGeometry(
        width_mm=A4_WIDTH_MM,
        height_mm=A4_HEIGHT_MM,
        margins_mm=margins_mm,
        scale=scale,
        page_format="a4",
        paginated=True,
        content_width_mm=content_width_mm,
        content_height_mm=content_height_mm,
        estimated_pages=pages,
    )


def compute_page_geometry(
    content_width_px: float,
    content_height_px: float,
    mode: PageMode = PageMode.SINGLE_PAGE,
    margins_mm: Tuple[float, float, float, float] = DEFAULT_MARGINS_MM,
) -> PageGeometry:
    """Dispatch to the sizing function for a page mode."""
    mode = PageMode(mode)
    if mode is PageMode.FIXED_A4:
        return fixed_page_geometry(content_width_px, content_height_px, margins_mm)
    return single_page_geometry(content_width_px, content_height_px, margins_mm)
