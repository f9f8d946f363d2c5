"""
Rendering Context

Responsibilities:
- Stages rendered resume HTML off-screen and measures it
- Computes output page geometry (single tall page or paginated A4)
- Hands staged content to a rasterizer and manages output files
- Preview and print fallbacks

Owns: Page geometry, staging container lifecycle, PDF output
Never: Modifies template content
"""

from vitae.contexts.rendering.exceptions import RasterizationError
from vitae.contexts.rendering.generator import (
    GenerationResult,
    PdfGenerator,
    batch_generate,
    open_pdf_generator,
    resume_filename,
)
from vitae.contexts.rendering.geometry import (
    PageGeometry,
    PageMode,
    compute_page_geometry,
    px_to_mm,
)
from vitae.contexts.rendering.options import RasterizerOptions, load_rasterizer_options

__all__ = [
    "PdfGenerator",
    "GenerationResult",
    "open_pdf_generator",
    "batch_generate",
    "resume_filename",
    "PageGeometry",
    "PageMode",
    "compute_page_geometry",
    "px_to_mm",
    "RasterizerOptions",
    "load_rasterizer_options",
    "RasterizationError",
]
