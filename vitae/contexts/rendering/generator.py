"""
PDF Generation Module

Stages rendered resume HTML, sizes the output page from the measured content,
and hands the surface to a rasterizer.
"""

import asyncio
import os
import re
import time
from contextlib import asynccontextmanager
from dataclasses import dataclass
from pathlib import Path
from typing import AsyncIterator, Iterable, List, Optional, Tuple

from dotenv import load_dotenv
from playwright.async_api import async_playwright

from vitae.contexts.rendering.exceptions import RasterizationError
from vitae.contexts.rendering.geometry import PageGeometry, PageMode, compute_page_geometry
from vitae.contexts.rendering.logger import (
    _log_info,
    log_generation_failure,
    log_generation_result,
    log_generation_start,
    log_geometry,
)
from vitae.contexts.rendering.options import RasterizerOptions, load_rasterizer_options
from vitae.contexts.rendering.rasterizer import PlaywrightRasterizer
from vitae.contexts.rendering.staging import SETTLE_MS, PlaywrightStageFactory
from vitae.contexts.rendering.surface import Rasterizer, StageFactory
from vitae.utils.pdf_processing import page_count

load_dotenv()
OUTPUT_PATH = Path(os.getenv("VITAE_OUTPUT_PATH", "outs/results"))

# Delay between batch generations so the browser is not flooded
BATCH_DELAY_S = 1.0

BLANK_DOCUMENT = "<!DOCTYPE html><html><head><meta charset='utf-8'></head><body></body></html>"


@dataclass
class GenerationResult:
    """
    Result of PDF generation.

    Attributes:
        pdf_path: Path to the generated PDF
        geometry: Page geometry the PDF was printed with
        options: Rasterizer options actually used
        size_bytes: Size of the PDF byte stream
        page_count: Number of pages in the PDF (None if unreadable)
        elapsed_s: Wall-clock generation time
    """

    pdf_path: Path
    geometry: PageGeometry
    options: RasterizerOptions
    size_bytes: int = 0
    page_count: Optional[int] = None
    elapsed_s: float = 0.0


class PdfGenerator:
    """
    Generates PDFs from rendered resume HTML.

    Attributes:
        stage_factory: Provides off-screen staging containers
        rasterizer: Prints a staged surface to PDF
        output_dir: Directory receiving generated PDFs
        options: Default rasterizer options
    """

    def __init__(
        self,
        stage_factory: StageFactory,
        rasterizer: Rasterizer,
        output_dir: Path = None,
        options: RasterizerOptions = None,
    ):
        self.stage_factory = stage_factory
        self.rasterizer = rasterizer
        self.output_dir = Path(output_dir) if output_dir is not None else OUTPUT_PATH
        self.options = options if options is not None else load_rasterizer_options()

    async def generate(
        self,
        html: str,
        filename: str = "resume.pdf",
        mode: PageMode = PageMode.SINGLE_PAGE,
        options: RasterizerOptions = None,
    ) -> GenerationResult:
        """
        Generate a PDF from rendered resume HTML.

        Args:
            html: Rendered resume document (must contain a .resume-container)
            filename: Output file name inside output_dir
            mode: SINGLE_PAGE (one page sized to content) or FIXED_A4 (paginated)
            options: Rasterizer options (defaults to the generator's options)

        Returns:
            GenerationResult

        Raises:
            RasterizationError: If staging or rasterization fails. The staging
                container has been removed and any existing file at the output
                path is left untouched.
        """
        options = options if options is not None else self.options
        mode = PageMode(mode)
        self.output_dir.mkdir(parents=True, exist_ok=True)
        pdf_path = self.output_dir / filename

        log_generation_start(filename, mode.value)
        start_time = time.time()

        try:
            async with self.stage_factory.stage(html) as surface:
                await surface.normalize_for_print(avoid_breaks=options.avoid_all_breaks)
                width_px, height_px = await surface.measure()

                geometry = compute_page_geometry(width_px, height_px, mode, options.margin)
                log_geometry(width_px, height_px, geometry)

                run_options = options.with_geometry(geometry, filename=str(pdf_path))
                pdf_bytes = await self.rasterizer.rasterize(surface, run_options)
        except RasterizationError as e:
            log_generation_failure(filename, e, time.time() - start_time)
            raise
        except Exception as e:
            log_generation_failure(filename, e, time.time() - start_time)
            raise RasterizationError("Error generating PDF", filename=filename, original_error=e) from e

        # A previous PDF at pdf_path is only replaced once the new bytes are on disk
        partial_path = pdf_path.with_name(f".{pdf_path.name}.partial")
        partial_path.write_bytes(pdf_bytes)
        os.replace(partial_path, pdf_path)

        result = GenerationResult(
            pdf_path=pdf_path,
            geometry=geometry,
            options=run_options,
            size_bytes=len(pdf_bytes),
            page_count=page_count(pdf_path),
            elapsed_s=time.time() - start_time,
        )
        log_generation_result(result, result.elapsed_s)
        return result


@asynccontextmanager
async def open_pdf_generator(
    output_dir: Path = None,
    options: RasterizerOptions = None,
    settle_ms: int = SETTLE_MS,
    headless: bool = True,
) -> AsyncIterator[PdfGenerator]:
    """
    Launch headless Chromium and yield a generator bound to it.

    Example:
        async with open_pdf_generator() as generator:
            await generator.generate(html, "ann-lee-resume.pdf")
    """
    async with async_playwright() as playwright:
        browser = await playwright.chromium.launch(headless=headless)
        try:
            context = await browser.new_context()
            page = await context.new_page()
            await page.set_content(BLANK_DOCUMENT)
            yield PdfGenerator(
                stage_factory=PlaywrightStageFactory(page, settle_ms=settle_ms),
                rasterizer=PlaywrightRasterizer(context),
                output_dir=output_dir,
                options=options,
            )
        finally:
            await browser.close()


def resume_filename(name: str) -> str:
    """
    Output file name for a person's resume.

    Example:
        resume_filename("Ann Lee")  # "Ann-Lee-resume.pdf"
    """
    name = name.strip()
    if not name:
        return "resume.pdf"
    return re.sub(r"\s+", "-", name) + "-resume.pdf"


async def batch_generate(
    generator: PdfGenerator,
    documents: Iterable[Tuple[str, str]],
    mode: PageMode = PageMode.SINGLE_PAGE,
    delay_s: float = BATCH_DELAY_S,
) -> List[GenerationResult]:
    """
    Generate PDFs one after another with a fixed delay in between.

    Generation is serial and stops at the first failure; there are no retries.

    Args:
        generator: PdfGenerator to use
        documents: (filename, rendered html) pairs
        mode: Page mode for every document
        delay_s: Pause between consecutive generations

    Returns:
        Results in input order

    Raises:
        RasterizationError: From the first document that fails
    """
    results = []
    for index, (filename, html) in enumerate(documents):
        if index:
            await asyncio.sleep(delay_s)
        results.append(await generator.generate(html, filename=filename, mode=mode))

    _log_info(f"Batch complete: {len(results)} PDF(s)")
    return results
