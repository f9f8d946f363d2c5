"""Chromium rasterizer for staged resume content."""

from playwright.async_api import BrowserContext

from vitae.contexts.rendering.logger import _log_debug
from vitae.contexts.rendering.options import RasterizerOptions
from vitae.contexts.rendering.surface import MeasurableSurface


class PlaywrightRasterizer:
    """
    Prints a staged surface to PDF with Chromium.

    The surface snapshot is loaded into a dedicated page so that only the
    resume container is printed. That page is always closed afterwards.
    """

    def __init__(self, context: BrowserContext):
        self.context = context

    async def rasterize(self, surface: MeasurableSurface, options: RasterizerOptions) -> bytes:
        html = await surface.snapshot()
        pdf_kwargs = options.to_pdf_kwargs()
        _log_debug(f"Chromium pdf options: {pdf_kwargs}")

        page = await self.context.new_page()
        try:
            await page.set_content(html, wait_until="load")
            return await page.pdf(**pdf_kwargs)
        finally:
            await page.close()
