"""
Capability interfaces between PDF generation and the browser.

The generator only needs a staged surface it can normalize, measure and
snapshot, plus a rasterizer that prints a surface. Playwright implementations
live in staging.py and rasterizer.py; tests supply fakes.
"""

from typing import AsyncContextManager, Protocol, Tuple

from vitae.contexts.rendering.options import RasterizerOptions


class MeasurableSurface(Protocol):
    """Rendered resume content attached to a live document."""

    async def normalize_for_print(self, avoid_breaks: bool = True) -> None:
        """Strip screen-only styling and hint the rasterizer not to break inside elements."""
        ...

    async def measure(self) -> Tuple[float, float]:
        """Natural (width, height) of the content in CSS pixels."""
        ...

    async def snapshot(self) -> str:
        """Standalone HTML document of the content with its stylesheets."""
        ...


class StageFactory(Protocol):
    """Creates staging containers for rendered HTML."""

    def stage(self, html: str) -> AsyncContextManager[MeasurableSurface]:
        """Attach html off-screen, yield it as a surface, and always detach it."""
        ...


class Rasterizer(Protocol):
    """Turns a staged surface into PDF bytes; the generator writes the file."""

    async def rasterize(self, surface: MeasurableSurface, options: RasterizerOptions) -> bytes:
        ...
