"""
Off-screen staging of rendered HTML in a Playwright page.

Each stage() call creates its own uniquely named container, so overlapping
generations on the same page never share DOM state. The container is removed
when the context exits, including when measurement or rasterization fails.
"""

import os
import uuid
from contextlib import asynccontextmanager
from typing import AsyncIterator, Tuple

from dotenv import load_dotenv
from playwright.async_api import ElementHandle, Page

from vitae.contexts.rendering.exceptions import RasterizationError
from vitae.contexts.rendering.logger import _log_debug

load_dotenv()
SETTLE_MS = int(os.getenv("VITAE_SETTLE_MS", "500"))

RESUME_CONTAINER_SELECTOR = ".resume-container"

_CREATE_CONTAINER_JS = """
([containerId, html]) => {
  const container = document.createElement('div');
  container.id = containerId;
  container.innerHTML = html;
  container.style.position = 'fixed';
  container.style.top = '0';
  container.style.left = '-9999px';
  container.style.width = '210mm';
  container.style.backgroundColor = 'white';
  document.body.appendChild(container);
}
"""

_REMOVE_CONTAINER_JS = """
(containerId) => {
  const container = document.getElementById(containerId);
  if (container) container.remove();
}
"""

_NORMALIZE_JS = """
(el, avoidBreaks) => {
  el.style.boxShadow = 'none';
  el.style.borderRadius = '0';
  el.style.maxWidth = 'none';
  el.style.margin = '0';
  if (!avoidBreaks) return;
  for (const node of [el, ...el.querySelectorAll('*')]) {
    node.style.breakInside = 'avoid';
    node.style.pageBreakInside = 'avoid';
  }
}
"""

_MEASURE_JS = "(el) => [el.scrollWidth, el.scrollHeight]"

_SNAPSHOT_JS = """
(el) => {
  const styles = Array.from(document.querySelectorAll('style, link[rel="stylesheet"]'))
    .map((node) => node.outerHTML)
    .join('\\n');
  return '<!DOCTYPE html><html><head><meta charset="utf-8">' + styles +
    '</head><body style="margin:0;background:white"><div style="width:' + el.scrollWidth +
    'px">' + el.outerHTML + '</div></body></html>';
}
"""


class PlaywrightSurface:
    """Staged resume container inside a live Playwright page."""

    def __init__(self, element: ElementHandle):
        self.element = element

    async def normalize_for_print(self, avoid_breaks: bool = True) -> None:
        await self.element.evaluate(_NORMALIZE_JS, avoid_breaks)

    async def measure(self) -> Tuple[float, float]:
        width, height = await self.element.evaluate(_MEASURE_JS)
        return float(width), float(height)

    async def snapshot(self) -> str:
        return await self.element.evaluate(_SNAPSHOT_JS)


class PlaywrightStageFactory:
    """
    Stages rendered HTML off-screen in an existing page.

    Attributes:
        page: Page hosting the staging containers
        settle_ms: Time to wait for layout (fonts, images) before measuring
    """

    def __init__(self, page: Page, settle_ms: int = SETTLE_MS):
        self.page = page
        self.settle_ms = settle_ms

    @asynccontextmanager
    async def stage(self, html: str) -> AsyncIterator[PlaywrightSurface]:
        """
        Attach html off-screen and yield its resume container.

        Raises:
            RasterizationError: If the rendered HTML has no .resume-container
        """
        container_id = f"vitae-staging-{uuid.uuid4().hex}"
        await self.page.evaluate(_CREATE_CONTAINER_JS, [container_id, html])
        _log_debug(f"Staging container attached: {container_id}")

        try:
            await self.page.wait_for_timeout(self.settle_ms)

            element = await self.page.query_selector(f"#{container_id} {RESUME_CONTAINER_SELECTOR}")
            if element is None:
                raise RasterizationError("Resume container not found")

            yield PlaywrightSurface(element)
        finally:
            await self.page.evaluate(_REMOVE_CONTAINER_JS, container_id)
            _log_debug(f"Staging container removed: {container_id}")
