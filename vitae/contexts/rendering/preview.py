"""
Preview and print fallbacks for rendered resume HTML.

Neither path sanitizes the HTML; callers rendering untrusted data should
render with escape=True.
"""

import tempfile
import webbrowser
from pathlib import Path
from typing import Callable

from playwright.async_api import Page

from vitae.contexts.rendering.logger import _log_debug, _log_error, _log_info

DEFAULT_PREVIEW_SELECTOR = "#resume-preview"

# Injected before </body>; waits for layout before opening the print dialog
PRINT_SCRIPT = (
    "<script>window.onload = function () { window.focus(); "
    "setTimeout(function () { window.print(); }, 500); };</script>"
)


async def preview_in_page(page: Page, html: str, target: str = DEFAULT_PREVIEW_SELECTOR) -> bool:
    """
    Inject rendered HTML into a container element of a live page.

    Args:
        page: Page hosting the preview container
        html: Rendered resume HTML
        target: CSS selector of the container

    Returns:
        True if the container was found and updated
    """
    element = await page.query_selector(target)
    if element is None:
        _log_error(f"Preview target not found: {target}")
        return False

    await element.evaluate("(el, html) => { el.innerHTML = html; }", html)
    _log_debug(f"Preview updated: {target}")
    return True


def with_print_script(html: str) -> str:
    """Append the auto-print script to a document."""
    index = html.lower().rfind("</body>")
    if index == -1:
        return html + PRINT_SCRIPT
    return html[:index] + PRINT_SCRIPT + html[index:]


def print_fallback(html: str, opener: Callable[[str], bool] = webbrowser.open) -> None:
    """
    Open rendered HTML in a new browser window and trigger the print dialog.

    Fallback for environments where headless PDF generation is unavailable.
    The temporary file is left for the browser to read.
    """
    with tempfile.NamedTemporaryFile(
        "w", suffix=".html", prefix="vitae-print-", delete=False, encoding="utf-8"
    ) as handle:
        handle.write(with_print_script(html))
        print_path = Path(handle.name)

    _log_info(f"Opening print view: {print_path}")
    opener(print_path.as_uri())
