from __future__ import annotations

from dataclasses import dataclass
import logging

from playwright.sync_api import Error as PlaywrightError
from playwright.sync_api import sync_playwright

from ..config import RenderConfig
from ..errors import RenderError

logger = logging.getLogger(__name__)

CHROMIUM_ARGS = (
    "--no-sandbox",
    "--disable-setuid-sandbox",
    "--disable-dev-shm-usage",
    "--disable-gpu",
)


@dataclass(frozen=True)
class RenderOptions:
    page_format: str = "Letter"
    margin: str = "0.5in"
    print_background: bool = True
    wait_until: str = "networkidle"
    timeout_ms: int = 30000
    browser_args: tuple[str, ...] = CHROMIUM_ARGS

    @classmethod
    def from_config(cls, cfg: RenderConfig) -> "RenderOptions":
        return cls(
            page_format=cfg.page_format,
            margin=cfg.margin,
            print_background=cfg.print_background,
            timeout_ms=cfg.timeout_ms,
        )

    def margins(self) -> dict[str, str]:
        return {side: self.margin for side in ("top", "right", "bottom", "left")}


class BrowserRenderer:
    """Print HTML to PDF with a headless Chromium.

    Every call launches its own browser and closes it before returning, so a
    crashed render never leaks into the next request.
    """

    def __init__(self, options: RenderOptions | None = None) -> None:
        self.options = options or RenderOptions()

    def render(self, markup: str) -> bytes:
        opts = self.options
        try:
            with sync_playwright() as p:
                browser = p.chromium.launch(headless=True, args=list(opts.browser_args))
                try:
                    page = browser.new_page()
                    page.set_content(markup, wait_until=opts.wait_until, timeout=opts.timeout_ms)
                    pdf = page.pdf(
                        format=opts.page_format,
                        print_background=opts.print_background,
                        margin=opts.margins(),
                    )
                finally:
                    browser.close()
        except PlaywrightError as exc:
            logger.error("PDF rendering failed: %s", exc)
            raise RenderError(f"PDF rendering failed: {exc}") from exc

        if not pdf:
            raise RenderError("PDF rendering produced no output")
        logger.debug("Rendered PDF (%d bytes)", len(pdf))
        return pdf
