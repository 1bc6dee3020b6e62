"""Playwright-backed :class:`~table2dsv.render.base.Renderer`.

One call to :meth:`PlaywrightRenderer.render` launches a headless browser,
opens a single page, navigates with the configured wait condition (network
idle by default), collects ``innerText`` for every element matching the row
selector and closes the browser.  The browser is closed in a ``finally`` block
so a failed navigation or evaluation does not leave the process running.
"""

from __future__ import annotations

from typing import Any, Callable

from table2dsv.config.schema import RenderSettings
from table2dsv.utils.errors import RenderError
from table2dsv.utils.logging import get_logger

logger = get_logger(__name__)

ROW_TEXT_SCRIPT = "rows => rows.map(row => row.innerText)"

PlaywrightFactory = Callable[[], Any]


def _default_factory() -> Any:
    try:
        from playwright.sync_api import sync_playwright
    except ImportError as exc:  # pragma: no cover - dependency is declared
        raise RenderError(
            "Playwright is not available. Install it with `pip install playwright` "
            "and fetch a browser with `playwright install chromium`."
        ) from exc
    return sync_playwright()


class PlaywrightRenderer:
    """Render pages with Playwright's synchronous API.

    Parameters
    ----------
    settings:
        Browser type, headless flag, wait condition, timeout and row selector.
    playwright_factory:
        Callable returning a context manager that yields a Playwright
        instance.  Defaults to :func:`playwright.sync_api.sync_playwright`.
    """

    def __init__(
        self,
        settings: RenderSettings,
        playwright_factory: PlaywrightFactory | None = None,
    ) -> None:
        self.settings = settings
        self._factory = playwright_factory or _default_factory

    def name(self) -> str:
        return f"playwright-{self.settings.browser}"

    def render(self, uri: str) -> list[str]:
        settings = self.settings
        with self._factory() as pw:
            browser = self._launch(pw)
            try:
                page = browser.new_page()
                logger.debug("Navigating to %s (wait_until=%s)", uri, settings.wait_until)
                page.goto(uri, wait_until=settings.wait_until, timeout=settings.timeout_ms)
                rows = page.eval_on_selector_all(settings.row_selector, ROW_TEXT_SCRIPT)
            finally:
                browser.close()
        logger.debug("Collected %d rows", len(rows))
        return [str(row) for row in rows]

    def _launch(self, pw: Any) -> Any:
        browser_type = getattr(pw, self.settings.browser)
        try:
            return browser_type.launch(headless=self.settings.headless)
        except Exception as exc:
            if "Executable doesn't exist" in str(exc):
                raise RenderError(
                    f"Playwright browser binary is missing. Run `playwright install "
                    f"{self.settings.browser}` once to install it."
                ) from exc
            raise


__all__ = ["PlaywrightRenderer", "ROW_TEXT_SCRIPT"]
