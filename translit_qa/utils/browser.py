"""Browser launch helpers for Playwright."""

from __future__ import annotations

from typing import Optional

from playwright.async_api import Browser, BrowserContext, Playwright

DEFAULT_USER_AGENT = (
    "Mozilla/5.0 (Macintosh; Intel Mac OS X 10_15_7) "
    "AppleWebKit/537.36 (KHTML, like Gecko) "
    "Chrome/122.0.0.0 Safari/537.36"
)


async def launch_browser(
    playwright: Playwright, headless: bool = True, slow_mo_ms: int = 0,
) -> Browser:
    """Launch Chromium for a test run."""
    return await playwright.chromium.launch(
        headless=headless,
        slow_mo=slow_mo_ms,
        args=[
            "--disable-blink-features=AutomationControlled",
        ],
    )


async def create_context(
    browser: Browser,
    viewport: dict,
    user_agent: Optional[str] = None,
    record_video_dir: str | None = None,
) -> BrowserContext:
    """Create the browser context shared by every case in a run.

    Args:
        record_video_dir: Optional directory path for Playwright video recording.
            When provided, pages in this context are recorded as .webm files.
    """
    context_kwargs: dict = {
        "viewport": viewport,
        "user_agent": user_agent or DEFAULT_USER_AGENT,
        "locale": "en-US",
    }
    if record_video_dir:
        context_kwargs["record_video_dir"] = record_video_dir
        context_kwargs["record_video_size"] = viewport

    return await browser.new_context(**context_kwargs)
