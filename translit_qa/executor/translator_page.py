"""Page adapter around the translator website."""

from __future__ import annotations

import logging
import time

from playwright.async_api import Page

from translit_qa.errors import SetupFailure
from translit_qa.models.config import HarnessConfig

from .selector_resolver import discover_selector

logger = logging.getLogger(__name__)


class TranslatorPage:
    """Drives the input control and reads the output region of the translator."""

    def __init__(self, page: Page, config: HarnessConfig):
        self.page = page
        self.config = config
        self.timing = config.timing
        self.selectors = config.selectors

    async def goto(self) -> None:
        """Open the target site and wait until a text control is attached."""
        url = self.config.target_url
        logger.debug("Navigating to %s...", url)
        try:
            await self.page.goto(url, wait_until="networkidle",
                                 timeout=self.timing.navigation_timeout_ms)
            await self.page.wait_for_selector(self.selectors.ready_selector,
                                              timeout=self.timing.ready_timeout_ms)
        except Exception as e:
            raise SetupFailure(f"Could not load {url}: {e}") from e
        logger.info("Loaded translator website: %s", url)

    async def locate_input(self) -> str | None:
        result = await discover_selector(self.page, self.selectors.input_candidates)
        return result.selector

    async def locate_output(self) -> str | None:
        result = await discover_selector(self.page, self.selectors.output_candidates)
        return result.selector

    async def locate_controls(self) -> tuple[str, str]:
        """Find both controls or raise SetupFailure."""
        input_selector = await self.locate_input()
        output_selector = await self.locate_output()
        if not input_selector or not output_selector:
            missing = [name for name, sel in (("input", input_selector), ("output", output_selector))
                       if not sel]
            raise SetupFailure(
                f"Could not find {' and '.join(missing)} element(s) on the page. "
                "Website UI might have changed."
            )
        logger.info("Input selector: %s", input_selector)
        logger.info("Output selector: %s", output_selector)
        return input_selector, output_selector

    async def fill(self, selector: str, text: str) -> None:
        await self.page.fill(selector, text)

    async def read_text(self, selector: str) -> str:
        text = await self.page.text_content(selector)
        return (text or "").strip()

    async def clear(self, selector: str) -> None:
        """Empty the input, through the page's clear button when one is configured."""
        button = None
        if self.selectors.clear_button:
            button = await self.page.query_selector(self.selectors.clear_button)
        if button:
            await button.click()
        else:
            await self.page.fill(selector, "")
        await self.page.wait_for_timeout(self.timing.clear_pause_ms)

    async def read_settled_output(self, selector: str, first_case: bool = False) -> str:
        """Read the output once the page has had time to render the translation."""
        if self.timing.wait_strategy == "poll":
            return await self._poll_until_stable(selector)

        await self.page.wait_for_timeout(
            self.timing.first_settle_ms if first_case else self.timing.settle_ms
        )
        output = ""
        for _ in range(self.timing.read_attempts):
            await self.page.wait_for_timeout(self.timing.read_interval_ms)
            output = await self.read_text(selector)
            if output:
                break
        return output

    async def _poll_until_stable(self, selector: str) -> str:
        deadline = time.monotonic() + self.timing.output_timeout_ms / 1000
        previous: str | None = None
        current = ""
        while time.monotonic() < deadline:
            await self.page.wait_for_timeout(self.timing.poll_interval_ms)
            current = await self.read_text(selector)
            if current and current == previous:
                return current
            previous = current
        logger.debug("Output did not settle within %dms, using last read",
                     self.timing.output_timeout_ms)
        return current

    async def check_realtime_update(
        self, input_selector: str, output_selector: str, text: str,
    ) -> bool:
        """Type ``text`` one key at a time and report whether the output reacted."""
        await self.page.click(input_selector)
        await self.page.fill(input_selector, "")
        await self.page.wait_for_timeout(self.timing.clear_pause_ms)
        await self.page.click(input_selector)

        previous = ""
        updates = 0
        for ch in text:
            await self.page.keyboard.type(ch)
            await self.page.wait_for_timeout(self.timing.keystroke_pause_ms)
            current = await self.page.text_content(output_selector)
            if current and current != previous:
                updates += 1
                previous = current

        await self.page.wait_for_timeout(self.timing.read_interval_ms)
        final = await self.page.text_content(output_selector)
        if final and final != previous:
            updates += 1

        if updates:
            logger.info("  Real-time updates detected: %d times", updates)
        else:
            logger.info("  No real-time updates detected (final output: %r)", final)
        return updates > 0

    async def screenshot(self, path: str) -> str:
        """Capture the viewport; returns the path or "" when capture fails."""
        try:
            await self.page.screenshot(path=path)
            return path
        except Exception as e:
            logger.warning("Screenshot failed: %s", e)
            return ""
