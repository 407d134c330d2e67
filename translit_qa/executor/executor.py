"""Test executor: runs translation cases against the live site using Playwright."""

from __future__ import annotations

import asyncio
import logging
import time
from pathlib import Path

from playwright.async_api import async_playwright

from translit_qa.errors import SetupFailure
from translit_qa.models.config import HarnessConfig
from translit_qa.models.test_case import CaseKind, TranslationCase
from translit_qa.models.test_result import CaseResult, CaseStatus, RunSummary
from translit_qa.utils.browser import create_context, launch_browser

from .comparator import status_for
from .recorder import ResultRecorder
from .translator_page import TranslatorPage

logger = logging.getLogger(__name__)

REALTIME_VERIFIED = "Real-time update verified"
REALTIME_MISSING = "No real-time update detected"


class Executor:
    """Executes translation cases sequentially in a single shared page."""

    def __init__(self, config: HarnessConfig, recorder: ResultRecorder | None = None):
        self.config = config
        self.recorder = recorder or ResultRecorder(events=logger)
        self.screenshots_dir = Path(config.screenshots_dir)

    async def execute(self, cases: list[TranslationCase]) -> tuple[list[CaseResult], RunSummary]:
        """Run every case in order and return the recorded results.

        Raises SetupFailure (before any case runs) when the browser cannot be
        started, the page cannot be loaded, or its input/output controls
        cannot be found.
        """
        logger.info("Starting execution of %d test cases against %s",
                    len(cases), self.config.target_url)
        self.screenshots_dir.mkdir(parents=True, exist_ok=True)
        video_dir = None
        if self.config.record_video:
            Path(self.config.videos_dir).mkdir(parents=True, exist_ok=True)
            video_dir = self.config.videos_dir

        self.recorder.start()
        async with async_playwright() as p:
            logger.debug("Launching Chromium (headless=%s)...", self.config.headless)
            try:
                browser = await launch_browser(p, headless=self.config.headless,
                                               slow_mo_ms=self.config.slow_mo_ms)
            except Exception as e:
                raise SetupFailure(f"Could not launch browser: {e}") from e
            try:
                try:
                    context = await create_context(
                        browser,
                        viewport=self.config.viewport.model_dump(),
                        user_agent=self.config.user_agent,
                        record_video_dir=video_dir,
                    )
                    page = await context.new_page()
                except Exception as e:
                    raise SetupFailure(f"Could not open browser page: {e}") from e
                translator = TranslatorPage(page, self.config)
                await translator.goto()
                input_selector, output_selector = await translator.locate_controls()

                for index, case in enumerate(cases):
                    await self.run_case(translator, case, input_selector, output_selector,
                                        index, len(cases))
                await context.close()
            finally:
                await browser.close()

        summary = self.recorder.finish()
        logger.info(
            "Execution complete: %d passed, %d failed, %d errors (%.1fs)",
            summary.passed, summary.failed, summary.errors, summary.duration_seconds,
        )
        return self.recorder.results, summary

    async def run_case(
        self,
        translator: TranslatorPage,
        case: TranslationCase,
        input_selector: str,
        output_selector: str,
        index: int,
        total: int,
    ) -> CaseResult:
        """Run one case under the per-case timeout and record its outcome.

        Any exception is confined to this case and recorded as Error.
        """
        logger.info("Test %d/%d: %s - %s", index + 1, total, case.case_id, case.name)
        start = time.monotonic()
        actual = ""
        status = CaseStatus.ERROR
        error: str | None = None
        screenshot: str | None = None
        try:
            actual, status = await asyncio.wait_for(
                self._execute_case(translator, case, input_selector, output_selector,
                                   first_case=index == 0),
                timeout=self.config.timing.case_timeout_seconds,
            )
            if status is CaseStatus.FAIL and self.config.screenshot_on_failure:
                path = self.screenshots_dir / f"{case.case_id}.png"
                screenshot = await translator.screenshot(str(path)) or None
        except asyncio.TimeoutError:
            status = CaseStatus.ERROR
            error = f"Case exceeded {self.config.timing.case_timeout_seconds:g}s timeout"
        except Exception as e:
            status = CaseStatus.ERROR
            error = str(e) or e.__class__.__name__

        elapsed_ms = int((time.monotonic() - start) * 1000)
        return self.recorder.record(case, actual, status, elapsed_ms,
                                    error=error, screenshot=screenshot)

    async def _execute_case(
        self,
        translator: TranslatorPage,
        case: TranslationCase,
        input_selector: str,
        output_selector: str,
        first_case: bool,
    ) -> tuple[str, CaseStatus]:
        await translator.clear(input_selector)

        match case.kind:
            case CaseKind.UI:
                updated = await translator.check_realtime_update(
                    input_selector, output_selector, case.input_text)
                if updated:
                    return REALTIME_VERIFIED, CaseStatus.PASS
                return REALTIME_MISSING, CaseStatus.FAIL
            case CaseKind.FUNCTIONAL:
                await translator.fill(input_selector, case.input_text)
                actual = await translator.read_settled_output(output_selector, first_case=first_case)
                return actual, status_for(case, actual)
            case _:
                raise ValueError(f"Unsupported case kind: {case.kind!r}")
