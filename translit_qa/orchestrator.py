"""Pipeline orchestrator: coordinates load, execute and report stages."""

from __future__ import annotations

import asyncio
import logging
import time
from pathlib import Path

from translit_qa.errors import ReportWriteError
from translit_qa.executor.executor import Executor
from translit_qa.fixtures.catalog import write_fixture_workbook
from translit_qa.fixtures.store import FixtureStore
from translit_qa.models.config import HarnessConfig
from translit_qa.models.test_case import TranslationCase
from translit_qa.models.test_result import CaseResult, RunSummary
from translit_qa.reporter.excel_report import render_results_workbook
from translit_qa.reporter.reporter import Reporter

logger = logging.getLogger(__name__)


class Orchestrator:
    """Coordinates the full test pipeline."""

    def __init__(self, config: HarnessConfig):
        self.config = config
        self.store = FixtureStore(config.fixture_path, config.fixture_sheet)

    def load_cases(self) -> list[TranslationCase]:
        return self.store.load_cases()

    def run_full_pipeline(self) -> dict:
        """Execute the complete load → execute → report pipeline."""
        return asyncio.run(self._run_pipeline())

    async def _run_pipeline(self) -> dict:
        start = time.time()
        logger.info("=== Starting translation test run for %s ===", self.config.target_url)

        # Stage 1: Load
        logger.info("--- Stage 1: Load fixtures ---")
        cases = self.load_cases()

        # Stage 2: Execute
        logger.info("--- Stage 2: Execute (%d tests) ---", len(cases))
        stage_start = time.time()
        results, summary = await self._execute(cases)
        logger.info("--- Stage 2 complete: %d passed, %d failed, %d errors in %.1fs ---",
                    summary.passed, summary.failed, summary.errors, time.time() - stage_start)

        # Stage 3: Report
        logger.info("--- Stage 3: Report ---")
        reports = Reporter(self.config).write(results, summary)

        duration = time.time() - start
        logger.info("=== Run complete in %.1fs ===", duration)

        return {
            "duration": round(duration, 2),
            "results": {
                "total": summary.total,
                "passed": summary.passed,
                "failed": summary.failed,
                "errors": summary.errors,
                "pass_rate": summary.pass_rate,
            },
            "reports": reports,
        }

    async def _execute(self, cases: list[TranslationCase]) -> tuple[list[CaseResult], RunSummary]:
        executor = Executor(self.config)
        return await executor.execute(cases)

    def run_collect(self) -> RunSummary:
        """Run every case and write the observed outputs back into the fixture workbook."""
        cases = self.load_cases()
        results, summary = asyncio.run(self._execute(cases))
        content = render_results_workbook(
            self.config.fixture_path, results, sheet_name=self.config.fixture_sheet,
        )
        path = Path(self.config.fixture_path)
        try:
            path.write_bytes(content)
        except OSError as e:
            raise ReportWriteError(f"Could not update {path}: {e}") from e
        logger.info("Fixture workbook updated with actual outputs: %s", path)
        return summary

    def init_fixtures(self) -> Path:
        """Write the built-in case catalogue to the configured fixture path."""
        return write_fixture_workbook(
            self.config.fixture_path, sheet_name=self.config.fixture_sheet,
        )
