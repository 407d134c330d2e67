"""Result recorder: accumulates per-case outcomes and the running summary."""

from __future__ import annotations

import logging
import threading
from datetime import datetime

from translit_qa.models.test_case import TranslationCase
from translit_qa.models.test_result import CaseResult, CaseStatus, RunSummary


class ResultRecorder:
    """Owns the result list and summary counters for one run.

    Log lines go to the ``events`` logger handed in by the caller, so the
    recorder has no opinion on where progress is displayed.
    """

    def __init__(self, events: logging.Logger | None = None):
        self.events = events or logging.getLogger(__name__)
        self.results: list[CaseResult] = []
        self.summary = RunSummary()
        self._lock = threading.Lock()

    def start(self) -> None:
        self.summary.start_time = datetime.now()

    def finish(self) -> RunSummary:
        self.summary.end_time = datetime.now()
        if self.summary.start_time is None:
            self.summary.start_time = self.summary.end_time
        return self.summary

    def record(
        self,
        case: TranslationCase,
        actual_output: str,
        status: CaseStatus,
        timing_ms: int,
        error: str | None = None,
        screenshot: str | None = None,
    ) -> CaseResult:
        """Append a result and bump the counter for its status."""
        result = CaseResult(
            case=case,
            actual_output=actual_output,
            status=status,
            execution_time_ms=timing_ms,
            error_message=error,
            screenshot_path=screenshot,
        )
        with self._lock:
            self.results.append(result)
            self.summary.total += 1
            match status:
                case CaseStatus.PASS:
                    self.summary.passed += 1
                case CaseStatus.FAIL:
                    self.summary.failed += 1
                case CaseStatus.ERROR:
                    self.summary.errors += 1

        self.events.info("[%s] %s: %s (%dms)",
                         status.value.upper(), case.case_id, case.name, timing_ms)
        if status is CaseStatus.FAIL:
            self.events.info("    Expected: %s", case.expected_output)
            self.events.info("    Actual:   %s", actual_output)
        elif status is CaseStatus.ERROR:
            self.events.warning("    Error: %s", error)
        return result
