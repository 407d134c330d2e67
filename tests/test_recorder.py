"""Tests for the result recorder."""

import logging

from translit_qa.executor.recorder import ResultRecorder
from translit_qa.models.test_result import CaseStatus


class TestResultRecorder:

    def test_counters_follow_status(self, positive_case, negative_case, ui_case):
        recorder = ResultRecorder()
        recorder.start()
        recorder.record(positive_case, positive_case.expected_output, CaseStatus.PASS, 1500)
        recorder.record(negative_case, "x", CaseStatus.FAIL, 900)
        recorder.record(ui_case, "", CaseStatus.ERROR, 30, error="boom")
        summary = recorder.finish()

        assert (summary.total, summary.passed, summary.failed, summary.errors) == (3, 1, 1, 1)
        assert summary.is_consistent
        assert [r.case.case_id for r in recorder.results] == [
            "Pos_Fun_0001", "Neg_Fun_0001", "Pos_UI_0001",
        ]
        assert recorder.results[2].error_message == "boom"

    def test_record_returns_result(self, positive_case):
        result = ResultRecorder().record(positive_case, "මම", CaseStatus.FAIL, 12,
                                         screenshot="shots/Pos_Fun_0001.png")
        assert result.actual_output == "මම"
        assert result.execution_time_ms == 12
        assert result.screenshot_path == "shots/Pos_Fun_0001.png"

    def test_finish_without_start(self):
        summary = ResultRecorder().finish()
        assert summary.start_time == summary.end_time
        assert summary.total == 0
        assert summary.pass_rate == 0.0

    def test_times_are_ordered(self, positive_case):
        recorder = ResultRecorder()
        recorder.start()
        recorder.record(positive_case, "", CaseStatus.ERROR, 0)
        summary = recorder.finish()
        assert summary.start_time <= summary.end_time

    def test_events_go_to_given_logger(self, caplog, positive_case, negative_case, ui_case):
        events = logging.getLogger("translit_qa.tests.events")
        recorder = ResultRecorder(events=events)
        with caplog.at_level(logging.INFO, logger="translit_qa.tests.events"):
            recorder.record(positive_case, "ok", CaseStatus.PASS, 10)
            recorder.record(negative_case, "මම ගෙදර යනවා.", CaseStatus.FAIL, 20)
            recorder.record(ui_case, "", CaseStatus.ERROR, 30, error="Timeout")

        messages = [r.getMessage() for r in caplog.records if r.name == "translit_qa.tests.events"]
        assert messages[0] == "[PASS] Pos_Fun_0001: Entrance of attendance in a Sri Lankan (10ms)"
        assert messages[1].startswith("[FAIL] Neg_Fun_0001")
        assert "Expected: මම ගෙදර යනවා." in messages[2]
        assert "Actual:   මම ගෙදර යනවා." in messages[3]
        assert messages[4].startswith("[ERROR] Pos_UI_0001")
        assert messages[5] == "    Error: Timeout"
