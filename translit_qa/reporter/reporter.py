"""Report generation orchestration."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path

from translit_qa.errors import ReportWriteError
from translit_qa.models.config import HarnessConfig
from translit_qa.models.test_result import CaseResult, RunSummary

from .excel_report import render_results_workbook
from .html_report import render_html_report
from .text_report import render_text_summary

logger = logging.getLogger(__name__)


@dataclass
class EmittedReports:
    spreadsheet_bytes: bytes
    html_text: str
    plain_text: str


class Reporter:
    """Renders and persists the results workbook, HTML report and text summary."""

    def __init__(self, config: HarnessConfig):
        self.config = config

    def artifact_paths(self) -> dict[str, str]:
        return {
            "Excel Workbook": str(self.config.results_workbook_path),
            "HTML Report": str(self.config.html_report_path),
            "Screenshots": self.config.screenshots_dir,
            "Videos": self.config.videos_dir,
        }

    def emit(self, results: list[CaseResult], summary: RunSummary) -> EmittedReports:
        """Render all three artefacts in memory."""
        logger.debug("Rendering results workbook from %s...", self.config.fixture_path)
        spreadsheet = render_results_workbook(
            self.config.fixture_path, results, summary, self.config.fixture_sheet,
        )
        logger.debug("Rendering HTML report...")
        html_text = render_html_report(
            results, summary, self.config.target_url,
            report_dir=self.config.html_report_path.parent,
        )
        logger.debug("Rendering text summary...")
        plain_text = render_text_summary(
            results, summary, self.config.target_url, self.artifact_paths(),
        )
        return EmittedReports(spreadsheet, html_text, plain_text)

    def write(self, results: list[CaseResult], summary: RunSummary) -> dict[str, str]:
        """Emit and persist every report. Returns format -> file path."""
        reports = self.emit(results, summary)
        targets = {
            "xlsx": (self.config.results_workbook_path, reports.spreadsheet_bytes),
            "html": (self.config.html_report_path, reports.html_text),
            "txt": (self.config.text_summary_path, reports.plain_text),
        }

        generated = {}
        for fmt, (path, content) in targets.items():
            _write_file(path, content)
            generated[fmt] = str(path)
            logger.info("%s report: %s", fmt.upper(), path)
        return generated


def _write_file(path: Path, content: bytes | str) -> None:
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        if isinstance(content, bytes):
            path.write_bytes(content)
        else:
            path.write_text(content, encoding="utf-8")
    except OSError as e:
        raise ReportWriteError(f"Could not write {path}: {e}") from e
