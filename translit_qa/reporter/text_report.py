"""Plain-text execution summary."""

from __future__ import annotations

import platform
from datetime import datetime

from translit_qa.models.test_result import CaseResult, RunSummary

RULE = "=" * 45
SUBRULE = "-" * 45


def _environment() -> str:
    return f"Python {platform.python_version()} / Playwright Chromium"


def format_case_line(position: int, result: CaseResult) -> str:
    """``NN. [id] STATUS | name`` with the status padded to six columns."""
    return (f"{position:02d}. [{result.case.case_id}] "
            f"{result.status.value:<6} | {result.case.name}")


def render_text_summary(
    results: list[CaseResult],
    summary: RunSummary,
    target_url: str = "",
    artifacts: dict[str, str] | None = None,
) -> str:
    executed = (summary.end_time or datetime.now()).strftime("%Y-%m-%d %H:%M:%S")
    lines = [
        RULE,
        "        TRANSLATION SYSTEM TEST SUMMARY",
        RULE,
        f"Execution Date: {executed}",
        f"Target System:  {target_url}",
        f"Environment:    {_environment()}",
        "",
        SUBRULE,
        "TEST STATISTICS",
        SUBRULE,
        f"Total Tests:      {summary.total}",
        f"Passed:           {summary.passed}",
        f"Failed:           {summary.failed}",
        f"Errors:           {summary.errors}",
        f"Pass Rate:        {summary.pass_rate:.2f}%",
        f"Duration:         {summary.duration_seconds:.2f} seconds",
        "",
    ]

    if artifacts:
        lines += [SUBRULE, "OUTPUT ARTIFACTS", SUBRULE]
        for i, (label, path) in enumerate(artifacts.items(), 1):
            lines.append(f"{i}. {label + ':':<16}{path}")
        lines.append("")

    lines += [SUBRULE, "DETAILED RESULTS BY CASE", SUBRULE]
    lines += [format_case_line(i, r) for i, r in enumerate(results, 1)]
    lines += [
        "",
        RULE,
        "             END OF EXECUTION",
        RULE,
        "",
    ]
    return "\n".join(lines)
