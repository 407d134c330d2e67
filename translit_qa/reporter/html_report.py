"""HTML report generator: a single self-contained page with one row per case."""

from __future__ import annotations

import html
import os
from datetime import datetime
from pathlib import Path

from translit_qa.models.test_result import CaseResult, CaseStatus, RunSummary

SAMPLE_LENGTH = 20


def _truncate(text: str, limit: int = SAMPLE_LENGTH) -> str:
    if len(text) <= limit:
        return text
    return text[:limit] + "..."


def _screenshot_href(screenshot_path: str, report_dir: Path | None) -> str:
    """Link target for a screenshot, relative to the report when possible."""
    if report_dir is None:
        return Path(screenshot_path).as_posix()
    try:
        return Path(os.path.relpath(screenshot_path, report_dir)).as_posix()
    except ValueError:
        # Different drive on Windows
        return Path(screenshot_path).resolve().as_uri()


def _build_result_row(r: CaseResult, report_dir: Path | None = None) -> str:
    """Build a single table row for a case result."""
    status_class = r.status.value.lower()
    artifact = "-"
    if r.screenshot_path:
        href = html.escape(_screenshot_href(r.screenshot_path, report_dir))
        artifact = f'<a href="{href}" target="_blank" class="screenshot-link">Screenshot</a>'

    error_html = ""
    if r.error_message:
        error_html = f'<div class="error-msg">{html.escape(r.error_message[:300])}</div>'

    return f'''
        <tr class="row-{status_class}">
          <td>{html.escape(r.case.case_id)}</td>
          <td>{html.escape(r.case.name)}</td>
          <td><code>{html.escape(_truncate(r.case.input_text))}</code></td>
          <td><code>{html.escape(_truncate(r.actual_output or ""))}</code></td>
          <td><span class="badge {status_class}">{html.escape(r.status.value)}</span>{error_html}</td>
          <td class="time">{r.execution_time_ms}ms</td>
          <td>{artifact}</td>
        </tr>'''


def render_html_report(
    results: list[CaseResult],
    summary: RunSummary,
    target_url: str = "",
    report_dir: Path | None = None,
) -> str:
    """Render the full report page.

    ``report_dir`` is the directory the page will be written to; screenshot
    links are made relative to it.
    """
    rows = "".join(_build_result_row(r, report_dir) for r in results)
    generated = (summary.end_time or datetime.now()).strftime("%Y-%m-%d %H:%M:%S")
    target_html = f" &middot; Target: {html.escape(target_url)}" if target_url else ""
    failed_cases = sum(1 for r in results if r.status is not CaseStatus.PASS)

    return f'''<!DOCTYPE html>
<html lang="en">
<head>
<meta charset="UTF-8">
<meta name="viewport" content="width=device-width, initial-scale=1.0">
<title>Test Execution Report</title>
<style>
  :root {{ --pass: #22c55e; --fail: #ef4444; --error: #f97316; --bg: #f8fafc; --card: white; --border: #e2e8f0; --text: #1e293b; --muted: #64748b; --accent: #6366f1; }}
  * {{ margin: 0; padding: 0; box-sizing: border-box; }}
  body {{ font-family: -apple-system, BlinkMacSystemFont, 'Segoe UI', Roboto, 'Noto Sans Sinhala', sans-serif; background: var(--bg); color: var(--text); line-height: 1.6; padding: 1.5rem; }}
  .container {{ max-width: 1200px; margin: 0 auto; }}
  h1 {{ font-size: 1.8rem; margin-bottom: 0.3rem; }}
  .meta {{ color: var(--muted); margin-bottom: 1.5rem; font-size: 0.9rem; }}
  /* Summary strip */
  .summary {{ display: grid; grid-template-columns: repeat(auto-fit, minmax(130px, 1fr)); gap: 0.8rem; margin-bottom: 1.5rem; }}
  .stat {{ background: var(--card); border-radius: 8px; padding: 1rem; box-shadow: 0 1px 3px rgba(0,0,0,0.08); text-align: center; }}
  .stat .value {{ font-size: 1.8rem; font-weight: 700; }}
  .stat .label {{ font-size: 0.8rem; color: var(--muted); }}
  .stat.pass .value {{ color: var(--pass); }}
  .stat.fail .value {{ color: var(--fail); }}
  .stat.error .value {{ color: var(--error); }}
  .stat.rate .value {{ color: var(--accent); }}
  /* Badges */
  .badge {{ display: inline-block; padding: 0.15rem 0.55rem; border-radius: 9999px; font-size: 0.7rem; font-weight: 600; text-transform: uppercase; white-space: nowrap; }}
  .badge.pass {{ background: #dcfce7; color: #166534; }}
  .badge.fail {{ background: #fecaca; color: #991b1b; }}
  .badge.error {{ background: #fed7aa; color: #9a3412; }}
  /* Results table */
  table {{ width: 100%; border-collapse: collapse; background: var(--card); border-radius: 8px; overflow: hidden; box-shadow: 0 1px 3px rgba(0,0,0,0.08); }}
  th, td {{ padding: 0.6rem 0.8rem; text-align: left; border-bottom: 1px solid var(--border); font-size: 0.88rem; vertical-align: top; }}
  th {{ background: #1e293b; color: white; font-weight: 500; }}
  tr.row-fail {{ background: #fef8f8; }}
  tr.row-error {{ background: #fffaf5; }}
  code {{ background: #f1f5f9; padding: 0.1rem 0.3rem; border-radius: 3px; font-size: 0.82rem; }}
  .time {{ color: var(--muted); white-space: nowrap; }}
  .error-msg {{ color: var(--fail); font-size: 0.8rem; margin-top: 0.2rem; }}
  .screenshot-link {{ color: var(--accent); text-decoration: none; }}
  .screenshot-link:hover {{ text-decoration: underline; }}
</style>
</head>
<body>
<div class="container">
  <h1>Translation Test Results</h1>
  <p class="meta">Generated: {generated}{target_html} &middot; Duration: {summary.duration_seconds:.2f}s &middot; {failed_cases} case(s) need attention</p>

  <div class="summary">
    <div class="stat"><div class="value">{summary.total}</div><div class="label">Total Tests</div></div>
    <div class="stat pass"><div class="value">{summary.passed}</div><div class="label">Passed</div></div>
    <div class="stat fail"><div class="value">{summary.failed}</div><div class="label">Failed</div></div>
    <div class="stat error"><div class="value">{summary.errors}</div><div class="label">Errors</div></div>
    <div class="stat rate"><div class="value">{summary.pass_rate:.2f}%</div><div class="label">Pass Rate</div></div>
  </div>

  <table>
    <thead>
      <tr>
        <th>TC ID</th>
        <th>Test Name</th>
        <th>Input Sample</th>
        <th>Output Sample</th>
        <th>Status</th>
        <th>Time</th>
        <th>Artifacts</th>
      </tr>
    </thead>
    <tbody>{rows}
    </tbody>
  </table>
</div>
</body>
</html>'''
