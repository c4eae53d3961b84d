"""Self-contained HTML report document."""

import logging
from html import escape
from pathlib import Path

from probe_harness.errors import ReportIOError
from probe_harness.models.report import Report

log = logging.getLogger(__name__)

STYLE = """
body { font-family: -apple-system, 'Segoe UI', Roboto, sans-serif; margin: 2rem; color: #24292f; }
h1 { font-size: 1.5em; margin-bottom: 0.25rem; }
.meta { color: #57606a; font-size: 0.9em; margin-bottom: 1.5rem; }
table { border-collapse: collapse; width: 100%; margin-bottom: 2rem; }
th, td { border: 1px solid #d0d7de; padding: 6px 10px; text-align: left; vertical-align: top; }
th { background: #f6f8fa; }
.badge { display: inline-block; padding: 2px 8px; border-radius: 10px; font-weight: 600; font-size: 0.85em; }
.badge.pass { background: #dafbe1; color: #1a7f37; }
.badge.fail { background: #ffebe9; color: #cf222e; }
.badge.skip { background: #fff8c5; color: #9a6700; }
tr.fail td { background: #fff5f5; }
td.error { font-family: monospace; white-space: pre-wrap; }
"""


def render_html(report: Report) -> str:
    """Render the report as a standalone HTML document."""
    summary = report.summary

    rows = []
    for result in report.results:
        status_class = result.status.lower()
        rows.append(
            f"<tr class='{status_class}'>"
            f"<td>{escape(result.name)}</td>"
            f"<td><span class='badge {status_class}'>{result.status}</span></td>"
            f"<td>{result.duration:.2f}s</td>"
            f"<td class='error'>{escape(result.error or '')}</td>"
            "</tr>"
        )
    rows_html = "\n".join(rows)

    return f"""<!DOCTYPE html>
<html lang="en">
<head>
<meta charset="UTF-8">
<title>Check Report</title>
<style>{STYLE}</style>
</head>
<body>
<h1>Check Report</h1>
<div class="meta">
  Started: <strong>{report.start_time.isoformat()}</strong> |
  Finished: <strong>{report.end_time.isoformat()}</strong>
</div>
<h2>Summary</h2>
<table class="summary">
<thead><tr><th>Total</th><th>Passed</th><th>Failed</th><th>Skipped</th><th>Duration</th><th>Pass Rate</th></tr></thead>
<tbody>
<tr><td>{summary.total}</td><td>{summary.passed}</td><td>{summary.failed}</td><td>{summary.skipped}</td><td>{summary.duration:.2f}s</td><td>{summary.pass_rate:.1%}</td></tr>
</tbody>
</table>
<h2>Checks</h2>
<table class="details">
<thead><tr><th>Name</th><th>Status</th><th>Duration</th><th>Error</th></tr></thead>
<tbody>
{rows_html}
</tbody>
</table>
</body>
</html>
"""


def save_report_to_html(report: Report, path: str | Path) -> None:
    """Write the report as an HTML document, replacing any existing file.

    Raises:
        ReportIOError: If the file cannot be created or written

    """
    path = Path(path)
    try:
        path.write_text(render_html(report), encoding="utf-8")
    except OSError as exc:
        raise ReportIOError(f"Failed to write HTML report to {path}: {exc}") from exc
    log.info("HTML report written to %s", path)
