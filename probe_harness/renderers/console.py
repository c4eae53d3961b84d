"""Console summary of a report."""

import sys
from typing import TextIO

from probe_harness.models.report import Report

STATUS_SYMBOLS = {
    "PASS": "✓",
    "FAIL": "✗",
    "SKIP": "-",
}

MAX_ERROR_DISPLAY = 200


def truncate(text: str, limit: int = MAX_ERROR_DISPLAY) -> str:
    """Shorten text to at most ``limit`` characters, marking the cut."""
    if len(text) <= limit:
        return text
    return text[: limit - 3] + "..."


def print_report(report: Report, stream: TextIO | None = None) -> None:
    """Print totals followed by one line per check."""
    out = stream if stream is not None else sys.stdout
    summary = report.summary

    lines = [
        "=" * 80,
        "Check Results Summary:",
        "=" * 80,
        (
            f"Total: {summary.total}  Passed: {summary.passed}  "
            f"Failed: {summary.failed}  Skipped: {summary.skipped}"
        ),
        f"Duration: {summary.duration:.2f}s  Pass rate: {summary.pass_rate:.1%}",
        "-" * 80,
    ]
    for result in report.results:
        symbol = STATUS_SYMBOLS.get(result.status, "?")
        lines.append(
            f"{symbol} {result.name}: {result.status} ({result.duration:.2f}s)"
        )
        if result.error:
            lines.append(f"  Error: {truncate(result.error)}")

    print("\n".join(lines), file=out)
