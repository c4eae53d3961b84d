"""Run a suite end to end: fixture, checks, report."""

import logging
from collections.abc import Sequence
from datetime import datetime, timezone
from pathlib import Path

from probe_harness.errors import ReportIOError
from probe_harness.fixtures import FixtureProvider, fixture_scope
from probe_harness.harness import Check, CheckHarness
from probe_harness.models.report import Report
from probe_harness.renderers import (
    print_report,
    save_report_to_file,
    save_report_to_html,
)

log = logging.getLogger(__name__)


async def run_suite[F](
    provider: FixtureProvider[F],
    checks: Sequence[Check[F]],
    *,
    harness: CheckHarness[F] | None = None,
    json_path: Path | None = None,
    html_path: Path | None = None,
) -> Report:
    """Provision the fixture, run the checks, tear down and report.

    The fixture is torn down before any report is rendered. The console summary
    is always printed; the JSON and HTML files are written when a path is given.

    Raises:
        ExceptionGroup: Of ReportIOError, if any report file could not be
            written; every writer is attempted first

    """
    harness = harness if harness is not None else CheckHarness()

    start_time = datetime.now(timezone.utc)
    async with fixture_scope(provider) as fixture:
        results = await harness.run(fixture, checks)
    end_time = datetime.now(timezone.utc)

    report = Report.build(results, start_time, end_time)
    print_report(report)
    write_reports(report, json_path=json_path, html_path=html_path)
    return report


def write_reports(
    report: Report,
    *,
    json_path: Path | None = None,
    html_path: Path | None = None,
) -> None:
    """Write the file reports independently of each other."""
    errors: list[ReportIOError] = []
    for path, writer in (
        (json_path, save_report_to_file),
        (html_path, save_report_to_html),
    ):
        if path is None:
            continue
        try:
            writer(report, path)
        except ReportIOError as exc:
            log.error("%s", exc)
            errors.append(exc)

    if errors:
        raise ExceptionGroup("Failed to write reports", errors)
