"""Machine-readable JSON report file."""

import logging
from pathlib import Path

from probe_harness.errors import ReportIOError
from probe_harness.models.report import Report

log = logging.getLogger(__name__)


def save_report_to_file(report: Report, path: str | Path) -> None:
    """Write the report as JSON, replacing any existing file.

    Raises:
        ReportIOError: If the file cannot be created or written

    """
    path = Path(path)
    try:
        path.write_text(report.model_dump_json(indent=2), encoding="utf-8")
    except OSError as exc:
        raise ReportIOError(f"Failed to write JSON report to {path}: {exc}") from exc
    log.info("JSON report written to %s", path)


def load_report_from_file(path: str | Path) -> Report:
    """Parse a JSON report written by save_report_to_file."""
    return Report.model_validate_json(Path(path).read_text(encoding="utf-8"))
