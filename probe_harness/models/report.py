"""Aggregated report of a completed suite run."""

from collections.abc import Sequence
from datetime import datetime
from typing import Self

from pydantic import AwareDatetime, Field, computed_field, model_validator

from probe_harness.models.base import Model
from probe_harness.models.result import CheckResult


class ReportSummary(Model):
    """Derived statistics of a report."""

    passed: int
    failed: int
    skipped: int
    total: int
    duration: float = Field(..., description="Suite wall-clock seconds")
    pass_rate: float = Field(..., description="Passed checks over total checks")


class Report(Model):
    """Results of one suite run, in execution order, with suite timestamps."""

    results: Sequence[CheckResult] = Field(default_factory=list)
    start_time: AwareDatetime
    end_time: AwareDatetime

    @classmethod
    def build(
        cls,
        results: Sequence[CheckResult],
        start_time: datetime,
        end_time: datetime,
    ) -> "Report":
        """Create a report from accumulated results and the suite timestamps."""
        return cls(results=list(results), start_time=start_time, end_time=end_time)

    @model_validator(mode="after")
    def _ends_after_start(self) -> Self:
        if self.end_time < self.start_time:
            raise ValueError("end_time must not be earlier than start_time")
        return self

    @computed_field  # type: ignore[prop-decorator]
    @property
    def summary(self) -> ReportSummary:
        """Counts per status, suite duration and pass rate.

        The duration spans the suite timestamps rather than summing per-check
        durations, so it stays meaningful when checks overlap.
        """
        passed = sum(1 for r in self.results if r.status == "PASS")
        failed = sum(1 for r in self.results if r.status == "FAIL")
        skipped = sum(1 for r in self.results if r.status == "SKIP")
        total = len(self.results)
        return ReportSummary(
            passed=passed,
            failed=failed,
            skipped=skipped,
            total=total,
            duration=(self.end_time - self.start_time).total_seconds(),
            pass_rate=passed / total if total else 0.0,
        )
