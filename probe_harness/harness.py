"""Harness for running named checks against a shared fixture."""

import asyncio
import logging
from collections import Counter
from collections.abc import Sequence
from dataclasses import dataclass

from probe_harness.errors import DuplicateCheckError
from probe_harness.models.result import CheckResult
from probe_harness.recorder import CheckFn, record_check

log = logging.getLogger(__name__)


@dataclass(frozen=True, kw_only=True)
class Check[F]:
    """A named verification function run against the fixture."""

    name: str
    fn: CheckFn[F]


@dataclass(frozen=True, kw_only=True)
class CheckHarness[F]:
    """Runs every check once under the result recorder.

    Checks only read the fixture, so they may overlap when ``concurrency`` is
    above one. Results are always returned in the order the checks were given.
    """

    timeout: float | None = None
    concurrency: int = 1

    def __post_init__(self) -> None:
        if self.concurrency < 1:
            raise ValueError(f"concurrency must be at least 1, got {self.concurrency}")
        if self.timeout is not None and self.timeout <= 0:
            raise ValueError(f"timeout must be positive, got {self.timeout}")

    async def run(
        self,
        fixture: F,
        checks: Sequence[Check[F]],
    ) -> Sequence[CheckResult]:
        """Run all checks against the fixture.

        Args:
            fixture: Shared fixture handle; created and destroyed by the caller
            checks: Checks to run, with unique names

        Returns:
            One result per check, in input order

        Raises:
            DuplicateCheckError: If two checks share a name; nothing is run

        """
        ensure_unique_names(checks)

        if not checks:
            log.info("No checks provided")
            return []

        log.info(
            "Running %d check(s) with concurrency=%d", len(checks), self.concurrency
        )
        if self.concurrency == 1:
            results: list[CheckResult] = []
            for check in checks:
                results.append(await self._run_check(fixture, check))
        else:
            semaphore = asyncio.Semaphore(self.concurrency)

            async def _bounded(check: Check[F]) -> CheckResult:
                async with semaphore:
                    return await self._run_check(fixture, check)

            async with asyncio.TaskGroup() as group:
                tasks = [group.create_task(_bounded(c)) for c in checks]
            results = [task.result() for task in tasks]
        log.info("Check execution completed")

        return results

    async def _run_check(self, fixture: F, check: Check[F]) -> CheckResult:
        log.info("Running check %s", check.name)
        result = await record_check(
            check.name, check.fn, fixture, timeout=self.timeout
        )
        log.info(
            "Check completed: name=%s status=%s duration=%.2fs",
            result.name,
            result.status,
            result.duration,
        )
        return result


def ensure_unique_names[F](checks: Sequence[Check[F]]) -> None:
    """Raise DuplicateCheckError if any check name appears more than once."""
    duplicates = sorted(
        name for name, count in Counter(c.name for c in checks).items() if count > 1
    )
    if duplicates:
        raise DuplicateCheckError(f"Duplicate check names: {', '.join(duplicates)}")
