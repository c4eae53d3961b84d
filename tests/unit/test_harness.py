"""Tests for the check harness."""

import asyncio
import threading

import pytest

from probe_harness.context import CheckContext
from probe_harness.errors import DuplicateCheckError
from probe_harness.harness import Check, CheckHarness
from probe_harness.recorder import CheckFn


def passing(ctx: CheckContext, fixture: object) -> None:
    """Check that passes."""


def failing(ctx: CheckContext, fixture: object) -> None:
    """Check whose assertion does not hold."""
    ctx.expect(False, "Cluster ID should contain expected name pattern")


def skipping(ctx: CheckContext, fixture: object) -> None:
    """Check that skips itself."""
    ctx.skip("not applicable")


def panicking(ctx: CheckContext, fixture: object) -> None:
    """Check that terminates abnormally."""
    ctx.panic("boom")


@pytest.fixture
def harness() -> CheckHarness[object]:
    """Create sequential harness."""
    return CheckHarness()


async def test_pass_fail_skip_scenario(harness: CheckHarness[object]) -> None:
    """Records one result per check with the expected statuses."""
    checks = [
        Check(name="A", fn=passing),
        Check(name="B", fn=failing),
        Check(name="C", fn=skipping),
    ]

    results = await harness.run(object(), checks)

    assert [(r.name, r.status, r.error) for r in results] == [
        ("A", "PASS", None),
        ("B", "FAIL", "assertions failed"),
        ("C", "SKIP", None),
    ]


async def test_panic_does_not_stop_later_checks(
    harness: CheckHarness[object],
) -> None:
    """A panicking check is recorded and the next check still runs."""
    checks = [
        Check(name="A", fn=panicking),
        Check(name="B", fn=passing),
    ]

    results = await harness.run(object(), checks)

    assert [(r.name, r.status, r.error) for r in results] == [
        ("A", "FAIL", "boom"),
        ("B", "PASS", None),
    ]


@pytest.mark.parametrize("count", [1, 5, 25])
async def test_one_result_per_check_in_input_order(
    harness: CheckHarness[object], count: int
) -> None:
    """Produces exactly N results, one per name, in input order."""
    bodies = [passing, failing, skipping, panicking]
    checks = [
        Check(name=f"check-{i}", fn=bodies[i % len(bodies)]) for i in range(count)
    ]

    results = await harness.run(object(), checks)

    assert [r.name for r in results] == [c.name for c in checks]


async def test_empty_check_list(harness: CheckHarness[object]) -> None:
    """Returns no results for no checks."""
    assert await harness.run(object(), []) == []


async def test_rejects_duplicate_names(harness: CheckHarness[object]) -> None:
    """Raises before running anything when names repeat."""
    ran: list[str] = []

    def body(ctx: CheckContext, fixture: object) -> None:
        ran.append(ctx.name)  # pragma: no cover

    checks = [
        Check(name="A", fn=body),
        Check(name="B", fn=body),
        Check(name="A", fn=body),
    ]

    with pytest.raises(DuplicateCheckError, match="A"):
        await harness.run(object(), checks)

    assert ran == []


async def test_sequential_checks_do_not_overlap(
    harness: CheckHarness[object],
) -> None:
    """Checks run one at a time with the default concurrency."""
    active = [0]
    peak = [0]

    async def body(ctx: CheckContext, fixture: object) -> None:
        active[0] += 1
        peak[0] = max(peak[0], active[0])
        await asyncio.sleep(0.01)
        active[0] -= 1

    checks = [Check(name=str(i), fn=body) for i in range(4)]

    await harness.run(object(), checks)

    assert peak[0] == 1


async def test_concurrent_checks_keep_input_order() -> None:
    """Concurrent runs overlap up to the limit but keep input order."""
    harness: CheckHarness[object] = CheckHarness(concurrency=3)
    active = [0]
    peak = [0]
    finished: list[str] = []

    def make_body(delay: float) -> CheckFn[object]:
        async def body(ctx: CheckContext, fixture: object) -> None:
            active[0] += 1
            peak[0] = max(peak[0], active[0])
            await asyncio.sleep(delay)
            active[0] -= 1
            finished.append(ctx.name)

        return body

    checks = [
        Check(name=f"check-{i}", fn=make_body(0.05 - i * 0.01)) for i in range(5)
    ]

    results = await harness.run(object(), checks)

    assert [r.name for r in results] == [c.name for c in checks]
    assert finished != [c.name for c in checks]
    assert peak[0] == 3


async def test_timeout_applies_to_each_check() -> None:
    """A slow check is recorded as timed out and the suite continues."""
    harness: CheckHarness[object] = CheckHarness(timeout=0.05)

    async def slow(ctx: CheckContext, fixture: object) -> None:
        await asyncio.sleep(5)

    results = await harness.run(
        object(),
        [Check(name="slow", fn=slow), Check(name="fast", fn=passing)],
    )

    assert [(r.name, r.status) for r in results] == [
        ("slow", "FAIL"),
        ("fast", "PASS"),
    ]
    assert results[0].error == "timed out after 0.05s"


async def test_escaping_error_cancels_running_siblings() -> None:
    """An error escaping a concurrent check cancels the ones still running."""

    class Abort(BaseException):
        pass

    harness: CheckHarness[object] = CheckHarness(concurrency=2)
    cancelled: list[str] = []

    async def waiting(ctx: CheckContext, fixture: object) -> None:
        try:
            await asyncio.sleep(5)
        except asyncio.CancelledError:
            cancelled.append(ctx.name)
            raise

    async def aborting(ctx: CheckContext, fixture: object) -> None:
        await asyncio.sleep(0.01)
        raise Abort

    with pytest.raises(BaseExceptionGroup) as excinfo:
        await harness.run(
            object(),
            [Check(name="waiting", fn=waiting), Check(name="aborting", fn=aborting)],
        )

    assert any(isinstance(exc, Abort) for exc in excinfo.value.exceptions)
    assert cancelled == ["waiting"]


async def test_timeout_applies_to_plain_function_checks() -> None:
    """A blocked plain function times out without holding up later checks."""
    harness: CheckHarness[object] = CheckHarness(timeout=0.05)
    release = threading.Event()

    def blocked(ctx: CheckContext, fixture: object) -> None:
        release.wait(5)

    try:
        results = await harness.run(
            object(),
            [Check(name="blocked", fn=blocked), Check(name="fast", fn=passing)],
        )
    finally:
        release.set()

    assert [(r.name, r.status) for r in results] == [
        ("blocked", "FAIL"),
        ("fast", "PASS"),
    ]
    assert results[0].error == "timed out after 0.05s"


@pytest.mark.parametrize(
    "kwargs",
    [
        {"concurrency": 0},
        {"timeout": 0},
        {"timeout": -1.0},
    ],
)
def test_rejects_invalid_options(kwargs: dict[str, float]) -> None:
    """Concurrency and timeout must be positive."""
    with pytest.raises(ValueError):
        CheckHarness(**kwargs)  # type: ignore[arg-type]
