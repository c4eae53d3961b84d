"""Run a single check body and classify how it terminated."""

import asyncio
import inspect
import logging
import threading
import time
from collections.abc import Awaitable, Callable

from probe_harness.context import CheckContext
from probe_harness.errors import CheckFailure, CheckSkip
from probe_harness.models.result import CheckResult, CheckStatus

log = logging.getLogger(__name__)

ASSERTIONS_FAILED = "assertions failed"

type CheckFn[F] = Callable[[CheckContext, F], Awaitable[None] | None]


async def record_check[F](
    name: str,
    fn: CheckFn[F],
    fixture: F,
    *,
    timeout: float | None = None,
) -> CheckResult:
    """Execute a check body and turn its termination into a CheckResult.

    Coroutine functions are awaited on the running loop, plain functions run
    on a daemon thread of their own. Any exception escaping the body is
    recovered here and recorded as a failure carrying the exception message, so
    a crashing check never takes the suite down with it.

    Args:
        name: Check name recorded on the result
        fn: Check body, called with a fresh CheckContext and the fixture
        fixture: Shared fixture handle, passed through untouched
        timeout: Seconds after which the check is recorded as failed; a body
            running on a thread is abandoned, not stopped

    Returns:
        The finalized result of the check

    """
    ctx = CheckContext(name=name)
    failed = False
    skipped = False
    panic: str | None = None

    started = time.perf_counter()
    deadline = asyncio.timeout(timeout)
    try:
        async with deadline:
            await _invoke(fn, ctx, fixture)
    except CheckFailure:
        failed = True
    except CheckSkip:
        skipped = True
    except Exception as exc:
        if not deadline.expired():
            log.error("Check %s panicked: %s", name, exc, exc_info=exc)
            panic = _describe(exc)
    duration = time.perf_counter() - started

    # Also covers a body that swallowed the cancellation and returned.
    if deadline.expired():
        log.error("Check %s timed out after %ss", name, timeout)
        panic = f"timed out after {timeout}s"

    status: CheckStatus
    error: str | None = None
    if panic is not None:
        status, error = "FAIL", panic
    elif failed or ctx.failed:
        status, error = "FAIL", ASSERTIONS_FAILED
    elif skipped or ctx.skipped:
        status = "SKIP"
    else:
        status = "PASS"

    return CheckResult(name=name, status=status, duration=duration, error=error)


async def _invoke[F](fn: CheckFn[F], ctx: CheckContext, fixture: F) -> None:
    if inspect.iscoroutinefunction(fn):
        await fn(ctx, fixture)
        return

    outcome = await _run_in_daemon_thread(fn, ctx, fixture)
    if inspect.isawaitable(outcome):
        await outcome


async def _run_in_daemon_thread[F](
    fn: CheckFn[F], ctx: CheckContext, fixture: F
) -> object:
    """Run a plain function on its own daemon thread.

    A body abandoned after its deadline keeps running but neither delays loop
    shutdown nor blocks interpreter exit.
    """
    loop = asyncio.get_running_loop()
    future: asyncio.Future[object] = loop.create_future()

    def _settle(outcome: object, exc: BaseException | None) -> None:
        if future.done():
            return
        if exc is not None:
            future.set_exception(exc)
        else:
            future.set_result(outcome)

    def _target() -> None:
        outcome: object = None
        error: BaseException | None = None
        try:
            outcome = fn(ctx, fixture)
        except BaseException as exc:
            error = exc
        try:
            loop.call_soon_threadsafe(_settle, outcome, error)
        except RuntimeError:
            log.debug("Check %s finished after its loop closed", ctx.name)

    threading.Thread(target=_target, name=f"check-{ctx.name}", daemon=True).start()
    return await future


def _describe(exc: BaseException) -> str:
    return str(exc) or type(exc).__name__
