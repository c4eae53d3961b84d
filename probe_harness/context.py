"""Handle through which a running check reports its outcome."""

import logging
from collections.abc import MutableMapping, Sequence
from dataclasses import dataclass, field
from typing import Any, NoReturn

from probe_harness.errors import CheckFailure, CheckPanic, CheckSkip

log = logging.getLogger(__name__)


class CheckLogAdapter(logging.LoggerAdapter[logging.Logger]):
    """Prefixes records with the check name, leaving formatting to logging.

    Callers always pass arguments, so the escaped name is always interpolated.
    """

    def process(
        self, msg: Any, kwargs: MutableMapping[str, Any]
    ) -> tuple[Any, MutableMapping[str, Any]]:
        name = str(self.extra["check"]).replace("%", "%%") if self.extra else "?"
        return f"[{name}] {msg}", kwargs


@dataclass(kw_only=True)
class CheckContext:
    """Per-check state handed to a check body alongside the shared fixture.

    ``fail`` records a failure and lets the body continue, ``fail_now`` and
    ``skip`` record their outcome and halt the body, and ``panic`` aborts the
    body abnormally.
    """

    name: str
    _failed: bool = field(default=False, init=False)
    _skipped: bool = field(default=False, init=False)
    _messages: list[str] = field(default_factory=list, init=False)
    _log: CheckLogAdapter = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._log = CheckLogAdapter(log, {"check": self.name})

    @property
    def failed(self) -> bool:
        """Whether the check has been marked failed."""
        return self._failed

    @property
    def skipped(self) -> bool:
        """Whether the check has been marked skipped."""
        return self._skipped

    @property
    def messages(self) -> Sequence[str]:
        """Failure messages recorded so far."""
        return tuple(self._messages)

    def log(self, message: str, *args: Any) -> None:
        """Log an informational message on behalf of the check.

        Arguments are interpolated lazily by logging; a message without
        arguments is logged verbatim.
        """
        if args:
            self._log.info(message, *args)
        else:
            self._log.info("%s", message)

    def fail(self, message: str) -> None:
        """Mark the check failed and continue running."""
        self._log.warning("%s", message)
        self._failed = True
        self._messages.append(message)

    def fail_now(self, message: str) -> NoReturn:
        """Mark the check failed and stop it."""
        self.fail(message)
        raise CheckFailure(message)

    def skip(self, reason: str = "") -> NoReturn:
        """Mark the check skipped and stop it."""
        if reason:
            self._log.info("skipped: %s", reason)
        self._skipped = True
        raise CheckSkip(reason)

    def panic(self, payload: object) -> NoReturn:
        """Terminate the check abnormally with the given payload."""
        raise CheckPanic(payload)

    def expect(self, condition: object, message: str) -> None:
        """Fail without stopping when the condition does not hold."""
        if not condition:
            self.fail(message)

    def require(self, condition: object, message: str) -> None:
        """Fail and stop when the condition does not hold."""
        if not condition:
            self.fail_now(message)
