"""Exceptions raised by checks, the harness and the report renderers."""


class CheckFailure(Exception):
    """Raised to halt a check whose assertions did not hold."""


class CheckSkip(Exception):
    """Raised to halt a check that declined to run its assertions."""


class CheckPanic(Exception):
    """Raised when a check terminates abnormally.

    The first argument is the payload recorded as the check's error detail.
    """


class DuplicateCheckError(ValueError):
    """Raised when two checks of one run share a name."""


class ReportIOError(OSError):
    """Raised when a report renderer cannot write its target file."""


class SuiteNotFoundError(Exception):
    """Raised when a suite is not found."""
