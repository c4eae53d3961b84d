"""Models for check execution results."""

from typing import Literal, Self

from pydantic import Field, model_validator

from probe_harness.models.base import Model

CheckStatus = Literal["PASS", "FAIL", "SKIP"]


class CheckResult(Model):
    """Outcome of a single executed check.

    The error detail is present exactly when the check failed, either because
    its assertions did not hold or because its body terminated abnormally.
    """

    name: str = Field(..., description="Check name, unique within a suite run")
    status: CheckStatus = Field(..., description="Terminal status of the check")
    duration: float = Field(..., ge=0, description="Elapsed wall-clock seconds")
    error: str | None = Field(
        default=None, description="Failure detail, set only when status is FAIL"
    )

    @model_validator(mode="after")
    def _error_only_on_failure(self) -> Self:
        if self.status == "FAIL" and not self.error:
            raise ValueError("a failed check must carry an error detail")
        if self.status != "FAIL" and self.error is not None:
            raise ValueError(f"a {self.status} check must not carry an error detail")
        return self
