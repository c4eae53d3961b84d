"""Configuration for the HTTP endpoints suite."""

from collections.abc import Sequence

from pydantic import BaseModel, Field, SecretStr


class EndpointSpec(BaseModel):
    """One endpoint to probe."""

    name: str
    path: str = Field(..., description="Path relative to base_url, starting with /")
    method: str = "GET"
    expected_status: int = 200
    contains: str | None = Field(
        default=None, description="Substring the response body must contain"
    )
    skip_reason: str | None = Field(
        default=None, description="When set, the check is skipped with this reason"
    )


class HttpEndpointsConfig(BaseModel):
    """Configuration for the HTTP endpoints suite."""

    base_url: str
    token: SecretStr | None = None
    request_timeout: float = 30
    endpoints: Sequence[EndpointSpec] = Field(default_factory=list)
