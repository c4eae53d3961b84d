"""HTTP endpoints suite module."""

from probe_harness.suites.http_endpoints.checks import build_checks, endpoint_check
from probe_harness.suites.http_endpoints.config import (
    EndpointSpec,
    HttpEndpointsConfig,
)
from probe_harness.suites.http_endpoints.manifest import http_endpoints_manifest
from probe_harness.suites.http_endpoints.provider import HttpSessionProvider

__all__ = [
    "EndpointSpec",
    "HttpEndpointsConfig",
    "HttpSessionProvider",
    "build_checks",
    "endpoint_check",
    "http_endpoints_manifest",
]
