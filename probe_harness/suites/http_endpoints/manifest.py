"""HTTP endpoints suite manifest."""

from probe_harness.suites.http_endpoints.checks import build_checks
from probe_harness.suites.http_endpoints.config import HttpEndpointsConfig
from probe_harness.suites.http_endpoints.provider import HttpSessionProvider
from probe_harness.suites.manifest import SuiteManifest

http_endpoints_manifest = SuiteManifest(
    config_cls=HttpEndpointsConfig,
    provider_factory=HttpSessionProvider.from_config,
    checks_factory=build_checks,
)
