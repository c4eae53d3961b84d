"""HTTP session fixture for the endpoints suite."""

import logging
from dataclasses import dataclass

import aiohttp

from probe_harness.fixtures import FixtureProvider
from probe_harness.suites.http_endpoints.config import HttpEndpointsConfig

log = logging.getLogger(__name__)


@dataclass(frozen=True, kw_only=True)
class HttpSessionProvider(FixtureProvider[aiohttp.ClientSession]):
    """Provides a client session bound to the deployed service."""

    config: HttpEndpointsConfig

    @classmethod
    def from_config(cls, config: HttpEndpointsConfig) -> "HttpSessionProvider":
        """Create provider from suite configuration."""
        return cls(config=config)

    async def provision(self) -> aiohttp.ClientSession:
        """Open a session with the configured base URL and credentials."""
        headers = {}
        if self.config.token is not None:
            headers["Authorization"] = f"Bearer {self.config.token.get_secret_value()}"

        log.info("Opening HTTP session: base_url=%s", self.config.base_url)
        return aiohttp.ClientSession(
            base_url=self.config.base_url,
            headers=headers,
            timeout=aiohttp.ClientTimeout(total=self.config.request_timeout),
        )

    async def teardown(self, fixture: aiohttp.ClientSession) -> None:
        """Close the session."""
        await fixture.close()
