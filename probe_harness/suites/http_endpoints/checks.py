"""Checks probing HTTP endpoints of a deployed service."""

from collections.abc import Sequence

import aiohttp

from probe_harness.context import CheckContext
from probe_harness.harness import Check
from probe_harness.suites.http_endpoints.config import (
    EndpointSpec,
    HttpEndpointsConfig,
)


def endpoint_check(endpoint: EndpointSpec) -> Check[aiohttp.ClientSession]:
    """Build a check asserting on the status and body of one endpoint."""

    async def _check(ctx: CheckContext, session: aiohttp.ClientSession) -> None:
        if endpoint.skip_reason:
            ctx.skip(endpoint.skip_reason)

        async with session.request(endpoint.method, endpoint.path) as response:
            body = await response.text()

        ctx.log("%s %s -> %d", endpoint.method, endpoint.path, response.status)
        ctx.expect(
            response.status == endpoint.expected_status,
            f"{endpoint.method} {endpoint.path} returned {response.status}, "
            f"expected {endpoint.expected_status}",
        )
        if endpoint.contains is not None:
            ctx.expect(
                endpoint.contains in body,
                f"Response body should contain {endpoint.contains!r}",
            )

    return Check(name=endpoint.name, fn=_check)


def build_checks(config: HttpEndpointsConfig) -> Sequence[Check[aiohttp.ClientSession]]:
    """Build one check per configured endpoint, in configuration order."""
    return [endpoint_check(endpoint) for endpoint in config.endpoints]
