"""Scoped acquisition of the shared fixture."""

import logging
from abc import ABC, abstractmethod
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager
from dataclasses import dataclass

log = logging.getLogger(__name__)


@dataclass(frozen=True, kw_only=True)
class FixtureProvider[F](ABC):
    """Abstract base for fixture providers.

    Generic type F is the fixture handle. The harness never looks inside it;
    only the checks of a suite know what accessors it offers.
    """

    @abstractmethod
    async def provision(self) -> F:
        """Create the fixture and return its handle."""

    @abstractmethod
    async def teardown(self, fixture: F) -> None:
        """Destroy a fixture previously returned by provision."""


@asynccontextmanager
async def fixture_scope[F](provider: FixtureProvider[F]) -> AsyncGenerator[F, None]:
    """Provision a fixture and tear it down on every exit path."""
    log.info("Provisioning fixture with %s", type(provider).__name__)
    fixture = await provider.provision()
    try:
        yield fixture
    finally:
        log.info("Tearing down fixture")
        await provider.teardown(fixture)
