"""Suite manifest definition for the plugin system."""

from collections.abc import Callable, Sequence
from dataclasses import dataclass

from pydantic import BaseModel

from probe_harness.fixtures import FixtureProvider
from probe_harness.harness import Check


@dataclass(frozen=True, kw_only=True)
class SuiteManifest[ConfigT: BaseModel, F]:
    """Manifest describing a suite plugin.

    The manifest ties a configuration class to the fixture provider and the
    checks built from that configuration, so suites can be loaded by key.
    """

    config_cls: type[ConfigT]
    provider_factory: Callable[[ConfigT], FixtureProvider[F]]
    checks_factory: Callable[[ConfigT], Sequence[Check[F]]]
