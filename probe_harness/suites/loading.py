"""Loading of suites from entry points."""

from importlib.metadata import entry_points
from typing import Any

from probe_harness.errors import SuiteNotFoundError
from probe_harness.suites.manifest import SuiteManifest

ENTRY_POINT_GROUP = "probe_harness.suites"


def load_suite_manifest(key: str) -> SuiteManifest[Any, Any]:
    """Load a suite manifest by key.

    Args:
        key: The suite key as registered in pyproject.toml
             (e.g., "http-endpoints")

    Returns:
        The suite manifest instance

    Raises:
        SuiteNotFoundError: If no suite with the given key is found

    """
    entries = entry_points(group=ENTRY_POINT_GROUP)

    for entry in entries:
        if entry.name == key:
            manifest: SuiteManifest[Any, Any] = entry.load()
            return manifest

    available = sorted(e.name for e in entries)
    raise SuiteNotFoundError(f"Suite '{key}' not found. Available suites: {available}")
