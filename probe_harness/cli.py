"""CLI entry point for running a check suite."""

import argparse
import asyncio
import json
import logging
import sys
from pathlib import Path

from probe_harness.harness import CheckHarness
from probe_harness.suite import run_suite
from probe_harness.suites.loading import load_suite_manifest

DEFAULT_JSON_REPORT = Path("test-report.json")
DEFAULT_HTML_REPORT = Path("test-report.html")


async def run(
    suite_key: str,
    suite_config_json: str,
    json_path: Path | None = DEFAULT_JSON_REPORT,
    html_path: Path | None = DEFAULT_HTML_REPORT,
    timeout: float | None = None,
    concurrency: int = 1,
) -> int:
    """Run a suite and return exit code."""
    log = logging.getLogger("probe_harness")

    log.info("Loading suite: %s", suite_key)
    manifest = load_suite_manifest(suite_key)

    config_dict = json.loads(suite_config_json)
    config = manifest.config_cls(**config_dict)

    checks = manifest.checks_factory(config)
    if not checks:
        log.info("No checks defined for suite %s", suite_key)

    harness: CheckHarness[object] = CheckHarness(
        timeout=timeout, concurrency=concurrency
    )
    try:
        report = await run_suite(
            manifest.provider_factory(config),
            checks,
            harness=harness,
            json_path=json_path,
            html_path=html_path,
        )
    except ExceptionGroup as group:
        log.error("%d report(s) could not be written", len(group.exceptions))
        return 1

    return 1 if report.summary.failed else 0


def main() -> None:
    """CLI entry point."""
    parser = argparse.ArgumentParser(
        description="Run named checks against a shared fixture and report results"
    )
    parser.add_argument(
        "--suite",
        required=True,
        help="Suite key (http-endpoints)",
    )
    parser.add_argument(
        "--suite-config",
        required=True,
        help="JSON configuration for the suite",
    )
    parser.add_argument(
        "--json-report",
        type=Path,
        default=DEFAULT_JSON_REPORT,
        help="Path of the JSON report (default: %(default)s)",
    )
    parser.add_argument(
        "--html-report",
        type=Path,
        default=DEFAULT_HTML_REPORT,
        help="Path of the HTML report (default: %(default)s)",
    )
    parser.add_argument(
        "--timeout",
        type=float,
        default=None,
        help="Per-check timeout in seconds (default: none)",
    )
    parser.add_argument(
        "--concurrency",
        type=int,
        default=1,
        help="Number of checks run at the same time (default: %(default)s)",
    )

    args = parser.parse_args()

    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        stream=sys.stderr,
    )

    exit_code = asyncio.run(
        run(
            suite_key=args.suite,
            suite_config_json=args.suite_config,
            json_path=args.json_report,
            html_path=args.html_report,
            timeout=args.timeout,
            concurrency=args.concurrency,
        )
    )
    sys.exit(exit_code)


if __name__ == "__main__":  # pragma: no cover
    main()
