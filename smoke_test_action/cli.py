"""CLI entry point for the deployment smoke test action."""

import argparse
import asyncio
import logging
import os
import sys
from collections.abc import Mapping, Sequence
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from smoke_test_action.fetcher import Fetcher
from smoke_test_action.models.config import (
    DEFAULT_ASSET_PATHS,
    DEFAULT_DOCS_PATHS,
    DEFAULT_REPORT_PATH,
    DEFAULT_SEARCH_PATH,
    SmokeTestConfig,
)
from smoke_test_action.outputs import (
    log_results_summary,
    write_github_output,
    write_report,
)
from smoke_test_action.probes import default_probes
from smoke_test_action.runner import SmokeTestRunner

log = logging.getLogger("smoke_test_action")


def parse_paths(paths: str) -> Sequence[str]:
    """Parse comma-separated site paths."""
    if not paths.strip():
        return ()
    return tuple(p.strip() for p in paths.split(",") if p.strip())


def log_banner(config: SmokeTestConfig) -> None:
    log.info("=" * 60)
    log.info("Deployment Smoke Tests")
    log.info("=" * 60)
    log.info("Site URL: %s", config.site_url)
    log.info("Timeout: %gs", config.timeout)
    log.info("Max retries: %d", config.max_retries)
    log.info("=" * 60)


async def run(config: SmokeTestConfig, *, parallel: bool = False) -> int:
    """Run the smoke test suite and return exit code."""
    log_banner(config)

    async with Fetcher.create(config.timeout) as fetcher:
        runner = SmokeTestRunner(
            fetcher=fetcher, max_retries=config.max_retries, parallel=parallel
        )
        report = await runner.run(default_probes(config))

    write_report(report, config.report_path)
    log.info("Report written to %s", config.report_path)

    if config.github_output is not None:
        write_github_output(report, config.github_output)

    log_results_summary(log, report)

    return 0 if report.succeeded else 1


def build_config(args: argparse.Namespace) -> SmokeTestConfig:
    """Build run configuration from parsed arguments.

    Raises:
        ValidationError: If a value is missing or invalid

    """
    values: dict[str, Any] = {
        "site_url": args.site_url,
        "timeout": args.timeout,
        "max_retries": args.max_retries,
        "docs_paths": parse_paths(args.docs_paths),
        "search_path": args.search_path,
        "asset_paths": parse_paths(args.asset_paths),
        "link_check_limit": args.link_check_limit,
        "report_path": args.report_path,
        "github_output": args.github_output or None,
    }
    return SmokeTestConfig(**values)


def build_parser(environ: Mapping[str, str]) -> argparse.ArgumentParser:
    """Build the argument parser, taking defaults from ``environ``."""
    parser = argparse.ArgumentParser(
        description="Run smoke tests against a deployed site"
    )
    parser.add_argument(
        "--site-url",
        default=environ.get("SITE_URL"),
        help="Site to test (default: $SITE_URL)",
    )
    parser.add_argument(
        "--timeout",
        default=environ.get("TIMEOUT", "300"),
        help="Request timeout in seconds (default: $TIMEOUT or 300)",
    )
    parser.add_argument(
        "--max-retries",
        default=environ.get("MAX_RETRIES", "2"),
        help="Retries per probe (default: $MAX_RETRIES or 2)",
    )
    parser.add_argument(
        "--docs-paths",
        default=",".join(DEFAULT_DOCS_PATHS),
        help="Comma-separated documentation paths to check",
    )
    parser.add_argument(
        "--search-path",
        default=DEFAULT_SEARCH_PATH,
        help="Path of the search index script",
    )
    parser.add_argument(
        "--asset-paths",
        default=",".join(DEFAULT_ASSET_PATHS),
        help="Comma-separated static asset paths to check",
    )
    parser.add_argument(
        "--link-check-limit",
        default="20",
        help="Maximum number of homepage links to check",
    )
    parser.add_argument(
        "--report-path",
        type=Path,
        default=DEFAULT_REPORT_PATH,
        help="Where to write the JSON report",
    )
    parser.add_argument(
        "--github-output",
        type=Path,
        default=environ.get("GITHUB_OUTPUT") or None,
        help="GitHub Actions output file (default: $GITHUB_OUTPUT)",
    )
    parser.add_argument(
        "--parallel",
        action="store_true",
        help="Run probes concurrently; report order is unchanged",
    )
    return parser


def main(argv: Sequence[str] | None = None) -> None:
    """CLI entry point."""
    args = build_parser(os.environ).parse_args(argv)

    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        stream=sys.stdout,
    )

    try:
        config = build_config(args)
    except ValidationError as e:
        log.error("Invalid configuration, no probes were run:\n%s", e)
        sys.exit(1)

    try:
        exit_code = asyncio.run(run(config, parallel=args.parallel))
    except Exception:
        log.exception("Fatal error running smoke tests")
        sys.exit(1)
    sys.exit(exit_code)


if __name__ == "__main__":  # pragma: no cover
    main()
