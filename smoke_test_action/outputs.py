"""Report serialization and pipeline outputs."""

import json
import logging
from pathlib import Path
from typing import Any

from smoke_test_action.models.result import ProbeResult, RunReport

STATUS_SYMBOLS = {
    "passed": "✅",
    "failed": "❌",
}


def format_report(report: RunReport) -> dict[str, Any]:
    """Format a run report for JSON output."""
    return {
        "summary": {
            "total": report.total,
            "passed": report.passed,
            "failed": report.failed,
            "duration": report.duration_ms,
        },
        "tests": [format_result(result) for result in report.tests],
    }


def format_result(result: ProbeResult) -> dict[str, Any]:
    """Format a probe result, omitting ``error`` for passed probes."""
    output: dict[str, Any] = {
        "name": result.name,
        "status": result.status,
        "duration": result.duration_ms,
        "attempts": result.attempts,
    }
    if result.error is not None:
        output["error"] = result.error
    return output


def write_report(report: RunReport, path: Path) -> None:
    """Write the report as indented JSON, creating parent directories."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(format_report(report), indent=2) + "\n")


def github_outputs(report: RunReport) -> dict[str, str]:
    """Key/value pairs exposed as GitHub Actions step outputs."""
    return {
        "results": json.dumps(format_report(report), separators=(",", ":")),
        "passed": "true" if report.succeeded else "false",
        "total": str(report.total),
        "passed-count": str(report.passed),
        "failed-count": str(report.failed),
    }


def write_github_output(report: RunReport, path: Path) -> None:
    """Append step outputs to the GitHub Actions output file."""
    lines = [f"{key}={value}" for key, value in github_outputs(report).items()]
    with path.open("a") as output_file:
        output_file.write("\n".join(lines) + "\n")


def log_results_summary(log: logging.Logger, report: RunReport) -> None:
    """Log a formatted summary of the run."""
    log.info("=" * 60)
    log.info("Test Summary")
    log.info("=" * 60)

    for result in report.tests:
        symbol = STATUS_SYMBOLS.get(result.status, "?")
        log.info(
            "%s %s: %s (%dms, %d attempt(s))",
            symbol,
            result.name,
            result.status,
            result.duration_ms,
            result.attempts,
        )
        if result.error:
            log.info("  Error: %s", result.error)

    log.info("Total: %d", report.total)
    log.info("Passed: %d", report.passed)
    log.info("Failed: %d", report.failed)
    log.info("Duration: %dms", report.duration_ms)
    log.info("=" * 60)
