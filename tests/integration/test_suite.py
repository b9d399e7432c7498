"""End-to-end runs of the default probe suite against a mocked site."""

import json
from unittest.mock import AsyncMock

from aioresponses import aioresponses as aioresponses_cls

from smoke_test_action.cli import run
from smoke_test_action.fetcher import Fetcher
from smoke_test_action.models.config import SmokeTestConfig
from smoke_test_action.probes import default_probes
from smoke_test_action.runner import SmokeTestRunner
from smoke_test_action.testing.payloads import html_page

SITE_URL = "https://docs.example.com"


def mock_healthy_site(
    aioresponses: aioresponses_cls, hrefs: list[str] | None = None
) -> None:
    """Serve every default probe path successfully."""
    aioresponses.get(
        SITE_URL,
        status=200,
        body=html_page(hrefs or []),
        content_type="text/html",
        repeat=True,
    )
    for path in ("/docs/", "/docs/workflows/", "/docs/agents/"):
        aioresponses.get(f"{SITE_URL}{path}", status=200, body="ok", repeat=True)
    aioresponses.get(
        f"{SITE_URL}/pagefind/pagefind.js", status=200, body="//", repeat=True
    )
    aioresponses.get(f"{SITE_URL}/favicon.svg", status=200, body="<svg/>", repeat=True)
    aioresponses.get(f"{SITE_URL}/_astro/", status=403, repeat=True)
    for href in hrefs or []:
        aioresponses.get(f"{SITE_URL}{href}", status=200, repeat=True)


async def test_healthy_site_passes(
    config: SmokeTestConfig, aioresponses: aioresponses_cls
) -> None:
    """All probes pass, the report is written and the exit code is 0."""
    mock_healthy_site(aioresponses)

    exit_code = await run(config)

    assert exit_code == 0
    report = json.loads(config.report_path.read_text())
    assert report["summary"]["total"] == 5
    assert report["summary"]["passed"] == 5
    assert report["summary"]["failed"] == 0
    assert all(test["attempts"] == 1 for test in report["tests"])
    assert all("error" not in test for test in report["tests"])

    assert config.github_output is not None
    outputs = dict(
        line.split("=", 1) for line in config.github_output.read_text().splitlines()
    )
    assert outputs["passed"] == "true"
    assert outputs["total"] == "5"
    assert outputs["passed-count"] == "5"
    assert outputs["failed-count"] == "0"
    assert json.loads(outputs["results"]) == report


async def test_missing_docs_page_exhausts_retries(
    config: SmokeTestConfig, fetcher: Fetcher, aioresponses: aioresponses_cls
) -> None:
    """A persistent 404 fails only the docs probe after every attempt."""
    aioresponses.get(f"{SITE_URL}/docs/agents/", status=404, repeat=True)
    mock_healthy_site(aioresponses)
    sleep = AsyncMock()

    runner = SmokeTestRunner(fetcher=fetcher, max_retries=2, sleep=sleep)
    report = await runner.run(default_probes(config))

    docs_result = report.tests[1]
    assert docs_result.name == "Documentation pages accessible"
    assert docs_result.status == "failed"
    assert docs_result.attempts == 3
    assert docs_result.error == "Page /docs/agents/ returned status 404"
    assert [c.args[0] for c in sleep.await_args_list] == [2.0, 4.0]
    assert report.passed == 4
    assert report.failed == 1
    assert not report.succeeded


async def test_transient_failure_recovers_on_retry(
    config: SmokeTestConfig, fetcher: Fetcher, aioresponses: aioresponses_cls
) -> None:
    """A probe failing once then passing is reported with two attempts."""
    aioresponses.get(f"{SITE_URL}/pagefind/pagefind.js", status=503)
    mock_healthy_site(aioresponses)

    runner = SmokeTestRunner(fetcher=fetcher, max_retries=2, sleep=AsyncMock())
    report = await runner.run(default_probes(config))

    search_result = report.tests[2]
    assert search_result.status == "passed"
    assert search_result.attempts == 2
    assert report.succeeded


async def test_broken_link_fails_run(
    config: SmokeTestConfig, aioresponses: aioresponses_cls
) -> None:
    """A broken homepage link fails the run with exit code 1."""
    aioresponses.get(f"{SITE_URL}/gone", status=410, repeat=True)
    mock_healthy_site(aioresponses, ["/docs/", "/gone"])

    exit_code = await run(config)

    assert exit_code == 1
    report = json.loads(config.report_path.read_text())
    assert report["summary"] == {
        "total": 5,
        "passed": 4,
        "failed": 1,
        "duration": report["summary"]["duration"],
    }
    assert report["tests"][4]["error"] == (
        f"Found 1 broken links: {SITE_URL}/gone (410)"
    )


async def test_unreachable_site_fails_every_probe(
    config: SmokeTestConfig, aioresponses: aioresponses_cls
) -> None:
    """Network failures are captured per probe rather than raised."""
    exit_code = await run(config)

    assert exit_code == 1
    report = json.loads(config.report_path.read_text())
    assert report["summary"]["failed"] == 5
    assert all(test["status"] == "failed" for test in report["tests"])
    assert all(test["error"] for test in report["tests"])


async def test_parallel_run_matches_sequential_order(
    config: SmokeTestConfig, aioresponses: aioresponses_cls
) -> None:
    """Concurrent probes report in the fixed order."""
    mock_healthy_site(aioresponses)

    exit_code = await run(config, parallel=True)

    assert exit_code == 0
    report = json.loads(config.report_path.read_text())
    assert [test["name"] for test in report["tests"]] == [
        "Homepage loads",
        "Documentation pages accessible",
        "Search functionality works",
        "Assets load correctly",
        "No broken links on homepage",
    ]
