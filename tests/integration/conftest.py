"""Fixtures for integration tests against a mocked site."""

from collections.abc import AsyncGenerator
from pathlib import Path

import pytest
from aioresponses import aioresponses as aioresponses_cls

from smoke_test_action.fetcher import Fetcher
from smoke_test_action.models.config import SmokeTestConfig

SITE_URL = "https://docs.example.com"


@pytest.fixture
def config(tmp_path: Path) -> SmokeTestConfig:
    """Configuration pointing at the mocked site, without retries."""
    return SmokeTestConfig(
        site_url=SITE_URL,
        timeout=5,
        max_retries=0,
        report_path=tmp_path / "smoke-test-results.json",
        github_output=tmp_path / "github_output",
    )


@pytest.fixture
async def fetcher(aioresponses: aioresponses_cls) -> AsyncGenerator[Fetcher, None]:
    """Create fetcher with managed session."""
    async with Fetcher.create(timeout=5) as impl:
        yield impl
