"""Run configuration for the smoke test suite."""

from collections.abc import Sequence
from pathlib import Path
from urllib.parse import urlsplit

from pydantic import Field, field_validator

from smoke_test_action.models.base import Model

DEFAULT_DOCS_PATHS = ("/docs/", "/docs/workflows/", "/docs/agents/")
DEFAULT_SEARCH_PATH = "/pagefind/pagefind.js"
DEFAULT_ASSET_PATHS = ("/favicon.svg", "/_astro/")
DEFAULT_REPORT_PATH = Path("/tmp/smoke-test-results.json")


class SmokeTestConfig(Model):
    """Configuration for a smoke test run against a deployed site."""

    site_url: str = Field(..., description="Fully-qualified HTTP(S) URL of the site")
    timeout: float = Field(
        default=300, gt=0, description="Per-request timeout in seconds"
    )
    max_retries: int = Field(
        default=2, ge=0, description="Retries per probe after the first attempt"
    )
    docs_paths: Sequence[str] = Field(
        default=DEFAULT_DOCS_PATHS, description="Documentation pages to check"
    )
    search_path: str = Field(
        default=DEFAULT_SEARCH_PATH, description="Path of the search index script"
    )
    asset_paths: Sequence[str] = Field(
        default=DEFAULT_ASSET_PATHS, description="Static asset paths to check"
    )
    link_check_limit: int = Field(
        default=20, ge=0, description="Maximum homepage links to check"
    )
    report_path: Path = Field(
        default=DEFAULT_REPORT_PATH, description="Where the JSON report is written"
    )
    github_output: Path | None = Field(
        default=None, description="GitHub Actions output file to append to"
    )

    @field_validator("site_url")
    @classmethod
    def validate_site_url(cls, value: str) -> str:
        """Require an absolute http(s) URL and drop any trailing slash."""
        parts = urlsplit(value.strip())
        if parts.scheme not in {"http", "https"} or not parts.netloc:
            raise ValueError(f"site_url must be an http(s) URL, got {value!r}")
        return value.strip().rstrip("/")

    def url_for(self, path: str) -> str:
        """Build an absolute URL for a site-relative path."""
        return f"{self.site_url}{path}"
