"""Homepage probe."""

from smoke_test_action.fetcher import Fetcher
from smoke_test_action.probes.base import Probe, expect


class HomepageProbe(Probe):
    """The site root serves a non-empty HTML page."""

    name = "Homepage loads"

    async def check(self, fetcher: Fetcher) -> None:
        response = await fetcher.fetch(self.config.site_url)

        expect(
            response.status_code == 200,
            f"Expected status 200, got {response.status_code}",
        )
        content_type = response.headers.get("content-type", "")
        expect(
            "text/html" in content_type,
            f"Expected content-type to include text/html, got {content_type}",
        )
        expect(len(response.body) > 0, "Response body is empty")
