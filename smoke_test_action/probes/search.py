"""Search index probe."""

from smoke_test_action.fetcher import Fetcher
from smoke_test_action.probes.base import Probe, expect


class SearchProbe(Probe):
    """The client-side search script is published and non-empty."""

    name = "Search functionality works"

    async def check(self, fetcher: Fetcher) -> None:
        response = await fetcher.fetch(self.config.url_for(self.config.search_path))

        expect(
            response.status_code == 200,
            f"Search script not found (status {response.status_code})",
        )
        expect(len(response.body) > 0, "Search script is empty")
