"""Static assets probe."""

from smoke_test_action.fetcher import Fetcher
from smoke_test_action.probes.base import Probe, expect

# 403 is what a directory with listing disabled returns, so it counts as present
ACCEPTED_ASSET_STATUSES = frozenset({200, 301, 302, 403})


class AssetsProbe(Probe):
    """Each configured asset path is served, redirected or listing-protected."""

    name = "Assets load correctly"

    async def check(self, fetcher: Fetcher) -> None:
        for path in self.config.asset_paths:
            response = await fetcher.fetch(self.config.url_for(path))
            expect(
                response.status_code in ACCEPTED_ASSET_STATUSES,
                f"Asset {path} returned unexpected status {response.status_code}",
            )
