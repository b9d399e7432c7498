"""Documentation pages probe."""

from smoke_test_action.fetcher import Fetcher
from smoke_test_action.probes.base import Probe, expect


class DocumentationProbe(Probe):
    """Every configured documentation page answers 200, checked in order."""

    name = "Documentation pages accessible"

    async def check(self, fetcher: Fetcher) -> None:
        for path in self.config.docs_paths:
            response = await fetcher.fetch(self.config.url_for(path))
            expect(
                response.status_code == 200,
                f"Page {path} returned status {response.status_code}",
            )
