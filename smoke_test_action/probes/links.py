"""Homepage link integrity probe."""

import logging
from collections.abc import Sequence
from dataclasses import dataclass

from smoke_test_action.fetcher import Fetcher, FetchError
from smoke_test_action.link_extractor import extract_links
from smoke_test_action.probes.base import Probe, ProbeAssertionError, expect

log = logging.getLogger(__name__)


@dataclass(frozen=True, kw_only=True)
class BrokenLink:
    """A link that errored or answered with a status of 400 or above."""

    url: str
    status: int | None = None
    error: str | None = None

    def __str__(self) -> str:
        return f"{self.url} ({self.status if self.status is not None else self.error})"


class BrokenLinksProbe(Probe):
    """Same-host links on the homepage resolve without client or server errors.

    Links are checked one after another and are not retried individually: a
    retry of this probe re-checks the whole batch.
    """

    name = "No broken links on homepage"

    async def check(self, fetcher: Fetcher) -> None:
        response = await fetcher.fetch(self.config.site_url)
        expect(
            response.status_code == 200,
            f"Homepage returned status {response.status_code}",
        )

        links = extract_links(response.body, self.config.site_url)
        log.info("  Found %d links to check", len(links))

        broken = await self.find_broken_links(
            fetcher, links[: self.config.link_check_limit]
        )
        if broken:
            raise ProbeAssertionError(
                f"Found {len(broken)} broken links: "
                + ", ".join(str(link) for link in broken)
            )

    async def find_broken_links(
        self, fetcher: Fetcher, links: Sequence[str]
    ) -> Sequence[BrokenLink]:
        """Fetch each link in turn and collect the broken ones."""
        broken: list[BrokenLink] = []
        for link in links:
            try:
                link_response = await fetcher.fetch(link)
            except FetchError as e:
                broken.append(BrokenLink(url=link, error=e.reason))
                continue

            if link_response.status_code >= 400:
                broken.append(BrokenLink(url=link, status=link_response.status_code))
        return broken
