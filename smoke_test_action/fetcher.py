"""Single-shot HTTP GET used by every probe."""

import logging
from collections.abc import AsyncGenerator, Mapping
from contextlib import asynccontextmanager
from dataclasses import dataclass, field

import aiohttp

log = logging.getLogger(__name__)

USER_AGENT = "smoke-test-action"


class FetchError(Exception):
    """Raised when no HTTP response could be obtained for a URL."""

    def __init__(self, url: str, reason: str) -> None:
        super().__init__(f"{reason} ({url})")
        self.url = url
        self.reason = reason


class NetworkError(FetchError):
    """Connection, DNS or TLS failure."""


class FetchTimeoutError(FetchError, TimeoutError):
    """No response received within the configured timeout."""


@dataclass(frozen=True, kw_only=True)
class FetchResponse:
    """Response of a single GET request.

    Header names are lower-cased.
    """

    status_code: int
    headers: Mapping[str, str]
    body: str


@dataclass(frozen=True, kw_only=True)
class Fetcher:
    """Issues one GET per call, never retrying and never following redirects."""

    session: aiohttp.ClientSession = field(repr=False)
    timeout: float

    @classmethod
    @asynccontextmanager
    async def create(cls, timeout: float) -> AsyncGenerator["Fetcher", None]:
        """Create fetcher with managed session lifecycle."""
        async with aiohttp.ClientSession(
            headers={"User-Agent": USER_AGENT},
            timeout=aiohttp.ClientTimeout(total=timeout),
        ) as session:
            yield cls(session=session, timeout=timeout)

    async def fetch(self, url: str) -> FetchResponse:
        """GET ``url`` and return its status, headers and body.

        Raises:
            FetchTimeoutError: If no response arrived within the timeout
            NetworkError: If the connection could not be established

        """
        log.debug("GET %s", url)
        try:
            async with self.session.get(url, allow_redirects=False) as response:
                body = await response.text(errors="replace")
                headers = {
                    name.lower(): value for name, value in response.headers.items()
                }
                return FetchResponse(
                    status_code=response.status, headers=headers, body=body
                )
        except TimeoutError as e:
            raise FetchTimeoutError(
                url, f"Request timeout after {self.timeout:g}s"
            ) from e
        except aiohttp.ClientError as e:
            raise NetworkError(url, str(e) or type(e).__name__) from e
