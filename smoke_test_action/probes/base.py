"""Abstract base class for smoke test probes."""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import ClassVar

from smoke_test_action.fetcher import Fetcher
from smoke_test_action.models.config import SmokeTestConfig


class ProbeAssertionError(AssertionError):
    """Raised when a response arrived but does not have the expected shape."""


def expect(condition: bool, message: str) -> None:
    """Raise ProbeAssertionError with ``message`` unless ``condition`` holds."""
    if not condition:
        raise ProbeAssertionError(message)


@dataclass(frozen=True, kw_only=True)
class Probe(ABC):
    """A named, independently retryable check against the deployed site.

    Probes only issue GET requests, so running one again after a failure is
    always safe.
    """

    name: ClassVar[str]

    config: SmokeTestConfig

    @abstractmethod
    async def check(self, fetcher: Fetcher) -> None:
        """Run the check once.

        Args:
            fetcher: HTTP fetcher bound to the run's session and timeout

        Raises:
            ProbeAssertionError: If the site responded unexpectedly
            FetchError: If a request got no response

        """
