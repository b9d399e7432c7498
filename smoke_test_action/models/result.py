"""Models for probe execution results."""

from collections.abc import Sequence
from dataclasses import dataclass
from typing import Literal


@dataclass(frozen=True, kw_only=True)
class ProbeResult:
    """Outcome of a single probe, after retries.

    ``error`` is set if and only if the probe failed.
    """

    name: str
    status: Literal["passed", "failed"]
    duration_ms: int
    attempts: int
    error: str | None = None

    def __post_init__(self) -> None:
        if self.attempts < 1:
            raise ValueError(f"attempts must be >= 1, got {self.attempts}")
        if (self.status == "failed") != (self.error is not None):
            raise ValueError("error must be set if and only if status is 'failed'")


@dataclass(frozen=True, kw_only=True)
class RunReport:
    """Finalized results of one smoke test run.

    Counters are derived from ``tests`` so they always agree with it.
    """

    tests: Sequence[ProbeResult]
    duration_ms: int

    @property
    def total(self) -> int:
        return len(self.tests)

    @property
    def passed(self) -> int:
        return sum(1 for result in self.tests if result.status == "passed")

    @property
    def failed(self) -> int:
        return sum(1 for result in self.tests if result.status == "failed")

    @property
    def succeeded(self) -> bool:
        """True when no probe failed, including the empty run."""
        return self.failed == 0
