"""Runner executing the probe suite and folding outcomes into a report."""

import asyncio
import logging
import time
from collections.abc import Callable, Sequence
from dataclasses import dataclass, field
from typing import Literal

from smoke_test_action.fetcher import Fetcher
from smoke_test_action.models.result import ProbeResult, RunReport
from smoke_test_action.probes.base import Probe
from smoke_test_action.retry import Sleep, elapsed_ms, execute_with_retry

log = logging.getLogger(__name__)

type RunState = Literal["not-started", "running", "completed"]


@dataclass(kw_only=True)
class SmokeTestRunner:
    """Runs probes through the retry policy and builds the run report.

    A runner is single-use: ``run`` may be called once.
    """

    fetcher: Fetcher
    max_retries: int
    parallel: bool = False
    sleep: Sleep = asyncio.sleep
    clock: Callable[[], float] = time.monotonic
    state: RunState = field(default="not-started", init=False)

    async def run(self, probes: Sequence[Probe]) -> RunReport:
        """Run every probe and return the finalized report.

        Probe failures are recorded in the report, never raised. Results keep
        the order of ``probes`` whether or not they ran in parallel.
        """
        if self.state != "not-started":
            raise RuntimeError(f"Runner already {self.state}")
        self.state = "running"
        start = self.clock()

        if self.parallel:
            log.info("Running %d probe(s) in parallel...", len(probes))
            results = await asyncio.gather(*(self._run_probe(p) for p in probes))
        else:
            results = [await self._run_probe(probe) for probe in probes]

        report = RunReport(tests=results, duration_ms=elapsed_ms(start, self.clock()))
        self.state = "completed"
        return report

    async def _run_probe(self, probe: Probe) -> ProbeResult:
        log.info("Running: %s", probe.name)

        async def action() -> None:
            await probe.check(self.fetcher)

        result = await execute_with_retry(
            probe.name,
            action,
            self.max_retries,
            sleep=self.sleep,
            clock=self.clock,
        )

        if result.status == "passed":
            log.info(
                "✅ PASSED %s (%dms, %d attempt(s))",
                result.name,
                result.duration_ms,
                result.attempts,
            )
        else:
            log.error(
                "❌ FAILED %s (%dms, %d attempt(s))",
                result.name,
                result.duration_ms,
                result.attempts,
            )
            log.error("  Error: %s", result.error)
        return result
