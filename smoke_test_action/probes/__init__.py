"""Probe suite run against a deployed site."""

from collections.abc import Sequence

from smoke_test_action.models.config import SmokeTestConfig
from smoke_test_action.probes.assets import AssetsProbe
from smoke_test_action.probes.base import Probe, ProbeAssertionError
from smoke_test_action.probes.docs import DocumentationProbe
from smoke_test_action.probes.homepage import HomepageProbe
from smoke_test_action.probes.links import BrokenLinksProbe
from smoke_test_action.probes.search import SearchProbe

PROBE_TYPES: Sequence[type[Probe]] = (
    HomepageProbe,
    DocumentationProbe,
    SearchProbe,
    AssetsProbe,
    BrokenLinksProbe,
)


def default_probes(config: SmokeTestConfig) -> Sequence[Probe]:
    """Build the standard probe suite, in execution order."""
    return [probe_cls(config=config) for probe_cls in PROBE_TYPES]


__all__ = [
    "PROBE_TYPES",
    "AssetsProbe",
    "BrokenLinksProbe",
    "DocumentationProbe",
    "HomepageProbe",
    "Probe",
    "ProbeAssertionError",
    "SearchProbe",
    "default_probes",
]
