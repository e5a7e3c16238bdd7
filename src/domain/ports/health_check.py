"""Domain service abstractions for health checks."""

from __future__ import annotations

from typing import List, Protocol, Sequence

from src.domain.entities.health import HealthReport
from src.domain.entities.service import (
    AuxiliaryService,
    AuxiliaryServiceStatus,
    ServiceTarget,
)


class IHealthAggregator(Protocol):
    """Runs a probe battery and aggregates the outcome."""

    async def aggregate(self, targets: Sequence[ServiceTarget]) -> HealthReport:
        """Probe every address form of every target exactly once."""
        ...


class IPortChecker(Protocol):
    async def check_services(
        self, host: str, services: Sequence[AuxiliaryService]
    ) -> List[AuxiliaryServiceStatus]:
        """Report, in input order, whether each service port is open on host."""
        ...
