"""
Health domain entities.

A ``HealthReport`` is built once per aggregation pass from the results of
every probe and is discarded after it has been rendered.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Dict, List, Mapping, Sequence

from .probe import ProbeResult


def compute_score(total_checks: int, total_failures: int) -> int:
    """
    Percentage of healthy checks, with failures rounded up.

    ``100 - ceil(100 * failures / total)``. Rounding the failure share up
    means a partial failure never displays as a better score than it is.
    A pass with nothing to check reports 100.
    """
    if total_checks <= 0:
        return 100
    failures = min(max(total_failures, 0), total_checks)
    failure_percent = -(-100 * failures // total_checks)
    return 100 - failure_percent


@dataclass(frozen=True, slots=True)
class HealthReport:
    """Aggregated result of one full probe pass."""

    per_service: Dict[str, List[ProbeResult]]
    total_checks: int
    total_failures: int
    score_percent: int
    checked_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    @classmethod
    def from_results(
        cls, per_service: Mapping[str, Sequence[ProbeResult]]
    ) -> "HealthReport":
        ordered = {name: list(results) for name, results in per_service.items()}
        total = sum(len(results) for results in ordered.values())
        failures = sum(
            1
            for results in ordered.values()
            for result in results
            if not result.succeeded
        )
        return cls(
            per_service=ordered,
            total_checks=total,
            total_failures=failures,
            score_percent=compute_score(total, failures),
        )

    @property
    def healthy(self) -> bool:
        return self.total_failures == 0
