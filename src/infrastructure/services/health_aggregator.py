"""Infrastructure implementation of the probe battery."""

from __future__ import annotations

import asyncio
from typing import Dict, List, Mapping, Sequence, Tuple

from src.domain.entities.health import HealthReport
from src.domain.entities.probe import AddressForm, ProbeKind, ProbeResult
from src.domain.entities.service import (
    AuxiliaryService,
    AuxiliaryServiceStatus,
    ServiceTarget,
)
from src.domain.ports.health_check import IHealthAggregator, IPortChecker
from src.domain.ports.probe import IProbe
from src.infrastructure.probes import is_port_open
from src.infrastructure.probes.base import describe_error
from src.shared import DEFAULT_PROBE_TIMEOUT_SECONDS, get_logger

logger = get_logger(__name__)


class HealthAggregator(IHealthAggregator):
    """Probe every address form of every target concurrently and score them."""

    def __init__(
        self,
        probes: Mapping[ProbeKind, IProbe],
        *,
        probe_timeout: float = DEFAULT_PROBE_TIMEOUT_SECONDS,
        grace_seconds: float = 0.5,
    ) -> None:
        self._probes = dict(probes)
        self._probe_timeout = probe_timeout
        self._grace_seconds = grace_seconds

    async def aggregate(self, targets: Sequence[ServiceTarget]) -> HealthReport:
        """Run checks concurrently and aggregate them in declared order."""

        jobs: List[Tuple[ServiceTarget, AddressForm]] = [
            (target, form) for target in targets for form in target.address_forms
        ]
        results = await asyncio.gather(
            *(self._probe_form(target, form) for target, form in jobs)
        )

        per_service: Dict[str, List[ProbeResult]] = {
            target.service_name: [] for target in targets
        }
        for (target, _), result in zip(jobs, results):
            per_service[target.service_name].append(result)

        report = HealthReport.from_results(per_service)
        logger.info(
            "health.aggregate.completed",
            total_checks=report.total_checks,
            total_failures=report.total_failures,
            score_percent=report.score_percent,
        )
        return report

    async def _probe_form(
        self, target: ServiceTarget, form: AddressForm
    ) -> ProbeResult:
        probe = self._probes.get(target.probe_kind)
        if probe is None:
            result = ProbeResult.unreachable(
                form.host,
                target.port,
                f"No probe registered for {target.probe_kind.value}",
            )
            return result.with_label(form.label)

        try:
            result = await asyncio.wait_for(
                probe.probe(
                    form.host, target.port, self._probe_timeout, form.credentials
                ),
                timeout=self._probe_timeout + self._grace_seconds,
            )
        except asyncio.TimeoutError:
            result = ProbeResult.unreachable(
                form.host,
                target.port,
                f"Could not reach host: timed out after {self._probe_timeout:g}s",
            )
        except Exception as exc:  # pragma: no cover - probes do not raise
            logger.warning(
                "health.probe.crashed",
                service=target.service_name,
                host=form.host,
                error=describe_error(exc),
            )
            result = ProbeResult.unreachable(
                form.host, target.port, f"Could not reach host: {describe_error(exc)}"
            )

        return result.with_label(form.label)


class TcpPortChecker(IPortChecker):
    """Liveness of the auxiliary services, by open port only."""

    def __init__(self, timeout: float = DEFAULT_PROBE_TIMEOUT_SECONDS) -> None:
        self._timeout = timeout

    async def check_services(
        self, host: str, services: Sequence[AuxiliaryService]
    ) -> List[AuxiliaryServiceStatus]:
        running = await asyncio.gather(
            *(is_port_open(host, service.port, self._timeout) for service in services)
        )
        return [
            AuxiliaryServiceStatus(service=service, running=is_running)
            for service, is_running in zip(services, running)
        ]
