"""Use cases for the health report and auxiliary service endpoints."""

import asyncio
from typing import List, Optional, Sequence

from src.application.dtos.health_dto import AuxiliaryServiceDTO, HealthReportDTO
from src.application.models import (
    SERVICE_CATALOG,
    DevilboxConfig,
    build_auxiliary_services,
)
from src.domain.entities.health import HealthReport
from src.domain.entities.probe import AddressForm, AddressLabel
from src.domain.entities.service import ServiceDefinition, ServiceTarget
from src.domain.ports.address_resolver import IAddressResolver
from src.domain.ports.health_check import IHealthAggregator, IPortChecker
from src.shared import LOOPBACK_ADDRESS, get_logger

logger = get_logger(__name__)


class GetHealthReportUseCase:
    """Builds the probe targets for the available services and scores them."""

    def __init__(
        self,
        health_aggregator: IHealthAggregator,
        address_resolver: IAddressResolver,
        config: DevilboxConfig,
        catalog: Sequence[ServiceDefinition] = SERVICE_CATALOG,
    ) -> None:
        self._aggregator = health_aggregator
        self._resolver = address_resolver
        self._config = config
        self._catalog = tuple(catalog)

    async def execute(self) -> HealthReportDTO:
        report = await self.evaluate()
        return HealthReportDTO.from_domain(report)

    async def evaluate(self) -> HealthReport:
        targets = await self.build_targets()
        return await self._aggregator.aggregate(targets)

    async def build_targets(self) -> List[ServiceTarget]:
        available = [
            definition
            for definition in self._catalog
            if self._config.is_available(definition)
        ]
        skipped = [d.name for d in self._catalog if d not in available]
        if skipped:
            logger.debug("health.targets.skipped", services=skipped)

        hostnames = [self._config.hostname_for(definition) for definition in available]
        resolved = await asyncio.gather(
            *(self._resolver.resolve(hostname) for hostname in hostnames)
        )

        return [
            self._build_target(definition, hostname, address)
            for definition, hostname, address in zip(available, hostnames, resolved)
        ]

    def _build_target(
        self,
        definition: ServiceDefinition,
        hostname: str,
        container_address: Optional[str],
    ) -> ServiceTarget:
        hosts = {
            AddressLabel.HOSTNAME: hostname,
            AddressLabel.CONTAINER_IP: container_address or "",
            AddressLabel.LOOPBACK: LOOPBACK_ADDRESS,
        }
        credentials = self._config.credentials_for(definition)
        return ServiceTarget(
            service_name=definition.name,
            port=definition.port,
            probe_kind=definition.probe_kind,
            address_forms=tuple(
                AddressForm(label=label, host=hosts[label], credentials=credentials)
                for label in definition.address_labels
            ),
        )


class GetAuxiliaryServicesUseCase:
    """Reports which optional extra tools are running."""

    def __init__(self, port_checker: IPortChecker, config: DevilboxConfig) -> None:
        self._port_checker = port_checker
        self._config = config

    async def execute(self) -> List[AuxiliaryServiceDTO]:
        services = build_auxiliary_services(self._config)
        statuses = await self._port_checker.check_services(
            self._config.auxiliary_host, services
        )
        return [AuxiliaryServiceDTO.from_domain(status) for status in statuses]
