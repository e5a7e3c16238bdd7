from __future__ import annotations

from unittest.mock import AsyncMock

import pytest
from fastapi import HTTPException

from src.application.dtos.health_dto import AuxiliaryServiceDTO, HealthReportDTO
from src.domain.entities.errors import ConfigurationError
from src.domain.entities.health import HealthReport
from src.domain.entities.probe import ProbeResult
from src.presentation.controllers.system_controller import auxiliary_services, health


def _report_dto() -> HealthReportDTO:
    report = HealthReport.from_results(
        {
            "httpd": [ProbeResult.success("httpd", 80)],
            "bind": [ProbeResult.unreachable("bind", 53, "Could not reach host")],
        }
    )
    return HealthReportDTO.from_domain(report)


@pytest.mark.asyncio
async def test_health_endpoint_returns_report():
    use_case = AsyncMock()
    use_case.execute.return_value = _report_dto()

    dto = await health(get_health_report_use_case=use_case)

    assert dto.score_percent == 50
    assert list(dto.services) == ["httpd", "bind"]


@pytest.mark.asyncio
async def test_health_endpoint_maps_domain_errors_to_503():
    use_case = AsyncMock()
    use_case.execute.side_effect = ConfigurationError("unreadable .env")

    with pytest.raises(HTTPException) as exc_info:
        await health(get_health_report_use_case=use_case)

    assert exc_info.value.status_code == 503


@pytest.mark.asyncio
async def test_auxiliary_services_endpoint_returns_list():
    use_case = AsyncMock()
    use_case.execute.return_value = [
        AuxiliaryServiceDTO(
            key="mailpit",
            name="Mailpit",
            port=8025,
            url="http://localhost:8025",
            running=True,
        )
    ]

    services = await auxiliary_services(get_auxiliary_services_use_case=use_case)

    assert services[0].running is True
