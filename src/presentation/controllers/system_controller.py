"""System endpoints exposing the health score and auxiliary services."""

from typing import List

from dependency_injector.wiring import Provide, inject
from fastapi import APIRouter, Depends, HTTPException, status

from src.application.dtos.health_dto import AuxiliaryServiceDTO, HealthReportDTO
from src.application.use_cases.health_use_cases import (
    GetAuxiliaryServicesUseCase,
    GetHealthReportUseCase,
)
from src.domain.entities.errors import DomainError
from src.shared import get_logger

logger = get_logger(__name__)

router = APIRouter(tags=["System"])


@router.get("/health", response_model=HealthReportDTO)
@inject
async def health(
    get_health_report_use_case: GetHealthReportUseCase = Depends(
        Provide["get_health_report_use_case"]
    ),
) -> HealthReportDTO:
    """
    Probe every available Devilbox service and return the health score.

    Failed probes are part of the report, so this endpoint answers 200
    even when the stack is down.
    """
    try:
        report = await get_health_report_use_case.execute()
    except DomainError as exc:
        logger.error("health.check.failure", error=exc.message, details=exc.details)
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail=exc.message,
        ) from exc

    logger.debug(
        "health.check.success",
        score=report.score_percent,
        failures=report.total_failures,
    )
    return report


@router.get("/health/services", response_model=List[AuxiliaryServiceDTO])
@inject
async def auxiliary_services(
    get_auxiliary_services_use_case: GetAuxiliaryServicesUseCase = Depends(
        Provide["get_auxiliary_services_use_case"]
    ),
) -> List[AuxiliaryServiceDTO]:
    """Report which optional tools (search, mail catcher, queues) are listening."""
    try:
        return await get_auxiliary_services_use_case.execute()
    except DomainError as exc:
        logger.error("health.services.failure", error=exc.message)
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail=exc.message,
        ) from exc
