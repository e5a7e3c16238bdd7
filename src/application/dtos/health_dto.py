"""DTOs for health report and auxiliary service responses."""

from __future__ import annotations

from datetime import datetime
from typing import Dict, List, Optional

from pydantic import BaseModel, Field

from src.domain.entities.health import HealthReport
from src.domain.entities.probe import AddressLabel, ProbeErrorKind, ProbeResult
from src.domain.entities.service import AuxiliaryServiceStatus


class ProbeResultDTO(BaseModel):
    """Serializable representation of one probe."""

    host: str = Field(description="Address that was probed")
    port: int = Field(description="Port that was probed")
    label: Optional[AddressLabel] = Field(
        default=None, description="Which address form of the service this is"
    )
    succeeded: bool = Field(description="Whether the endpoint answered")
    error_detail: Optional[str] = Field(
        default=None, description="Human readable failure cause"
    )
    error_kind: Optional[ProbeErrorKind] = Field(
        default=None, description="unreachable or rejected"
    )
    latency_ms: Optional[float] = Field(
        default=None, description="Probe duration in milliseconds"
    )

    @classmethod
    def from_domain(cls, result: ProbeResult) -> "ProbeResultDTO":
        return cls(
            host=result.host,
            port=result.port,
            label=result.label,
            succeeded=result.succeeded,
            error_detail=result.error_detail,
            error_kind=result.error_kind,
            latency_ms=result.latency_ms,
        )


class HealthReportDTO(BaseModel):
    """DTO representing the /health response payload."""

    score_percent: int = Field(ge=0, le=100, description="Overall health score")
    total_checks: int = Field(ge=0, description="Number of probes run")
    total_failures: int = Field(ge=0, description="Number of failed probes")
    checked_at: datetime = Field(description="When the probe pass completed")
    services: Dict[str, List[ProbeResultDTO]] = Field(
        default_factory=dict,
        description="Probe results per service in declared address order",
    )

    @classmethod
    def from_domain(cls, report: HealthReport) -> "HealthReportDTO":
        return cls(
            score_percent=report.score_percent,
            total_checks=report.total_checks,
            total_failures=report.total_failures,
            checked_at=report.checked_at,
            services={
                name: [ProbeResultDTO.from_domain(result) for result in results]
                for name, results in report.per_service.items()
            },
        )

    model_config = {
        "json_schema_extra": {
            "example": {
                "score_percent": 86,
                "total_checks": 7,
                "total_failures": 1,
                "checked_at": "2024-09-09T12:00:00Z",
                "services": {
                    "httpd": [
                        {
                            "host": "httpd",
                            "port": 80,
                            "label": "hostname",
                            "succeeded": True,
                            "error_detail": None,
                            "error_kind": None,
                            "latency_ms": 1.8,
                        }
                    ],
                    "mysql": [
                        {
                            "host": "127.0.0.1",
                            "port": 3306,
                            "label": "loopback",
                            "succeeded": False,
                            "error_detail": "Access denied for user 'root'",
                            "error_kind": "rejected",
                            "latency_ms": 4.2,
                        }
                    ],
                },
            }
        }
    }


class AuxiliaryServiceDTO(BaseModel):
    """Liveness of one optional extra tool."""

    key: str = Field(description="Service identifier")
    name: str = Field(description="Display name")
    port: int = Field(description="Port checked for liveness")
    url: str = Field(description="Web UI address")
    running: bool = Field(description="Whether the port accepted a connection")
    username: Optional[str] = Field(default=None, description="Default user")
    password: Optional[str] = Field(default=None, description="Default password")
    extra_ports: Dict[str, int] = Field(
        default_factory=dict, description="Other ports the service exposes"
    )

    @classmethod
    def from_domain(cls, status: AuxiliaryServiceStatus) -> "AuxiliaryServiceDTO":
        service = status.service
        return cls(
            key=service.key,
            name=service.name,
            port=service.port,
            url=service.url,
            running=status.running,
            username=service.username,
            password=service.password,
            extra_ports=dict(service.extra_ports),
        )
