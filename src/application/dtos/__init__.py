"""
DTOs Package - Application Layer

This package contains Data Transfer Objects (DTOs) used for data exchange
between the application layer and the presentation layer.
"""

from .health_dto import AuxiliaryServiceDTO, HealthReportDTO, ProbeResultDTO
from .tool_dto import (
    ConfigArguments,
    DatabasesArguments,
    ExecArguments,
    LogsArguments,
    NoArguments,
    ServicesArguments,
    ToolCallRequestDTO,
    ToolCallResponseDTO,
    ToolContentDTO,
    ToolDescriptorDTO,
)

__all__ = [
    "AuxiliaryServiceDTO",
    "HealthReportDTO",
    "ProbeResultDTO",
    "ConfigArguments",
    "DatabasesArguments",
    "ExecArguments",
    "LogsArguments",
    "NoArguments",
    "ServicesArguments",
    "ToolCallRequestDTO",
    "ToolCallResponseDTO",
    "ToolContentDTO",
    "ToolDescriptorDTO",
]
