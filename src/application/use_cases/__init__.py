"""
Use Cases Package - Application Layer

This package contains use cases that orchestrate the probe battery,
the auxiliary liveness checks and the assistant tool dispatch.
"""

from .health_use_cases import GetAuxiliaryServicesUseCase, GetHealthReportUseCase
from .tool_use_cases import CallToolUseCase, ListToolsUseCase

__all__ = [
    "GetHealthReportUseCase",
    "GetAuxiliaryServicesUseCase",
    "CallToolUseCase",
    "ListToolsUseCase",
]
