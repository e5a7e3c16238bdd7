"""
Domain Entities Package

This package contains the core domain entities and business logic.
"""

from .errors import (
    CommandExecutionError,
    CommandTimeoutError,
    ConfigurationError,
    DomainError,
    ToolArgumentError,
    ToolNotFoundError,
)
from .health import HealthReport, compute_score
from .probe import (
    AddressForm,
    AddressLabel,
    Credentials,
    ProbeErrorKind,
    ProbeKind,
    ProbeResult,
)
from .project import Project
from .service import (
    AuxiliaryService,
    AuxiliaryServiceStatus,
    ServiceDefinition,
    ServiceTarget,
)
from .tool import CommandResult, ToolContent, ToolDefinition, ToolResult

__all__ = [
    "AddressForm",
    "AddressLabel",
    "Credentials",
    "ProbeErrorKind",
    "ProbeKind",
    "ProbeResult",
    "Project",
    "HealthReport",
    "compute_score",
    "AuxiliaryService",
    "AuxiliaryServiceStatus",
    "ServiceDefinition",
    "ServiceTarget",
    "CommandResult",
    "ToolContent",
    "ToolDefinition",
    "ToolResult",
    "DomainError",
    "ToolNotFoundError",
    "ToolArgumentError",
    "ConfigurationError",
    "CommandExecutionError",
    "CommandTimeoutError",
]
