"""Domain ports package."""

from .address_resolver import IAddressResolver
from .command_runner import ICommandRunner
from .container_orchestrator import IContainerOrchestrator
from .health_check import IHealthAggregator, IPortChecker
from .probe import IProbe

__all__ = [
    "IAddressResolver",
    "ICommandRunner",
    "IContainerOrchestrator",
    "IHealthAggregator",
    "IPortChecker",
    "IProbe",
]
