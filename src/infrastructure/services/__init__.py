"""Infrastructure services package."""

from .address_resolver import DnsAddressResolver
from .command_runner import SubprocessCommandRunner
from .docker_compose_orchestrator import DockerComposeOrchestrator
from .health_aggregator import HealthAggregator, TcpPortChecker

__all__ = [
    "DnsAddressResolver",
    "SubprocessCommandRunner",
    "DockerComposeOrchestrator",
    "HealthAggregator",
    "TcpPortChecker",
]
