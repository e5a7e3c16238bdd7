"""
Dependency container injection module - Main Layer

This module implements the dependency injection container
to simplify the management and lifecycle of dependencies
in the application.
"""

import os
from contextlib import asynccontextmanager
from pathlib import Path

from dependency_injector import containers, providers

from src.application.models import DevilboxConfig
from src.application.use_cases.health_use_cases import (
    GetAuxiliaryServicesUseCase,
    GetHealthReportUseCase,
)
from src.application.use_cases.tool_use_cases import CallToolUseCase, ListToolsUseCase
from src.domain.repositories.env_file_repository import IEnvFileRepository
from src.infrastructure.probes import build_probe_registry
from src.infrastructure.repositories import (
    EnvFileRepository,
    FilesystemProjectRepository,
)
from src.infrastructure.services import (
    DnsAddressResolver,
    DockerComposeOrchestrator,
    HealthAggregator,
    SubprocessCommandRunner,
    TcpPortChecker,
)
from src.shared import get_logger
from src.shared.env import resolve_secret_files

from .config import AppSettings

logger = get_logger(__name__)


def _join_path(base: str, relative: str) -> str:
    return str(Path(base) / relative)


def load_devilbox_config(
    env_file_repository: IEnvFileRepository,
    probe_timeout: float,
    auxiliary_host: str,
) -> DevilboxConfig:
    """Devilbox ``.env`` values, overridden by the process environment."""

    values = {**env_file_repository.read_all(), **os.environ}
    return DevilboxConfig.from_mapping(
        resolve_secret_files(values),
        probe_timeout=probe_timeout,
        auxiliary_host=auxiliary_host,
    )


class AppContainer(containers.DeclarativeContainer):
    """Composition Root using dependency-injector."""

    wiring_config = containers.WiringConfiguration(packages=["..presentation"])

    # Settings
    config = providers.Configuration()

    # Infrastructure
    env_file_repository = providers.Singleton(
        EnvFileRepository,
        env_path=providers.Callable(
            _join_path, config.devilbox.path, config.devilbox.env_file
        ),
    )

    project_repository = providers.Singleton(
        FilesystemProjectRepository,
        data_path=providers.Callable(
            _join_path, config.devilbox.path, config.devilbox.data_dir
        ),
    )

    command_runner = providers.Singleton(
        SubprocessCommandRunner,
        timeout=config.devilbox.command_timeout,
        cwd=config.devilbox.path,
    )

    orchestrator = providers.Singleton(
        DockerComposeOrchestrator,
        command_runner=command_runner,
        project_path=config.devilbox.path,
        compose_command=config.devilbox.compose_command,
        docker_command=config.devilbox.docker_command,
        container_template=config.devilbox.container_template,
    )

    probe_registry = providers.Singleton(build_probe_registry)

    health_aggregator = providers.Singleton(
        HealthAggregator,
        probes=probe_registry,
        probe_timeout=config.health.probe_timeout,
    )

    address_resolver = providers.Singleton(
        DnsAddressResolver,
        timeout=config.health.probe_timeout,
    )

    port_checker = providers.Singleton(
        TcpPortChecker,
        timeout=config.health.probe_timeout,
    )

    # Read on every request so .env edits show up without a restart
    devilbox_config = providers.Factory(
        load_devilbox_config,
        env_file_repository=env_file_repository,
        probe_timeout=config.health.probe_timeout,
        auxiliary_host=config.health.auxiliary_host,
    )

    # Application (use cases)
    get_health_report_use_case = providers.Factory(
        GetHealthReportUseCase,
        health_aggregator=health_aggregator,
        address_resolver=address_resolver,
        config=devilbox_config,
    )

    get_auxiliary_services_use_case = providers.Factory(
        GetAuxiliaryServicesUseCase,
        port_checker=port_checker,
        config=devilbox_config,
    )

    list_tools_use_case = providers.Factory(ListToolsUseCase)

    call_tool_use_case = providers.Factory(
        CallToolUseCase,
        orchestrator=orchestrator,
        env_file_repository=env_file_repository,
        project_repository=project_repository,
        health_report_use_case=get_health_report_use_case,
        php_service=config.devilbox.php_service,
    )


# -------------------------
# Global Container Instance
# -------------------------
_app_container: AppContainer | None = None


def init_container(settings: AppSettings) -> AppContainer:
    """Initialize global container with application settings."""

    global _app_container

    container = AppContainer()
    container.config.from_pydantic(settings)
    _app_container = container
    return container


def get_container() -> AppContainer:
    """Get the initialized global container."""

    if _app_container is None:
        raise RuntimeError("Container has not been initialized yet")

    return _app_container


@asynccontextmanager
async def app_lifespan():
    """
    Lifecycle hook used by the FastAPI lifespan.

    Nothing is held open between requests; startup only reports where the
    Devilbox configuration is expected to be.
    """
    container = get_container()
    env_file = container.env_file_repository()

    if env_file.path.is_file():
        logger.info("container.env_file.found", path=str(env_file.path))
    else:
        logger.warning("container.env_file.missing", path=str(env_file.path))

    try:
        logger.info("container.resources.initialized")
        yield container
    finally:
        logger.info("container.resources.shutdown")
