"""
Use cases for the assistant tool dispatch.

Every tool is a row in ``TOOL_SPECS``: a name, a description, the pydantic
model its arguments are validated against and the coroutine that runs it.
Tools return the raw text of the commands they shell out to.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Awaitable, Callable, Dict, List, Mapping, Optional, Type

from pydantic import BaseModel, ValidationError

from src.application.dtos.tool_dto import (
    ConfigArguments,
    DatabasesArguments,
    ExecArguments,
    LogsArguments,
    NoArguments,
    ServicesArguments,
    ToolCallResponseDTO,
    ToolDescriptorDTO,
)
from src.application.models import SERVICE_CATALOG
from src.application.use_cases.health_use_cases import GetHealthReportUseCase
from src.domain.entities.errors import (
    ConfigurationError,
    ToolArgumentError,
    ToolNotFoundError,
)
from src.domain.entities.health import HealthReport
from src.domain.entities.tool import ToolDefinition, ToolResult
from src.domain.ports.container_orchestrator import IContainerOrchestrator
from src.domain.repositories.env_file_repository import IEnvFileRepository
from src.domain.repositories.project_repository import IProjectRepository
from src.shared import LOOPBACK_ADDRESS, get_logger

logger = get_logger(__name__)

ToolHandler = Callable[["CallToolUseCase", Any], Awaitable[ToolResult]]


@dataclass(frozen=True)
class _ToolSpec:
    name: str
    description: str
    arguments: Type[BaseModel]
    handler: ToolHandler

    def definition(self) -> ToolDefinition:
        return ToolDefinition(
            name=self.name,
            description=self.description,
            input_schema=self.arguments.model_json_schema(),
        )


def _format_validation_errors(exc: ValidationError) -> List[str]:
    messages = []
    for error in exc.errors():
        location = ".".join(str(part) for part in error["loc"]) or "arguments"
        messages.append(f"{location}: {error['msg']}")
    return messages


def render_health_report(report: HealthReport) -> str:
    """Plain-text rendering of a health report."""

    display_names = {d.name: d.display_name for d in SERVICE_CATALOG}
    lines = [
        f"Health: {report.score_percent}% "
        f"({report.total_checks - report.total_failures}/{report.total_checks} "
        "checks passed)"
    ]
    for service_name, results in report.per_service.items():
        lines.append(f"{display_names.get(service_name, service_name)} connect:")
        for result in results:
            host = result.host or "<unresolved>"
            if result.succeeded:
                lines.append(f"  OK   {host}:{result.port}")
            else:
                lines.append(f"  FAIL {host}:{result.port} - {result.error_detail}")
    return "\n".join(lines)


class ListToolsUseCase:
    """Use case responsible for describing the available tools."""

    def execute(self) -> List[ToolDescriptorDTO]:
        return [ToolDescriptorDTO.from_domain(spec.definition()) for spec in TOOL_SPECS]


class CallToolUseCase:
    """Validates tool arguments and dispatches to the matching handler."""

    def __init__(
        self,
        orchestrator: IContainerOrchestrator,
        env_file_repository: IEnvFileRepository,
        project_repository: IProjectRepository,
        health_report_use_case: GetHealthReportUseCase,
        php_service: str = "php",
    ) -> None:
        self._orchestrator = orchestrator
        self._env_file = env_file_repository
        self._projects = project_repository
        self._health = health_report_use_case
        self._php_service = php_service

    async def execute(
        self, name: str, arguments: Optional[Mapping[str, Any]] = None
    ) -> ToolCallResponseDTO:
        """
        Run a tool by name.

        Raises:
            ToolNotFoundError: If no tool is registered under ``name``.
            ToolArgumentError: If ``arguments`` do not match the tool schema.
        """
        spec = _TOOLS_BY_NAME.get(name)
        if spec is None:
            raise ToolNotFoundError(name)

        try:
            parsed = spec.arguments.model_validate(dict(arguments or {}))
        except ValidationError as exc:
            raise ToolArgumentError(
                f"Invalid arguments for {name}",
                details={"errors": _format_validation_errors(exc)},
            ) from exc

        logger.info("tools.call.started", tool=name)
        try:
            result = await spec.handler(self, parsed)
        except Exception as exc:
            logger.warning("tools.call.failed", tool=name, error=str(exc))
            result = ToolResult.error(str(exc))
        else:
            logger.info("tools.call.completed", tool=name)

        return ToolCallResponseDTO.from_domain(result)

    async def _status(self, _: NoArguments) -> ToolResult:
        result = await self._orchestrator.status()
        return ToolResult.text(result.stdout)

    async def _start(self, args: ServicesArguments) -> ToolResult:
        result = await self._orchestrator.start(args.services)
        return ToolResult.text(result.output)

    async def _stop(self, args: ServicesArguments) -> ToolResult:
        result = await self._orchestrator.stop(args.services)
        return ToolResult.text(result.output)

    async def _restart(self, args: ServicesArguments) -> ToolResult:
        result = await self._orchestrator.restart(args.services)
        return ToolResult.text(result.output)

    async def _logs(self, args: LogsArguments) -> ToolResult:
        result = await self._orchestrator.logs(args.service, args.lines)
        return ToolResult.text(result.stdout)

    async def _exec(self, args: ExecArguments) -> ToolResult:
        result = await self._orchestrator.exec(
            args.service, ["sh", "-c", args.command]
        )
        return ToolResult.text(result.output)

    async def _vhosts(self, _: NoArguments) -> ToolResult:
        projects = self._projects.list_projects()
        lines = [f"Found {len(projects)} projects:", ""]
        for project in projects:
            state = "configured" if project.configured else "no vhost config"
            lines.append(f"- {project.name} ({state})")
        return ToolResult.text("\n".join(lines))

    async def _config(self, args: ConfigArguments) -> ToolResult:
        if args.action == "get":
            if args.key:
                value = self._env_file.get(args.key)
                if value:
                    return ToolResult.text(f"{args.key}={value}")
                return ToolResult.text(f'Key "{args.key}" not found')
            values = self._env_file.read_all()
            return ToolResult.text(
                "\n".join(f"{key}={value}" for key, value in values.items())
            )

        if not args.key or not args.value:
            raise ConfigurationError("Both key and value are required for action=set")
        self._env_file.set(args.key, args.value)
        return ToolResult.text(f"Updated {args.key}={args.value}")

    async def _databases(self, args: DatabasesArguments) -> ToolResult:
        if args.type == "mysql":
            command = ["mysql", "-h", LOOPBACK_ADDRESS, "-u", "root"]
            password = self._env_file.get("MYSQL_ROOT_PASSWORD")
            if password:
                command.append(f"-p{password}")
            command.extend(["--skip-ssl", "-e", "SHOW DATABASES;"])
        else:
            user = self._env_file.get("PGSQL_ROOT_USER") or "postgres"
            command = ["psql", "-h", LOOPBACK_ADDRESS, "-U", user, "-l"]

        result = await self._orchestrator.exec(self._php_service, command)
        return ToolResult.text(result.stdout)

    async def _health(self, _: NoArguments) -> ToolResult:
        sections: Dict[str, str] = {}

        status = await self._orchestrator.status()
        sections["Service Status"] = status.stdout

        disk = await self._orchestrator.disk_usage()
        sections["Disk Space"] = disk.stdout

        engine = await self._orchestrator.engine_info()
        sections["Docker Info"] = engine.stdout

        report = await self._health.evaluate()
        sections["Connectivity"] = render_health_report(report)

        return ToolResult.text(
            "\n\n".join(
                f"=== {title} ===\n{body.rstrip()}" for title, body in sections.items()
            )
        )


TOOL_SPECS = (
    _ToolSpec(
        name="devilbox_status",
        description="Get status of all Devilbox services (running/stopped)",
        arguments=NoArguments,
        handler=CallToolUseCase._status,
    ),
    _ToolSpec(
        name="devilbox_start",
        description="Start Devilbox services. Can start all services or specific ones.",
        arguments=ServicesArguments,
        handler=CallToolUseCase._start,
    ),
    _ToolSpec(
        name="devilbox_stop",
        description="Stop Devilbox services. Can stop all services or specific ones.",
        arguments=ServicesArguments,
        handler=CallToolUseCase._stop,
    ),
    _ToolSpec(
        name="devilbox_restart",
        description="Restart Devilbox services. Useful after configuration changes.",
        arguments=ServicesArguments,
        handler=CallToolUseCase._restart,
    ),
    _ToolSpec(
        name="devilbox_logs",
        description="View recent logs from a Devilbox container.",
        arguments=LogsArguments,
        handler=CallToolUseCase._logs,
    ),
    _ToolSpec(
        name="devilbox_exec",
        description="Execute a command inside a Devilbox container",
        arguments=ExecArguments,
        handler=CallToolUseCase._exec,
    ),
    _ToolSpec(
        name="devilbox_vhosts",
        description="List all virtual hosts (projects) in Devilbox",
        arguments=NoArguments,
        handler=CallToolUseCase._vhosts,
    ),
    _ToolSpec(
        name="devilbox_config",
        description="Get or update Devilbox configuration (.env file)",
        arguments=ConfigArguments,
        handler=CallToolUseCase._config,
    ),
    _ToolSpec(
        name="devilbox_databases",
        description="List databases in MySQL or PostgreSQL",
        arguments=DatabasesArguments,
        handler=CallToolUseCase._databases,
    ),
    _ToolSpec(
        name="devilbox_health",
        description=(
            "Check Devilbox health - service status, disk space, "
            "docker engine and service connectivity"
        ),
        arguments=NoArguments,
        handler=CallToolUseCase._health,
    ),
)

_TOOLS_BY_NAME = {spec.name: spec for spec in TOOL_SPECS}
