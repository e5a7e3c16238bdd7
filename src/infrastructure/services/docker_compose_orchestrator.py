"""``docker compose`` backed implementation of the orchestrator port."""

from __future__ import annotations

import shlex
from typing import List, Sequence

from src.domain.entities.tool import CommandResult
from src.domain.ports.command_runner import ICommandRunner
from src.domain.ports.container_orchestrator import IContainerOrchestrator

ENGINE_INFO_FORMAT = "{{.OperatingSystem}} | {{.ServerVersion}}"


class DockerComposeOrchestrator(IContainerOrchestrator):
    """Shells out to the compose CLI inside the Devilbox checkout."""

    def __init__(
        self,
        command_runner: ICommandRunner,
        project_path: str,
        compose_command: str = "docker-compose",
        docker_command: str = "docker",
        container_template: str = "devilbox-{service}-1",
    ) -> None:
        self._runner = command_runner
        self._project_path = project_path
        self._compose = shlex.split(compose_command)
        self._docker = shlex.split(docker_command)
        self._container_template = container_template

    def container_name(self, service: str) -> str:
        return self._container_template.format(service=service)

    async def _compose_run(self, *args: str) -> CommandResult:
        return await self._runner.run([*self._compose, *args], cwd=self._project_path)

    async def status(self) -> CommandResult:
        return await self._compose_run("ps")

    async def start(self, services: Sequence[str] = ()) -> CommandResult:
        return await self._compose_run("up", "-d", *services)

    async def stop(self, services: Sequence[str] = ()) -> CommandResult:
        return await self._compose_run("stop", *services)

    async def restart(self, services: Sequence[str] = ()) -> CommandResult:
        return await self._compose_run("restart", *services)

    async def logs(self, service: str, lines: int = 100) -> CommandResult:
        return await self._compose_run("logs", f"--tail={lines}", service)

    async def exec(self, service: str, args: Sequence[str]) -> CommandResult:
        argv: List[str] = [*self._docker, "exec", self.container_name(service), *args]
        return await self._runner.run(argv)

    async def engine_info(self) -> CommandResult:
        return await self._runner.run(
            [*self._docker, "info", "--format", ENGINE_INFO_FORMAT]
        )

    async def disk_usage(self) -> CommandResult:
        return await self._runner.run(["df", "-h"], cwd=self._project_path)
