"""Domain port for the container orchestration CLI."""

from __future__ import annotations

from typing import Protocol, Sequence

from src.domain.entities.tool import CommandResult


class IContainerOrchestrator(Protocol):
    """Thin wrapper over ``docker compose`` and ``docker``."""

    async def status(self) -> CommandResult: ...

    async def start(self, services: Sequence[str] = ()) -> CommandResult: ...

    async def stop(self, services: Sequence[str] = ()) -> CommandResult: ...

    async def restart(self, services: Sequence[str] = ()) -> CommandResult: ...

    async def logs(self, service: str, lines: int = 100) -> CommandResult: ...

    async def exec(self, service: str, args: Sequence[str]) -> CommandResult:
        """Run ``args`` inside the container of ``service``."""
        ...

    async def engine_info(self) -> CommandResult: ...

    async def disk_usage(self) -> CommandResult: ...
