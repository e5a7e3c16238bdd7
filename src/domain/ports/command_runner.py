"""Domain port for running external commands."""

from __future__ import annotations

from typing import Optional, Protocol, Sequence

from src.domain.entities.tool import CommandResult


class ICommandRunner(Protocol):
    async def run(
        self,
        args: Sequence[str],
        *,
        cwd: Optional[str] = None,
        check: bool = True,
    ) -> CommandResult:
        """
        Run ``args`` without a shell and capture its output.

        Raises:
            CommandExecutionError: If ``check`` is set and the exit code is
                non-zero.
            CommandTimeoutError: If the command exceeds its time budget.
        """
        ...
