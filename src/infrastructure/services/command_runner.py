"""Run external commands without a shell."""

from __future__ import annotations

import asyncio
import contextlib
import os
from typing import Optional, Sequence

from src.domain.entities.errors import CommandExecutionError, CommandTimeoutError
from src.domain.entities.tool import CommandResult
from src.domain.ports.command_runner import ICommandRunner
from src.shared import get_logger

logger = get_logger(__name__)

MAX_OUTPUT_CHARS = 200_000


def _decode(data: Optional[bytes]) -> str:
    text = (data or b"").decode("utf-8", errors="replace")
    if len(text) > MAX_OUTPUT_CHARS:
        text = text[-MAX_OUTPUT_CHARS:]
    return text


class SubprocessCommandRunner(ICommandRunner):
    """``asyncio`` subprocess runner with a per-command timeout."""

    def __init__(self, timeout: float = 60.0, cwd: Optional[str] = None) -> None:
        self._timeout = timeout
        self._cwd = cwd

    async def run(
        self,
        args: Sequence[str],
        *,
        cwd: Optional[str] = None,
        check: bool = True,
    ) -> CommandResult:
        argv = [str(arg) for arg in args]
        env = os.environ.copy()
        env.setdefault("COMPOSE_ANSI", "never")

        logger.debug("command.started", args=argv)
        try:
            proc = await asyncio.create_subprocess_exec(
                *argv,
                cwd=cwd or self._cwd,
                stdout=asyncio.subprocess.PIPE,
                stderr=asyncio.subprocess.PIPE,
                env=env,
            )
        except FileNotFoundError as exc:
            raise CommandExecutionError(argv, 127, str(exc)) from exc

        try:
            stdout, stderr = await asyncio.wait_for(
                proc.communicate(), timeout=self._timeout
            )
        except asyncio.TimeoutError as exc:
            with contextlib.suppress(ProcessLookupError):
                proc.kill()
            await proc.wait()
            logger.warning("command.timeout", args=argv, timeout=self._timeout)
            raise CommandTimeoutError(argv, self._timeout) from exc

        result = CommandResult(
            args=tuple(argv),
            returncode=proc.returncode if proc.returncode is not None else -1,
            stdout=_decode(stdout),
            stderr=_decode(stderr),
        )
        logger.debug("command.finished", args=argv, returncode=result.returncode)

        if check and result.returncode != 0:
            raise CommandExecutionError(argv, result.returncode, result.stderr)
        return result
