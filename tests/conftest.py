from __future__ import annotations

import asyncio
import socket
import sys
from pathlib import Path
from typing import Dict, List, Optional, Sequence, Tuple

import pytest
import pytest_asyncio

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from src.domain.entities.tool import CommandResult  # noqa: E402


class FakeCommandRunner:
    """Records every command and answers from a queue of canned results."""

    def __init__(self, stdout: str = "", stderr: str = "", returncode: int = 0):
        self.calls: List[Tuple[Tuple[str, ...], Optional[str]]] = []
        self._stdout = stdout
        self._stderr = stderr
        self._returncode = returncode

    async def run(
        self,
        args: Sequence[str],
        *,
        cwd: Optional[str] = None,
        check: bool = True,
    ) -> CommandResult:
        self.calls.append((tuple(args), cwd))
        return CommandResult(
            args=tuple(args),
            returncode=self._returncode,
            stdout=self._stdout,
            stderr=self._stderr,
        )


class FakeEnvFileRepository:
    def __init__(self, values: Optional[Dict[str, str]] = None) -> None:
        self.values: Dict[str, str] = dict(values or {})
        self.path = ROOT / ".env.test"

    def read_all(self) -> Dict[str, str]:
        return dict(self.values)

    def read_resolved(self) -> Dict[str, str]:
        return dict(self.values)

    def get(self, key: str) -> Optional[str]:
        return self.values.get(key)

    def set(self, key: str, value: str) -> None:
        self.values[key] = value


@pytest.fixture()
def fake_command_runner() -> FakeCommandRunner:
    return FakeCommandRunner(stdout="ok\n")


@pytest.fixture()
def fake_env_file() -> FakeEnvFileRepository:
    return FakeEnvFileRepository(
        {
            "MYSQL_SERVER": "mariadb-10.6",
            "MYSQL_ROOT_PASSWORD": "secret",
            "PGSQL_SERVER": "",
            "PGSQL_ROOT_USER": "admin",
        }
    )


@pytest_asyncio.fixture()
async def tcp_listener():
    """A local TCP server on an ephemeral port that accepts and closes."""

    async def _handle(reader: asyncio.StreamReader, writer: asyncio.StreamWriter):
        writer.close()

    server = await asyncio.start_server(_handle, "127.0.0.1", 0)
    port = server.sockets[0].getsockname()[1]
    try:
        yield port
    finally:
        server.close()
        await server.wait_closed()


def closed_port() -> int:
    """A loopback port that nothing listens on."""
    with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as sock:
        sock.bind(("127.0.0.1", 0))
        return sock.getsockname()[1]


@pytest.fixture()
def unused_port() -> int:
    return closed_port()

