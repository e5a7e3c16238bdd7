"""Plain TCP and HTTP probes."""

from __future__ import annotations

import asyncio
from typing import Optional

import httpx

from src.domain.entities.probe import Credentials

from .base import BaseProbe


class TcpProbe(BaseProbe):
    """Succeeds when the port accepts a TCP connection."""

    name = "tcp"

    async def _handshake(
        self,
        host: str,
        port: int,
        timeout: float,
        credentials: Optional[Credentials],
    ) -> None:
        _, writer = await asyncio.open_connection(host, port)
        writer.close()
        await writer.wait_closed()


class HttpProbe(BaseProbe):
    """Succeeds when the endpoint answers an HTTP request with any status."""

    name = "http"

    def __init__(self, path: str = "/") -> None:
        self._path = path if path.startswith("/") else f"/{path}"

    def build_url(self, host: str, port: int) -> str:
        netloc = f"[{host}]" if ":" in host else host
        return f"http://{netloc}:{port}{self._path}"

    async def _handshake(
        self,
        host: str,
        port: int,
        timeout: float,
        credentials: Optional[Credentials],
    ) -> None:
        async with httpx.AsyncClient(timeout=timeout, trust_env=False) as client:
            await client.get(self.build_url(host, port))


async def is_port_open(host: str, port: int, timeout: float) -> bool:
    """Whether ``host:port`` accepts a TCP connection within ``timeout``."""
    result = await TcpProbe().probe(host, port, timeout)
    return result.succeeded
