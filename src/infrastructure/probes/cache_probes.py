"""Probes for the key-value caches."""

from __future__ import annotations

import asyncio
from typing import Optional

import redis.asyncio as aioredis
from redis.exceptions import AuthenticationError, ResponseError

from src.domain.entities.probe import Credentials

from .base import BaseProbe, ProbeRejectedError


class RedisProbe(BaseProbe):
    """Sends ``PING`` to Redis."""

    name = "redis"

    async def _handshake(
        self,
        host: str,
        port: int,
        timeout: float,
        credentials: Optional[Credentials],
    ) -> None:
        client = aioredis.Redis(
            host=host,
            port=port,
            username=credentials.user if credentials and credentials.user else None,
            password=credentials.password if credentials else None,
            socket_connect_timeout=timeout,
            socket_timeout=timeout,
        )
        try:
            await client.ping()
        finally:
            await client.aclose()

    def _is_rejection(self, exc: Exception) -> bool:
        # NOAUTH and WRONGPASS arrive as ResponseError subclasses.
        return isinstance(exc, (AuthenticationError, ResponseError))


class MemcachedProbe(BaseProbe):
    """Sends the text-protocol ``version`` command to memcached."""

    name = "memcached"

    async def _handshake(
        self,
        host: str,
        port: int,
        timeout: float,
        credentials: Optional[Credentials],
    ) -> None:
        reader, writer = await asyncio.open_connection(host, port)
        try:
            writer.write(b"version\r\n")
            await writer.drain()
            reply = await reader.readline()
        finally:
            writer.close()
            await writer.wait_closed()

        if not reply:
            raise ConnectionError("connection closed before reply")
        if not reply.startswith(b"VERSION"):
            text = reply.decode("utf-8", errors="replace").strip()
            raise ProbeRejectedError(f"unexpected reply {text!r}")
