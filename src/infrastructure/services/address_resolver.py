"""Hostname resolution for sibling containers."""

from __future__ import annotations

import asyncio
import socket
from typing import Optional

from src.domain.ports.address_resolver import IAddressResolver
from src.shared import DEFAULT_PROBE_TIMEOUT_SECONDS, get_logger

logger = get_logger(__name__)


class DnsAddressResolver(IAddressResolver):
    """Resolve a container hostname to its first IPv4 address."""

    def __init__(self, timeout: float = DEFAULT_PROBE_TIMEOUT_SECONDS) -> None:
        self._timeout = timeout

    async def resolve(self, hostname: str) -> Optional[str]:
        if not hostname:
            return None

        loop = asyncio.get_running_loop()
        try:
            infos = await asyncio.wait_for(
                loop.getaddrinfo(
                    hostname, None, family=socket.AF_INET, type=socket.SOCK_STREAM
                ),
                timeout=self._timeout,
            )
        except (OSError, asyncio.TimeoutError) as exc:
            logger.debug("resolver.lookup.failed", hostname=hostname, error=str(exc))
            return None

        for _, _, _, _, sockaddr in infos:
            return sockaddr[0]
        return None
