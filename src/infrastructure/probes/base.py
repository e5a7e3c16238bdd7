"""Shared skeleton for every probe."""

from __future__ import annotations

import asyncio
from abc import ABC, abstractmethod
from time import perf_counter
from typing import Optional

from src.domain.entities.probe import Credentials, ProbeResult
from src.shared import get_logger

logger = get_logger(__name__)


class ProbeRejectedError(Exception):
    """The endpoint answered but refused the handshake."""


def describe_error(exc: BaseException) -> str:
    text = str(exc).strip()
    return text or type(exc).__name__


class BaseProbe(ABC):
    """
    Template for a bounded-time probe.

    Subclasses implement ``_handshake``, which raises on failure, and may
    override ``_is_rejection`` to flag library errors that mean "reached the
    host, but it rejected us". ``probe`` never raises.
    """

    name = "probe"

    async def probe(
        self,
        host: str,
        port: int,
        timeout: float,
        credentials: Optional[Credentials] = None,
    ) -> ProbeResult:
        if not host:
            return ProbeResult.unreachable(
                host,
                port,
                "Could not reach host: no address to connect to "
                "(hostname did not resolve)",
            )

        start = perf_counter()
        try:
            await asyncio.wait_for(
                self._handshake(host, port, timeout, credentials), timeout=timeout
            )
        except asyncio.TimeoutError:
            return self._failure(
                host,
                port,
                start,
                f"Could not reach host: timed out after {timeout:g}s",
                rejected=False,
            )
        except Exception as exc:
            rejected = isinstance(exc, ProbeRejectedError) or self._is_rejection(exc)
            prefix = "Host rejected connection" if rejected else "Could not reach host"
            return self._failure(
                host, port, start, f"{prefix}: {describe_error(exc)}", rejected=rejected
            )

        latency_ms = (perf_counter() - start) * 1000
        logger.debug(
            f"probe.{self.name}.succeeded", host=host, port=port, latency_ms=latency_ms
        )
        return ProbeResult.success(host, port, latency_ms=latency_ms)

    def _failure(
        self, host: str, port: int, start: float, detail: str, *, rejected: bool
    ) -> ProbeResult:
        latency_ms = (perf_counter() - start) * 1000
        event = "rejected" if rejected else "unreachable"
        logger.debug(f"probe.{self.name}.{event}", host=host, port=port, detail=detail)
        if rejected:
            return ProbeResult.rejected(host, port, detail, latency_ms=latency_ms)
        return ProbeResult.unreachable(host, port, detail, latency_ms=latency_ms)

    @abstractmethod
    async def _handshake(
        self,
        host: str,
        port: int,
        timeout: float,
        credentials: Optional[Credentials],
    ) -> None:
        """Open a connection, perform the protocol check and release it."""

    def _is_rejection(self, exc: Exception) -> bool:
        return False
