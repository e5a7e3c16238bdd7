"""Domain port for single-endpoint probes."""

from __future__ import annotations

from typing import Optional, Protocol

from src.domain.entities.probe import Credentials, ProbeResult


class IProbe(Protocol):
    """Bounded-time reachability check against one endpoint."""

    async def probe(
        self,
        host: str,
        port: int,
        timeout: float,
        credentials: Optional[Credentials] = None,
    ) -> ProbeResult:
        """Return the probe outcome. Implementations never raise."""
        ...
