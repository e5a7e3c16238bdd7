"""
Probe domain entities.

A probe is a single bounded-time reachability check against one endpoint.
Its outcome is plain data: a failed probe is a ``ProbeResult`` with
``succeeded=False``, never an exception.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum
from typing import Optional


class ProbeKind(str, Enum):
    """Protocol used to decide whether an endpoint is healthy."""

    TCP = "tcp"
    HTTP = "http"
    MYSQL = "mysql"
    PGSQL = "pgsql"
    REDIS = "redis"
    MEMCACHED = "memcached"
    MONGO = "mongo"


class ProbeErrorKind(str, Enum):
    """Why a probe failed."""

    UNREACHABLE = "unreachable"
    REJECTED = "rejected"


class AddressLabel(str, Enum):
    """The ways a sibling container can be addressed from the dashboard."""

    HOSTNAME = "hostname"
    CONTAINER_IP = "container_ip"
    LOOPBACK = "loopback"


@dataclass(frozen=True, slots=True)
class Credentials:
    user: str
    password: str = ""

    def __repr__(self) -> str:
        return f"Credentials(user={self.user!r}, password='***')"


@dataclass(frozen=True, slots=True)
class AddressForm:
    """One address under which a service is expected to answer."""

    label: AddressLabel
    host: str
    credentials: Optional[Credentials] = None


@dataclass(frozen=True, slots=True)
class ProbeResult:
    """Outcome of exactly one probe invocation."""

    host: str
    port: int
    succeeded: bool
    error_detail: Optional[str] = None
    error_kind: Optional[ProbeErrorKind] = None
    latency_ms: Optional[float] = None
    label: Optional[AddressLabel] = None

    @classmethod
    def success(
        cls, host: str, port: int, latency_ms: Optional[float] = None
    ) -> "ProbeResult":
        return cls(host=host, port=port, succeeded=True, latency_ms=latency_ms)

    @classmethod
    def unreachable(
        cls, host: str, port: int, detail: str, latency_ms: Optional[float] = None
    ) -> "ProbeResult":
        return cls(
            host=host,
            port=port,
            succeeded=False,
            error_detail=detail or "Could not reach host",
            error_kind=ProbeErrorKind.UNREACHABLE,
            latency_ms=latency_ms,
        )

    @classmethod
    def rejected(
        cls, host: str, port: int, detail: str, latency_ms: Optional[float] = None
    ) -> "ProbeResult":
        return cls(
            host=host,
            port=port,
            succeeded=False,
            error_detail=detail or "Host rejected the connection",
            error_kind=ProbeErrorKind.REJECTED,
            latency_ms=latency_ms,
        )

    def with_label(self, label: AddressLabel) -> "ProbeResult":
        return replace(self, label=label)
