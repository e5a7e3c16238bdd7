"""Probe implementations, one per ``ProbeKind``."""

from typing import Dict

from src.domain.entities.probe import ProbeKind
from src.domain.ports.probe import IProbe

from .base import BaseProbe, ProbeRejectedError
from .cache_probes import MemcachedProbe, RedisProbe
from .database_probes import MongoProbe, MySqlProbe, PgSqlProbe
from .tcp_probe import HttpProbe, TcpProbe, is_port_open


def build_probe_registry() -> Dict[ProbeKind, IProbe]:
    """Default probe for every kind of service in the catalog."""
    return {
        ProbeKind.TCP: TcpProbe(),
        ProbeKind.HTTP: HttpProbe(),
        ProbeKind.MYSQL: MySqlProbe(),
        ProbeKind.PGSQL: PgSqlProbe(),
        ProbeKind.REDIS: RedisProbe(),
        ProbeKind.MEMCACHED: MemcachedProbe(),
        ProbeKind.MONGO: MongoProbe(),
    }


__all__ = [
    "BaseProbe",
    "ProbeRejectedError",
    "TcpProbe",
    "HttpProbe",
    "MySqlProbe",
    "PgSqlProbe",
    "RedisProbe",
    "MemcachedProbe",
    "MongoProbe",
    "build_probe_registry",
    "is_port_open",
]
