"""
Declarative tables of the services known to the dashboard.

Adding a service means adding a row here; nothing else branches on the
service name.
"""

from __future__ import annotations

from typing import List, Tuple

from src.domain.entities.probe import ProbeKind
from src.domain.entities.service import (
    CONTAINER_ADDRESS_LABELS,
    AuxiliaryService,
    ServiceDefinition,
)

from .devilbox_config import DevilboxConfig

SERVICE_CATALOG: Tuple[ServiceDefinition, ...] = (
    ServiceDefinition(
        name="httpd",
        display_name="Httpd",
        port=80,
        probe_kind=ProbeKind.HTTP,
        hostname_key="HTTPD_HOST_NAME",
        default_hostname="httpd",
        address_labels=CONTAINER_ADDRESS_LABELS,
        required=True,
    ),
    ServiceDefinition(
        name="mysql",
        display_name="MySQL",
        port=3306,
        probe_kind=ProbeKind.MYSQL,
        hostname_key="MYSQL_HOST_NAME",
        default_hostname="mysql",
        availability_key="MYSQL_SERVER",
        default_user="root",
        password_key="MYSQL_ROOT_PASSWORD",
    ),
    ServiceDefinition(
        name="pgsql",
        display_name="PgSQL",
        port=5432,
        probe_kind=ProbeKind.PGSQL,
        hostname_key="PGSQL_HOST_NAME",
        default_hostname="pgsql",
        availability_key="PGSQL_SERVER",
        user_key="PGSQL_ROOT_USER",
        default_user="postgres",
        password_key="PGSQL_ROOT_PASSWORD",
    ),
    ServiceDefinition(
        name="redis",
        display_name="Redis",
        port=6379,
        probe_kind=ProbeKind.REDIS,
        hostname_key="REDIS_HOST_NAME",
        default_hostname="redis",
        availability_key="REDIS_SERVER",
    ),
    ServiceDefinition(
        name="memcd",
        display_name="Memcached",
        port=11211,
        probe_kind=ProbeKind.MEMCACHED,
        hostname_key="MEMCD_HOST_NAME",
        default_hostname="memcd",
        availability_key="MEMCD_SERVER",
    ),
    ServiceDefinition(
        name="mongo",
        display_name="MongoDB",
        port=27017,
        probe_kind=ProbeKind.MONGO,
        hostname_key="MONGO_HOST_NAME",
        default_hostname="mongo",
        availability_key="MONGO_SERVER",
    ),
    ServiceDefinition(
        name="bind",
        display_name="Bind",
        port=53,
        probe_kind=ProbeKind.TCP,
        hostname_key="DNS_HOST_NAME",
        default_hostname="bind",
        address_labels=CONTAINER_ADDRESS_LABELS,
        required=True,
    ),
)


def build_auxiliary_services(config: DevilboxConfig) -> List[AuxiliaryService]:
    """Optional extra tools, with credentials taken from the environment."""

    return [
        AuxiliaryService(
            key="meilisearch",
            name="Meilisearch",
            port=7700,
            url="http://localhost:7700",
            password=config.get("MEILI_MASTER_KEY", "masterKey"),
        ),
        AuxiliaryService(
            key="mailpit",
            name="Mailpit",
            port=8025,
            url="http://localhost:8025",
            extra_ports={"smtp": 1025},
        ),
        AuxiliaryService(
            key="rabbit",
            name="RabbitMQ",
            port=15672,
            url="http://localhost:15672",
            username=config.get("RABBIT_DEFAULT_USER", "guest"),
            password=config.get("RABBIT_DEFAULT_PASS", "guest"),
            extra_ports={"amqp": 5672},
        ),
        AuxiliaryService(
            key="minio",
            name="MinIO",
            port=9001,
            url="http://localhost:9001",
            username=config.get("MINIO_ROOT_USER", "minioadmin"),
            password=config.get("MINIO_ROOT_PASSWORD", "minioadmin"),
            extra_ports={"api": 9000},
        ),
    ]
