"""Configuration structures consumed by the application layer."""

from .devilbox_config import DevilboxConfig
from .service_catalog import SERVICE_CATALOG, build_auxiliary_services

__all__ = ["DevilboxConfig", "SERVICE_CATALOG", "build_auxiliary_services"]
