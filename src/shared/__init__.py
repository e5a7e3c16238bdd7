"""
Shared module - Cross-cutting concerns / Shared Layer

Constants, enums and logging helpers used by every other layer.
It must not depend on Infrastructure or Frameworks.
"""

from .consts import (
    DEFAULT_PROBE_TIMEOUT_SECONDS,
    LOOPBACK_ADDRESS,
    EnumEnvironment,
    EnumLogLevel,
)
from .logging import configure_logging, get_logger, update_logging_from_settings

__all__ = [
    "DEFAULT_PROBE_TIMEOUT_SECONDS",
    "LOOPBACK_ADDRESS",
    "EnumEnvironment",
    "EnumLogLevel",
    "configure_logging",
    "get_logger",
    "update_logging_from_settings",
]
