"""Explicit configuration handed to the health use cases."""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import FrozenSet, Mapping, Optional

from src.domain.entities.probe import Credentials
from src.domain.entities.service import ServiceDefinition
from src.shared.consts import DEFAULT_PROBE_TIMEOUT_SECONDS, LOOPBACK_ADDRESS

DISABLED_SERVICES_KEY = "DEVILBOX_DISABLED_SERVICES"


@dataclass(frozen=True)
class DevilboxConfig:
    """
    Read-only view over the Devilbox environment mapping.

    Built once per request from the ``.env`` file (overlaid by the process
    environment). Every lookup the probes need goes through this object.
    """

    values: Mapping[str, str] = field(default_factory=dict)
    probe_timeout: float = DEFAULT_PROBE_TIMEOUT_SECONDS
    auxiliary_host: str = LOOPBACK_ADDRESS
    disabled_services: FrozenSet[str] = frozenset()

    @classmethod
    def from_mapping(
        cls,
        values: Mapping[str, Optional[str]],
        *,
        probe_timeout: float = DEFAULT_PROBE_TIMEOUT_SECONDS,
        auxiliary_host: str = LOOPBACK_ADDRESS,
    ) -> "DevilboxConfig":
        cleaned = {key: (value or "").strip() for key, value in values.items()}
        disabled = frozenset(
            name.strip().lower()
            for name in cleaned.get(DISABLED_SERVICES_KEY, "").split(",")
            if name.strip()
        )
        return cls(
            values=MappingProxyType(cleaned),
            probe_timeout=probe_timeout,
            auxiliary_host=auxiliary_host,
            disabled_services=disabled,
        )

    def get(self, key: str, default: str = "") -> str:
        value = self.values.get(key)
        return value if value else default

    def hostname_for(self, definition: ServiceDefinition) -> str:
        return self.get(definition.hostname_key, definition.default_hostname)

    def is_available(self, definition: ServiceDefinition) -> bool:
        if definition.name in self.disabled_services:
            return False
        if definition.required or definition.availability_key is None:
            return True
        return bool(self.get(definition.availability_key))

    def credentials_for(self, definition: ServiceDefinition) -> Optional[Credentials]:
        if definition.user_key is None and definition.default_user is None:
            return None
        user = definition.default_user or ""
        if definition.user_key:
            user = self.get(definition.user_key, user)
        password = self.get(definition.password_key) if definition.password_key else ""
        return Credentials(user=user, password=password)
