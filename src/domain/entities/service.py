"""Declarative descriptions of the services the dashboard knows about."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Optional, Tuple

from .probe import AddressForm, AddressLabel, ProbeKind

ALL_ADDRESS_LABELS: Tuple[AddressLabel, ...] = (
    AddressLabel.HOSTNAME,
    AddressLabel.CONTAINER_IP,
    AddressLabel.LOOPBACK,
)
CONTAINER_ADDRESS_LABELS: Tuple[AddressLabel, ...] = (
    AddressLabel.HOSTNAME,
    AddressLabel.CONTAINER_IP,
)


@dataclass(frozen=True, slots=True)
class ServiceDefinition:
    """
    Catalog entry for a probed service.

    ``availability_key`` names the configuration key whose non-empty value
    marks an optional service as enabled; required services leave it unset.
    """

    name: str
    display_name: str
    port: int
    probe_kind: ProbeKind
    hostname_key: str
    default_hostname: str
    address_labels: Tuple[AddressLabel, ...] = ALL_ADDRESS_LABELS
    required: bool = False
    availability_key: Optional[str] = None
    user_key: Optional[str] = None
    default_user: Optional[str] = None
    password_key: Optional[str] = None


@dataclass(frozen=True, slots=True)
class ServiceTarget:
    """A service as it will be probed during one aggregation pass."""

    service_name: str
    port: int
    probe_kind: ProbeKind
    address_forms: Tuple[AddressForm, ...]


@dataclass(frozen=True, slots=True)
class AuxiliaryService:
    """An optional extra tool that is only checked for an open port."""

    key: str
    name: str
    port: int
    url: str
    username: Optional[str] = None
    password: Optional[str] = None
    extra_ports: Dict[str, int] = field(default_factory=dict)


@dataclass(frozen=True, slots=True)
class AuxiliaryServiceStatus:
    service: AuxiliaryService
    running: bool
