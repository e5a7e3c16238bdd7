"""Domain port for hostname resolution."""

from __future__ import annotations

from typing import Optional, Protocol


class IAddressResolver(Protocol):
    async def resolve(self, hostname: str) -> Optional[str]:
        """Return the IPv4 address for ``hostname`` or ``None``."""
        ...
