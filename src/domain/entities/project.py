"""Projects served by the web container."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Project:
    """A directory under the Devilbox data root that becomes a vhost."""

    name: str
    configured: bool
