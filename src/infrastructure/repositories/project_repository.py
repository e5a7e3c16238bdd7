"""Filesystem listing of the projects in the Devilbox data root."""

from __future__ import annotations

from pathlib import Path
from typing import List

from src.domain.entities.errors import ConfigurationError
from src.domain.entities.project import Project
from src.domain.repositories.project_repository import IProjectRepository

VHOST_CONFIG_ENTRY = ".devilbox"


class FilesystemProjectRepository(IProjectRepository):
    def __init__(self, data_path: str) -> None:
        self._data_path = Path(data_path)

    def list_projects(self) -> List[Project]:
        try:
            entries = sorted(
                (entry for entry in self._data_path.iterdir() if entry.is_dir()),
                key=lambda entry: entry.name,
            )
        except OSError as exc:
            raise ConfigurationError(
                f"Could not list projects in {self._data_path}: {exc}"
            ) from exc

        return [
            Project(
                name=entry.name,
                configured=(entry / VHOST_CONFIG_ENTRY).exists(),
            )
            for entry in entries
            if not entry.name.startswith(".")
        ]
