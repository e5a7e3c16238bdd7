"""python-dotenv backed access to the Devilbox ``.env`` file."""

from __future__ import annotations

from pathlib import Path
from typing import Dict, Optional

from dotenv import dotenv_values, set_key

from src.domain.entities.errors import ConfigurationError
from src.domain.repositories.env_file_repository import IEnvFileRepository
from src.shared import get_logger
from src.shared.env import resolve_secret_files

logger = get_logger(__name__)

_QUOTE_TRIGGERS = frozenset("#'\"")


def _needs_quotes(value: str) -> bool:
    """Unquoted values end at whitespace before ``#`` and lose edge spaces."""
    return any(char.isspace() or char in _QUOTE_TRIGGERS for char in value)


class EnvFileRepository(IEnvFileRepository):
    """Reads and updates ``KEY=value`` pairs in a ``.env`` file."""

    def __init__(self, env_path: str) -> None:
        self._env_path = Path(env_path)

    @property
    def path(self) -> Path:
        return self._env_path

    def read_all(self) -> Dict[str, str]:
        if not self._env_path.is_file():
            logger.debug("env_file.missing", path=str(self._env_path))
            return {}
        values = dotenv_values(self._env_path, interpolate=False)
        return {key: value or "" for key, value in values.items()}

    def read_resolved(self) -> Dict[str, str]:
        """Values with ``KEY_FILE`` secret indirection expanded."""
        return resolve_secret_files(self.read_all())

    def get(self, key: str) -> Optional[str]:
        return self.read_resolved().get(key)

    def set(self, key: str, value: str) -> None:
        if "\n" in value or "\r" in value:
            raise ConfigurationError(
                f"Value for {key} must be a single line", details={"key": key}
            )

        quote_mode = "always" if _needs_quotes(value) else "never"
        try:
            set_key(self._env_path, key, value, quote_mode=quote_mode)
        except OSError as exc:
            logger.error(
                "env_file.write_failed",
                path=str(self._env_path),
                key=key,
                error=str(exc),
            )
            raise ConfigurationError(
                f"Could not update {self._env_path}: {exc}", details={"key": key}
            ) from exc
        logger.info("env_file.updated", path=str(self._env_path), key=key)
