"""
Environment File Repository Interface

Abstracts reading and updating the Devilbox ``.env`` file, the single
source of configuration for every container in the stack.
"""

from abc import ABC, abstractmethod
from typing import Dict, Optional


class IEnvFileRepository(ABC):
    """Interface for ``.env`` file access."""

    @abstractmethod
    def read_all(self) -> Dict[str, str]:
        """
        Read every ``KEY=value`` pair in file order.

        Returns:
            Mapping of keys to values; an empty mapping if the file is absent.
        """
        pass

    @abstractmethod
    def get(self, key: str) -> Optional[str]:
        """Return the value for ``key`` or ``None`` when it is not set."""
        pass

    @abstractmethod
    def set(self, key: str, value: str) -> None:
        """
        Replace the value of ``key``, appending it when it is missing.

        Raises:
            ConfigurationError: If the file cannot be written.
        """
        pass
