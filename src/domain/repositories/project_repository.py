"""Project Repository Interface"""

from abc import ABC, abstractmethod
from typing import List

from src.domain.entities.project import Project


class IProjectRepository(ABC):
    """Interface for listing the projects in the Devilbox data root."""

    @abstractmethod
    def list_projects(self) -> List[Project]:
        """
        List project directories in name order.

        Raises:
            ConfigurationError: If the data root cannot be read.
        """
        pass
