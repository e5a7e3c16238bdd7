"""
Repositories Package

This package contains interfaces defining repository contracts
for data access operations. Specific implementations are provided
by the infrastructure layer.
"""

from .env_file_repository import IEnvFileRepository
from .project_repository import IProjectRepository

__all__ = ["IEnvFileRepository", "IProjectRepository"]
