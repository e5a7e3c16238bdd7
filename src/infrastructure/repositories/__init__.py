"""Infrastructure repositories package."""

from .env_file_repository import EnvFileRepository
from .project_repository import FilesystemProjectRepository

__all__ = ["EnvFileRepository", "FilesystemProjectRepository"]
