"""
Infrastructure Layer Package

This package contains implementations of interfaces defined in the
domain layer: network probes, the command runner, the compose CLI
wrapper and file-backed repositories.
"""

from src.infrastructure import probes, repositories, services

__all__ = ["probes", "repositories", "services"]
