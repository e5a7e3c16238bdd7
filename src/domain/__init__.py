"""
Domain Layer Package

This package contains the core rules of the dashboard: probe outcomes,
health scoring and the declarative service descriptions. It has no
dependencies on external frameworks or infrastructure concerns.
"""

# Re-export submodules
from src.domain import entities, ports, repositories

__all__ = ["entities", "ports", "repositories"]
