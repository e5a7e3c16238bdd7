"""
Application Layer Package

This package contains the application-specific rules: building probe
targets from configuration, scoring them, and dispatching assistant tools.
"""

# Re-export submodules
from src.application import dtos, models, use_cases

__all__ = ["dtos", "use_cases", "models"]
