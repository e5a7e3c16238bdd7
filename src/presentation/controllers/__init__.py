"""
Controllers Package - Presentation Layer

This package contains FastAPI controllers (routers) that handle
HTTP requests and responses. Controllers map domain errors to HTTP
status codes and delegate everything else to application use cases.
"""

from .system_controller import router as system_router
from .tools_controller import router as tools_router

__all__ = ["system_router", "tools_router"]
