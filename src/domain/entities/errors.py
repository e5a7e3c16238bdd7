"""
Domain Errors

This module defines custom error classes for domain-specific exceptions.
Probe failures are not errors; they are reported as ``ProbeResult`` values.
"""

from typing import Any, Dict, Optional, Sequence


class DomainError(Exception):
    """Base class for domain errors."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        self.message = message
        self.details = details or {}
        super().__init__(message)


class ToolNotFoundError(DomainError):
    """Raised when a tool name is not registered."""

    def __init__(self, tool_name: str, details: Optional[Dict[str, Any]] = None):
        self.tool_name = tool_name
        super().__init__(f"Unknown tool: {tool_name}", details)


class ToolArgumentError(DomainError):
    """Raised when tool arguments fail validation."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message, details)


class ConfigurationError(DomainError):
    """Raised when a configuration read or update cannot be performed."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message, details)


class CommandExecutionError(DomainError):
    """Raised when an external command exits with a non-zero status."""

    def __init__(
        self,
        args: Sequence[str],
        returncode: int,
        stderr: str = "",
        details: Optional[Dict[str, Any]] = None,
    ):
        self.command = tuple(args)
        self.returncode = returncode
        self.stderr = stderr
        message = f"Command failed: {' '.join(args)} (exit {returncode})"
        if stderr.strip():
            message = f"{message}\n{stderr.strip()}"
        super().__init__(message, details)


class CommandTimeoutError(DomainError):
    """Raised when an external command exceeds its time budget."""

    def __init__(
        self,
        args: Sequence[str],
        timeout: float,
        details: Optional[Dict[str, Any]] = None,
    ):
        self.command = tuple(args)
        self.timeout = timeout
        super().__init__(
            f"Command timed out after {timeout:g}s: {' '.join(args)}", details
        )
