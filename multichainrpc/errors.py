"""
Exception hierarchy for multichainrpc.

Provides:
- Custom exception classes with error codes
- Error categorization (configuration, validation, protocol, transport)
- Safe error message formatting (no credential leak)
"""

from __future__ import annotations

import re
from enum import Enum
from typing import Any


class ErrorCategory(Enum):
    """Error categories for classification."""
    CONFIGURATION = "configuration"
    VALIDATION = "validation"
    PROTOCOL = "protocol"
    TRANSPORT = "transport"


class MultichainRPCError(Exception):
    """Base exception for all multichainrpc errors."""

    def __init__(
        self,
        message: str,
        code: str = "UNKNOWN_ERROR",
        category: ErrorCategory = ErrorCategory.CONFIGURATION,
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.category = category
        self.details = details or {}

    def to_dict(self) -> dict[str, Any]:
        return {
            "error": self.code,
            "message": self.message,
            "category": self.category.value,
            "details": self.details,
        }

    def __str__(self) -> str:
        return f"[{self.code}] {self.message}"


class ConfigurationError(MultichainRPCError):
    """Connection or client configuration could not be built."""

    def __init__(self, message: str, code: str = "CONFIGURATION_ERROR", details: dict[str, Any] | None = None):
        super().__init__(message, code=code, category=ErrorCategory.CONFIGURATION, details=details)


class InvalidChainError(ConfigurationError):
    """Requested chain name is not among the chains found on disk."""

    def __init__(self, name: str, chain_path: str | None = None):
        super().__init__(
            f"Invalid chain: {name}",
            code="INVALID_CHAIN",
            details={"name": name, "chain_path": chain_path},
        )
        self.name = name


class ReservedCommandError(ConfigurationError):
    """A command name would shadow a client attribute."""

    def __init__(self, names: list[str]):
        super().__init__(
            f"Command names collide with client attributes: {', '.join(names)}",
            code="RESERVED_COMMAND",
            details={"names": names},
        )
        self.names = names


class MissingParameterError(MultichainRPCError):
    """A required positional parameter was not supplied."""

    def __init__(self, method: str, position: int, parameter: Any = None):
        super().__init__(
            f"Required parameter {parameter} not found for method {method} at params[{position}]!",
            code="MISSING_PARAMETER",
            category=ErrorCategory.VALIDATION,
            details={"method": method, "position": position, "parameter": parameter},
        )
        self.method = method
        self.position = position
        self.parameter = parameter


class ProtocolError(MultichainRPCError):
    """Non-200 response carrying a JSON error body.

    ``payload`` is the parsed body exactly as the server sent it.
    """

    def __init__(self, payload: Any, status_code: int):
        super().__init__(
            f"RPC server returned HTTP {status_code}: {payload}",
            code="PROTOCOL_ERROR",
            category=ErrorCategory.PROTOCOL,
            details={"status_code": status_code},
        )
        self.payload = payload
        self.status_code = status_code


class TransportError(MultichainRPCError):
    """HTTP-level failure without a usable JSON body."""

    def __init__(self, message: str, *, status_code: int | None = None, code: str = "HTTP_ERROR"):
        super().__init__(
            message,
            code=code,
            category=ErrorCategory.TRANSPORT,
            details={"status_code": status_code},
        )
        self.status_code = status_code


_SENSITIVE_PATTERNS = [
    re.compile(r"(rpcpassword|password|pass|auth)[=:]\s*['\"]?([^\s'\"]+)['\"]?", re.IGNORECASE),
    re.compile(r"basic\s+[a-zA-Z0-9+/]+=*", re.IGNORECASE),
    re.compile(r"(https?://)[^/\s:@]+:[^/\s@]+@", re.IGNORECASE),
]


def sanitize_error_message(message: str, replacement: str = "[REDACTED]") -> str:
    """Remove credentials from messages before they reach logs or the console."""
    sanitized = message
    for pattern in _SENSITIVE_PATTERNS:
        if pattern.groups == 1:
            sanitized = pattern.sub(lambda m: f"{m.group(1)}{replacement}@", sanitized)
        else:
            sanitized = pattern.sub(replacement, sanitized)
    return sanitized
