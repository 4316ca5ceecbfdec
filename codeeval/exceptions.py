"""Custom exceptions for CodeEval."""

from typing import Any


class CodeEvalError(Exception):
    """Base exception for all CodeEval errors."""

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        """Initialize CodeEval error.

        Args:
            message: Error message
            details: Additional error details

        """
        super().__init__(message)
        self.details = details or {}


class ConfigurationError(CodeEvalError):
    """Raised when configuration is invalid or missing."""


class CacheError(CodeEvalError):
    """Raised when cache operations fail."""


class UpstreamError(CodeEvalError):
    """Base class for failures while acquiring leaderboard data from the backend."""

    def __init__(self, message: str, model: str | None = None, details: dict[str, Any] | None = None) -> None:
        """Initialize upstream error.

        Args:
            message: Error message
            model: Model tier that was being queried
            details: Additional error details

        """
        super().__init__(message, details)
        self.model = model


class TimeoutError(UpstreamError):
    """Raised when the backend does not answer within the search timeout."""

    def __init__(self, operation: str, timeout_seconds: float, model: str | None = None) -> None:
        message = f"Operation '{operation}' timed out after {timeout_seconds:g} seconds"
        super().__init__(message, model, {"operation": operation, "timeout_seconds": timeout_seconds})
        self.operation = operation
        self.timeout_seconds = timeout_seconds


class NetworkError(UpstreamError):
    """Raised when the backend call fails (transport, auth, provider error)."""


class ExtractionError(UpstreamError):
    """Raised when no JSON substring can be located in a response."""

    def __init__(self, message: str = "no JSON found", model: str | None = None) -> None:
        super().__init__(message, model)


class ParseError(UpstreamError):
    """Raised when the extracted text is not valid JSON or not an array."""


class EmptyResultError(UpstreamError):
    """Raised when the response holds an array but no usable records."""

    def __init__(self, message: str = "response contained no model records", model: str | None = None) -> None:
        super().__init__(message, model)
