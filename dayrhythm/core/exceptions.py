"""
Custom Exceptions - Application-specific error classes.

This module defines a hierarchy of exceptions for clean error handling:
- Each exception has a status code and error code
- Used by the API layer for consistent error responses
- No stack traces leaked in production
"""
from typing import Any, Optional


class DayRhythmException(Exception):
    """
    Base exception for all backend errors.

    Subclass this for specific error types.
    """
    status_code: int = 500
    error_code: str = "internal_error"

    def __init__(self, message: str, details: Optional[Any] = None):
        super().__init__(message)
        self.message = message
        self.details = details

    def to_dict(self) -> dict:
        """Convert to error response dict."""
        body = {
            "success": False,
            "error": self.message,
            "code": self.error_code,
        }
        if self.details is not None:
            body["details"] = self.details
        return body


class ValidationError(DayRhythmException):
    """Raised when input validation fails."""
    status_code = 400
    error_code = "validation_error"

    def __init__(self, message: str, field: Optional[str] = None):
        details = [{"field": field, "message": message}] if field else None
        super().__init__(message, details=details)
        self.field = field


class AuthenticationError(DayRhythmException):
    """Raised when the bearer token is missing, invalid or expired."""
    status_code = 401
    error_code = "unauthorized"

    def __init__(self, message: str = "Invalid or expired token"):
        super().__init__(message)


class NotFoundError(DayRhythmException):
    """Raised when a resource does not exist or is not owned by the caller."""
    status_code = 404
    error_code = "not_found"

    def __init__(self, message: str = "Resource not found"):
        super().__init__(message)


class StoreError(DayRhythmException):
    """Raised when a Supabase query fails."""
    status_code = 500
    error_code = "store_error"

    def __init__(self, message: str = "Database operation failed"):
        super().__init__(message)


class LLMError(DayRhythmException):
    """Raised when an inference call fails."""
    status_code = 500
    error_code = "llm_error"

    def __init__(self, message: str = "LLM service unavailable"):
        super().__init__(message)


class AIResponseParseError(DayRhythmException):
    """Raised when model output cannot be parsed into the expected JSON."""
    status_code = 500
    error_code = "ai_parse_error"

    def __init__(self, message: str = "Failed to parse AI response"):
        super().__init__(message)


class ProviderNotConfiguredError(DayRhythmException):
    """Raised when an endpoint needs a provider whose API key is missing."""
    status_code = 503
    error_code = "provider_not_configured"

    def __init__(self, message: str):
        super().__init__(message)
