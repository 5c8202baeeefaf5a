"""Core utilities and shared components."""
from mailsmith.core.errors import (
    ErrorCode,
    APIError,
    ValidationError,
    ExternalServiceError,
    ProviderError,
    EmptyProviderResponse,
    InternalError,
)
from mailsmith.core.responses import ErrorResponse, ERROR_RESPONSES

__all__ = [
    # Error codes and exceptions
    "ErrorCode",
    "APIError",
    "ValidationError",
    "ExternalServiceError",
    "ProviderError",
    "EmptyProviderResponse",
    "InternalError",
    # Response schemas
    "ErrorResponse",
    "ERROR_RESPONSES",
]
