"""
Standardized Error Codes and Custom Exceptions

Every failure the draft endpoint can produce is one of these exceptions.
They are converted to JSON responses by the handlers registered in
``mailsmith.main``:
- Machine-readable error codes for programmatic handling
- Human-readable messages that are safe to show to callers
- Consistent HTTP status code mapping
"""

from enum import Enum
from typing import Optional, Any, Dict, List
from fastapi import status


class ErrorCode(str, Enum):
    """
    Machine-readable error codes.

    Categories:
    - VALIDATION_*: Input validation errors (400)
    - EXTERNAL_*: Generative-text provider errors (500/502)
    - INTERNAL_*: Internal server errors (500)
    """

    # Validation Errors (400)
    VALIDATION_FAILED = "validation_failed"
    VALIDATION_MISSING_FIELD = "missing_required_field"

    # External Service Errors
    EXTERNAL_LLM_FAILED = "llm_service_failed"
    EXTERNAL_LLM_EMPTY_RESPONSE = "llm_empty_response"

    # Internal Errors (500)
    INTERNAL_ERROR = "internal_server_error"


# HTTP Status Code Mapping
ERROR_CODE_STATUS_MAP: Dict[ErrorCode, int] = {
    ErrorCode.VALIDATION_FAILED: status.HTTP_400_BAD_REQUEST,
    ErrorCode.VALIDATION_MISSING_FIELD: status.HTTP_400_BAD_REQUEST,

    ErrorCode.EXTERNAL_LLM_FAILED: status.HTTP_500_INTERNAL_SERVER_ERROR,
    ErrorCode.EXTERNAL_LLM_EMPTY_RESPONSE: status.HTTP_502_BAD_GATEWAY,

    ErrorCode.INTERNAL_ERROR: status.HTTP_500_INTERNAL_SERVER_ERROR,
}


class APIError(Exception):
    """
    Base exception for all API errors.

    - code: Machine-readable error code
    - message: Human-readable error message, returned to the caller
    - param: Parameter that caused the error (optional)
    - details: Additional error details (optional)

    Example:
        raise APIError(
            code=ErrorCode.VALIDATION_MISSING_FIELD,
            message="Missing required fields: ...",
        )
    """

    def __init__(
        self,
        code: ErrorCode,
        message: str,
        param: Optional[str] = None,
        details: Optional[List[str]] = None,
        headers: Optional[Dict[str, str]] = None,
    ):
        self.code = code
        self.message = message
        self.param = param
        self.details = details or []
        self.headers = headers or {}
        self.status_code = ERROR_CODE_STATUS_MAP.get(
            code, status.HTTP_500_INTERNAL_SERVER_ERROR
        )
        super().__init__(message)

    def to_dict(self) -> Dict[str, Any]:
        """Convert error to dictionary for JSON response."""
        error_dict = {
            "error": self.message,
            "code": self.code.value,
        }
        if self.param:
            error_dict["param"] = self.param
        if self.details:
            error_dict["details"] = self.details
        return error_dict


class ValidationError(APIError):
    """Raised when input validation fails."""

    def __init__(
        self,
        message: str,
        param: Optional[str] = None,
        code: ErrorCode = ErrorCode.VALIDATION_FAILED,
        details: Optional[List[str]] = None,
    ):
        super().__init__(code=code, message=message, param=param, details=details)


class ExternalServiceError(APIError):
    """Raised when an external service fails.

    ``message`` is what the caller sees. The underlying cause belongs in
    ``log_message`` (or the exception chain) and is never serialized.
    """

    def __init__(
        self,
        service: str,
        message: Optional[str] = None,
        code: ErrorCode = ErrorCode.EXTERNAL_LLM_FAILED,
        log_message: Optional[str] = None,
    ):
        self.service = service
        self.log_message = log_message

        if message is None:
            message = f"{service.capitalize()} service temporarily unavailable"

        super().__init__(code=code, message=message)


class ProviderError(ExternalServiceError):
    """Raised when the generative-text provider call fails or cannot be made."""

    def __init__(
        self,
        message: str = "An internal server error occurred during AI generation.",
        log_message: Optional[str] = None,
    ):
        super().__init__(
            service="llm",
            message=message,
            code=ErrorCode.EXTERNAL_LLM_FAILED,
            log_message=log_message,
        )


class EmptyProviderResponse(ExternalServiceError):
    """Raised when the provider answers without any usable text."""

    def __init__(
        self,
        message: str = "The AI provider returned an empty response. Please try again.",
    ):
        super().__init__(
            service="llm",
            message=message,
            code=ErrorCode.EXTERNAL_LLM_EMPTY_RESPONSE,
        )


class InternalError(APIError):
    """Raised for internal server errors. Never expose details to clients."""

    def __init__(
        self,
        message: str = "An internal error occurred. Please try again later.",
        code: ErrorCode = ErrorCode.INTERNAL_ERROR,
        log_message: Optional[str] = None,
    ):
        self.log_message = log_message  # For internal logging only
        super().__init__(code=code, message=message)
