"""
Standardized Response Schemas

Documents the error body produced by the exception handlers so it shows up
in the OpenAPI schema of every route that can fail.
"""

from datetime import datetime
from typing import Optional, List
from pydantic import BaseModel, Field


class ErrorResponse(BaseModel):
    """
    Standard error response structure.

    Example:
        {
            "error": "Missing required fields: userRole, recipientRole, tone, or details.",
            "code": "missing_required_field",
            "request_id": "req_abc123",
            "timestamp": "2024-01-15T10:30:00Z"
        }
    """
    error: str = Field(..., description="Human-readable error message")
    code: str = Field(..., description="Machine-readable error code")
    param: Optional[str] = Field(None, description="Parameter that caused the error")
    details: Optional[List[str]] = Field(None, description="Additional error details")
    request_id: str = Field(..., description="Unique request identifier for debugging")
    timestamp: datetime

    model_config = {
        "json_schema_extra": {
            "example": {
                "error": "Missing required fields: userRole, recipientRole, tone, or details.",
                "code": "missing_required_field",
                "request_id": "req_xyz789",
                "timestamp": "2024-01-15T10:30:00Z",
            }
        }
    }


# Status codes the draft routes document in OpenAPI
ERROR_RESPONSES = {
    400: {"model": ErrorResponse, "description": "Missing or invalid draft fields"},
    500: {"model": ErrorResponse, "description": "AI generation failed"},
    502: {"model": ErrorResponse, "description": "AI provider returned no text"},
}
