"""Pydantic schemas for API request/response validation."""
from mailsmith.schemas.draft_schemas import (
    MISSING_FIELDS_MESSAGE,
    DraftRequest,
    DraftRequestBody,
    DraftResult,
    EmailComponents,
    DraftResponse,
)

__all__ = [
    "MISSING_FIELDS_MESSAGE",
    "DraftRequest",
    "DraftRequestBody",
    "DraftResult",
    "EmailComponents",
    "DraftResponse",
]
