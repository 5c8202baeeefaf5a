"""Service layer for business logic."""
from mailsmith.services.llm import LLMService

__all__ = [
    "LLMService",
]
