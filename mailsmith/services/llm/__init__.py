"""Generative-text provider integration for email drafting."""
from mailsmith.services.llm.service import LLMService

__all__ = ["LLMService"]
