"""LLMService -- owns the provider client and runs the drafting pipeline."""
import logging
from typing import Optional

from mailsmith.config import Settings, get_settings
from mailsmith.core.errors import ProviderError
from mailsmith.schemas.draft_schemas import DraftRequest, DraftResult
from mailsmith.services.llm import email
from mailsmith.services.llm.prompts import build_draft_prompt
from mailsmith.services.llm.validation import parse_draft_result, screen_draft_request

logger = logging.getLogger(__name__)


class LLMService:
    """Service for AI email drafting using Groq.

    The client is passed in explicitly so tests can hand in a fake one.
    Use ``from_settings`` to build the real client and ``aclose`` to
    release it.
    """

    DEFAULT_MODEL = "llama-3.3-70b-versatile"

    def __init__(
        self,
        client=None,
        model: str = DEFAULT_MODEL,
        max_tokens: int = 1000,
    ):
        self.client = client
        self.model = model
        self.max_tokens = max_tokens

    @classmethod
    def from_settings(cls, settings: Optional[Settings] = None) -> "LLMService":
        settings = settings or get_settings()
        client = None

        if settings.groq_api_key:
            from groq import AsyncGroq
            # One attempt per request, default client timeout
            client = AsyncGroq(api_key=settings.groq_api_key, max_retries=0)
        else:
            logger.warning("GROQ_API_KEY is not set; draft requests will fail")

        return cls(
            client=client,
            model=settings.llm_model,
            max_tokens=settings.llm_max_tokens,
        )

    async def aclose(self) -> None:
        if self.client is not None and hasattr(self.client, "close"):
            await self.client.close()
        self.client = None

    # -- Drafting --

    async def draft_email(self, draft: DraftRequest) -> DraftResult:
        """Build the prompt, call the provider once and split its answer."""
        screen_draft_request(draft)
        prompt = build_draft_prompt(draft)

        if not self.client:
            raise ProviderError(log_message="Groq client not configured (GROQ_API_KEY missing)")

        logger.info(f"LLM call: model={self.model} prompt={len(prompt)} chars")
        text = await email.generate_email_text(
            self.client, self.model, prompt, self.max_tokens
        )
        return parse_draft_result(text)
