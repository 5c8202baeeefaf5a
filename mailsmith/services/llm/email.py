"""Email draft generation."""
import logging
from typing import Optional

from mailsmith.core.errors import ProviderError

logger = logging.getLogger(__name__)


def build_messages(prompt: str) -> list[dict]:
    """The whole drafting prompt goes out as one user message."""
    return [{"role": "user", "content": prompt}]


async def generate_email_text(
    client,
    model: str,
    prompt: str,
    max_tokens: int = 1000,
) -> Optional[str]:
    """Ask the provider for an email and return its raw text.

    Returns None when the completion carries no message content.
    """
    try:
        response = await client.chat.completions.create(
            model=model,
            max_tokens=max_tokens,
            messages=build_messages(prompt),
        )
    except Exception as e:
        raise ProviderError(log_message=f"Groq LLM request failed: {e}") from e

    if not response.choices:
        logger.warning("Groq returned a completion without choices")
        return None

    content = response.choices[0].message.content
    logger.info("LLM response: %d chars", len(content or ""))
    return content
