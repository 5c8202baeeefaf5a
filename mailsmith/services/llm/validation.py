"""Input screening and output splitting for email drafts."""
import logging
import re
from typing import Optional

from mailsmith.core.errors import EmptyProviderResponse
from mailsmith.schemas.draft_schemas import DraftRequest, DraftResult
from mailsmith.services.llm.prompts import INJECTION_PATTERNS

logger = logging.getLogger(__name__)

PARAGRAPH_BREAK = "\n\n"


def check_injection_patterns(text: str, source: str = "details") -> None:
    """Log a warning if the text contains common prompt-injection patterns.

    The text itself is never altered; it still goes into the prompt verbatim.
    """
    text_lower = text.lower()
    for pattern in INJECTION_PATTERNS:
        if re.search(pattern, text_lower):
            logger.warning(
                "Potential prompt injection detected in %s: matched pattern %r",
                source,
                pattern,
            )
            break


def screen_draft_request(draft: DraftRequest) -> None:
    """Run the injection check over every field of a draft request."""
    for field_name, value in draft.model_dump().items():
        check_injection_patterns(value, source=field_name)


def split_email_text(text: Optional[str]) -> tuple[str, str]:
    """Split generated text into ``(subject, body)`` at the first paragraph break.

    A single paragraph becomes the subject with an empty body.
    """
    trimmed = (text or "").strip()
    if not trimmed:
        raise EmptyProviderResponse()

    subject, _, body = trimmed.partition(PARAGRAPH_BREAK)
    return subject, body


def parse_draft_result(text: Optional[str]) -> DraftResult:
    """Build a DraftResult from raw provider output."""
    subject, body = split_email_text(text)
    return DraftResult(email_text=text.strip(), subject=subject, body=body)
