"""Prompt template and injection patterns for email drafting."""

from mailsmith.schemas.draft_schemas import DraftRequest

INJECTION_PATTERNS = [
    r"ignore\s+(all\s+)?previous\s+instructions",
    r"ignore\s+(all\s+)?above",
    r"you\s+are\s+now",
    r"system\s*prompt",
    r"disregard\s+(all\s+)?prior",
    r"new\s+instructions?\s*:",
    r"forget\s+(everything|all)",
    r"override\s+(your|the)\s+(instructions|rules|system)",
    r"pretend\s+you\s+are",
    r"roleplay\s+as",
]

NAME_PLACEHOLDER = "[Your Name]"

DRAFT_PROMPT_TEMPLATE = """\
You are MailSmith AI, an expert email drafting assistant.
Your task is to generate a professional email based on the following context.

Sender's Role: {user_role}
Recipient's Role: {recipient_role}
Required Tone: {tone}
Email Details/Context: "{details}"

Generate the email content. Start with the Subject line, followed by a double newline. \
Then, provide the salutation and the body of the email. \
Conclude with a generic closing sign-off like "Best regards," or "Sincerely," \
followed by a placeholder for the user's name: "{name_placeholder}"."""


def build_draft_prompt(draft: DraftRequest) -> str:
    """Fill the drafting template with the request's values, verbatim."""
    return DRAFT_PROMPT_TEMPLATE.format(
        user_role=draft.user_role,
        recipient_role=draft.recipient_role,
        tone=draft.tone,
        details=draft.details,
        name_placeholder=NAME_PLACEHOLDER,
    )
