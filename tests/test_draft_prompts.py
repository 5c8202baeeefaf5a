"""Tests for mailsmith.services.llm.prompts -- drafting prompt template."""
import pytest

from mailsmith.schemas.draft_schemas import DraftRequest
from mailsmith.services.llm.prompts import build_draft_prompt, NAME_PLACEHOLDER

from tests.llm_helpers import DRAFT_FIELDS, DRAFT_FIELDS_SPECIAL


def _draft(fields: dict) -> DraftRequest:
    return DraftRequest.from_fields(
        fields["userRole"], fields["recipientRole"], fields["tone"], fields["details"]
    )


def test_prompt_names_persona():
    prompt = build_draft_prompt(_draft(DRAFT_FIELDS))
    assert "You are MailSmith AI, an expert email drafting assistant." in prompt


def test_prompt_embeds_each_field_on_its_line():
    prompt = build_draft_prompt(_draft(DRAFT_FIELDS))
    assert "Sender's Role: Project Manager" in prompt
    assert "Recipient's Role: Client Stakeholder" in prompt
    assert "Required Tone: Professional" in prompt
    assert f'Email Details/Context: "{DRAFT_FIELDS["details"]}"' in prompt


def test_prompt_describes_output_format():
    prompt = build_draft_prompt(_draft(DRAFT_FIELDS))
    assert "Start with the Subject line, followed by a double newline." in prompt
    assert "salutation and the body" in prompt
    assert '"Best regards,"' in prompt
    assert NAME_PLACEHOLDER in prompt


@pytest.mark.parametrize("field", ["userRole", "recipientRole", "tone", "details"])
def test_special_characters_are_embedded_verbatim(field):
    prompt = build_draft_prompt(_draft(DRAFT_FIELDS_SPECIAL))
    assert DRAFT_FIELDS_SPECIAL[field] in prompt


def test_prompt_is_deterministic():
    draft = _draft(DRAFT_FIELDS)
    assert build_draft_prompt(draft) == build_draft_prompt(draft)


def test_long_details_are_not_capped():
    details = "word " * 20000
    draft = DraftRequest.from_fields("Sender", "Recipient", "Neutral", details)
    assert details in build_draft_prompt(draft)
