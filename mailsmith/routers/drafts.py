"""Email draft router: one drafting core behind a JSON route and a query route."""
from typing import Optional

from fastapi import APIRouter, Depends, Query, Request

from mailsmith.core.responses import ERROR_RESPONSES
from mailsmith.schemas.draft_schemas import DraftRequest, DraftRequestBody, DraftResponse
from mailsmith.services.llm import LLMService

router = APIRouter()


def get_llm_service(request: Request) -> LLMService:
    """Dependency returning the LLMService created in the app lifespan."""
    return request.app.state.llm_service


async def _draft(llm: LLMService, draft: DraftRequest) -> DraftResponse:
    result = await llm.draft_email(draft)
    return DraftResponse.from_result(result)


@router.post("", response_model=DraftResponse, responses=ERROR_RESPONSES)
async def generate_email_from_body(
    payload: DraftRequestBody,
    llm: LLMService = Depends(get_llm_service),
):
    """Draft an email from a JSON body."""
    return await _draft(llm, payload.to_draft_request())


@router.get("", response_model=DraftResponse, responses=ERROR_RESPONSES)
async def generate_email_from_query(
    user_role: Optional[str] = Query(None, alias="userRole"),
    recipient_role: Optional[str] = Query(None, alias="recipientRole"),
    tone: Optional[str] = Query(None),
    details: Optional[str] = Query(None),
    llm: LLMService = Depends(get_llm_service),
):
    """Draft an email from query parameters."""
    draft = DraftRequest.from_fields(user_role, recipient_role, tone, details)
    return await _draft(llm, draft)
