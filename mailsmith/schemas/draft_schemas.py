"""Email draft Pydantic schemas."""
from typing import Any, Optional
from pydantic import BaseModel, ConfigDict, Field, field_validator

from mailsmith.core.errors import ErrorCode, ValidationError

MISSING_FIELDS_MESSAGE = (
    "Missing required fields: userRole, recipientRole, tone, or details."
)


class DraftRequest(BaseModel):
    """The four drafting parameters, all present and non-empty.

    Build it with ``from_fields`` so both transports share one validation rule.
    """
    model_config = ConfigDict(frozen=True)

    user_role: str
    recipient_role: str
    tone: str
    details: str

    @classmethod
    def from_fields(
        cls,
        user_role: Optional[str],
        recipient_role: Optional[str],
        tone: Optional[str],
        details: Optional[str],
    ) -> "DraftRequest":
        """Validate raw transport values; any falsy value rejects the request."""
        if not user_role or not recipient_role or not tone or not details:
            raise ValidationError(
                message=MISSING_FIELDS_MESSAGE,
                code=ErrorCode.VALIDATION_MISSING_FIELD,
            )
        return cls(
            user_role=user_role,
            recipient_role=recipient_role,
            tone=tone,
            details=details,
        )


class DraftRequestBody(BaseModel):
    """JSON payload accepted by the write-style draft route.

    Every field is optional here; presence is checked by ``DraftRequest``
    so that a missing field is a 400 with the generic message.
    """
    model_config = ConfigDict(
        populate_by_name=True,
        extra="ignore",
    )

    user_role: Optional[str] = Field(None, alias="userRole")
    recipient_role: Optional[str] = Field(None, alias="recipientRole")
    tone: Optional[str] = None
    details: Optional[str] = None

    @field_validator("user_role", "recipient_role", "tone", "details", mode="before")
    @classmethod
    def scalar_as_text(cls, value: Any) -> Any:
        """Judge JSON scalars by truthiness first, then treat them as text.

        Falsy scalars (0, 0.0, false) count as missing; truthy ones are
        rendered the way JSON writes them (``true``, ``42``, ``1.5``).
        """
        if not isinstance(value, (bool, int, float)):
            return value
        if not value or value != value:  # NaN is falsy too
            return None
        if isinstance(value, bool):
            return "true"
        if isinstance(value, float) and value.is_integer():
            return str(int(value))
        return str(value)

    def to_draft_request(self) -> DraftRequest:
        return DraftRequest.from_fields(
            self.user_role, self.recipient_role, self.tone, self.details
        )


class DraftResult(BaseModel):
    """Provider output split into subject and body."""
    model_config = ConfigDict(frozen=True)

    email_text: str
    subject: str
    body: str


class EmailComponents(BaseModel):
    subject: str
    body: str


class DraftResponse(BaseModel):
    """Success payload shared by both draft routes."""
    model_config = ConfigDict(populate_by_name=True)

    email_text: str = Field(..., alias="emailText")
    email_components: EmailComponents = Field(..., alias="emailComponents")

    @classmethod
    def from_result(cls, result: DraftResult) -> "DraftResponse":
        return cls(
            email_text=result.email_text,
            email_components=EmailComponents(
                subject=result.subject,
                body=result.body,
            ),
        )
