from pydantic import BaseModel, EmailStr, Field, ValidationError, field_validator
from typing import Dict, Optional

from blueprint.core.exceptions import LeadValidationError

PLACEHOLDER = "—"


class Lead(BaseModel):
    """
    Contact details captured once per completed assessment.
    """

    name: str = Field(..., min_length=1, max_length=100, description="Full name")
    email: EmailStr = Field(..., max_length=255)
    phone: Optional[str] = Field(default=None, max_length=30)
    firm: Optional[str] = Field(default=None, max_length=200)

    @field_validator("name", "email", mode="before")
    @classmethod
    def strip_required(cls, v):
        return v.strip() if isinstance(v, str) else v

    @field_validator("phone", "firm", mode="before")
    @classmethod
    def blank_to_none(cls, v):
        if isinstance(v, str) and not v.strip():
            return None
        return v


_MESSAGES = {
    "name": "Name is required",
    "email": "Invalid email",
}


def validate_lead(data: Dict) -> Lead:
    """
    Validate raw form data into a Lead.

    Raises:
        LeadValidationError: with one message per failing field.
    """
    try:
        return Lead.model_validate(data)
    except ValidationError as e:
        errors: Dict[str, str] = {}
        for err in e.errors():
            field = str(err["loc"][0]) if err["loc"] else "form"
            if field in errors:
                continue
            if err["type"] in ("missing", "string_too_short") or field == "email":
                errors[field] = _MESSAGES.get(field, err["msg"])
            else:
                errors[field] = err["msg"]
        raise LeadValidationError(errors) from e


class LeadNotification(BaseModel):
    """Flat payload sent to the mail renderer."""

    name: str
    email: str
    phone: str = PLACEHOLDER
    firm: str = PLACEHOLDER
    score: str = Field(..., pattern=r"^\d{1,3}/100$")
    tier: str
    answers: str
