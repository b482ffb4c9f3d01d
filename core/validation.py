"""Form-side validation for subscription input."""

from __future__ import annotations

import re
from datetime import date
from typing import Any, Mapping

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from core.errors import SubscriptionValidationError
from core.models import BillingCycle, SubscriptionDraft
from utils.logger import get_logger

logger = get_logger(__name__)

__all__ = ["SubscriptionForm", "validate_subscription"]

_HEX_COLOR = re.compile(r"^#[0-9A-Fa-f]{6}$")
_CURRENCY_CODE = re.compile(r"^[A-Z]{3}$")


class SubscriptionForm(BaseModel):
    """Raw subscription input as submitted by the add/edit form."""

    model_config = ConfigDict(str_strip_whitespace=True)

    name: str = Field(min_length=1)
    amount: float = Field(ge=0)
    cycle: BillingCycle
    category: str = Field(min_length=1)
    next_billing_date: date
    currency: str = "USD"
    start_date: date = Field(default_factory=date.today)
    active: bool = True
    description: str | None = None
    logo: str | None = None
    color: str | None = None
    url: str | None = None

    @field_validator("currency")
    @classmethod
    def _check_currency(cls, value: str) -> str:
        code = value.upper()
        if not _CURRENCY_CODE.match(code):
            raise ValueError("currency must be a three-letter code")
        return code

    @field_validator("description", "logo", "url", "color", mode="before")
    @classmethod
    def _blank_to_none(cls, value: Any) -> Any:
        if isinstance(value, str) and not value.strip():
            return None
        return value

    @field_validator("color")
    @classmethod
    def _check_color(cls, value: str | None) -> str | None:
        if value is not None and not _HEX_COLOR.match(value):
            raise ValueError("color must be a hex value like #3B82F6")
        return value

    def to_draft(self) -> SubscriptionDraft:
        return SubscriptionDraft(**self.model_dump())


def _format_error(error: Mapping[str, Any]) -> str:
    location = ".".join(str(part) for part in error.get("loc", ()))
    message = str(error.get("msg", "invalid value"))
    return f"{location}: {message}" if location else message


def validate_subscription(data: Mapping[str, Any]) -> SubscriptionDraft:
    """Validate raw form data and return a draft ready for the store."""

    try:
        form = SubscriptionForm.model_validate(dict(data))
    except ValidationError as exc:
        messages = [_format_error(error) for error in exc.errors()]
        logger.info("Rejected subscription input: %s", "; ".join(messages))
        raise SubscriptionValidationError(messages) from exc
    return form.to_draft()
