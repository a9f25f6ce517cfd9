"""Pydantic models for the Fieldbook API.

Request bodies accept missing fields (the store decides what is required)
and coerce numbers to strings, since clients commonly send numeric ids.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, field_validator


class _Record(BaseModel):
    """Shared config for row-shaped payloads."""

    model_config = ConfigDict(coerce_numbers_to_str=True, extra="ignore")


class BusinessRecord(_Record):
    """A business as sent by the client."""

    name: str | None = None
    icon: str | None = None


class OfficerRecord(_Record):
    """An officer row."""

    id: str | None = None
    full_name: str | None = None
    territory: str | None = None
    password: str | None = None
    role: str | None = None
    business: str | None = None


class CustomerRecord(_Record):
    """A customer row."""

    id: str | None = None
    customer_no: str | None = None
    name: str | None = None
    date: str | None = None
    address: str | None = None
    model: str | None = None
    sale_type: str | None = None
    officer_id: str | None = None
    officer_name: str | None = None
    business: str | None = None
    visit_completed: str | None = None
    customer_type: str | None = None
    field_visit_notes: str | None = None
    booking_info: str | None = None
    delivery_info: str | None = None

    @field_validator("visit_completed", mode="before")
    @classmethod
    def blank_visit_completed(cls, value: Any) -> Any:
        """Treat any falsy status (0, false, empty) as missing."""
        if not value:
            return None
        if isinstance(value, bool):
            return "true"
        return value


class InitData(BaseModel):
    """Reference data the client loads at startup."""

    businesses: list[str]
    icons: dict[str, str]
    officers: list[OfficerRecord]


class SuccessResponse(BaseModel):
    """Acknowledgement for writes and deletes."""

    success: bool = True
