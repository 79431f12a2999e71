"""Pydantic models for checkout input."""
from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from brewcart.domain.order import CustomerDetails

FIELD_LABELS = {
    "fullname": "full name",
    "phone": "phone",
    "email": "email",
    "address": "address",
}


class CheckoutForm(BaseModel):
    """Customer fields submitted from the checkout page."""

    model_config = ConfigDict(str_strip_whitespace=True)

    fullname: str = Field(..., min_length=1)
    phone: str = Field(..., min_length=1)
    email: str = Field(..., min_length=1)
    address: str = Field(..., min_length=1)

    def to_customer(self) -> CustomerDetails:
        return CustomerDetails(
            fullname=self.fullname,
            phone=self.phone,
            email=self.email,
            address=self.address,
        )


def missing_fields(error: ValidationError) -> list[str]:
    """Field names rejected by ``CheckoutForm`` validation, in form order."""
    failed = {str(err["loc"][0]) for err in error.errors() if err.get("loc")}
    return [name for name in FIELD_LABELS if name in failed]


def describe_missing(fields: list[str]) -> str:
    labels = ", ".join(FIELD_LABELS.get(name, name) for name in fields)
    return f"Please fill in: {labels}."
