"""Coupon-related Pydantic schemas."""

from datetime import datetime
from uuid import UUID

from pydantic import AliasChoices, BaseModel, ConfigDict, Field

# Older clients send the amount camel-cased.
DISCOUNT_AMOUNT_KEYS = AliasChoices("discount_amount", "discountAmount")


class CouponCreate(BaseModel):
    """Schema for creating a coupon."""

    title: str = Field(..., min_length=1, max_length=200)
    description: str = Field(..., min_length=1)
    coupon: str = Field(..., min_length=1, max_length=50)
    discount_amount: float = Field(..., validation_alias=DISCOUNT_AMOUNT_KEYS)


class CouponUpdate(BaseModel):
    """Schema for updating a coupon. Unknown keys such as ``id`` are dropped."""

    model_config = ConfigDict(extra="ignore")

    title: str | None = Field(None, min_length=1, max_length=200)
    description: str | None = Field(None, min_length=1)
    coupon: str | None = Field(None, min_length=1, max_length=50)
    discount_amount: float | None = Field(None, validation_alias=DISCOUNT_AMOUNT_KEYS)


class CouponResponse(BaseModel):
    """Schema for coupon response."""

    model_config = ConfigDict(from_attributes=True)

    id: UUID
    title: str
    description: str
    coupon: str
    discount_amount: float
    created_at: datetime | None = None
