"""Pydantic models for social media, delivery and contact endpoints."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from storefront_admin.domain.site.delivery_type import DeliveryType

DEFAULT_SOCIAL_DISPLAY_ORDER = 999


class StrictModel(BaseModel):
    """Base model with strict unknown-field rejection."""

    model_config = ConfigDict(extra="forbid")


class SocialMediaCreateRequest(StrictModel):
    platform: str = Field(min_length=1)
    url: str = Field(min_length=1)
    icon: str = ""
    display_order: int = DEFAULT_SOCIAL_DISPLAY_ORDER
    is_active: bool = True
    custom_name: str = ""
    custom_logo: str = ""


class SocialMediaUpdateRequest(StrictModel):
    """Partial update; omitted fields keep their current value."""

    platform: str | None = Field(default=None, min_length=1)
    url: str | None = Field(default=None, min_length=1)
    icon: str | None = None
    display_order: int | None = None
    is_active: bool | None = None
    custom_name: str | None = None
    custom_logo: str | None = None


class SocialMediaResponse(StrictModel):
    id: int
    platform: str
    url: str
    icon: str
    display_order: int
    is_active: bool
    custom_name: str
    custom_logo: str


class SocialMediaListResponse(StrictModel):
    items: list[SocialMediaResponse]


class DeliveryInfoCreateRequest(StrictModel):
    title: str = Field(min_length=1)
    description: str = ""
    type: DeliveryType
    is_active: bool = True
    custom_name: str = ""


class DeliveryInfoUpdateRequest(StrictModel):
    """Partial update; omitted fields keep their current value."""

    title: str | None = Field(default=None, min_length=1)
    description: str | None = None
    type: DeliveryType | None = None
    is_active: bool | None = None
    custom_name: str | None = None


class DeliveryInfoResponse(StrictModel):
    id: int
    title: str
    description: str
    type: DeliveryType
    is_active: bool
    custom_name: str


class DeliveryInfoListResponse(StrictModel):
    items: list[DeliveryInfoResponse]


class ContactInfoCreateRequest(StrictModel):
    email: str = ""
    phone: str = ""
    address: str = ""
    hours: str = ""
    is_active: bool = True


class ContactInfoUpdateRequest(StrictModel):
    """Partial update; omitted fields keep their current value."""

    email: str | None = None
    phone: str | None = None
    address: str | None = None
    hours: str | None = None
    is_active: bool | None = None


class ContactInfoResponse(StrictModel):
    id: int
    email: str
    phone: str
    address: str
    hours: str
    is_active: bool


class ContactInfoListResponse(StrictModel):
    items: list[ContactInfoResponse]
