"""Pydantic models for product catalog endpoints."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from storefront_admin.domain.catalog.media import MediaKind

DEFAULT_BUTTON_TEXT = "Ajouter au panier"


class StrictModel(BaseModel):
    """Base model with strict unknown-field rejection."""

    model_config = ConfigDict(extra="forbid")


class PriceVariantModel(StrictModel):
    """One size/price pair submitted by admins."""

    size: str = Field(min_length=1)
    price: str = Field(min_length=1)


class PriceVariantResponse(StrictModel):
    id: int
    size: str
    price: str


class ProductCreateRequest(StrictModel):
    """Admin payload for creating one product."""

    name: str = Field(min_length=1)
    category: str = ""
    price: str = ""
    description: str = ""
    media: str | None = None
    farm: str = ""
    external_link: str = ""
    button_text: str = DEFAULT_BUTTON_TEXT
    prices: list[PriceVariantModel] = Field(default_factory=list)


class ProductUpdateRequest(StrictModel):
    """Partial admin payload; omitted fields keep their current value.

    When `prices` is provided it replaces every existing variant.
    """

    name: str | None = Field(default=None, min_length=1)
    category: str | None = None
    price: str | None = None
    description: str | None = None
    media: str | None = None
    farm: str | None = None
    external_link: str | None = None
    button_text: str | None = None
    prices: list[PriceVariantModel] | None = None


class ProductResponse(StrictModel):
    """Product as rendered by the storefront and admin surfaces."""

    id: int
    name: str
    category: str
    price: str
    description: str
    media: str | None
    media_kind: MediaKind
    farm: str
    external_link: str
    button_text: str
    prices: list[PriceVariantResponse]


class ProductListResponse(StrictModel):
    items: list[ProductResponse]


class FacetsResponse(StrictModel):
    """Distinct category and farm values available for filtering."""

    categories: list[str]
    farms: list[str]


class CategoryRenameRequest(StrictModel):
    name: str = Field(min_length=1)


class CategoryChangeResponse(StrictModel):
    """Number of products touched by a category rename or delete."""

    updated: int
