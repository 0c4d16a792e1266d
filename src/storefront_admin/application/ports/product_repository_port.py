"""Port for product catalog persistence, including per-size price variants."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Protocol


@dataclass(frozen=True)
class PriceVariantRecord:
    """One persisted size/price pair attached to a product."""

    id: int
    size: str
    price: str


@dataclass(frozen=True)
class PriceVariantInput:
    """One size/price pair to persist for a product."""

    size: str
    price: str


@dataclass(frozen=True)
class ProductRecord:
    """Product persistence model with its ordered price variants."""

    id: int
    name: str
    category: str
    price: str
    description: str
    media: str | None
    farm: str
    external_link: str
    button_text: str
    prices: tuple[PriceVariantRecord, ...] = ()


@dataclass(frozen=True)
class ProductWriteInput:
    """Full product state to insert or overwrite."""

    name: str
    category: str
    price: str
    description: str
    media: str | None
    farm: str
    external_link: str
    button_text: str
    prices: list[PriceVariantInput] = field(default_factory=list)


@dataclass(frozen=True)
class ProductFilter:
    """Storefront filters; None means the filter is not applied."""

    category: str | None = None
    farm: str | None = None
    search: str | None = None


@dataclass(frozen=True)
class CatalogFacets:
    """Distinct non-empty filter values currently present in the catalog."""

    categories: list[str]
    farms: list[str]


class ProductRepositoryPort(Protocol):
    """Product repository contract."""

    async def list_products(self, product_filter: ProductFilter) -> list[ProductRecord]:
        """Return products matching the filter ordered by id."""

    async def get_by_id(self, *, product_id: int) -> ProductRecord | None:
        """Return one product with its price variants."""

    async def create_product(self, payload: ProductWriteInput) -> ProductRecord:
        """Insert one product and its price variants."""

    async def update_product(
        self,
        *,
        product_id: int,
        payload: ProductWriteInput,
    ) -> ProductRecord | None:
        """Overwrite one product and replace all of its price variants."""

    async def delete_product(self, *, product_id: int) -> ProductRecord | None:
        """Delete one product with its variants and return the removed state."""

    async def list_facets(self) -> CatalogFacets:
        """Return distinct categories and farms."""

    async def replace_category(self, *, old_category: str, new_category: str) -> int:
        """Move every product from one category to another and return affected count."""
