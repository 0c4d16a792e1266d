"""Application service for storefront catalog reads and admin catalog edits."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass, fields, replace
from typing import Any

from storefront_admin.application.ports.product_repository_port import (
    CatalogFacets,
    PriceVariantInput,
    ProductFilter,
    ProductRecord,
    ProductRepositoryPort,
    ProductWriteInput,
)

logger = logging.getLogger(__name__)

_WRITABLE_FIELDS = frozenset(item.name for item in fields(ProductWriteInput))


class ProductNotFoundError(LookupError):
    """Raised when a product id does not resolve to a persisted product."""

    def __init__(self, *, product_id: int) -> None:
        super().__init__("Product not found")
        self.product_id = product_id


class InvalidProductError(ValueError):
    """Raised when product input violates catalog rules."""


class InvalidCategoryError(ValueError):
    """Raised when a category rename target is blank."""


@dataclass(frozen=True)
class ProductListQuery:
    """Storefront listing filters as received from query parameters."""

    category: str | None = None
    farm: str | None = None
    search: str | None = None


class ProductCatalogService:
    """Expose product listing, facets and admin catalog mutations."""

    def __init__(self, *, products: ProductRepositoryPort) -> None:
        self._products = products

    async def list_products(self, query: ProductListQuery) -> list[ProductRecord]:
        """List products with blank filters treated as absent."""

        return await self._products.list_products(
            ProductFilter(
                category=_optional_filter(query.category),
                farm=_optional_filter(query.farm),
                search=_optional_filter(query.search),
            )
        )

    async def list_facets(self) -> CatalogFacets:
        return await self._products.list_facets()

    async def get_product(self, *, product_id: int) -> ProductRecord:
        product = await self._products.get_by_id(product_id=product_id)
        if product is None:
            raise ProductNotFoundError(product_id=product_id)
        return product

    async def create_product(self, payload: ProductWriteInput) -> ProductRecord:
        """Validate and persist one product with its price variants."""

        created = await self._products.create_product(_validated(payload))
        logger.info(
            "product_created product_id=%s category=%s variants=%s",
            created.id,
            created.category,
            len(created.prices),
        )
        return created

    async def update_product(
        self,
        *,
        product_id: int,
        changes: Mapping[str, Any],
    ) -> ProductRecord:
        """Merge provided fields onto the current product and persist the result.

        A `prices` entry replaces every existing variant; omitting it keeps them.
        """

        unknown = set(changes) - _WRITABLE_FIELDS
        if unknown:
            raise InvalidProductError(f"unknown product fields: {', '.join(sorted(unknown))}")

        current = await self.get_product(product_id=product_id)
        merged = replace(_to_write_input(current), **changes)
        updated = await self._products.update_product(
            product_id=product_id,
            payload=_validated(merged),
        )
        if updated is None:
            raise ProductNotFoundError(product_id=product_id)
        logger.info(
            "product_updated product_id=%s fields=%s",
            product_id,
            ",".join(sorted(changes)),
        )
        return updated

    async def delete_product(self, *, product_id: int) -> ProductRecord:
        deleted = await self._products.delete_product(product_id=product_id)
        if deleted is None:
            raise ProductNotFoundError(product_id=product_id)
        logger.info("product_deleted product_id=%s", product_id)
        return deleted

    async def rename_category(self, *, old_name: str, new_name: str) -> int:
        """Move every product of `old_name` to `new_name` and return affected count."""

        target = new_name.strip()
        if not target:
            raise InvalidCategoryError("category name is required")
        updated = await self._products.replace_category(
            old_category=old_name,
            new_category=target,
        )
        logger.info("category_renamed old=%s new=%s updated=%s", old_name, target, updated)
        return updated

    async def delete_category(self, *, name: str) -> int:
        """Clear the category on every product holding it."""

        updated = await self._products.replace_category(old_category=name, new_category="")
        logger.info("category_deleted name=%s updated=%s", name, updated)
        return updated


def _optional_filter(value: str | None) -> str | None:
    if value is None:
        return None
    stripped = value.strip()
    return stripped or None


def _validated(payload: ProductWriteInput) -> ProductWriteInput:
    name = payload.name.strip()
    if not name:
        raise InvalidProductError("product name is required")
    media = payload.media.strip() if payload.media is not None else None
    return replace(
        payload,
        name=name,
        category=payload.category.strip(),
        farm=payload.farm.strip(),
        media=media or None,
    )


def _to_write_input(product: ProductRecord) -> ProductWriteInput:
    return ProductWriteInput(
        name=product.name,
        category=product.category,
        price=product.price,
        description=product.description,
        media=product.media,
        farm=product.farm,
        external_link=product.external_link,
        button_text=product.button_text,
        prices=[PriceVariantInput(size=item.size, price=item.price) for item in product.prices],
    )
