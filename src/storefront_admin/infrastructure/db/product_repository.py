"""SQLAlchemy adapter for products and their price variants."""

from __future__ import annotations

from collections import defaultdict
from collections.abc import Sequence
from typing import Any, cast

import sqlalchemy as sa
from sqlalchemy.engine import CursorResult
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from storefront_admin.application.ports.product_repository_port import (
    CatalogFacets,
    PriceVariantRecord,
    ProductFilter,
    ProductRecord,
    ProductRepositoryPort,
    ProductWriteInput,
)
from storefront_admin.infrastructure.db.metadata import product_prices, products

_PRODUCT_COLUMNS = (
    products.c.id,
    products.c.name,
    products.c.category,
    products.c.price,
    products.c.description,
    products.c.media,
    products.c.farm,
    products.c.external_link,
    products.c.button_text,
)
_LIKE_ESCAPE = "\\"


class SqlAlchemyProductRepository(ProductRepositoryPort):
    """Product repository backed by SQLAlchemy async sessions."""

    def __init__(self, session_factory: async_sessionmaker[AsyncSession]) -> None:
        self._session_factory = session_factory

    async def list_products(self, product_filter: ProductFilter) -> list[ProductRecord]:
        """Return filtered products ordered by id with variants attached."""

        statement = sa.select(*_PRODUCT_COLUMNS).order_by(products.c.id.asc())
        if product_filter.category is not None:
            statement = statement.where(products.c.category == product_filter.category)
        if product_filter.farm is not None:
            statement = statement.where(products.c.farm == product_filter.farm)
        if product_filter.search is not None:
            pattern = f"%{_escape_like(product_filter.search)}%"
            statement = statement.where(
                sa.or_(
                    products.c.name.ilike(pattern, escape=_LIKE_ESCAPE),
                    products.c.description.ilike(pattern, escape=_LIKE_ESCAPE),
                    products.c.category.ilike(pattern, escape=_LIKE_ESCAPE),
                    products.c.farm.ilike(pattern, escape=_LIKE_ESCAPE),
                )
            )

        async with self._session_factory() as session:
            result = await session.execute(statement)
            rows = result.mappings().all()
            variants = await _load_variants(session, [int(row["id"]) for row in rows])

        return [_to_product_record(row, variants.get(int(row["id"]), [])) for row in rows]

    async def get_by_id(self, *, product_id: int) -> ProductRecord | None:
        async with self._session_factory() as session:
            return await _fetch_product(session, product_id=product_id)

    async def create_product(self, payload: ProductWriteInput) -> ProductRecord:
        """Insert product row and variants in one transaction."""

        statement = (
            sa.insert(products)
            .values(**_product_values(payload))
            .returning(products.c.id)
        )

        async with self._session_factory() as session:
            result = await session.execute(statement)
            product_id = int(result.scalar_one())
            await _insert_variants(session, product_id=product_id, payload=payload)
            await session.commit()
            created = await _fetch_product(session, product_id=product_id)

        assert created is not None
        return created

    async def update_product(
        self,
        *,
        product_id: int,
        payload: ProductWriteInput,
    ) -> ProductRecord | None:
        """Overwrite product columns and replace its variant list."""

        statement = (
            sa.update(products)
            .where(products.c.id == product_id)
            .values(**_product_values(payload), updated_at=sa.func.current_timestamp())
        )

        async with self._session_factory() as session:
            result = cast(CursorResult[Any], await session.execute(statement))
            if not result.rowcount:
                await session.rollback()
                return None
            await session.execute(
                sa.delete(product_prices).where(product_prices.c.product_id == product_id)
            )
            await _insert_variants(session, product_id=product_id, payload=payload)
            await session.commit()
            return await _fetch_product(session, product_id=product_id)

    async def delete_product(self, *, product_id: int) -> ProductRecord | None:
        async with self._session_factory() as session:
            existing = await _fetch_product(session, product_id=product_id)
            if existing is None:
                return None
            await session.execute(
                sa.delete(product_prices).where(product_prices.c.product_id == product_id)
            )
            await session.execute(sa.delete(products).where(products.c.id == product_id))
            await session.commit()

        return existing

    async def list_facets(self) -> CatalogFacets:
        """Return distinct non-empty category and farm values in sorted order."""

        categories_statement = (
            sa.select(products.c.category)
            .where(products.c.category != "")
            .distinct()
            .order_by(products.c.category.asc())
        )
        farms_statement = (
            sa.select(products.c.farm)
            .where(products.c.farm != "")
            .distinct()
            .order_by(products.c.farm.asc())
        )

        async with self._session_factory() as session:
            categories = (await session.execute(categories_statement)).scalars().all()
            farms = (await session.execute(farms_statement)).scalars().all()

        return CatalogFacets(
            categories=[str(value) for value in categories],
            farms=[str(value) for value in farms],
        )

    async def replace_category(self, *, old_category: str, new_category: str) -> int:
        statement = (
            sa.update(products)
            .where(products.c.category == old_category)
            .values(category=new_category, updated_at=sa.func.current_timestamp())
        )

        async with self._session_factory() as session:
            result = cast(CursorResult[Any], await session.execute(statement))
            await session.commit()

        return int(result.rowcount or 0)


def _escape_like(value: str) -> str:
    return (
        value.replace(_LIKE_ESCAPE, _LIKE_ESCAPE * 2)
        .replace("%", f"{_LIKE_ESCAPE}%")
        .replace("_", f"{_LIKE_ESCAPE}_")
    )


def _product_values(payload: ProductWriteInput) -> dict[str, object]:
    return {
        "name": payload.name,
        "category": payload.category,
        "price": payload.price,
        "description": payload.description,
        "media": payload.media,
        "farm": payload.farm,
        "external_link": payload.external_link,
        "button_text": payload.button_text,
    }


async def _insert_variants(
    session: AsyncSession,
    *,
    product_id: int,
    payload: ProductWriteInput,
) -> None:
    if not payload.prices:
        return
    await session.execute(
        sa.insert(product_prices),
        [
            {
                "product_id": product_id,
                "position": position,
                "size": variant.size,
                "price": variant.price,
            }
            for position, variant in enumerate(payload.prices)
        ],
    )


async def _load_variants(
    session: AsyncSession,
    product_ids: Sequence[int],
) -> dict[int, list[PriceVariantRecord]]:
    if not product_ids:
        return {}

    statement = (
        sa.select(
            product_prices.c.id,
            product_prices.c.product_id,
            product_prices.c.size,
            product_prices.c.price,
        )
        .where(product_prices.c.product_id.in_(product_ids))
        .order_by(product_prices.c.product_id.asc(), product_prices.c.position.asc())
    )
    result = await session.execute(statement)

    grouped: dict[int, list[PriceVariantRecord]] = defaultdict(list)
    for row in result.mappings().all():
        grouped[int(row["product_id"])].append(
            PriceVariantRecord(
                id=int(row["id"]),
                size=cast(str, row["size"]),
                price=cast(str, row["price"]),
            )
        )
    return grouped


async def _fetch_product(session: AsyncSession, *, product_id: int) -> ProductRecord | None:
    result = await session.execute(
        sa.select(*_PRODUCT_COLUMNS).where(products.c.id == product_id).limit(1)
    )
    row = result.mappings().first()
    if row is None:
        return None
    variants = await _load_variants(session, [product_id])
    return _to_product_record(row, variants.get(product_id, []))


def _to_product_record(
    row: sa.RowMapping,
    variants: Sequence[PriceVariantRecord],
) -> ProductRecord:
    return ProductRecord(
        id=int(row["id"]),
        name=cast(str, row["name"]),
        category=cast(str, row["category"]),
        price=cast(str, row["price"]),
        description=cast(str, row["description"]),
        media=cast(str | None, row["media"]),
        farm=cast(str, row["farm"]),
        external_link=cast(str, row["external_link"]),
        button_text=cast(str, row["button_text"]),
        prices=tuple(variants),
    )
