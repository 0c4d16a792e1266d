"""SQLAlchemy adapters for social links, delivery info and contact info blocks."""

from __future__ import annotations

from dataclasses import asdict
from typing import cast

import sqlalchemy as sa
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from storefront_admin.application.ports.site_content_repository_port import (
    ContactInfoRecord,
    ContactInfoRepositoryPort,
    ContactInfoWriteInput,
    DeliveryInfoRecord,
    DeliveryInfoRepositoryPort,
    DeliveryInfoWriteInput,
    SocialMediaRecord,
    SocialMediaRepositoryPort,
    SocialMediaWriteInput,
)
from storefront_admin.domain.site.delivery_type import DeliveryType
from storefront_admin.infrastructure.db.metadata import contact_info, delivery_info, social_media


class _TableGateway:
    """Row-level CRUD helpers shared by the simple content tables."""

    def __init__(
        self,
        session_factory: async_sessionmaker[AsyncSession],
        table: sa.Table,
        *,
        order_by: tuple[sa.ColumnElement[object], ...],
    ) -> None:
        self._session_factory = session_factory
        self._table = table
        self._order_by = order_by

    async def list_rows(self, *, active_only: bool) -> list[sa.RowMapping]:
        statement = sa.select(*self._table.c).order_by(*self._order_by)
        if active_only:
            statement = statement.where(self._table.c.is_active.is_(True))

        async with self._session_factory() as session:
            result = await session.execute(statement)

        return list(result.mappings().all())

    async def get_row(self, *, item_id: int) -> sa.RowMapping | None:
        statement = sa.select(*self._table.c).where(self._table.c.id == item_id).limit(1)

        async with self._session_factory() as session:
            result = await session.execute(statement)

        return result.mappings().first()

    async def insert_row(self, values: dict[str, object]) -> sa.RowMapping:
        statement = sa.insert(self._table).values(**values).returning(*self._table.c)

        async with self._session_factory() as session:
            result = await session.execute(statement)
            row = result.mappings().one()
            await session.commit()

        return row

    async def update_row(self, *, item_id: int, values: dict[str, object]) -> sa.RowMapping | None:
        statement = (
            sa.update(self._table)
            .where(self._table.c.id == item_id)
            .values(**values)
            .returning(*self._table.c)
        )

        async with self._session_factory() as session:
            result = await session.execute(statement)
            row = result.mappings().first()
            await session.commit()

        return row

    async def delete_row(self, *, item_id: int) -> sa.RowMapping | None:
        statement = (
            sa.delete(self._table).where(self._table.c.id == item_id).returning(*self._table.c)
        )

        async with self._session_factory() as session:
            result = await session.execute(statement)
            row = result.mappings().first()
            await session.commit()

        return row


class SqlAlchemySocialMediaRepository(SocialMediaRepositoryPort):
    """Social link repository backed by SQLAlchemy async sessions."""

    def __init__(self, session_factory: async_sessionmaker[AsyncSession]) -> None:
        self._rows = _TableGateway(
            session_factory,
            social_media,
            order_by=(social_media.c.display_order.asc(), social_media.c.id.asc()),
        )

    async def list_items(self, *, active_only: bool) -> list[SocialMediaRecord]:
        rows = await self._rows.list_rows(active_only=active_only)
        return [_to_social_media(row) for row in rows]

    async def get_by_id(self, *, item_id: int) -> SocialMediaRecord | None:
        row = await self._rows.get_row(item_id=item_id)
        return _to_social_media(row) if row is not None else None

    async def create_item(self, payload: SocialMediaWriteInput) -> SocialMediaRecord:
        return _to_social_media(await self._rows.insert_row(asdict(payload)))

    async def update_item(
        self,
        *,
        item_id: int,
        payload: SocialMediaWriteInput,
    ) -> SocialMediaRecord | None:
        row = await self._rows.update_row(item_id=item_id, values=asdict(payload))
        return _to_social_media(row) if row is not None else None

    async def delete_item(self, *, item_id: int) -> SocialMediaRecord | None:
        row = await self._rows.delete_row(item_id=item_id)
        return _to_social_media(row) if row is not None else None


class SqlAlchemyDeliveryInfoRepository(DeliveryInfoRepositoryPort):
    """Delivery info repository backed by SQLAlchemy async sessions."""

    def __init__(self, session_factory: async_sessionmaker[AsyncSession]) -> None:
        self._rows = _TableGateway(
            session_factory,
            delivery_info,
            order_by=(delivery_info.c.id.asc(),),
        )

    async def list_items(self, *, active_only: bool) -> list[DeliveryInfoRecord]:
        rows = await self._rows.list_rows(active_only=active_only)
        return [_to_delivery_info(row) for row in rows]

    async def get_by_id(self, *, item_id: int) -> DeliveryInfoRecord | None:
        row = await self._rows.get_row(item_id=item_id)
        return _to_delivery_info(row) if row is not None else None

    async def create_item(self, payload: DeliveryInfoWriteInput) -> DeliveryInfoRecord:
        return _to_delivery_info(await self._rows.insert_row(_delivery_values(payload)))

    async def update_item(
        self,
        *,
        item_id: int,
        payload: DeliveryInfoWriteInput,
    ) -> DeliveryInfoRecord | None:
        row = await self._rows.update_row(item_id=item_id, values=_delivery_values(payload))
        return _to_delivery_info(row) if row is not None else None

    async def delete_item(self, *, item_id: int) -> DeliveryInfoRecord | None:
        row = await self._rows.delete_row(item_id=item_id)
        return _to_delivery_info(row) if row is not None else None


class SqlAlchemyContactInfoRepository(ContactInfoRepositoryPort):
    """Contact info repository backed by SQLAlchemy async sessions."""

    def __init__(self, session_factory: async_sessionmaker[AsyncSession]) -> None:
        self._rows = _TableGateway(
            session_factory,
            contact_info,
            order_by=(contact_info.c.id.asc(),),
        )

    async def list_items(self, *, active_only: bool) -> list[ContactInfoRecord]:
        rows = await self._rows.list_rows(active_only=active_only)
        return [_to_contact_info(row) for row in rows]

    async def get_by_id(self, *, item_id: int) -> ContactInfoRecord | None:
        row = await self._rows.get_row(item_id=item_id)
        return _to_contact_info(row) if row is not None else None

    async def create_item(self, payload: ContactInfoWriteInput) -> ContactInfoRecord:
        return _to_contact_info(await self._rows.insert_row(asdict(payload)))

    async def update_item(
        self,
        *,
        item_id: int,
        payload: ContactInfoWriteInput,
    ) -> ContactInfoRecord | None:
        row = await self._rows.update_row(item_id=item_id, values=asdict(payload))
        return _to_contact_info(row) if row is not None else None

    async def delete_item(self, *, item_id: int) -> ContactInfoRecord | None:
        row = await self._rows.delete_row(item_id=item_id)
        return _to_contact_info(row) if row is not None else None


def _delivery_values(payload: DeliveryInfoWriteInput) -> dict[str, object]:
    values = asdict(payload)
    values["type"] = payload.type.value
    return values


def _to_social_media(row: sa.RowMapping) -> SocialMediaRecord:
    return SocialMediaRecord(
        id=int(row["id"]),
        platform=cast(str, row["platform"]),
        url=cast(str, row["url"]),
        icon=cast(str, row["icon"]),
        display_order=int(row["display_order"]),
        is_active=bool(row["is_active"]),
        custom_name=cast(str, row["custom_name"]),
        custom_logo=cast(str, row["custom_logo"]),
    )


def _to_delivery_info(row: sa.RowMapping) -> DeliveryInfoRecord:
    return DeliveryInfoRecord(
        id=int(row["id"]),
        title=cast(str, row["title"]),
        description=cast(str, row["description"]),
        type=DeliveryType(cast(str, row["type"])),
        is_active=bool(row["is_active"]),
        custom_name=cast(str, row["custom_name"]),
    )


def _to_contact_info(row: sa.RowMapping) -> ContactInfoRecord:
    return ContactInfoRecord(
        id=int(row["id"]),
        email=cast(str, row["email"]),
        phone=cast(str, row["phone"]),
        address=cast(str, row["address"]),
        hours=cast(str, row["hours"]),
        is_active=bool(row["is_active"]),
    )
