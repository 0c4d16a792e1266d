"""SQLAlchemy adapter for the single storefront settings row."""

from __future__ import annotations

from dataclasses import asdict, fields
from typing import Any, cast

import sqlalchemy as sa
from sqlalchemy.engine import CursorResult
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from storefront_admin.application.ports.site_settings_repository_port import (
    SITE_SETTINGS_ROW_ID,
    SiteSettingsRecord,
    SiteSettingsRepositoryPort,
)
from storefront_admin.infrastructure.db.metadata import site_settings

_SETTINGS_FIELDS = tuple(field.name for field in fields(SiteSettingsRecord))


class SqlAlchemySiteSettingsRepository(SiteSettingsRepositoryPort):
    """Site settings repository backed by SQLAlchemy async sessions."""

    def __init__(self, session_factory: async_sessionmaker[AsyncSession]) -> None:
        self._session_factory = session_factory

    async def get_settings(self) -> SiteSettingsRecord | None:
        statement = (
            sa.select(*(site_settings.c[name] for name in _SETTINGS_FIELDS))
            .where(site_settings.c.id == SITE_SETTINGS_ROW_ID)
            .limit(1)
        )

        async with self._session_factory() as session:
            result = await session.execute(statement)

        row = result.mappings().first()
        if row is None:
            return None
        return _to_settings_record(row)

    async def save_settings(self, settings: SiteSettingsRecord) -> SiteSettingsRecord:
        """Update row 1 in place, inserting it first when the table is empty."""

        values = asdict(settings)
        update_statement = (
            sa.update(site_settings)
            .where(site_settings.c.id == SITE_SETTINGS_ROW_ID)
            .values(**values, updated_at=sa.func.current_timestamp())
        )

        async with self._session_factory() as session:
            result = cast(CursorResult[Any], await session.execute(update_statement))
            if not result.rowcount:
                await session.execute(
                    sa.insert(site_settings).values(id=SITE_SETTINGS_ROW_ID, **values)
                )
            await session.commit()

        return settings


def _to_settings_record(row: sa.RowMapping) -> SiteSettingsRecord:
    values: dict[str, Any] = {name: row[name] for name in _SETTINGS_FIELDS}
    values["animation_speed"] = int(values["animation_speed"])
    values["background_overlay"] = int(values["background_overlay"])
    for flag in ("dark_mode", "search_bar_enabled", "order_bar_enabled"):
        values[flag] = bool(values[flag])
    return SiteSettingsRecord(**values)
