"""SQLAlchemy adapter for the append-only login audit trail."""

from __future__ import annotations

import sqlalchemy as sa
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from storefront_admin.application.ports.auth_event_repository_port import (
    AuthEventCreateInput,
    AuthEventRepositoryPort,
)
from storefront_admin.infrastructure.db.metadata import auth_events


class SqlAlchemyAuthEventRepository(AuthEventRepositoryPort):
    def __init__(self, session_factory: async_sessionmaker[AsyncSession]) -> None:
        self._session_factory = session_factory

    async def append_event(self, payload: AuthEventCreateInput) -> int:
        """Insert one `login_success`/`login_failed` row and return its id."""

        # user_id stays NULL for attempts against unknown usernames.
        row = {
            "user_id": payload.user_id,
            "event_type": payload.event_type,
            "ip_address": payload.ip_address,
            "user_agent": payload.user_agent,
            "payload": dict(payload.payload),
        }
        async with self._session_factory.begin() as session:
            event_id = await session.scalar(
                sa.insert(auth_events).values(**row).returning(auth_events.c.id)
            )
        return int(event_id)
