"""SQLAlchemy adapter for admin user persistence."""

from __future__ import annotations

from datetime import datetime
from typing import cast

import sqlalchemy as sa
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from storefront_admin.application.ports.user_repository_port import (
    DuplicateUsernameError,
    UserCreateInput,
    UserRecord,
    UserRepositoryPort,
)
from storefront_admin.infrastructure.db.metadata import users

_USER_COLUMNS = (
    users.c.id,
    users.c.username,
    users.c.password_hash,
    users.c.created_at,
    users.c.updated_at,
)


class SqlAlchemyUserRepository(UserRepositoryPort):
    """User repository backed by SQLAlchemy async sessions."""

    def __init__(self, session_factory: async_sessionmaker[AsyncSession]) -> None:
        self._session_factory = session_factory

    async def get_by_id(self, *, user_id: int) -> UserRecord | None:
        statement = sa.select(*_USER_COLUMNS).where(users.c.id == user_id).limit(1)
        return await self._fetch_one(statement)

    async def get_by_username(self, *, username: str) -> UserRecord | None:
        statement = sa.select(*_USER_COLUMNS).where(users.c.username == username).limit(1)
        return await self._fetch_one(statement)

    async def list_users(self) -> list[UserRecord]:
        """Return every account ordered by id for admin listings."""

        statement = sa.select(*_USER_COLUMNS).order_by(users.c.id.asc())

        async with self._session_factory() as session:
            result = await session.execute(statement)

        return [_to_user_record(row) for row in result.mappings().all()]

    async def get_primary_user_id(self) -> int | None:
        async with self._session_factory() as session:
            result = await session.execute(sa.select(sa.func.min(users.c.id)))

        value = result.scalar_one_or_none()
        return int(value) if value is not None else None

    async def create_user(self, payload: UserCreateInput) -> UserRecord:
        """Insert one user row; a unique violation maps to DuplicateUsernameError."""

        statement = (
            sa.insert(users)
            .values(username=payload.username, password_hash=payload.password_hash)
            .returning(*_USER_COLUMNS)
        )

        async with self._session_factory() as session:
            try:
                result = await session.execute(statement)
                row = result.mappings().one()
                await session.commit()
            except IntegrityError as exc:
                await session.rollback()
                raise DuplicateUsernameError(username=payload.username) from exc

        return _to_user_record(row)

    async def update_password_hash(
        self,
        *,
        user_id: int,
        password_hash: str,
    ) -> UserRecord | None:
        statement = (
            sa.update(users)
            .where(users.c.id == user_id)
            .values(password_hash=password_hash, updated_at=sa.func.current_timestamp())
            .returning(*_USER_COLUMNS)
        )

        async with self._session_factory() as session:
            result = await session.execute(statement)
            row = result.mappings().first()
            await session.commit()

        if row is None:
            return None
        return _to_user_record(row)

    async def delete_user(self, *, user_id: int) -> UserRecord | None:
        statement = sa.delete(users).where(users.c.id == user_id).returning(*_USER_COLUMNS)

        async with self._session_factory() as session:
            result = await session.execute(statement)
            row = result.mappings().first()
            await session.commit()

        if row is None:
            return None
        return _to_user_record(row)

    async def _fetch_one(self, statement: sa.Select[tuple[object, ...]]) -> UserRecord | None:
        async with self._session_factory() as session:
            result = await session.execute(statement)

        row = result.mappings().first()
        if row is None:
            return None
        return _to_user_record(row)


def _to_user_record(row: sa.RowMapping) -> UserRecord:
    return UserRecord(
        user_id=int(row["id"]),
        username=cast(str, row["username"]),
        password_hash=cast(str, row["password_hash"]),
        created_at=cast(datetime, row["created_at"]),
        updated_at=cast(datetime, row["updated_at"]),
    )
