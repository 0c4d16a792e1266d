"""SQLAlchemy adapter for admin bearer token rows."""

from __future__ import annotations

from datetime import UTC, datetime
from typing import Any, cast

import sqlalchemy as sa
from sqlalchemy.engine import CursorResult
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from storefront_admin.application.ports.auth_token_repository_port import (
    AuthTokenCreateInput,
    AuthTokenRecord,
    AuthTokenRepositoryPort,
)
from storefront_admin.infrastructure.db.metadata import auth_tokens


def _not_revoked() -> sa.ColumnElement[bool]:
    return auth_tokens.c.revoked_at.is_(None)


class SqlAlchemyAuthTokenRepository(AuthTokenRepositoryPort):
    """Stores token digests; plaintext tokens never reach the database."""

    def __init__(self, session_factory: async_sessionmaker[AsyncSession]) -> None:
        self._session_factory = session_factory

    async def create_token(self, payload: AuthTokenCreateInput) -> AuthTokenRecord:
        async with self._session_factory.begin() as session:
            result = await session.execute(
                sa.insert(auth_tokens)
                .values(
                    user_id=payload.user_id,
                    token_hash=payload.token_hash,
                    expires_at=payload.expires_at,
                )
                .returning(*auth_tokens.c)
            )
            return _record_from_row(result.mappings().one())

    async def get_active_by_hash(self, *, token_hash: str) -> AuthTokenRecord | None:
        """Look up a digest that is neither revoked nor past `expires_at`."""

        query = sa.select(*auth_tokens.c).where(
            auth_tokens.c.token_hash == token_hash,
            _not_revoked(),
            auth_tokens.c.expires_at > datetime.now(tz=UTC),
        )
        async with self._session_factory() as session:
            row = (await session.execute(query)).mappings().first()
        return None if row is None else _record_from_row(row)

    async def revoke_token(self, *, token_hash: str) -> bool:
        return await self._revoke_where(auth_tokens.c.token_hash == token_hash) > 0

    async def revoke_active_tokens_for_user(self, *, user_id: int) -> int:
        return await self._revoke_where(auth_tokens.c.user_id == user_id)

    async def _revoke_where(self, condition: sa.ColumnElement[bool]) -> int:
        statement = (
            sa.update(auth_tokens)
            .where(condition, _not_revoked())
            .values(revoked_at=sa.func.current_timestamp())
        )
        async with self._session_factory.begin() as session:
            result = cast(CursorResult[Any], await session.execute(statement))
        return int(result.rowcount or 0)


def _record_from_row(row: sa.RowMapping) -> AuthTokenRecord:
    return AuthTokenRecord(
        id=int(row["id"]),
        user_id=int(row["user_id"]),
        token_hash=str(row["token_hash"]),
        issued_at=cast(datetime, row["issued_at"]),
        expires_at=cast(datetime, row["expires_at"]),
        revoked_at=cast(datetime | None, row["revoked_at"]),
    )
