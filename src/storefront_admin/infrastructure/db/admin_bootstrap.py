"""Bootstrap helper for creating the first admin account at startup."""

from __future__ import annotations

import asyncio
from dataclasses import dataclass
from enum import StrEnum
from pathlib import Path

import sqlalchemy as sa
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from storefront_admin.application.ports.password_hasher_port import PasswordHasherPort
from storefront_admin.domain.auth.credentials import normalize_username, validate_new_password
from storefront_admin.infrastructure.db.metadata import users


class AdminBootstrapConfigError(ValueError):
    """Raised when bootstrap-admin environment configuration is invalid."""


@dataclass(frozen=True)
class AdminBootstrapConfig:
    """Runtime configuration for one-time admin bootstrap."""

    username: str
    password: str


class AdminBootstrapOutcome(StrEnum):
    """Outcome states for initial admin bootstrap execution."""

    CREATED = "created"
    SKIPPED_USERS_PRESENT = "skipped_users_present"
    SKIPPED_CONCURRENT_INSERT = "skipped_concurrent_insert"


@dataclass(frozen=True)
class AdminBootstrapResult:
    """Result model for one initial-admin bootstrap attempt."""

    outcome: AdminBootstrapOutcome
    username: str


def resolve_admin_bootstrap_config(
    *,
    username: str | None,
    password: str | None,
    password_file: str | None,
) -> AdminBootstrapConfig | None:
    """Resolve bootstrap-admin config from env values or return None when disabled."""

    any_value_set = any(value is not None for value in (username, password, password_file))
    if username is None:
        if any_value_set:
            raise AdminBootstrapConfigError(
                "BOOTSTRAP_ADMIN_USERNAME is required when bootstrap-admin variables are set"
            )
        return None

    if password is not None and password_file is not None:
        raise AdminBootstrapConfigError(
            "set only one of BOOTSTRAP_ADMIN_PASSWORD or BOOTSTRAP_ADMIN_PASSWORD_FILE"
        )

    resolved_password: str | None = None
    if password_file is not None:
        try:
            resolved_password = Path(password_file).read_text(encoding="utf-8").strip()
        except OSError as exc:
            raise AdminBootstrapConfigError(
                "failed to read BOOTSTRAP_ADMIN_PASSWORD_FILE"
            ) from exc
    elif password is not None:
        resolved_password = password

    if resolved_password is None:
        raise AdminBootstrapConfigError(
            "set BOOTSTRAP_ADMIN_PASSWORD or BOOTSTRAP_ADMIN_PASSWORD_FILE "
            "when BOOTSTRAP_ADMIN_USERNAME is set"
        )

    try:
        normalized_username = normalize_username(username=username)
    except ValueError as exc:
        raise AdminBootstrapConfigError("BOOTSTRAP_ADMIN_USERNAME cannot be blank") from exc
    try:
        accepted_password = validate_new_password(password=resolved_password)
    except ValueError as exc:
        raise AdminBootstrapConfigError(f"bootstrap admin password rejected: {exc}") from exc

    return AdminBootstrapConfig(username=normalized_username, password=accepted_password)


async def ensure_initial_admin_user(
    *,
    session_factory: async_sessionmaker[AsyncSession],
    password_hasher: PasswordHasherPort,
    config: AdminBootstrapConfig,
) -> AdminBootstrapResult:
    """Create the configured admin when the user table is empty, otherwise skip."""

    async with session_factory() as session:
        user_count = await _read_user_count(session)
        if user_count > 0:
            return AdminBootstrapResult(
                outcome=AdminBootstrapOutcome.SKIPPED_USERS_PRESENT,
                username=config.username,
            )

        password_hash = await asyncio.to_thread(password_hasher.hash_password, config.password)
        try:
            await session.execute(
                sa.insert(users).values(
                    username=config.username,
                    password_hash=password_hash,
                )
            )
            await session.commit()
        except IntegrityError:
            await session.rollback()
            return AdminBootstrapResult(
                outcome=AdminBootstrapOutcome.SKIPPED_CONCURRENT_INSERT,
                username=config.username,
            )

    return AdminBootstrapResult(outcome=AdminBootstrapOutcome.CREATED, username=config.username)


async def _read_user_count(session: AsyncSession) -> int:
    result = await session.execute(sa.select(sa.func.count()).select_from(users))
    return int(result.scalar_one())
