"""Application authentication service for credential verification."""

from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass
from enum import StrEnum

from storefront_admin.application.ports.auth_event_repository_port import (
    AuthEventCreateInput,
    AuthEventRepositoryPort,
)
from storefront_admin.application.ports.password_hasher_port import PasswordHasherPort
from storefront_admin.application.ports.user_repository_port import UserRecord, UserRepositoryPort

logger = logging.getLogger(__name__)

_DECOY_PASSWORD = "unknown-user-decoy"


class AuthOutcome(StrEnum):
    """Supported authentication outcomes."""

    SUCCESS = "success"
    INVALID_CREDENTIALS = "invalid_credentials"


@dataclass(frozen=True)
class AuthResult:
    """Authentication result model."""

    outcome: AuthOutcome
    user: UserRecord | None = None


class AuthService:
    """Authenticate credentials and append auth audit events.

    Unknown usernames and wrong passwords produce the same outcome so callers
    cannot tell them apart. Unknown usernames are still verified against a
    decoy record so both paths pay the same key-derivation cost. Verification
    runs in a worker thread because scrypt blocks for tens of milliseconds.
    """

    def __init__(
        self,
        *,
        users: UserRepositoryPort,
        auth_events: AuthEventRepositoryPort,
        password_hasher: PasswordHasherPort,
    ) -> None:
        self._users = users
        self._auth_events = auth_events
        self._password_hasher = password_hasher
        self._decoy_hash = password_hasher.hash_password(_DECOY_PASSWORD)

    async def authenticate(
        self,
        *,
        username: str,
        password: str,
        ip_address: str | None,
        user_agent: str | None,
    ) -> AuthResult:
        """Authenticate user credentials and always emit an auth event."""

        normalized_username = username.strip()
        user = await self._users.get_by_username(username=normalized_username)

        verified = await asyncio.to_thread(
            self._password_hasher.verify_password,
            password=password,
            password_hash=user.password_hash if user is not None else self._decoy_hash,
        )
        is_valid = user is not None and verified

        if user is None or not is_valid:
            await self._auth_events.append_event(
                AuthEventCreateInput(
                    user_id=user.user_id if user is not None else None,
                    event_type="login_failed",
                    ip_address=ip_address,
                    user_agent=user_agent,
                    payload={"username": normalized_username, "reason": "invalid_credentials"},
                )
            )
            logger.info("login_failed username=%s ip=%s", normalized_username, ip_address)
            return AuthResult(outcome=AuthOutcome.INVALID_CREDENTIALS, user=None)

        await self._auth_events.append_event(
            AuthEventCreateInput(
                user_id=user.user_id,
                event_type="login_success",
                ip_address=ip_address,
                user_agent=user_agent,
                payload={"username": normalized_username},
            )
        )
        logger.info("login_success user_id=%s ip=%s", user.user_id, ip_address)
        return AuthResult(outcome=AuthOutcome.SUCCESS, user=user)
