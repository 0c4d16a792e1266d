"""Opaque bearer token generation and hashing."""

from __future__ import annotations

import hashlib
import secrets
from collections.abc import Callable
from dataclasses import dataclass
from datetime import UTC, datetime, timedelta

_DEFAULT_TOKEN_TTL = timedelta(hours=12)
_TOKEN_BYTES = 32


@dataclass(frozen=True)
class IssuedToken:
    """Plain token returned once to the client plus its persisted hash."""

    token: str
    token_hash: str
    expires_at: datetime


def _default_token_factory() -> str:
    return secrets.token_urlsafe(_TOKEN_BYTES)


def _utc_now() -> datetime:
    return datetime.now(tz=UTC)


class OpaqueTokenService:
    """Issue random opaque tokens; only their SHA-256 digest is ever stored."""

    def __init__(
        self,
        *,
        token_ttl: timedelta = _DEFAULT_TOKEN_TTL,
        token_factory: Callable[[], str] = _default_token_factory,
        now: Callable[[], datetime] = _utc_now,
    ) -> None:
        if token_ttl <= timedelta(0):
            raise ValueError("token_ttl must be positive")
        self._token_ttl = token_ttl
        self._token_factory = token_factory
        self._now = now

    def issue_token(self) -> IssuedToken:
        """Create a new token and compute its expiry from the configured ttl."""

        token = self._token_factory()
        return IssuedToken(
            token=token,
            token_hash=self.hash_token(token),
            expires_at=self._now() + self._token_ttl,
        )

    def hash_token(self, token: str) -> str:
        """Return the hex SHA-256 digest used for token lookups."""

        return hashlib.sha256(token.encode("utf-8")).hexdigest()
