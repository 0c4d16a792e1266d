"""Port for admin bearer token storage."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Protocol


@dataclass(frozen=True)
class AuthTokenCreateInput:
    user_id: int
    token_hash: str
    expires_at: datetime


@dataclass(frozen=True)
class AuthTokenRecord:
    """Stored token row; `token_hash` is the SHA-256 digest, never the token itself."""

    id: int
    user_id: int
    token_hash: str
    issued_at: datetime
    expires_at: datetime
    revoked_at: datetime | None


class AuthTokenRepositoryPort(Protocol):
    async def create_token(self, payload: AuthTokenCreateInput) -> AuthTokenRecord:
        """Store a freshly issued token digest."""

    async def get_active_by_hash(self, *, token_hash: str) -> AuthTokenRecord | None:
        """Return the row for a digest unless it is revoked or expired."""

    async def revoke_token(self, *, token_hash: str) -> bool:
        """Revoke one token (logout); False when nothing was active."""

    async def revoke_active_tokens_for_user(self, *, user_id: int) -> int:
        """Revoke every live token of a user (password change, deletion)."""
