"""Port for admin user persistence used by auth and user-management services."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Protocol


class DuplicateUsernameError(ValueError):
    """Raised when a username is already taken by another account."""

    def __init__(self, *, username: str) -> None:
        super().__init__(f"username already exists: {username}")
        self.username = username


@dataclass(frozen=True)
class UserRecord:
    """User persistence model."""

    user_id: int
    username: str
    password_hash: str
    created_at: datetime
    updated_at: datetime


@dataclass(frozen=True)
class UserCreateInput:
    """Input payload for inserting one user with an already-hashed password."""

    username: str
    password_hash: str


class UserRepositoryPort(Protocol):
    """User repository contract."""

    async def get_by_id(self, *, user_id: int) -> UserRecord | None:
        """Return user by id or None."""

    async def get_by_username(self, *, username: str) -> UserRecord | None:
        """Return user by normalized username or None."""

    async def list_users(self) -> list[UserRecord]:
        """Return all users ordered by id."""

    async def get_primary_user_id(self) -> int | None:
        """Return the id of the earliest created account, if any."""

    async def create_user(self, payload: UserCreateInput) -> UserRecord:
        """Persist one user or raise DuplicateUsernameError."""

    async def update_password_hash(
        self,
        *,
        user_id: int,
        password_hash: str,
    ) -> UserRecord | None:
        """Overwrite one stored password record and return the updated user."""

    async def delete_user(self, *, user_id: int) -> UserRecord | None:
        """Delete one user and return the removed row, or None when missing."""
