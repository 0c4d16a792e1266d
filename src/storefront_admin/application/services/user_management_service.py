"""Application service for admin user-management operations."""

from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass

from storefront_admin.application.ports.auth_token_repository_port import AuthTokenRepositoryPort
from storefront_admin.application.ports.password_hasher_port import PasswordHasherPort
from storefront_admin.application.ports.user_repository_port import (
    DuplicateUsernameError,
    UserCreateInput,
    UserRecord,
    UserRepositoryPort,
)
from storefront_admin.domain.auth.credentials import normalize_username, validate_new_password

logger = logging.getLogger(__name__)


class InvalidUsernameError(ValueError):
    """Raised when a requested username is blank."""


class InvalidUserPasswordError(ValueError):
    """Raised when a requested password violates the password policy."""


class UserNotFoundError(LookupError):
    """Raised when a target user cannot be found for one management action."""

    def __init__(self, *, user_id: int) -> None:
        super().__init__(f"user not found: {user_id}")
        self.user_id = user_id


class SelfUserManagementError(PermissionError):
    """Raised when an admin attempts to delete their own account."""

    def __init__(self) -> None:
        super().__init__("self-removal is not allowed")


class PrimaryAdminDeletionError(PermissionError):
    """Raised when an admin attempts to delete the primary account."""

    def __init__(self) -> None:
        super().__init__("Cannot delete main admin user")


@dataclass(frozen=True)
class NewUserInput:
    """Raw admin input for creating one account."""

    username: str
    password: str


class UserManagementService:
    """Expose user listing and lifecycle management use-cases."""

    def __init__(
        self,
        *,
        users: UserRepositoryPort,
        auth_tokens: AuthTokenRepositoryPort,
        password_hasher: PasswordHasherPort,
    ) -> None:
        self._users = users
        self._auth_tokens = auth_tokens
        self._password_hasher = password_hasher

    async def list_users(self) -> list[UserRecord]:
        """Return deterministic user listing for admin surfaces."""

        return await self._users.list_users()

    async def create_user(self, request: NewUserInput) -> UserRecord:
        """Validate input, hash the password with a fresh salt, and persist the account."""

        username = _require_username(request.username)
        password = _require_password(request.password)

        if await self._users.get_by_username(username=username) is not None:
            raise DuplicateUsernameError(username=username)

        password_hash = await asyncio.to_thread(self._password_hasher.hash_password, password)
        created = await self._users.create_user(
            UserCreateInput(username=username, password_hash=password_hash)
        )
        logger.info("user_created user_id=%s username=%s", created.user_id, created.username)
        return created

    async def change_password(self, *, user_id: int, password: str) -> UserRecord:
        """Overwrite one user's password record and revoke their active tokens."""

        accepted = _require_password(password)
        await self._require_existing_user(user_id=user_id)

        password_hash = await asyncio.to_thread(self._password_hasher.hash_password, accepted)
        updated = await self._users.update_password_hash(
            user_id=user_id,
            password_hash=password_hash,
        )
        if updated is None:
            raise UserNotFoundError(user_id=user_id)
        revoked = await self._auth_tokens.revoke_active_tokens_for_user(user_id=user_id)
        logger.info("user_password_changed user_id=%s revoked_tokens=%s", user_id, revoked)
        return updated

    async def delete_user(self, *, actor_user_id: int, user_id: int) -> UserRecord:
        """Delete one account after enforcing primary-admin and self-removal guards."""

        await self._require_existing_user(user_id=user_id)
        if user_id == await self._users.get_primary_user_id():
            raise PrimaryAdminDeletionError()
        if actor_user_id == user_id:
            raise SelfUserManagementError()

        await self._auth_tokens.revoke_active_tokens_for_user(user_id=user_id)
        deleted = await self._users.delete_user(user_id=user_id)
        if deleted is None:
            raise UserNotFoundError(user_id=user_id)
        logger.info("user_deleted user_id=%s actor_user_id=%s", user_id, actor_user_id)
        return deleted

    async def _require_existing_user(self, *, user_id: int) -> UserRecord:
        target = await self._users.get_by_id(user_id=user_id)
        if target is None:
            raise UserNotFoundError(user_id=user_id)
        return target


def _require_username(username: str) -> str:
    try:
        return normalize_username(username=username)
    except ValueError as exc:
        raise InvalidUsernameError(str(exc)) from exc


def _require_password(password: str) -> str:
    try:
        return validate_new_password(password=password)
    except ValueError as exc:
        raise InvalidUserPasswordError(str(exc)) from exc
