"""Auth header parsing and admin-guard helpers for protected endpoints."""

from __future__ import annotations

from fastapi import HTTPException, Request

from storefront_admin.application.ports.auth_token_repository_port import AuthTokenRepositoryPort
from storefront_admin.application.ports.user_repository_port import UserRecord, UserRepositoryPort
from storefront_admin.infrastructure.security.token_service import OpaqueTokenService


class MissingAuthTokenError(PermissionError):
    """Raised when a bearer token is required but not provided."""


class InvalidAuthTokenError(PermissionError):
    """Raised when bearer token header or persisted token is invalid."""


def extract_bearer_token(authorization_header: str | None) -> str:
    """Extract opaque token from standard `Authorization: Bearer <token>` header."""

    if authorization_header is None or not authorization_header.strip():
        raise MissingAuthTokenError("missing bearer token")

    parts = authorization_header.strip().split()
    if len(parts) != 2 or parts[0].lower() != "bearer" or not parts[1].strip():
        raise InvalidAuthTokenError("invalid bearer token header")

    return parts[1]


class AdminAuthGuard:
    """Resolve the authenticated admin behind a bearer token.

    Every account is an administrator, so a valid token is the only check.
    """

    def __init__(
        self,
        *,
        token_service: OpaqueTokenService,
        auth_token_repository: AuthTokenRepositoryPort,
        user_repository: UserRepositoryPort,
    ) -> None:
        self._token_service = token_service
        self._auth_token_repository = auth_token_repository
        self._user_repository = user_repository

    async def require_admin_user(self, *, authorization_header: str | None) -> UserRecord:
        """Resolve active caller from bearer token."""

        token = extract_bearer_token(authorization_header)
        token_hash = self._token_service.hash_token(token)
        token_record = await self._auth_token_repository.get_active_by_hash(token_hash=token_hash)
        if token_record is None:
            raise InvalidAuthTokenError("invalid or expired auth token")

        user = await self._user_repository.get_by_id(user_id=token_record.user_id)
        if user is None:
            raise InvalidAuthTokenError("invalid or expired auth token")

        return user

    async def require_admin_request(self, request: Request) -> UserRecord:
        """Router helper mapping guard failures to HTTP 401."""

        try:
            return await self.require_admin_user(
                authorization_header=request.headers.get("authorization")
            )
        except MissingAuthTokenError as exc:
            raise HTTPException(status_code=401, detail=str(exc)) from exc
        except InvalidAuthTokenError as exc:
            raise HTTPException(status_code=401, detail=str(exc)) from exc
