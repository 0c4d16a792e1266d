"""FastAPI router for login, logout and current-user endpoints."""

from __future__ import annotations

import logging

from fastapi import APIRouter, HTTPException, Request

from storefront_admin.application.dto.auth_models import (
    LoginRequest,
    LoginResponse,
    LogoutResponse,
    UserResponse,
)
from storefront_admin.application.ports.auth_token_repository_port import (
    AuthTokenCreateInput,
    AuthTokenRepositoryPort,
)
from storefront_admin.application.services.auth_service import AuthOutcome, AuthService
from storefront_admin.infrastructure.http.auth_guard import AdminAuthGuard, extract_bearer_token
from storefront_admin.infrastructure.security.token_service import OpaqueTokenService

logger = logging.getLogger(__name__)


def build_auth_router(
    *,
    auth_service: AuthService,
    auth_token_repository: AuthTokenRepositoryPort,
    token_service: OpaqueTokenService,
    auth_guard: AdminAuthGuard,
) -> APIRouter:
    """Build router exposing token-based login endpoints."""

    router = APIRouter(tags=["auth"])

    @router.post("/api/login", response_model=LoginResponse)
    async def login(payload: LoginRequest, request: Request) -> LoginResponse:
        if not payload.username.strip() or not payload.password:
            raise HTTPException(status_code=400, detail="username and password are required")

        result = await auth_service.authenticate(
            username=payload.username,
            password=payload.password,
            ip_address=request.client.host if request.client is not None else None,
            user_agent=request.headers.get("user-agent"),
        )
        if result.outcome is not AuthOutcome.SUCCESS or result.user is None:
            raise HTTPException(status_code=401, detail="invalid credentials")

        issued = token_service.issue_token()
        await auth_token_repository.create_token(
            AuthTokenCreateInput(
                user_id=result.user.user_id,
                token_hash=issued.token_hash,
                expires_at=issued.expires_at,
            )
        )
        return LoginResponse(
            token=issued.token,
            expires_at=issued.expires_at,
            user=UserResponse(
                id=result.user.user_id,
                username=result.user.username,
                created_at=result.user.created_at,
            ),
        )

    @router.post("/api/logout", response_model=LogoutResponse)
    async def logout(request: Request) -> LogoutResponse:
        user = await auth_guard.require_admin_request(request)
        token = extract_bearer_token(request.headers.get("authorization"))
        await auth_token_repository.revoke_token(token_hash=token_service.hash_token(token))
        logger.info("logout user_id=%s", user.user_id)
        return LogoutResponse(ok=True)

    @router.get("/api/me", response_model=UserResponse)
    async def me(request: Request) -> UserResponse:
        user = await auth_guard.require_admin_request(request)
        return UserResponse(id=user.user_id, username=user.username, created_at=user.created_at)

    return router
