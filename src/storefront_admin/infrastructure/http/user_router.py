"""FastAPI router for admin user-management endpoints."""

from __future__ import annotations

from fastapi import APIRouter, HTTPException, Request

from storefront_admin.application.dto.auth_models import (
    PasswordChangeRequest,
    UserCreateRequest,
    UserListResponse,
    UserResponse,
)
from storefront_admin.application.ports.user_repository_port import (
    DuplicateUsernameError,
    UserRecord,
)
from storefront_admin.application.services.user_management_service import (
    InvalidUsernameError,
    InvalidUserPasswordError,
    NewUserInput,
    PrimaryAdminDeletionError,
    SelfUserManagementError,
    UserManagementService,
    UserNotFoundError,
)
from storefront_admin.infrastructure.http.auth_guard import AdminAuthGuard


def build_user_router(
    *,
    user_management_service: UserManagementService,
    auth_guard: AdminAuthGuard,
) -> APIRouter:
    """Build router exposing admin user listing and lifecycle endpoints."""

    router = APIRouter(tags=["users"])

    @router.get("/api/users", response_model=UserListResponse)
    async def list_users(request: Request) -> UserListResponse:
        await auth_guard.require_admin_request(request)
        users = await user_management_service.list_users()
        return UserListResponse(items=[_to_response(user) for user in users])

    @router.post("/api/users", response_model=UserResponse, status_code=201)
    async def create_user(payload: UserCreateRequest, request: Request) -> UserResponse:
        await auth_guard.require_admin_request(request)
        try:
            created = await user_management_service.create_user(
                NewUserInput(
                    username=payload.username,
                    password=payload.password,
                )
            )
        except DuplicateUsernameError as exc:
            raise HTTPException(status_code=400, detail="Username already exists") from exc
        except (InvalidUsernameError, InvalidUserPasswordError) as exc:
            raise HTTPException(status_code=400, detail=str(exc)) from exc
        return _to_response(created)

    @router.put("/api/users/{user_id}/password", response_model=UserResponse)
    async def change_password(
        user_id: int,
        payload: PasswordChangeRequest,
        request: Request,
    ) -> UserResponse:
        await auth_guard.require_admin_request(request)
        try:
            updated = await user_management_service.change_password(
                user_id=user_id,
                password=payload.password,
            )
        except InvalidUserPasswordError as exc:
            raise HTTPException(status_code=400, detail=str(exc)) from exc
        except UserNotFoundError as exc:
            raise HTTPException(status_code=404, detail="User not found") from exc
        return _to_response(updated)

    @router.delete("/api/users/{user_id}", response_model=UserResponse)
    async def delete_user(user_id: int, request: Request) -> UserResponse:
        actor = await auth_guard.require_admin_request(request)
        try:
            deleted = await user_management_service.delete_user(
                actor_user_id=actor.user_id,
                user_id=user_id,
            )
        except UserNotFoundError as exc:
            raise HTTPException(status_code=404, detail="User not found") from exc
        except PrimaryAdminDeletionError as exc:
            raise HTTPException(status_code=403, detail=str(exc)) from exc
        except SelfUserManagementError as exc:
            raise HTTPException(status_code=403, detail=str(exc)) from exc
        return _to_response(deleted)

    return router


def _to_response(user: UserRecord) -> UserResponse:
    return UserResponse(id=user.user_id, username=user.username, created_at=user.created_at)
