"""Pydantic models for login, session and user-management endpoints."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict


class StrictModel(BaseModel):
    """Base model with strict unknown-field rejection."""

    model_config = ConfigDict(extra="forbid")


class LoginRequest(StrictModel):
    """Credentials submitted to the login endpoint."""

    username: str
    password: str


class UserResponse(StrictModel):
    """Public user projection; the password record never leaves the service."""

    id: int
    username: str
    created_at: datetime


class LoginResponse(StrictModel):
    """Successful login payload with the opaque bearer token."""

    token: str
    expires_at: datetime
    user: UserResponse


class LogoutResponse(StrictModel):
    ok: bool


class UserListResponse(StrictModel):
    items: list[UserResponse]


class UserCreateRequest(StrictModel):
    """Admin request for creating one account."""

    username: str
    password: str


class PasswordChangeRequest(StrictModel):
    """Admin request for overwriting one account password."""

    password: str
