"""Shared normalization helpers for admin credential inputs."""

from __future__ import annotations

MIN_PASSWORD_LENGTH = 6


def normalize_username(*, username: str) -> str:
    """Normalize one username and reject blank values."""

    normalized = username.strip()
    if not normalized:
        raise ValueError("username cannot be blank")
    return normalized


def validate_new_password(*, password: str) -> str:
    """Return a password accepted for storage or raise with the violated rule.

    Surrounding whitespace is significant and preserved; only the length
    policy is enforced here.
    """

    if not password.strip():
        raise ValueError("password cannot be blank")
    if len(password) < MIN_PASSWORD_LENGTH:
        raise ValueError(
            f"password must be at least {MIN_PASSWORD_LENGTH} characters long"
        )
    return password
