from __future__ import annotations

import pytest

from storefront_admin.domain.auth.credentials import normalize_username, validate_new_password


def test_normalize_username_strips_surrounding_whitespace() -> None:
    assert normalize_username(username="  admin  ") == "admin"


def test_normalize_username_rejects_blank() -> None:
    with pytest.raises(ValueError):
        normalize_username(username="   ")


def test_validate_new_password_accepts_minimum_length_unchanged() -> None:
    assert validate_new_password(password=" abcde") == " abcde"


@pytest.mark.parametrize("password", ["", "      ", "abcde"])
def test_validate_new_password_rejects_blank_and_short(password: str) -> None:
    with pytest.raises(ValueError):
        validate_new_password(password=password)
