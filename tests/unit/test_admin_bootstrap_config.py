from __future__ import annotations

from pathlib import Path

import pytest

from storefront_admin.infrastructure.db.admin_bootstrap import (
    AdminBootstrapConfig,
    AdminBootstrapConfigError,
    resolve_admin_bootstrap_config,
)


def test_bootstrap_disabled_when_nothing_is_set() -> None:
    assert resolve_admin_bootstrap_config(username=None, password=None, password_file=None) is None


def test_bootstrap_uses_env_password() -> None:
    config = resolve_admin_bootstrap_config(
        username=" admin ",
        password="AdminBroly69",
        password_file=None,
    )

    assert config == AdminBootstrapConfig(username="admin", password="AdminBroly69")


def test_bootstrap_reads_password_file(tmp_path: Path) -> None:
    password_file = tmp_path / "admin-password.txt"
    password_file.write_text("from-file-secret\n", encoding="utf-8")

    config = resolve_admin_bootstrap_config(
        username="admin",
        password=None,
        password_file=str(password_file),
    )

    assert config == AdminBootstrapConfig(username="admin", password="from-file-secret")


def test_bootstrap_requires_username_when_password_is_set() -> None:
    with pytest.raises(AdminBootstrapConfigError):
        resolve_admin_bootstrap_config(username=None, password="secret1", password_file=None)


def test_bootstrap_rejects_both_password_sources(tmp_path: Path) -> None:
    password_file = tmp_path / "admin-password.txt"
    password_file.write_text("from-file-secret", encoding="utf-8")

    with pytest.raises(AdminBootstrapConfigError):
        resolve_admin_bootstrap_config(
            username="admin",
            password="secret1",
            password_file=str(password_file),
        )


def test_bootstrap_rejects_missing_password_file(tmp_path: Path) -> None:
    with pytest.raises(AdminBootstrapConfigError):
        resolve_admin_bootstrap_config(
            username="admin",
            password=None,
            password_file=str(tmp_path / "missing.txt"),
        )


def test_bootstrap_rejects_short_password() -> None:
    with pytest.raises(AdminBootstrapConfigError):
        resolve_admin_bootstrap_config(username="admin", password="abc", password_file=None)
