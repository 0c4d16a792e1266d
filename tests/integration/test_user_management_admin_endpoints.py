from __future__ import annotations

from pathlib import Path

import pytest
import sqlalchemy as sa
from alembic.config import Config
from fastapi.testclient import TestClient

from alembic import command
from apps.catalog_api.main import create_app
from storefront_admin.infrastructure.security.password_hasher import ScryptPasswordHasher


def _upgrade_head(tmp_path: Path, filename: str) -> tuple[str, str]:
    db_path = tmp_path / filename
    sync_url = f"sqlite+pysqlite:///{db_path}"
    async_url = f"sqlite+aiosqlite:///{db_path}"

    alembic_config = Config("alembic.ini")
    alembic_config.set_main_option("sqlalchemy.url", sync_url)
    command.upgrade(alembic_config, "head")

    return sync_url, async_url


def _seed_admin(sync_url: str, *, username: str = "admin", password: str = "AdminBroly69") -> None:
    hasher = ScryptPasswordHasher()
    with sa.create_engine(sync_url).begin() as connection:
        connection.execute(
            sa.text("INSERT INTO users (username, password_hash) VALUES (:username, :hash)"),
            {"username": username, "hash": hasher.hash_password(password)},
        )


def _login(client: TestClient, *, username: str, password: str) -> dict[str, str]:
    response = client.post("/api/login", json={"username": username, "password": password})
    assert response.status_code == 200
    return {"Authorization": f"Bearer {response.json()['token']}"}


@pytest.mark.asyncio
async def test_user_endpoints_require_bearer_token(tmp_path: Path) -> None:
    _, async_url = _upgrade_head(tmp_path, "users_auth_required.db")

    with TestClient(create_app(database_url=async_url)) as client:
        list_response = client.get("/api/users")
        create_response = client.post(
            "/api/users",
            json={"username": "editor", "password": "secret1"},
        )
        invalid_token = client.get("/api/users", headers={"Authorization": "Bearer nope"})
        malformed_header = client.get("/api/users", headers={"Authorization": "Token nope"})

    assert list_response.status_code == 401
    assert create_response.status_code == 401
    assert invalid_token.status_code == 401
    assert malformed_header.status_code == 401


@pytest.mark.asyncio
async def test_admin_creates_lists_and_logs_in_new_user(tmp_path: Path) -> None:
    sync_url, async_url = _upgrade_head(tmp_path, "users_create.db")
    _seed_admin(sync_url)

    with TestClient(create_app(database_url=async_url)) as client:
        headers = _login(client, username="admin", password="AdminBroly69")
        created = client.post(
            "/api/users",
            json={"username": "editor", "password": "secret1"},
            headers=headers,
        )
        duplicate = client.post(
            "/api/users",
            json={"username": "editor", "password": "secret2"},
            headers=headers,
        )
        too_short = client.post(
            "/api/users",
            json={"username": "other", "password": "12345"},
            headers=headers,
        )
        listed = client.get("/api/users", headers=headers)
        new_login = client.post(
            "/api/login",
            json={"username": "editor", "password": "secret1"},
        )

    assert created.status_code == 201
    assert created.json()["username"] == "editor"
    assert duplicate.status_code == 400
    assert duplicate.json() == {"detail": "Username already exists"}
    assert too_short.status_code == 400
    assert [item["username"] for item in listed.json()["items"]] == ["admin", "editor"]
    assert all("password_hash" not in item for item in listed.json()["items"])
    assert new_login.status_code == 200

    with sa.create_engine(sync_url).begin() as connection:
        stored = connection.execute(
            sa.text("SELECT password_hash FROM users WHERE username = 'editor'")
        ).scalar_one()

    assert stored != "secret1"
    assert len(stored.split(".")) == 2


@pytest.mark.asyncio
async def test_change_password_revokes_sessions_and_replaces_record(tmp_path: Path) -> None:
    sync_url, async_url = _upgrade_head(tmp_path, "users_change_password.db")
    _seed_admin(sync_url)
    _seed_admin(sync_url, username="editor", password="secret1")

    with TestClient(create_app(database_url=async_url)) as client:
        admin_headers = _login(client, username="admin", password="AdminBroly69")
        editor_headers = _login(client, username="editor", password="secret1")

        changed = client.put(
            "/api/users/2/password",
            json={"password": "new-secret"},
            headers=admin_headers,
        )
        editor_me = client.get("/api/me", headers=editor_headers)
        old_login = client.post(
            "/api/login",
            json={"username": "editor", "password": "secret1"},
        )
        new_login = client.post(
            "/api/login",
            json={"username": "editor", "password": "new-secret"},
        )
        missing = client.put(
            "/api/users/99/password",
            json={"password": "new-secret"},
            headers=admin_headers,
        )

    assert changed.status_code == 200
    assert editor_me.status_code == 401
    assert old_login.status_code == 401
    assert new_login.status_code == 200
    assert missing.status_code == 404


@pytest.mark.asyncio
async def test_delete_user_guards_primary_admin_and_self(tmp_path: Path) -> None:
    sync_url, async_url = _upgrade_head(tmp_path, "users_delete.db")
    _seed_admin(sync_url)
    _seed_admin(sync_url, username="editor", password="secret1")
    _seed_admin(sync_url, username="helper", password="secret2")

    with TestClient(create_app(database_url=async_url)) as client:
        editor_headers = _login(client, username="editor", password="secret1")

        primary = client.delete("/api/users/1", headers=editor_headers)
        self_delete = client.delete("/api/users/2", headers=editor_headers)
        missing = client.delete("/api/users/99", headers=editor_headers)
        deleted = client.delete("/api/users/3", headers=editor_headers)
        helper_login = client.post(
            "/api/login",
            json={"username": "helper", "password": "secret2"},
        )

    assert primary.status_code == 403
    assert primary.json() == {"detail": "Cannot delete main admin user"}
    assert self_delete.status_code == 403
    assert missing.status_code == 404
    assert deleted.status_code == 200
    assert deleted.json()["username"] == "helper"
    assert helper_login.status_code == 401
