from __future__ import annotations

from datetime import UTC, datetime, timedelta
from pathlib import Path

import pytest
import sqlalchemy as sa
from alembic.config import Config
from fastapi.testclient import TestClient

from alembic import command
from apps.catalog_api.main import create_app
from storefront_admin.infrastructure.security.password_hasher import ScryptPasswordHasher
from storefront_admin.infrastructure.security.token_service import OpaqueTokenService


def _upgrade_head(tmp_path: Path, filename: str) -> tuple[str, str]:
    db_path = tmp_path / filename
    sync_url = f"sqlite+pysqlite:///{db_path}"
    async_url = f"sqlite+aiosqlite:///{db_path}"

    alembic_config = Config("alembic.ini")
    alembic_config.set_main_option("sqlalchemy.url", sync_url)
    command.upgrade(alembic_config, "head")

    return sync_url, async_url


def _insert_user(connection: sa.Connection, *, username: str, password_hash: str) -> int:
    result = connection.execute(
        sa.text(
            "INSERT INTO users (username, password_hash) "
            "VALUES (:username, :password_hash) RETURNING id"
        ),
        {"username": username, "password_hash": password_hash},
    )
    return int(result.scalar_one())


def _fixed_token_service(token: str) -> OpaqueTokenService:
    fixed_now = datetime(2099, 2, 15, 0, 0, 0, tzinfo=UTC)
    return OpaqueTokenService(
        token_ttl=timedelta(hours=1),
        token_factory=lambda: token,
        now=lambda: fixed_now,
    )


@pytest.mark.asyncio
async def test_valid_credentials_return_opaque_token_and_persist_hash(tmp_path: Path) -> None:
    sync_url, async_url = _upgrade_head(tmp_path, "login_success.db")
    hasher = ScryptPasswordHasher()
    token_service = _fixed_token_service("opaque-token-value")

    engine = sa.create_engine(sync_url)
    with engine.begin() as connection:
        user_id = _insert_user(
            connection,
            username="admin",
            password_hash=hasher.hash_password("AdminBroly69"),
        )

    with TestClient(create_app(database_url=async_url, token_service=token_service)) as client:
        response = client.post(
            "/api/login",
            json={"username": "admin", "password": "AdminBroly69"},
            headers={"user-agent": "pytest-client"},
        )

    assert response.status_code == 200
    body = response.json()
    assert body["token"] == "opaque-token-value"
    assert body["user"]["id"] == user_id
    assert body["user"]["username"] == "admin"
    assert "password_hash" not in body["user"]
    assert body["expires_at"].startswith("2099-02-15T01:00:00")

    with engine.begin() as connection:
        auth_event = connection.execute(
            sa.text(
                "SELECT event_type, user_id, user_agent, payload FROM auth_events "
                "ORDER BY id DESC LIMIT 1"
            )
        ).mappings().one()
        auth_token = connection.execute(
            sa.text("SELECT user_id, token_hash FROM auth_tokens ORDER BY id DESC LIMIT 1")
        ).mappings().one()

    assert auth_event["event_type"] == "login_success"
    assert int(auth_event["user_id"]) == user_id
    assert auth_event["user_agent"] == "pytest-client"
    assert "AdminBroly69" not in str(auth_event["payload"])
    assert int(auth_token["user_id"]) == user_id
    assert auth_token["token_hash"] == token_service.hash_token("opaque-token-value")


@pytest.mark.asyncio
async def test_wrong_password_unknown_user_and_malformed_record_are_indistinguishable(
    tmp_path: Path,
) -> None:
    sync_url, async_url = _upgrade_head(tmp_path, "login_invalid.db")
    hasher = ScryptPasswordHasher()

    engine = sa.create_engine(sync_url)
    with engine.begin() as connection:
        _insert_user(connection, username="admin", password_hash=hasher.hash_password("correct"))
        _insert_user(connection, username="legacy", password_hash="not-a-valid-record")

    with TestClient(create_app(database_url=async_url)) as client:
        wrong_password = client.post(
            "/api/login",
            json={"username": "admin", "password": "incorrect"},
        )
        unknown_user = client.post(
            "/api/login",
            json={"username": "ghost", "password": "incorrect"},
        )
        malformed_record = client.post(
            "/api/login",
            json={"username": "legacy", "password": "incorrect"},
        )

    for response in (wrong_password, unknown_user, malformed_record):
        assert response.status_code == 401
        assert response.json() == {"detail": "invalid credentials"}

    with engine.begin() as connection:
        events = connection.execute(
            sa.text("SELECT event_type FROM auth_events ORDER BY id")
        ).scalars().all()
        token_count = connection.execute(sa.text("SELECT COUNT(*) FROM auth_tokens")).scalar_one()

    assert events == ["login_failed", "login_failed", "login_failed"]
    assert token_count == 0


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "payload",
    [
        {"username": "", "password": "secret1"},
        {"username": "   ", "password": "secret1"},
        {"username": "admin", "password": ""},
    ],
)
async def test_blank_credentials_are_rejected_with_400(
    tmp_path: Path,
    payload: dict[str, str],
) -> None:
    _, async_url = _upgrade_head(tmp_path, "login_blank.db")

    with TestClient(create_app(database_url=async_url)) as client:
        response = client.post("/api/login", json=payload)

    assert response.status_code == 400


@pytest.mark.asyncio
async def test_me_and_logout_use_bearer_token(tmp_path: Path) -> None:
    sync_url, async_url = _upgrade_head(tmp_path, "login_logout.db")
    hasher = ScryptPasswordHasher()
    with sa.create_engine(sync_url).begin() as connection:
        _insert_user(connection, username="admin", password_hash=hasher.hash_password("secret1"))

    with TestClient(create_app(database_url=async_url)) as client:
        token = client.post(
            "/api/login",
            json={"username": "admin", "password": "secret1"},
        ).json()["token"]
        headers = {"Authorization": f"Bearer {token}"}

        me_before = client.get("/api/me", headers=headers)
        logout = client.post("/api/logout", headers=headers)
        me_after = client.get("/api/me", headers=headers)
        me_anonymous = client.get("/api/me")

    assert me_before.status_code == 200
    assert me_before.json()["username"] == "admin"
    assert logout.status_code == 200
    assert logout.json() == {"ok": True}
    assert me_after.status_code == 401
    assert me_anonymous.status_code == 401
