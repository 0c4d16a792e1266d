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


def _client(tmp_path: Path, filename: str) -> tuple[TestClient, str]:
    sync_url, async_url = _upgrade_head(tmp_path, filename)
    with sa.create_engine(sync_url).begin() as connection:
        connection.execute(
            sa.text("INSERT INTO users (username, password_hash) VALUES ('admin', :hash)"),
            {"hash": ScryptPasswordHasher().hash_password("AdminBroly69")},
        )
    return TestClient(create_app(database_url=async_url)), sync_url


def _login(client: TestClient) -> dict[str, str]:
    response = client.post("/api/login", json={"username": "admin", "password": "AdminBroly69"})
    assert response.status_code == 200
    return {"Authorization": f"Bearer {response.json()['token']}"}


@pytest.mark.asyncio
async def test_public_settings_return_seeded_defaults(tmp_path: Path) -> None:
    client, _ = _client(tmp_path, "settings_defaults.db")

    with client:
        response = client.get("/api/site-settings")

    assert response.status_code == 200
    body = response.json()
    assert body["site_name"] == "Broly69"
    assert body["primary_color"] == "#3b82f6"
    assert body["animation_speed"] == 100
    assert body["dark_mode"] is True
    assert body["background_type"] == "none"
    assert body["order_bar_text"] == "Commander maintenant"
    assert body["home_welcome_title"] == "Bienvenue"


@pytest.mark.asyncio
async def test_update_settings_merges_fields_and_persists(tmp_path: Path) -> None:
    client, sync_url = _client(tmp_path, "settings_update.db")

    with client:
        headers = _login(client)
        anonymous = client.put("/api/site-settings", json={"site_name": "Shop"})
        updated = client.put(
            "/api/site-settings",
            json={"site_name": "Shop", "primary_color": "#112233", "dark_mode": False},
            headers=headers,
        )
        fetched = client.get("/api/site-settings").json()

    assert anonymous.status_code == 401
    assert updated.status_code == 200
    assert fetched["site_name"] == "Shop"
    assert fetched["primary_color"] == "#112233"
    assert fetched["dark_mode"] is False
    assert fetched["secondary_color"] == "#1e40af"

    with sa.create_engine(sync_url).begin() as connection:
        row_count = connection.execute(sa.text("SELECT COUNT(*) FROM site_settings")).scalar_one()

    assert row_count == 1


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "payload",
    [
        {"primary_color": "blue"},
        {"animation_speed": 5},
        {"animation_speed": 501},
        {"background_overlay": 101},
        {"logo_size": "huge"},
        {"favicon": "x.ico"},
    ],
)
async def test_invalid_settings_are_rejected(tmp_path: Path, payload: dict[str, object]) -> None:
    client, _ = _client(tmp_path, "settings_invalid.db")

    with client:
        headers = _login(client)
        response = client.put("/api/site-settings", json=payload, headers=headers)

    assert response.status_code == 422


@pytest.mark.asyncio
async def test_background_update_sets_url_and_type(tmp_path: Path) -> None:
    client, _ = _client(tmp_path, "settings_background.db")

    with client:
        headers = _login(client)
        updated = client.put(
            "/api/site-settings/background",
            json={"url": "/uploads/bg.mp4", "type": "video"},
            headers=headers,
        )
        invalid = client.put(
            "/api/site-settings/background",
            json={"url": "/uploads/bg.mp4", "type": "none"},
            headers=headers,
        )

    assert updated.status_code == 200
    assert updated.json()["background_url"] == "/uploads/bg.mp4"
    assert updated.json()["background_type"] == "video"
    assert invalid.status_code == 422
