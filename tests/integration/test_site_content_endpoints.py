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


def _client(tmp_path: Path, filename: str) -> TestClient:
    sync_url, async_url = _upgrade_head(tmp_path, filename)
    with sa.create_engine(sync_url).begin() as connection:
        connection.execute(
            sa.text("INSERT INTO users (username, password_hash) VALUES ('admin', :hash)"),
            {"hash": ScryptPasswordHasher().hash_password("AdminBroly69")},
        )
    return TestClient(create_app(database_url=async_url))


def _login(client: TestClient) -> dict[str, str]:
    response = client.post("/api/login", json={"username": "admin", "password": "AdminBroly69"})
    assert response.status_code == 200
    return {"Authorization": f"Bearer {response.json()['token']}"}


@pytest.mark.asyncio
async def test_social_media_defaults_order_and_active_filter(tmp_path: Path) -> None:
    with _client(tmp_path, "content_social.db") as client:
        headers = _login(client)
        late = client.post(
            "/api/social-media",
            json={"platform": "instagram", "url": "https://instagram.com/shop"},
            headers=headers,
        )
        first = client.post(
            "/api/social-media",
            json={
                "platform": "telegram",
                "url": "https://t.me/shop",
                "icon": "send",
                "display_order": 1,
            },
            headers=headers,
        )
        hidden = client.post(
            "/api/social-media",
            json={
                "platform": "snapchat",
                "url": "https://snapchat.com/add/shop",
                "display_order": 2,
                "is_active": False,
            },
            headers=headers,
        )
        listed = client.get("/api/social-media").json()
        active = client.get("/api/social-media", params={"active_only": "true"}).json()

    assert late.status_code == 201
    assert late.json()["display_order"] == 999
    assert late.json()["is_active"] is True
    assert late.json()["custom_name"] == ""
    assert first.status_code == 201
    assert hidden.status_code == 201
    assert [item["platform"] for item in listed["items"]] == ["telegram", "snapchat", "instagram"]
    assert [item["platform"] for item in active["items"]] == ["telegram", "instagram"]


@pytest.mark.asyncio
async def test_social_media_partial_update_and_delete(tmp_path: Path) -> None:
    with _client(tmp_path, "content_social_update.db") as client:
        headers = _login(client)
        item_id = client.post(
            "/api/social-media",
            json={"platform": "telegram", "url": "https://t.me/shop"},
            headers=headers,
        ).json()["id"]
        updated = client.put(
            f"/api/social-media/{item_id}",
            json={"custom_name": "Canal", "custom_logo": "/uploads/logo.png"},
            headers=headers,
        )
        deleted = client.delete(f"/api/social-media/{item_id}", headers=headers)
        after = client.get(f"/api/social-media/{item_id}")

    assert updated.status_code == 200
    assert updated.json()["custom_name"] == "Canal"
    assert updated.json()["url"] == "https://t.me/shop"
    assert deleted.status_code == 200
    assert after.status_code == 404
    assert after.json() == {"detail": "Social media not found"}


@pytest.mark.asyncio
async def test_delivery_info_validates_type(tmp_path: Path) -> None:
    with _client(tmp_path, "content_delivery.db") as client:
        headers = _login(client)
        created = client.post(
            "/api/delivery-info",
            json={"title": "Livraison", "description": "Paris 7j/7", "type": "delivery"},
            headers=headers,
        )
        invalid = client.post(
            "/api/delivery-info",
            json={"title": "Livraison", "type": "teleport"},
            headers=headers,
        )
        updated = client.put(
            f"/api/delivery-info/{created.json()['id']}",
            json={"type": "meetup", "custom_name": "Meetup"},
            headers=headers,
        )
        missing = client.get("/api/delivery-info/999")

    assert created.status_code == 201
    assert created.json()["custom_name"] == ""
    assert invalid.status_code == 422
    assert updated.json()["type"] == "meetup"
    assert updated.json()["title"] == "Livraison"
    assert missing.status_code == 404
    assert missing.json() == {"detail": "Delivery info not found"}


@pytest.mark.asyncio
async def test_contact_info_crud_requires_admin(tmp_path: Path) -> None:
    with _client(tmp_path, "content_contact.db") as client:
        anonymous = client.post("/api/contact-info", json={"email": "shop@example.org"})
        headers = _login(client)
        created = client.post(
            "/api/contact-info",
            json={"email": "shop@example.org", "phone": "+33 6 00 00 00 00"},
            headers=headers,
        )
        item_id = created.json()["id"]
        updated = client.put(
            f"/api/contact-info/{item_id}",
            json={"is_active": False},
            headers=headers,
        )
        active = client.get("/api/contact-info", params={"active_only": "true"}).json()
        everything = client.get("/api/contact-info").json()
        deleted = client.delete(f"/api/contact-info/{item_id}", headers=headers)
        deleted_again = client.delete(f"/api/contact-info/{item_id}", headers=headers)

    assert anonymous.status_code == 401
    assert created.status_code == 201
    assert updated.json()["is_active"] is False
    assert updated.json()["email"] == "shop@example.org"
    assert active["items"] == []
    assert len(everything["items"]) == 1
    assert deleted.status_code == 200
    assert deleted_again.status_code == 404
    assert deleted_again.json() == {"detail": "Contact info not found"}
