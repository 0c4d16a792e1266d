from __future__ import annotations

from pathlib import Path

import pytest
import sqlalchemy as sa
from alembic.config import Config
from sqlalchemy.exc import IntegrityError

from alembic import command


def _alembic_config(tmp_path: Path) -> tuple[Config, str]:
    db_path = tmp_path / "storefront_migration.db"
    database_url = f"sqlite+pysqlite:///{db_path}"

    alembic_config = Config("alembic.ini")
    alembic_config.set_main_option("sqlalchemy.url", database_url)
    return alembic_config, database_url


def _upgrade_head(tmp_path: Path) -> str:
    alembic_config, database_url = _alembic_config(tmp_path)
    command.upgrade(alembic_config, "head")
    return database_url


def test_migration_creates_required_tables(tmp_path: Path) -> None:
    engine = sa.create_engine(_upgrade_head(tmp_path))

    table_names = set(sa.inspect(engine).get_table_names())

    assert {
        "users",
        "auth_events",
        "auth_tokens",
        "products",
        "product_prices",
        "social_media",
        "delivery_info",
        "contact_info",
        "site_settings",
    } <= table_names


def test_migration_creates_required_uniques_and_indexes(tmp_path: Path) -> None:
    engine = sa.create_engine(_upgrade_head(tmp_path))
    inspector = sa.inspect(engine)

    users_uniques = {
        tuple(sorted(constraint["column_names"]))
        for constraint in inspector.get_unique_constraints("users")
    }
    assert ("username",) in users_uniques

    token_uniques = {
        tuple(sorted(constraint["column_names"]))
        for constraint in inspector.get_unique_constraints("auth_tokens")
    }
    assert ("token_hash",) in token_uniques

    price_uniques = {
        tuple(sorted(constraint["column_names"]))
        for constraint in inspector.get_unique_constraints("product_prices")
    }
    assert ("position", "product_id") in price_uniques

    product_indexes = {index["name"] for index in inspector.get_indexes("products")}
    assert {"ix_products_category", "ix_products_farm"} <= product_indexes

    auth_event_indexes = {index["name"] for index in inspector.get_indexes("auth_events")}
    assert "ix_auth_events_user_id_occurred_at" in auth_event_indexes


def test_site_settings_row_is_seeded_with_page_text_defaults(tmp_path: Path) -> None:
    engine = sa.create_engine(_upgrade_head(tmp_path))

    with engine.begin() as connection:
        row = connection.execute(sa.text("SELECT * FROM site_settings")).mappings().one()

    assert row["id"] == 1
    assert row["site_name"] == "Broly69"
    assert row["background_overlay"] == 50
    assert row["order_bar_color"] == "#ffffff"
    assert row["home_action_button_text"] == "Découvrir nos produits"
    assert row["info_page_description"].startswith("Découvrez")


def test_product_text_defaults_apply_on_insert(tmp_path: Path) -> None:
    engine = sa.create_engine(_upgrade_head(tmp_path))

    with engine.begin() as connection:
        connection.execute(
            sa.text(
                "INSERT INTO products (name, category, price, description) "
                "VALUES ('Lemon Haze', 'Fleurs', '10€', '')"
            )
        )
        row = connection.execute(
            sa.text("SELECT farm, external_link, button_text FROM products")
        ).mappings().one()

    assert row["farm"] == ""
    assert row["external_link"] == ""
    assert row["button_text"] == "Ajouter au panier"


def test_delivery_type_check_constraint_rejects_unknown_type(tmp_path: Path) -> None:
    engine = sa.create_engine(_upgrade_head(tmp_path))

    with engine.begin() as connection:
        connection.execute(
            sa.text(
                "INSERT INTO delivery_info (title, description, type) "
                "VALUES ('Livraison', '', 'delivery')"
            )
        )

    with pytest.raises(IntegrityError), engine.begin() as connection:
        connection.execute(
            sa.text(
                "INSERT INTO delivery_info (title, description, type) "
                "VALUES ('Bad', '', 'teleport')"
            )
        )


def test_downgrade_to_base_removes_all_tables(tmp_path: Path) -> None:
    alembic_config, database_url = _alembic_config(tmp_path)
    command.upgrade(alembic_config, "head")
    command.downgrade(alembic_config, "0004_site_settings")

    engine = sa.create_engine(database_url)
    settings_columns = {
        column["name"] for column in sa.inspect(engine).get_columns("site_settings")
    }
    assert "order_bar_enabled" not in settings_columns
    assert "home_welcome_title" not in settings_columns
    assert "site_name" in settings_columns

    command.downgrade(alembic_config, "base")
    engine = sa.create_engine(database_url)
    assert set(sa.inspect(engine).get_table_names()) <= {"alembic_version"}
