from __future__ import annotations

from pathlib import Path

import pytest
from alembic.config import Config

from alembic import command
from storefront_admin.application.ports.product_repository_port import (
    PriceVariantInput,
    ProductFilter,
    ProductWriteInput,
)
from storefront_admin.infrastructure.db.product_repository import SqlAlchemyProductRepository
from storefront_admin.infrastructure.db.session import create_session_factory


def _upgrade_head(tmp_path: Path, filename: str) -> str:
    db_path = tmp_path / filename
    alembic_config = Config("alembic.ini")
    alembic_config.set_main_option("sqlalchemy.url", f"sqlite+pysqlite:///{db_path}")
    command.upgrade(alembic_config, "head")
    return f"sqlite+aiosqlite:///{db_path}"


def _payload(name: str, **overrides: object) -> ProductWriteInput:
    values: dict[str, object] = {
        "name": name,
        "category": "Fleurs",
        "price": "10€",
        "description": "",
        "media": None,
        "farm": "",
        "external_link": "",
        "button_text": "Ajouter au panier",
        "prices": [],
    }
    values.update(overrides)
    return ProductWriteInput(**values)  # type: ignore[arg-type]


@pytest.mark.asyncio
async def test_variants_keep_submission_order(tmp_path: Path) -> None:
    repository = SqlAlchemyProductRepository(
        create_session_factory(_upgrade_head(tmp_path, "product_variants.db"))
    )

    created = await repository.create_product(
        _payload(
            "Lemon Haze",
            prices=[
                PriceVariantInput(size="20g", price="120€"),
                PriceVariantInput(size="5g", price="40€"),
            ],
        )
    )
    replaced = await repository.update_product(
        product_id=created.id,
        payload=_payload("Lemon Haze", prices=[PriceVariantInput(size="1g", price="10€")]),
    )

    assert [item.size for item in created.prices] == ["20g", "5g"]
    assert replaced is not None
    assert [item.size for item in replaced.prices] == ["1g"]
    assert await repository.update_product(product_id=999, payload=_payload("x")) is None


@pytest.mark.asyncio
async def test_search_escapes_like_wildcards(tmp_path: Path) -> None:
    repository = SqlAlchemyProductRepository(
        create_session_factory(_upgrade_head(tmp_path, "product_search.db"))
    )
    await repository.create_product(_payload("100% Pure"))
    await repository.create_product(_payload("Plain"))

    percent = await repository.list_products(ProductFilter(search="%"))
    underscore = await repository.list_products(ProductFilter(search="_"))

    assert [item.name for item in percent] == ["100% Pure"]
    assert underscore == []
