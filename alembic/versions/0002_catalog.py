"""Product catalog with ordered per-size price variants."""

from __future__ import annotations

import sqlalchemy as sa

from alembic import op

revision = "0002_catalog"
down_revision = "0001_users_and_auth"
branch_labels = None
depends_on = None

sqlite_bigint = sa.BigInteger().with_variant(sa.Integer(), "sqlite")


def upgrade() -> None:
    op.create_table(
        "products",
        sa.Column("id", sqlite_bigint, primary_key=True, autoincrement=True),
        sa.Column("name", sa.Text(), nullable=False),
        sa.Column("category", sa.Text(), nullable=False),
        sa.Column("price", sa.Text(), nullable=False),
        sa.Column("description", sa.Text(), nullable=False),
        sa.Column("media", sa.Text(), nullable=True),
        sa.Column("farm", sa.Text(), nullable=False, server_default=sa.text("''")),
        sa.Column("external_link", sa.Text(), nullable=False, server_default=sa.text("''")),
        sa.Column(
            "button_text",
            sa.Text(),
            nullable=False,
            server_default=sa.text("'Ajouter au panier'"),
        ),
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            nullable=False,
            server_default=sa.text("CURRENT_TIMESTAMP"),
        ),
        sa.Column(
            "updated_at",
            sa.DateTime(timezone=True),
            nullable=False,
            server_default=sa.text("CURRENT_TIMESTAMP"),
        ),
    )
    op.create_index("ix_products_category", "products", ["category"], unique=False)
    op.create_index("ix_products_farm", "products", ["farm"], unique=False)

    op.create_table(
        "product_prices",
        sa.Column("id", sqlite_bigint, primary_key=True, autoincrement=True),
        sa.Column(
            "product_id",
            sqlite_bigint,
            sa.ForeignKey("products.id", ondelete="CASCADE"),
            nullable=False,
        ),
        sa.Column("position", sa.Integer(), nullable=False),
        sa.Column("size", sa.Text(), nullable=False),
        sa.Column("price", sa.Text(), nullable=False),
        sa.UniqueConstraint(
            "product_id",
            "position",
            name="uq_product_prices_product_position",
        ),
    )


def downgrade() -> None:
    op.drop_table("product_prices")
    op.drop_index("ix_products_farm", table_name="products")
    op.drop_index("ix_products_category", table_name="products")
    op.drop_table("products")
