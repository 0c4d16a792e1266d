"""Social media links, delivery info and contact info blocks."""

from __future__ import annotations

import sqlalchemy as sa

from alembic import op

revision = "0003_site_content"
down_revision = "0002_catalog"
branch_labels = None
depends_on = None

sqlite_bigint = sa.BigInteger().with_variant(sa.Integer(), "sqlite")


def upgrade() -> None:
    op.create_table(
        "social_media",
        sa.Column("id", sqlite_bigint, primary_key=True, autoincrement=True),
        sa.Column("platform", sa.Text(), nullable=False),
        sa.Column("url", sa.Text(), nullable=False),
        sa.Column("icon", sa.Text(), nullable=False),
        sa.Column("display_order", sa.Integer(), nullable=False, server_default=sa.text("0")),
        sa.Column("is_active", sa.Boolean(), nullable=False, server_default=sa.true()),
        sa.Column("custom_name", sa.Text(), nullable=False, server_default=sa.text("''")),
        sa.Column("custom_logo", sa.Text(), nullable=False, server_default=sa.text("''")),
    )
    op.create_index(
        "ix_social_media_display_order",
        "social_media",
        ["display_order"],
        unique=False,
    )

    op.create_table(
        "delivery_info",
        sa.Column("id", sqlite_bigint, primary_key=True, autoincrement=True),
        sa.Column("title", sa.Text(), nullable=False),
        sa.Column("description", sa.Text(), nullable=False),
        sa.Column("type", sa.Text(), nullable=False),
        sa.Column("is_active", sa.Boolean(), nullable=False, server_default=sa.true()),
        sa.Column("custom_name", sa.Text(), nullable=False, server_default=sa.text("''")),
        sa.CheckConstraint(
            "type IN ('delivery', 'meetup', 'hours', 'notice')",
            name="ck_delivery_info_type",
        ),
    )

    op.create_table(
        "contact_info",
        sa.Column("id", sqlite_bigint, primary_key=True, autoincrement=True),
        sa.Column("email", sa.Text(), nullable=False),
        sa.Column("phone", sa.Text(), nullable=False),
        sa.Column("address", sa.Text(), nullable=False),
        sa.Column("hours", sa.Text(), nullable=False),
        sa.Column("is_active", sa.Boolean(), nullable=False, server_default=sa.true()),
    )


def downgrade() -> None:
    op.drop_table("contact_info")
    op.drop_table("delivery_info")
    op.drop_index("ix_social_media_display_order", table_name="social_media")
    op.drop_table("social_media")
