"""Add storefront page texts, home texts and order bar settings."""

from __future__ import annotations

import sqlalchemy as sa

from alembic import op

revision = "0005_site_settings_page_texts"
down_revision = "0004_site_settings"
branch_labels = None
depends_on = None

_TEXT_COLUMNS: tuple[tuple[str, str], ...] = (
    ("info_page_description", "Découvrez notre sélection exclusive de produits premium"),
    ("canal_page_description", "Nos différents canaux de communication pour rester connecté"),
    ("order_bar_text", "Commander maintenant"),
    ("order_bar_link", ""),
    ("order_bar_color", "#ffffff"),
    ("order_bar_text_color", "#000000"),
    ("home_welcome_title", "Bienvenue"),
    ("home_welcome_text", "Explorez notre sélection de produits premium."),
    ("home_action_button_text", "Découvrir nos produits"),
)


def upgrade() -> None:
    """Add columns with server defaults so the existing row is backfilled."""

    op.add_column(
        "site_settings",
        sa.Column("order_bar_enabled", sa.Boolean(), nullable=False, server_default=sa.true()),
    )
    for name, default in _TEXT_COLUMNS:
        op.add_column(
            "site_settings",
            sa.Column(name, sa.Text(), nullable=False, server_default=sa.text(f"'{default}'")),
        )


def downgrade() -> None:
    with op.batch_alter_table("site_settings") as batch_op:
        for name, _ in reversed(_TEXT_COLUMNS):
            batch_op.drop_column(name)
        batch_op.drop_column("order_bar_enabled")
