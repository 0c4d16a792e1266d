"""Single-row storefront theme settings seeded with defaults."""

from __future__ import annotations

import sqlalchemy as sa

from alembic import op

revision = "0004_site_settings"
down_revision = "0003_site_content"
branch_labels = None
depends_on = None


def _text(name: str, default: str) -> sa.Column:
    return sa.Column(name, sa.Text(), nullable=False, server_default=sa.text(f"'{default}'"))


def _flag(name: str) -> sa.Column:
    return sa.Column(name, sa.Boolean(), nullable=False, server_default=sa.true())


def upgrade() -> None:
    """Create settings table and insert row 1 so reads never start empty."""

    op.create_table(
        "site_settings",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=False),
        sa.Column("logo_url", sa.Text(), nullable=True),
        _text("logo_size", "medium"),
        _text("site_name", "Broly69"),
        _text("category_font_size", "medium"),
        _text("background_theme", "default"),
        _text("primary_color", "#3b82f6"),
        _text("secondary_color", "#1e40af"),
        _text("accent_color", "#06b6d4"),
        _text("text_style", "normal"),
        _text("title_effect", "none"),
        sa.Column("animation_speed", sa.Integer(), nullable=False, server_default=sa.text("100")),
        _flag("dark_mode"),
        _text("button_style", "default"),
        _text("category_text_effect", "none"),
        _text("product_title_effect", "none"),
        sa.Column("background_url", sa.Text(), nullable=True),
        _text("background_type", "none"),
        sa.Column(
            "background_overlay",
            sa.Integer(),
            nullable=False,
            server_default=sa.text("50"),
        ),
        _flag("search_bar_enabled"),
        _text("search_bar_position", "top"),
        _text("search_bar_placeholder", "Rechercher..."),
        _text("search_bar_style", "default"),
        _text("search_bar_animation", "none"),
        sa.Column(
            "updated_at",
            sa.DateTime(timezone=True),
            nullable=False,
            server_default=sa.text("CURRENT_TIMESTAMP"),
        ),
    )
    op.execute(sa.text("INSERT INTO site_settings (id) VALUES (1)"))


def downgrade() -> None:
    op.drop_table("site_settings")
