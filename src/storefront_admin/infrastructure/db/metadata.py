"""SQLAlchemy metadata definitions for storefront admin tables."""

from __future__ import annotations

from datetime import datetime

import sqlalchemy as sa

metadata = sa.MetaData()
sqlite_bigint = sa.BigInteger().with_variant(sa.Integer(), "sqlite")


def _timestamp_column(name: str) -> sa.Column[datetime]:
    return sa.Column(
        name,
        sa.DateTime(timezone=True),
        nullable=False,
        server_default=sa.text("CURRENT_TIMESTAMP"),
    )


users = sa.Table(
    "users",
    metadata,
    sa.Column("id", sqlite_bigint, primary_key=True, autoincrement=True),
    sa.Column("username", sa.Text(), nullable=False),
    sa.Column("password_hash", sa.Text(), nullable=False),
    _timestamp_column("created_at"),
    _timestamp_column("updated_at"),
    sa.UniqueConstraint("username", name="uq_users_username"),
)

auth_events = sa.Table(
    "auth_events",
    metadata,
    sa.Column("id", sqlite_bigint, primary_key=True, autoincrement=True),
    sa.Column(
        "user_id",
        sqlite_bigint,
        sa.ForeignKey("users.id", ondelete="SET NULL"),
        nullable=True,
    ),
    sa.Column("event_type", sa.Text(), nullable=False),
    sa.Column("ip_address", sa.Text(), nullable=True),
    sa.Column("user_agent", sa.Text(), nullable=True),
    sa.Column("payload", sa.JSON(), nullable=False, server_default=sa.text("'{}'")),
    _timestamp_column("occurred_at"),
)
sa.Index("ix_auth_events_user_id_occurred_at", auth_events.c.user_id, auth_events.c.occurred_at)
sa.Index(
    "ix_auth_events_event_type_occurred_at",
    auth_events.c.event_type,
    auth_events.c.occurred_at,
)

auth_tokens = sa.Table(
    "auth_tokens",
    metadata,
    sa.Column("id", sqlite_bigint, primary_key=True, autoincrement=True),
    sa.Column(
        "user_id",
        sqlite_bigint,
        sa.ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
    ),
    sa.Column("token_hash", sa.Text(), nullable=False),
    _timestamp_column("issued_at"),
    sa.Column("expires_at", sa.DateTime(timezone=True), nullable=False),
    sa.Column("revoked_at", sa.DateTime(timezone=True), nullable=True),
    sa.UniqueConstraint("token_hash", name="uq_auth_tokens_token_hash"),
)
sa.Index("ix_auth_tokens_user_id", auth_tokens.c.user_id)
sa.Index("ix_auth_tokens_expires_at", auth_tokens.c.expires_at)

products = sa.Table(
    "products",
    metadata,
    sa.Column("id", sqlite_bigint, primary_key=True, autoincrement=True),
    sa.Column("name", sa.Text(), nullable=False),
    sa.Column("category", sa.Text(), nullable=False),
    sa.Column("price", sa.Text(), nullable=False),
    sa.Column("description", sa.Text(), nullable=False),
    sa.Column("media", sa.Text(), nullable=True),
    sa.Column("farm", sa.Text(), nullable=False, server_default=""),
    sa.Column("external_link", sa.Text(), nullable=False, server_default=""),
    sa.Column(
        "button_text",
        sa.Text(),
        nullable=False,
        server_default="Ajouter au panier",
    ),
    _timestamp_column("created_at"),
    _timestamp_column("updated_at"),
)
sa.Index("ix_products_category", products.c.category)
sa.Index("ix_products_farm", products.c.farm)

product_prices = sa.Table(
    "product_prices",
    metadata,
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
    sa.UniqueConstraint("product_id", "position", name="uq_product_prices_product_position"),
)

social_media = sa.Table(
    "social_media",
    metadata,
    sa.Column("id", sqlite_bigint, primary_key=True, autoincrement=True),
    sa.Column("platform", sa.Text(), nullable=False),
    sa.Column("url", sa.Text(), nullable=False),
    sa.Column("icon", sa.Text(), nullable=False),
    sa.Column("display_order", sa.Integer(), nullable=False, server_default=sa.text("0")),
    sa.Column("is_active", sa.Boolean(), nullable=False, server_default=sa.true()),
    sa.Column("custom_name", sa.Text(), nullable=False, server_default=""),
    sa.Column("custom_logo", sa.Text(), nullable=False, server_default=""),
)
sa.Index("ix_social_media_display_order", social_media.c.display_order)

delivery_info = sa.Table(
    "delivery_info",
    metadata,
    sa.Column("id", sqlite_bigint, primary_key=True, autoincrement=True),
    sa.Column("title", sa.Text(), nullable=False),
    sa.Column("description", sa.Text(), nullable=False),
    sa.Column("type", sa.Text(), nullable=False),
    sa.Column("is_active", sa.Boolean(), nullable=False, server_default=sa.true()),
    sa.Column("custom_name", sa.Text(), nullable=False, server_default=""),
    sa.CheckConstraint(
        "type IN ('delivery', 'meetup', 'hours', 'notice')",
        name="ck_delivery_info_type",
    ),
)

contact_info = sa.Table(
    "contact_info",
    metadata,
    sa.Column("id", sqlite_bigint, primary_key=True, autoincrement=True),
    sa.Column("email", sa.Text(), nullable=False),
    sa.Column("phone", sa.Text(), nullable=False),
    sa.Column("address", sa.Text(), nullable=False),
    sa.Column("hours", sa.Text(), nullable=False),
    sa.Column("is_active", sa.Boolean(), nullable=False, server_default=sa.true()),
)

site_settings = sa.Table(
    "site_settings",
    metadata,
    sa.Column("id", sa.Integer(), primary_key=True, autoincrement=False),
    sa.Column("logo_url", sa.Text(), nullable=True),
    sa.Column("logo_size", sa.Text(), nullable=False, server_default="medium"),
    sa.Column("site_name", sa.Text(), nullable=False, server_default="Broly69"),
    sa.Column("category_font_size", sa.Text(), nullable=False, server_default="medium"),
    sa.Column("background_theme", sa.Text(), nullable=False, server_default="default"),
    sa.Column("primary_color", sa.Text(), nullable=False, server_default="#3b82f6"),
    sa.Column("secondary_color", sa.Text(), nullable=False, server_default="#1e40af"),
    sa.Column("accent_color", sa.Text(), nullable=False, server_default="#06b6d4"),
    sa.Column("text_style", sa.Text(), nullable=False, server_default="normal"),
    sa.Column("title_effect", sa.Text(), nullable=False, server_default="none"),
    sa.Column("animation_speed", sa.Integer(), nullable=False, server_default=sa.text("100")),
    sa.Column("dark_mode", sa.Boolean(), nullable=False, server_default=sa.true()),
    sa.Column("button_style", sa.Text(), nullable=False, server_default="default"),
    sa.Column("category_text_effect", sa.Text(), nullable=False, server_default="none"),
    sa.Column("product_title_effect", sa.Text(), nullable=False, server_default="none"),
    sa.Column("background_url", sa.Text(), nullable=True),
    sa.Column("background_type", sa.Text(), nullable=False, server_default="none"),
    sa.Column(
        "background_overlay",
        sa.Integer(),
        nullable=False,
        server_default=sa.text("50"),
    ),
    sa.Column("search_bar_enabled", sa.Boolean(), nullable=False, server_default=sa.true()),
    sa.Column("search_bar_position", sa.Text(), nullable=False, server_default="top"),
    sa.Column(
        "search_bar_placeholder",
        sa.Text(),
        nullable=False,
        server_default="Rechercher...",
    ),
    sa.Column("search_bar_style", sa.Text(), nullable=False, server_default="default"),
    sa.Column("search_bar_animation", sa.Text(), nullable=False, server_default="none"),
    sa.Column(
        "info_page_description",
        sa.Text(),
        nullable=False,
        server_default="Découvrez notre sélection exclusive de produits premium",
    ),
    sa.Column(
        "canal_page_description",
        sa.Text(),
        nullable=False,
        server_default="Nos différents canaux de communication pour rester connecté",
    ),
    sa.Column("order_bar_enabled", sa.Boolean(), nullable=False, server_default=sa.true()),
    sa.Column(
        "order_bar_text",
        sa.Text(),
        nullable=False,
        server_default="Commander maintenant",
    ),
    sa.Column("order_bar_link", sa.Text(), nullable=False, server_default=""),
    sa.Column("order_bar_color", sa.Text(), nullable=False, server_default="#ffffff"),
    sa.Column("order_bar_text_color", sa.Text(), nullable=False, server_default="#000000"),
    sa.Column("home_welcome_title", sa.Text(), nullable=False, server_default="Bienvenue"),
    sa.Column(
        "home_welcome_text",
        sa.Text(),
        nullable=False,
        server_default="Explorez notre sélection de produits premium.",
    ),
    sa.Column(
        "home_action_button_text",
        sa.Text(),
        nullable=False,
        server_default="Découvrir nos produits",
    ),
    _timestamp_column("updated_at"),
)
