"""Port for the single-row storefront theme/settings store."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol

SITE_SETTINGS_ROW_ID = 1


@dataclass(frozen=True)
class SiteSettingsRecord:
    """Storefront theme and page-text settings; defaults apply before first save."""

    logo_url: str | None = None
    logo_size: str = "medium"
    site_name: str = "Broly69"
    category_font_size: str = "medium"
    background_theme: str = "default"
    primary_color: str = "#3b82f6"
    secondary_color: str = "#1e40af"
    accent_color: str = "#06b6d4"
    text_style: str = "normal"
    title_effect: str = "none"
    animation_speed: int = 100
    dark_mode: bool = True
    button_style: str = "default"
    category_text_effect: str = "none"
    product_title_effect: str = "none"
    background_url: str | None = None
    background_type: str = "none"
    background_overlay: int = 50
    search_bar_enabled: bool = True
    search_bar_position: str = "top"
    search_bar_placeholder: str = "Rechercher..."
    search_bar_style: str = "default"
    search_bar_animation: str = "none"
    info_page_description: str = "Découvrez notre sélection exclusive de produits premium"
    canal_page_description: str = "Nos différents canaux de communication pour rester connecté"
    order_bar_enabled: bool = True
    order_bar_text: str = "Commander maintenant"
    order_bar_link: str = ""
    order_bar_color: str = "#ffffff"
    order_bar_text_color: str = "#000000"
    home_welcome_title: str = "Bienvenue"
    home_welcome_text: str = "Explorez notre sélection de produits premium."
    home_action_button_text: str = "Découvrir nos produits"


class SiteSettingsRepositoryPort(Protocol):
    """Site settings repository contract."""

    async def get_settings(self) -> SiteSettingsRecord | None:
        """Return the persisted settings row, or None before the first save."""

    async def save_settings(self, settings: SiteSettingsRecord) -> SiteSettingsRecord:
        """Insert or overwrite the single settings row."""
