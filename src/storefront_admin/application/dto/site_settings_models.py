"""Pydantic models for storefront theme settings endpoints."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from storefront_admin.domain.site.theme_options import (
    HEX_COLOR_PATTERN,
    MAX_ANIMATION_SPEED,
    MIN_ANIMATION_SPEED,
    BackgroundTheme,
    BackgroundType,
    ButtonStyle,
    CategoryTextEffect,
    SearchBarAnimation,
    SearchBarPosition,
    SearchBarStyle,
    SizeOption,
    TextStyle,
    TitleEffect,
    UploadedBackgroundType,
)


class StrictModel(BaseModel):
    """Base model with strict unknown-field rejection."""

    model_config = ConfigDict(extra="forbid")


class SiteSettingsResponse(StrictModel):
    """Full storefront settings snapshot."""

    logo_url: str | None
    logo_size: SizeOption
    site_name: str
    category_font_size: SizeOption
    background_theme: BackgroundTheme
    primary_color: str
    secondary_color: str
    accent_color: str
    text_style: TextStyle
    title_effect: TitleEffect
    animation_speed: int
    dark_mode: bool
    button_style: ButtonStyle
    category_text_effect: CategoryTextEffect
    product_title_effect: TitleEffect
    background_url: str | None
    background_type: BackgroundType
    background_overlay: int
    search_bar_enabled: bool
    search_bar_position: SearchBarPosition
    search_bar_placeholder: str
    search_bar_style: SearchBarStyle
    search_bar_animation: SearchBarAnimation
    info_page_description: str
    canal_page_description: str
    order_bar_enabled: bool
    order_bar_text: str
    order_bar_link: str
    order_bar_color: str
    order_bar_text_color: str
    home_welcome_title: str
    home_welcome_text: str
    home_action_button_text: str


class SiteSettingsUpdateRequest(StrictModel):
    """Partial settings update; only provided fields are merged."""

    logo_url: str | None = None
    logo_size: SizeOption | None = None
    site_name: str | None = Field(default=None, min_length=1)
    category_font_size: SizeOption | None = None
    background_theme: BackgroundTheme | None = None
    primary_color: str | None = Field(default=None, pattern=HEX_COLOR_PATTERN)
    secondary_color: str | None = Field(default=None, pattern=HEX_COLOR_PATTERN)
    accent_color: str | None = Field(default=None, pattern=HEX_COLOR_PATTERN)
    text_style: TextStyle | None = None
    title_effect: TitleEffect | None = None
    animation_speed: int | None = Field(
        default=None,
        ge=MIN_ANIMATION_SPEED,
        le=MAX_ANIMATION_SPEED,
    )
    dark_mode: bool | None = None
    button_style: ButtonStyle | None = None
    category_text_effect: CategoryTextEffect | None = None
    product_title_effect: TitleEffect | None = None
    background_url: str | None = None
    background_type: BackgroundType | None = None
    background_overlay: int | None = Field(default=None, ge=0, le=100)
    search_bar_enabled: bool | None = None
    search_bar_position: SearchBarPosition | None = None
    search_bar_placeholder: str | None = None
    search_bar_style: SearchBarStyle | None = None
    search_bar_animation: SearchBarAnimation | None = None
    info_page_description: str | None = None
    canal_page_description: str | None = None
    order_bar_enabled: bool | None = None
    order_bar_text: str | None = None
    order_bar_link: str | None = None
    order_bar_color: str | None = Field(default=None, pattern=HEX_COLOR_PATTERN)
    order_bar_text_color: str | None = Field(default=None, pattern=HEX_COLOR_PATTERN)
    home_welcome_title: str | None = None
    home_welcome_text: str | None = None
    home_action_button_text: str | None = None


class BackgroundUpdateRequest(StrictModel):
    """Custom background already uploaded elsewhere, referenced by URL."""

    url: str = Field(min_length=1)
    type: UploadedBackgroundType
