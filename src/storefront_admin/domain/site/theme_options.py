"""Allowed values for storefront theme settings."""

from __future__ import annotations

from typing import Literal

HEX_COLOR_PATTERN = r"^#[0-9a-fA-F]{6}$"
MIN_ANIMATION_SPEED = 10
MAX_ANIMATION_SPEED = 500

SizeOption = Literal["small", "medium", "large"]
BackgroundTheme = Literal["default", "blue", "green", "purple", "red"]
TextStyle = Literal["normal", "bold", "italic", "light"]
TitleEffect = Literal["none", "glow", "shadow", "gradient"]
ButtonStyle = Literal["default", "rounded", "pill", "gradient"]
CategoryTextEffect = Literal["none", "glow", "shadow", "uppercase"]
BackgroundType = Literal["none", "image", "video", "gif"]
UploadedBackgroundType = Literal["image", "video", "gif"]
SearchBarPosition = Literal["top", "floating"]
SearchBarStyle = Literal["default", "rounded", "minimal"]
SearchBarAnimation = Literal["none", "fade", "slide"]
