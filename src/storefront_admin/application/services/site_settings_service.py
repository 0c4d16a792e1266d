"""Application service for the single-row storefront settings."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import fields, replace
from typing import Any

from storefront_admin.application.ports.site_settings_repository_port import (
    SiteSettingsRecord,
    SiteSettingsRepositoryPort,
)

logger = logging.getLogger(__name__)

UPLOADED_BACKGROUND_TYPES = frozenset({"image", "video", "gif"})
_SETTINGS_FIELDS = frozenset(item.name for item in fields(SiteSettingsRecord))


class InvalidSiteSettingsError(ValueError):
    """Raised when a settings change cannot be applied."""


class SiteSettingsService:
    """Read and merge storefront theme settings."""

    def __init__(self, *, settings: SiteSettingsRepositoryPort) -> None:
        self._settings = settings

    async def get_settings(self) -> SiteSettingsRecord:
        """Return persisted settings, or defaults before the first save."""

        persisted = await self._settings.get_settings()
        return persisted if persisted is not None else SiteSettingsRecord()

    async def update_settings(self, changes: Mapping[str, Any]) -> SiteSettingsRecord:
        """Merge provided fields onto current settings and upsert the row."""

        unknown = set(changes) - _SETTINGS_FIELDS
        if unknown:
            raise InvalidSiteSettingsError(f"unknown settings: {', '.join(sorted(unknown))}")

        current = await self.get_settings()
        saved = await self._settings.save_settings(replace(current, **changes))
        logger.info("site_settings_updated fields=%s", ",".join(sorted(changes)))
        return saved

    async def update_background(self, *, url: str, background_type: str) -> SiteSettingsRecord:
        """Point the custom background at an already-uploaded asset."""

        if background_type not in UPLOADED_BACKGROUND_TYPES:
            raise InvalidSiteSettingsError(f"unsupported background type: {background_type}")
        if not url.strip():
            raise InvalidSiteSettingsError("background url is required")
        return await self.update_settings(
            {"background_url": url.strip(), "background_type": background_type}
        )
