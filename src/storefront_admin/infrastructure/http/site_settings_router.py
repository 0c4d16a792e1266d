"""FastAPI router for storefront theme settings."""

from __future__ import annotations

from dataclasses import asdict

from fastapi import APIRouter, HTTPException, Request

from storefront_admin.application.dto.site_settings_models import (
    BackgroundUpdateRequest,
    SiteSettingsResponse,
    SiteSettingsUpdateRequest,
)
from storefront_admin.application.ports.site_settings_repository_port import SiteSettingsRecord
from storefront_admin.application.services.site_settings_service import (
    InvalidSiteSettingsError,
    SiteSettingsService,
)
from storefront_admin.infrastructure.http.auth_guard import AdminAuthGuard

_NULLABLE_SETTINGS = frozenset({"logo_url", "background_url"})


def build_site_settings_router(
    *,
    site_settings_service: SiteSettingsService,
    auth_guard: AdminAuthGuard,
) -> APIRouter:
    """Build router exposing public settings reads and admin settings updates."""

    router = APIRouter(tags=["site-settings"])

    @router.get("/api/site-settings", response_model=SiteSettingsResponse)
    async def get_site_settings() -> SiteSettingsResponse:
        return _to_response(await site_settings_service.get_settings())

    @router.put("/api/site-settings", response_model=SiteSettingsResponse)
    async def update_site_settings(
        payload: SiteSettingsUpdateRequest,
        request: Request,
    ) -> SiteSettingsResponse:
        await auth_guard.require_admin_request(request)
        changes = {
            key: value
            for key, value in payload.model_dump(exclude_unset=True).items()
            if value is not None or key in _NULLABLE_SETTINGS
        }
        try:
            updated = await site_settings_service.update_settings(changes)
        except InvalidSiteSettingsError as exc:
            raise HTTPException(status_code=422, detail=str(exc)) from exc
        return _to_response(updated)

    @router.put("/api/site-settings/background", response_model=SiteSettingsResponse)
    async def update_background(
        payload: BackgroundUpdateRequest,
        request: Request,
    ) -> SiteSettingsResponse:
        await auth_guard.require_admin_request(request)
        try:
            updated = await site_settings_service.update_background(
                url=payload.url,
                background_type=payload.type,
            )
        except InvalidSiteSettingsError as exc:
            raise HTTPException(status_code=422, detail=str(exc)) from exc
        return _to_response(updated)

    return router


def _to_response(settings: SiteSettingsRecord) -> SiteSettingsResponse:
    return SiteSettingsResponse.model_validate(asdict(settings))
