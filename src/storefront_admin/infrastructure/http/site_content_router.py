"""FastAPI router for social media, delivery info and contact info blocks."""

from __future__ import annotations

from typing import Any

from fastapi import APIRouter, HTTPException, Request

from storefront_admin.application.dto.site_content_models import (
    ContactInfoCreateRequest,
    ContactInfoListResponse,
    ContactInfoResponse,
    ContactInfoUpdateRequest,
    DeliveryInfoCreateRequest,
    DeliveryInfoListResponse,
    DeliveryInfoResponse,
    DeliveryInfoUpdateRequest,
    SocialMediaCreateRequest,
    SocialMediaListResponse,
    SocialMediaResponse,
    SocialMediaUpdateRequest,
)
from storefront_admin.application.ports.site_content_repository_port import (
    ContactInfoRecord,
    ContactInfoWriteInput,
    DeliveryInfoRecord,
    DeliveryInfoWriteInput,
    SocialMediaRecord,
    SocialMediaWriteInput,
)
from storefront_admin.application.services.site_content_service import (
    ContentItemNotFoundError,
    SiteContentService,
)
from storefront_admin.infrastructure.http.auth_guard import AdminAuthGuard


def build_site_content_router(
    *,
    social_media_service: SiteContentService[SocialMediaRecord, SocialMediaWriteInput],
    delivery_info_service: SiteContentService[DeliveryInfoRecord, DeliveryInfoWriteInput],
    contact_info_service: SiteContentService[ContactInfoRecord, ContactInfoWriteInput],
    auth_guard: AdminAuthGuard,
) -> APIRouter:
    """Build router exposing public content reads and admin content edits."""

    router = APIRouter(tags=["site-content"])

    @router.get("/api/social-media", response_model=SocialMediaListResponse)
    async def list_social_media(active_only: bool = False) -> SocialMediaListResponse:
        items = await social_media_service.list_items(active_only=active_only)
        return SocialMediaListResponse(items=[_social_response(item) for item in items])

    @router.get("/api/social-media/{item_id}", response_model=SocialMediaResponse)
    async def get_social_media(item_id: int) -> SocialMediaResponse:
        item = await _call(social_media_service.get_item(item_id=item_id))
        return _social_response(item)

    @router.post("/api/social-media", response_model=SocialMediaResponse, status_code=201)
    async def create_social_media(
        payload: SocialMediaCreateRequest,
        request: Request,
    ) -> SocialMediaResponse:
        await auth_guard.require_admin_request(request)
        created = await social_media_service.create_item(
            SocialMediaWriteInput(**payload.model_dump())
        )
        return _social_response(created)

    @router.put("/api/social-media/{item_id}", response_model=SocialMediaResponse)
    async def update_social_media(
        item_id: int,
        payload: SocialMediaUpdateRequest,
        request: Request,
    ) -> SocialMediaResponse:
        await auth_guard.require_admin_request(request)
        updated = await _call(
            social_media_service.update_item(item_id=item_id, changes=_changes(payload))
        )
        return _social_response(updated)

    @router.delete("/api/social-media/{item_id}", response_model=SocialMediaResponse)
    async def delete_social_media(item_id: int, request: Request) -> SocialMediaResponse:
        await auth_guard.require_admin_request(request)
        deleted = await _call(social_media_service.delete_item(item_id=item_id))
        return _social_response(deleted)

    @router.get("/api/delivery-info", response_model=DeliveryInfoListResponse)
    async def list_delivery_info(active_only: bool = False) -> DeliveryInfoListResponse:
        items = await delivery_info_service.list_items(active_only=active_only)
        return DeliveryInfoListResponse(items=[_delivery_response(item) for item in items])

    @router.get("/api/delivery-info/{item_id}", response_model=DeliveryInfoResponse)
    async def get_delivery_info(item_id: int) -> DeliveryInfoResponse:
        item = await _call(delivery_info_service.get_item(item_id=item_id))
        return _delivery_response(item)

    @router.post("/api/delivery-info", response_model=DeliveryInfoResponse, status_code=201)
    async def create_delivery_info(
        payload: DeliveryInfoCreateRequest,
        request: Request,
    ) -> DeliveryInfoResponse:
        await auth_guard.require_admin_request(request)
        created = await delivery_info_service.create_item(
            DeliveryInfoWriteInput(**payload.model_dump())
        )
        return _delivery_response(created)

    @router.put("/api/delivery-info/{item_id}", response_model=DeliveryInfoResponse)
    async def update_delivery_info(
        item_id: int,
        payload: DeliveryInfoUpdateRequest,
        request: Request,
    ) -> DeliveryInfoResponse:
        await auth_guard.require_admin_request(request)
        updated = await _call(
            delivery_info_service.update_item(item_id=item_id, changes=_changes(payload))
        )
        return _delivery_response(updated)

    @router.delete("/api/delivery-info/{item_id}", response_model=DeliveryInfoResponse)
    async def delete_delivery_info(item_id: int, request: Request) -> DeliveryInfoResponse:
        await auth_guard.require_admin_request(request)
        deleted = await _call(delivery_info_service.delete_item(item_id=item_id))
        return _delivery_response(deleted)

    @router.get("/api/contact-info", response_model=ContactInfoListResponse)
    async def list_contact_info(active_only: bool = False) -> ContactInfoListResponse:
        items = await contact_info_service.list_items(active_only=active_only)
        return ContactInfoListResponse(items=[_contact_response(item) for item in items])

    @router.get("/api/contact-info/{item_id}", response_model=ContactInfoResponse)
    async def get_contact_info(item_id: int) -> ContactInfoResponse:
        item = await _call(contact_info_service.get_item(item_id=item_id))
        return _contact_response(item)

    @router.post("/api/contact-info", response_model=ContactInfoResponse, status_code=201)
    async def create_contact_info(
        payload: ContactInfoCreateRequest,
        request: Request,
    ) -> ContactInfoResponse:
        await auth_guard.require_admin_request(request)
        created = await contact_info_service.create_item(
            ContactInfoWriteInput(**payload.model_dump())
        )
        return _contact_response(created)

    @router.put("/api/contact-info/{item_id}", response_model=ContactInfoResponse)
    async def update_contact_info(
        item_id: int,
        payload: ContactInfoUpdateRequest,
        request: Request,
    ) -> ContactInfoResponse:
        await auth_guard.require_admin_request(request)
        updated = await _call(
            contact_info_service.update_item(item_id=item_id, changes=_changes(payload))
        )
        return _contact_response(updated)

    @router.delete("/api/contact-info/{item_id}", response_model=ContactInfoResponse)
    async def delete_contact_info(item_id: int, request: Request) -> ContactInfoResponse:
        await auth_guard.require_admin_request(request)
        deleted = await _call(contact_info_service.delete_item(item_id=item_id))
        return _contact_response(deleted)

    return router


async def _call(awaitable: Any) -> Any:
    """Await one service call, mapping missing content blocks to HTTP 404."""

    try:
        return await awaitable
    except ContentItemNotFoundError as exc:
        raise HTTPException(status_code=404, detail=str(exc)) from exc


def _changes(payload: Any) -> dict[str, Any]:
    # Explicit nulls on non-nullable columns are treated as omitted.
    return {
        key: value
        for key, value in payload.model_dump(exclude_unset=True).items()
        if value is not None
    }


def _social_response(item: SocialMediaRecord) -> SocialMediaResponse:
    return SocialMediaResponse(
        id=item.id,
        platform=item.platform,
        url=item.url,
        icon=item.icon,
        display_order=item.display_order,
        is_active=item.is_active,
        custom_name=item.custom_name,
        custom_logo=item.custom_logo,
    )


def _delivery_response(item: DeliveryInfoRecord) -> DeliveryInfoResponse:
    return DeliveryInfoResponse(
        id=item.id,
        title=item.title,
        description=item.description,
        type=item.type,
        is_active=item.is_active,
        custom_name=item.custom_name,
    )


def _contact_response(item: ContactInfoRecord) -> ContactInfoResponse:
    return ContactInfoResponse(
        id=item.id,
        email=item.email,
        phone=item.phone,
        address=item.address,
        hours=item.hours,
        is_active=item.is_active,
    )
