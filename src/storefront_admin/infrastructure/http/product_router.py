"""FastAPI router for storefront catalog and admin product endpoints."""

from __future__ import annotations

from fastapi import APIRouter, HTTPException, Request

from storefront_admin.application.dto.catalog_models import (
    CategoryChangeResponse,
    CategoryRenameRequest,
    FacetsResponse,
    PriceVariantModel,
    PriceVariantResponse,
    ProductCreateRequest,
    ProductListResponse,
    ProductResponse,
    ProductUpdateRequest,
)
from storefront_admin.application.ports.product_repository_port import (
    PriceVariantInput,
    ProductRecord,
    ProductWriteInput,
)
from storefront_admin.application.services.product_catalog_service import (
    InvalidCategoryError,
    InvalidProductError,
    ProductCatalogService,
    ProductListQuery,
    ProductNotFoundError,
)
from storefront_admin.domain.catalog.media import classify_media
from storefront_admin.infrastructure.http.auth_guard import AdminAuthGuard


def build_product_router(
    *,
    catalog_service: ProductCatalogService,
    auth_guard: AdminAuthGuard,
) -> APIRouter:
    """Build router exposing public catalog reads and admin catalog edits."""

    router = APIRouter(tags=["catalog"])

    @router.get("/api/products", response_model=ProductListResponse)
    async def list_products(
        category: str | None = None,
        farm: str | None = None,
        search: str | None = None,
    ) -> ProductListResponse:
        products = await catalog_service.list_products(
            ProductListQuery(category=category, farm=farm, search=search)
        )
        return ProductListResponse(items=[_to_response(product) for product in products])

    @router.get("/api/catalog/facets", response_model=FacetsResponse)
    async def list_facets() -> FacetsResponse:
        facets = await catalog_service.list_facets()
        return FacetsResponse(categories=facets.categories, farms=facets.farms)

    @router.get("/api/products/{product_id}", response_model=ProductResponse)
    async def get_product(product_id: int) -> ProductResponse:
        try:
            product = await catalog_service.get_product(product_id=product_id)
        except ProductNotFoundError as exc:
            raise HTTPException(status_code=404, detail=str(exc)) from exc
        return _to_response(product)

    @router.post("/api/products", response_model=ProductResponse, status_code=201)
    async def create_product(payload: ProductCreateRequest, request: Request) -> ProductResponse:
        await auth_guard.require_admin_request(request)
        try:
            created = await catalog_service.create_product(
                ProductWriteInput(
                    name=payload.name,
                    category=payload.category,
                    price=payload.price,
                    description=payload.description,
                    media=payload.media,
                    farm=payload.farm,
                    external_link=payload.external_link,
                    button_text=payload.button_text,
                    prices=_to_variant_inputs(payload.prices),
                )
            )
        except InvalidProductError as exc:
            raise HTTPException(status_code=422, detail=str(exc)) from exc
        return _to_response(created)

    @router.put("/api/products/{product_id}", response_model=ProductResponse)
    async def update_product(
        product_id: int,
        payload: ProductUpdateRequest,
        request: Request,
    ) -> ProductResponse:
        await auth_guard.require_admin_request(request)
        changes = {
            key: value
            for key, value in payload.model_dump(exclude_unset=True, exclude={"prices"}).items()
            if value is not None or key == "media"
        }
        if payload.prices is not None:
            changes["prices"] = _to_variant_inputs(payload.prices)
        try:
            updated = await catalog_service.update_product(product_id=product_id, changes=changes)
        except ProductNotFoundError as exc:
            raise HTTPException(status_code=404, detail=str(exc)) from exc
        except InvalidProductError as exc:
            raise HTTPException(status_code=422, detail=str(exc)) from exc
        return _to_response(updated)

    @router.delete("/api/products/{product_id}", response_model=ProductResponse)
    async def delete_product(product_id: int, request: Request) -> ProductResponse:
        await auth_guard.require_admin_request(request)
        try:
            deleted = await catalog_service.delete_product(product_id=product_id)
        except ProductNotFoundError as exc:
            raise HTTPException(status_code=404, detail=str(exc)) from exc
        return _to_response(deleted)

    @router.put("/api/categories/{name}", response_model=CategoryChangeResponse)
    async def rename_category(
        name: str,
        payload: CategoryRenameRequest,
        request: Request,
    ) -> CategoryChangeResponse:
        await auth_guard.require_admin_request(request)
        try:
            updated = await catalog_service.rename_category(old_name=name, new_name=payload.name)
        except InvalidCategoryError as exc:
            raise HTTPException(status_code=422, detail=str(exc)) from exc
        return CategoryChangeResponse(updated=updated)

    @router.delete("/api/categories/{name}", response_model=CategoryChangeResponse)
    async def delete_category(name: str, request: Request) -> CategoryChangeResponse:
        await auth_guard.require_admin_request(request)
        updated = await catalog_service.delete_category(name=name)
        return CategoryChangeResponse(updated=updated)

    return router


def _to_variant_inputs(prices: list[PriceVariantModel]) -> list[PriceVariantInput]:
    return [PriceVariantInput(size=item.size, price=item.price) for item in prices]


def _to_response(product: ProductRecord) -> ProductResponse:
    return ProductResponse(
        id=product.id,
        name=product.name,
        category=product.category,
        price=product.price,
        description=product.description,
        media=product.media,
        media_kind=classify_media(product.media),
        farm=product.farm,
        external_link=product.external_link,
        button_text=product.button_text,
        prices=[
            PriceVariantResponse(id=item.id, size=item.size, price=item.price)
            for item in product.prices
        ],
    )
