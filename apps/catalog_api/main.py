"""catalog-api entrypoint and HTTP route wiring."""

from __future__ import annotations

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from datetime import timedelta

import uvicorn
from fastapi import FastAPI

from storefront_admin.application.ports.password_hasher_port import PasswordHasherPort
from storefront_admin.application.ports.site_content_repository_port import (
    ContactInfoWriteInput,
    DeliveryInfoWriteInput,
    SocialMediaWriteInput,
)
from storefront_admin.application.services.auth_service import AuthService
from storefront_admin.application.services.product_catalog_service import ProductCatalogService
from storefront_admin.application.services.site_content_service import SiteContentService
from storefront_admin.application.services.site_settings_service import SiteSettingsService
from storefront_admin.application.services.user_management_service import UserManagementService
from storefront_admin.config.settings import load_settings
from storefront_admin.infrastructure.db.admin_bootstrap import (
    AdminBootstrapConfig,
    AdminBootstrapConfigError,
    ensure_initial_admin_user,
    resolve_admin_bootstrap_config,
)
from storefront_admin.infrastructure.db.auth_event_repository import SqlAlchemyAuthEventRepository
from storefront_admin.infrastructure.db.auth_token_repository import SqlAlchemyAuthTokenRepository
from storefront_admin.infrastructure.db.product_repository import SqlAlchemyProductRepository
from storefront_admin.infrastructure.db.session import create_session_factory
from storefront_admin.infrastructure.db.site_content_repository import (
    SqlAlchemyContactInfoRepository,
    SqlAlchemyDeliveryInfoRepository,
    SqlAlchemySocialMediaRepository,
)
from storefront_admin.infrastructure.db.site_settings_repository import (
    SqlAlchemySiteSettingsRepository,
)
from storefront_admin.infrastructure.db.user_repository import SqlAlchemyUserRepository
from storefront_admin.infrastructure.http.auth_guard import AdminAuthGuard
from storefront_admin.infrastructure.http.auth_router import build_auth_router
from storefront_admin.infrastructure.http.product_router import build_product_router
from storefront_admin.infrastructure.http.site_content_router import build_site_content_router
from storefront_admin.infrastructure.http.site_settings_router import build_site_settings_router
from storefront_admin.infrastructure.http.user_router import build_user_router
from storefront_admin.infrastructure.logging import configure_logging
from storefront_admin.infrastructure.security.password_hasher import ScryptPasswordHasher
from storefront_admin.infrastructure.security.token_service import OpaqueTokenService

CATALOG_API_HOST = "0.0.0.0"
CATALOG_API_PORT = 8000
logger = logging.getLogger(__name__)


def create_app(
    *,
    database_url: str | None = None,
    token_service: OpaqueTokenService | None = None,
    password_hasher: PasswordHasherPort | None = None,
    admin_bootstrap: AdminBootstrapConfig | None = None,
) -> FastAPI:
    """Create FastAPI app for storefront reads and admin management routes.

    Settings are loaded only when `database_url` is not given; they also supply
    the token ttl, log level and optional first-admin bootstrap.
    """

    if database_url is None:
        settings = load_settings()
        configure_logging(level=settings.log_level)
        database_url = settings.database_url
        if token_service is None:
            token_service = OpaqueTokenService(
                token_ttl=timedelta(seconds=settings.auth_token_ttl_seconds)
            )
        if admin_bootstrap is None:
            try:
                admin_bootstrap = resolve_admin_bootstrap_config(
                    username=settings.bootstrap_admin_username,
                    password=settings.bootstrap_admin_password,
                    password_file=settings.bootstrap_admin_password_file,
                )
            except AdminBootstrapConfigError as exc:
                raise RuntimeError(f"invalid admin bootstrap configuration: {exc}") from exc

    if token_service is None:
        token_service = OpaqueTokenService()
    if password_hasher is None:
        password_hasher = ScryptPasswordHasher()

    session_factory = create_session_factory(database_url)
    user_repository = SqlAlchemyUserRepository(session_factory)
    auth_token_repository = SqlAlchemyAuthTokenRepository(session_factory)
    auth_guard = AdminAuthGuard(
        token_service=token_service,
        auth_token_repository=auth_token_repository,
        user_repository=user_repository,
    )
    bootstrap_config = admin_bootstrap
    bootstrap_hasher = password_hasher

    @asynccontextmanager
    async def lifespan(_: FastAPI) -> AsyncIterator[None]:
        if bootstrap_config is not None:
            result = await ensure_initial_admin_user(
                session_factory=session_factory,
                password_hasher=bootstrap_hasher,
                config=bootstrap_config,
            )
            logger.info(
                "admin_bootstrap outcome=%s username=%s",
                result.outcome.value,
                result.username,
            )
        yield

    app = FastAPI(lifespan=lifespan)
    app.include_router(
        build_auth_router(
            auth_service=AuthService(
                users=user_repository,
                auth_events=SqlAlchemyAuthEventRepository(session_factory),
                password_hasher=password_hasher,
            ),
            auth_token_repository=auth_token_repository,
            token_service=token_service,
            auth_guard=auth_guard,
        )
    )
    app.include_router(
        build_user_router(
            user_management_service=UserManagementService(
                users=user_repository,
                auth_tokens=auth_token_repository,
                password_hasher=password_hasher,
            ),
            auth_guard=auth_guard,
        )
    )
    app.include_router(
        build_product_router(
            catalog_service=ProductCatalogService(
                products=SqlAlchemyProductRepository(session_factory),
            ),
            auth_guard=auth_guard,
        )
    )
    app.include_router(
        build_site_content_router(
            social_media_service=SiteContentService(
                resource="Social media",
                repository=SqlAlchemySocialMediaRepository(session_factory),
                write_type=SocialMediaWriteInput,
            ),
            delivery_info_service=SiteContentService(
                resource="Delivery info",
                repository=SqlAlchemyDeliveryInfoRepository(session_factory),
                write_type=DeliveryInfoWriteInput,
            ),
            contact_info_service=SiteContentService(
                resource="Contact info",
                repository=SqlAlchemyContactInfoRepository(session_factory),
                write_type=ContactInfoWriteInput,
            ),
            auth_guard=auth_guard,
        )
    )
    app.include_router(
        build_site_settings_router(
            site_settings_service=SiteSettingsService(
                settings=SqlAlchemySiteSettingsRepository(session_factory),
            ),
            auth_guard=auth_guard,
        )
    )
    return app


def run_asgi_server(*, host: str = CATALOG_API_HOST, port: int = CATALOG_API_PORT) -> None:
    """Run catalog-api as a long-lived ASGI process using application factory mode."""

    uvicorn.run(
        "apps.catalog_api.main:create_app",
        host=host,
        port=port,
        factory=True,
    )


def main() -> None:
    """Run catalog-api runtime process."""

    run_asgi_server()


if __name__ == "__main__":
    main()
