"""
tenant_gateway.api.app

FastAPI app factory for the Tenant Auth Gateway.

Responsibilities:
- Build the FastAPI application and register routers/middleware/error handlers.
- Own the shared provider HTTP client (open on startup, close on shutdown).
- Provide a single composition root where cross-cutting concerns live.
"""

from __future__ import annotations

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

import httpx
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.status import HTTP_400_BAD_REQUEST

from tenant_gateway import __version__
from tenant_gateway.api.routers.auth import router as auth_router
from tenant_gateway.api.routers.health import router as health_router
from tenant_gateway.errors import GatewayError
from tenant_gateway.observability.logging import configure_logging, get_logger
from tenant_gateway.observability.middleware import RequestContextMiddleware
from tenant_gateway.provider.base import TenantProvider
from tenant_gateway.provider.turnkey import TurnkeyClient
from tenant_gateway.services.tenant_auth_service import TenantAuthGateway
from tenant_gateway.settings import Settings

log = get_logger(__name__)


def create_app(*, settings: Settings, provider: TenantProvider | None = None) -> FastAPI:
    configure_logging(service_name=settings.service_name, level=settings.log_level)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        log.info(
            "startup",
            env=settings.env,
            api_base_url=settings.api_base_url,
            parent_org_id=settings.parent_org_id,
        )
        http: httpx.AsyncClient | None = None
        if provider is None:
            # One pooled client for all provider calls; closed on shutdown.
            http = httpx.AsyncClient(base_url=settings.api_base_url.rstrip("/"))
            app.state.gateway = TenantAuthGateway(
                provider=TurnkeyClient(settings=settings, http=http),
                parent_org_id=settings.parent_org_id,
            )
        try:
            yield
        finally:
            if http is not None:
                await http.aclose()
            log.info("shutdown")

    app = FastAPI(
        title="Tenant Auth Gateway",
        version=__version__,
        docs_url="/docs",
        openapi_url="/openapi.json",
        lifespan=lifespan,
    )
    if provider is not None:
        app.state.gateway = TenantAuthGateway(
            provider=provider,
            parent_org_id=settings.parent_org_id,
        )

    app.add_middleware(RequestContextMiddleware)
    app.include_router(health_router, tags=["health"])
    app.include_router(auth_router)

    @app.exception_handler(GatewayError)
    async def _gateway_error(_: Request, exc: GatewayError) -> JSONResponse:
        return JSONResponse(status_code=exc.status_code, content=exc.to_body())

    @app.exception_handler(RequestValidationError)
    async def _malformed_body(_: Request, exc: RequestValidationError) -> JSONResponse:
        log.warning("malformed_request_body", errors=len(exc.errors()))
        return JSONResponse(
            status_code=HTTP_400_BAD_REQUEST,
            content={"error": "Invalid request body."},
        )

    return app


# --- Module Notes -----------------------------------------------------------
# App composition stays here; request validation and provider sequencing live in
# `services.tenant_auth_service`.
