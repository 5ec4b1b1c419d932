"""FastAPI application entry point.

Run with: uvicorn src.main:app --reload --port 3001
"""

# ruff: noqa: E402  -- uvloop.install() must run before other imports

import uvloop

uvloop.install()

import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from config.settings import settings
from src.lp_common.database import dispose_engine
from src.lp_common.errors import AppError
from src.lp_common.response import error_response
from src.lp_dashboard.api.router import router as dashboard_router
from src.lp_gateway.middleware.request_log import RequestLogMiddleware
from src.lp_pool.api.router import router as pool_router
from src.lp_token.api.router import router as token_router
from src.services import Services, build_services

logger = logging.getLogger(__name__)


def configure_logging(level: str) -> None:
    logging.basicConfig(
        level=level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Startup: load pools + tokens from the store. Shutdown: dispose DB engine."""
    services: Services = app.state.services
    await services.pool_store.refresh()
    await services.token_service.refresh()
    logger.info("Store loaded (backend=%s)", settings.STORE_BACKEND)
    yield
    await dispose_engine()


async def app_error_handler(request: Request, exc: AppError) -> JSONResponse:
    resp = error_response(exc, getattr(request.state, "request_id", None))
    if exc.http_status >= 500:
        logger.error("%s failed: [%d] %s", request.url.path, exc.code, exc.message)
    else:
        logger.warning("%s rejected: [%d] %s", request.url.path, exc.code, exc.message)
    return JSONResponse(
        status_code=exc.http_status,
        content=resp.model_dump(),
    )


def create_app(services: Services | None = None) -> FastAPI:
    app = FastAPI(
        title=settings.APP_NAME,
        version="0.1.0",
        lifespan=lifespan,
    )
    app.state.services = services or build_services(settings)
    app.add_middleware(RequestLogMiddleware)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_methods=["*"],
        allow_headers=["*"],
        expose_headers=["x-request-id"],
    )
    app.add_exception_handler(AppError, app_error_handler)  # type: ignore[arg-type]

    app.include_router(token_router, prefix="/api")
    app.include_router(pool_router, prefix="/api")
    app.include_router(dashboard_router, prefix="/api")

    @app.get("/health")
    async def health() -> dict[str, str]:
        return {"status": "ok", "version": "0.1.0"}

    return app


configure_logging(settings.LOG_LEVEL)
app = create_app()
