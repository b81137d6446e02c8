"""Main FastAPI application entry point."""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

import structlog
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.middleware.gzip import GZipMiddleware
from fastapi.responses import ORJSONResponse

from api.exception_handlers import setup_exception_handlers
from api.middleware.request_context import RequestContextMiddleware
from api.routes.health import router as health_router
from api.v1 import router as v1_router
from api.v1.dependencies import get_engine, get_http_client, get_session_service
from core.config import settings
from core.logging import setup_logging

logger = structlog.get_logger()

# Initialize structured logging
setup_logging()


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Start the session (splash timer) and release backend handles on shutdown."""
    service = app.dependency_overrides.get(get_session_service, get_session_service)()
    service.start()
    logger.info("session_started", splash_delay_seconds=service.splash_delay)
    yield
    await service.close()
    await get_http_client().aclose()
    await get_engine().dispose()
    logger.info("session_closed")


def create_app() -> FastAPI:
    """Create and configure the FastAPI application."""
    app = FastAPI(
        lifespan=lifespan,
        default_response_class=ORJSONResponse,
        title=settings.app_name,
        description=(
            "## Profile Hub\n\n"
            "Headless app shell for account registration, login and profile "
            "management. Each running instance holds one session; the client "
            "renders whatever screen tree `/api/v1/navigation` reports.\n\n"
            "### Screens\n"
            "- **Splash**: shown for a fixed delay after start\n"
            "- **Login / Register**: shown while nobody is logged in\n"
            "- **Home / Profile**: shown for the logged-in user\n\n"
            "### Errors\n"
            "Failed actions return a notification payload with "
            "`error_code`, `title`, `message` and `details`."
        ),
        version="1.0.0",
        debug=settings.debug,
        openapi_tags=[
            {"name": "health", "description": "Health check endpoints"},
            {"name": "navigation", "description": "Screen tree for the current session"},
            {"name": "session", "description": "Login, logout and session state"},
            {"name": "users", "description": "Account registration"},
            {"name": "profile", "description": "Profile view, edit and photo upload"},
        ],
    )

    # Tracking middleware (LIFO order - last added = outermost)
    app.add_middleware(RequestContextMiddleware)

    # GZip compression for responses > 1KB
    app.add_middleware(GZipMiddleware, minimum_size=1000)

    # Configure CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins_list,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Setup exception handlers
    setup_exception_handlers(app)

    # Include routers
    app.include_router(health_router)
    app.include_router(v1_router, prefix="/api/v1")

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "main:app",
        host=settings.host,
        port=settings.port,
        reload=not settings.is_production,
    )
