"""Health check endpoints."""

from datetime import datetime, timezone

from fastapi import APIRouter, Depends
from pydantic import BaseModel

from api.v1.dependencies import get_document_store, get_session_service
from core.config import settings
from core.exceptions import BackendError
from domain.repositories.document_store import IDocumentStore
from domain.services.session_service import SessionService

router = APIRouter(tags=["health"])

VERSION = "1.0.0"


class HealthResponse(BaseModel):
    """Health check response."""

    status: str
    version: str
    timestamp: str
    environment: str
    document_store: str | None = None
    splash_done: bool | None = None


@router.get("/health", response_model=HealthResponse, summary="Basic health check")
async def health_check() -> HealthResponse:
    """
    Basic liveness check.

    Returns service status without touching the backend.
    """
    return HealthResponse(
        status="healthy",
        version=VERSION,
        timestamp=datetime.now(timezone.utc).isoformat(),
        environment=settings.app_env,
    )


@router.get(
    "/health/detailed",
    response_model=HealthResponse,
    summary="Detailed health check",
)
async def detailed_health_check(
    documents: IDocumentStore = Depends(get_document_store),
    service: SessionService = Depends(get_session_service),
) -> HealthResponse:
    """
    Health check including document store connectivity.

    Reports ``degraded`` when the store cannot be reached.
    """
    try:
        await documents.ping()
        store_status = "healthy"
    except BackendError as e:
        store_status = f"unhealthy: {e.message}"

    return HealthResponse(
        status="healthy" if store_status == "healthy" else "degraded",
        version=VERSION,
        timestamp=datetime.now(timezone.utc).isoformat(),
        environment=settings.app_env,
        document_store=store_status,
        splash_done=not service.show_splash,
    )
