"""Navigator route."""

from fastapi import APIRouter, Depends

from api.v1.dependencies import get_session_service
from api.v1.schemas.navigation import NavigationResponse
from domain.services.navigation import layout_for
from domain.services.session_service import SessionService

router = APIRouter(prefix="/navigation", tags=["navigation"])


@router.get("", response_model=NavigationResponse, summary="Current screen tree")
async def get_navigation(
    service: SessionService = Depends(get_session_service),
) -> NavigationResponse:
    """Splash, auth stack or app tabs, depending on the session."""
    return NavigationResponse.from_layout(layout_for(service.snapshot()))
