"""Session API routes (Login screen and logout)."""

from fastapi import APIRouter, Depends

from api.v1.dependencies import get_session_service
from api.v1.schemas.common import MessageResponse
from api.v1.schemas.user import LoginRequest, SessionResponse
from domain.services.forms import validate_login_form
from domain.services.session_service import SessionService

router = APIRouter(prefix="/session", tags=["session"])


@router.get("", response_model=SessionResponse, summary="Get the current session")
async def get_session(
    service: SessionService = Depends(get_session_service),
) -> SessionResponse:
    """Who is logged in, plus the loading and splash flags."""
    return SessionResponse.from_snapshot(service.snapshot())


@router.post(
    "/login",
    response_model=SessionResponse,
    summary="Log in",
    responses={
        400: {"description": "Form validation failed"},
        401: {"description": "Incorrect password"},
        404: {"description": "No user with this email"},
    },
)
async def login(
    body: LoginRequest,
    service: SessionService = Depends(get_session_service),
) -> SessionResponse:
    """Log in with email and password. The navigator switches to the app tabs."""
    validate_login_form(body.email, body.password)
    result = await service.login(body.email, body.password)
    result.unwrap()
    return SessionResponse.from_snapshot(service.snapshot())


@router.post("/logout", response_model=MessageResponse, summary="Log out")
async def logout(
    service: SessionService = Depends(get_session_service),
) -> MessageResponse:
    """Clear the session. Calling it while logged out is harmless."""
    result = await service.logout()
    result.unwrap()
    return MessageResponse(message="Session closed")
