"""Profile routes (Home and Edit Profile screens)."""

from fastapi import APIRouter, Depends, Request

from api.v1.dependencies import get_session_service
from api.v1.schemas.user import (
    ProfileDetailResponse,
    ProfileImageResponse,
    ProfileUpdate,
    UserResponse,
)
from core.exceptions import NoActiveSessionError
from domain.entities.user import ImagePayload, UserRecord
from domain.services.forms import changed_fields, validate_profile_form
from domain.services.session_service import SessionService

router = APIRouter(prefix="/profile", tags=["profile"])


def _current_user(service: SessionService) -> UserRecord:
    if service.user is None:
        raise NoActiveSessionError()
    return service.user


@router.get(
    "",
    response_model=ProfileDetailResponse,
    summary="Get the logged-in profile",
    responses={401: {"description": "Nobody is logged in"}},
)
async def get_profile(
    service: SessionService = Depends(get_session_service),
) -> ProfileDetailResponse:
    """Profile shown on the Home screen, with the specialty label resolved."""
    return ProfileDetailResponse(data=UserResponse.from_record(_current_user(service)))


@router.patch(
    "",
    response_model=ProfileDetailResponse,
    summary="Update the profile",
    responses={
        400: {"description": "Form validation failed or nothing changed"},
        401: {"description": "Nobody is logged in"},
        502: {"description": "The profile could not be saved"},
    },
)
async def update_profile(
    body: ProfileUpdate,
    service: SessionService = Depends(get_session_service),
) -> ProfileDetailResponse:
    """Save the edit form. Only fields that differ from the profile are written."""
    patch = validate_profile_form(
        name=body.name,
        email=body.email,
        age=body.age,
        specialty=body.specialty,
    )
    patch = changed_fields(_current_user(service), patch)
    result = await service.update_profile(patch)
    user = result.unwrap()
    return ProfileDetailResponse(
        data=UserResponse.from_record(user),
        message="Your details have been updated",
    )


@router.put(
    "/image",
    response_model=ProfileImageResponse,
    summary="Upload a profile photo",
    responses={
        400: {"description": "Empty body"},
        401: {"description": "Nobody is logged in"},
        502: {"description": "The upload failed"},
    },
)
async def upload_profile_image(
    request: Request,
    service: SessionService = Depends(get_session_service),
) -> ProfileImageResponse:
    """Upload the raw image body picked on the device and link it to the profile."""
    image = ImagePayload(
        data=await request.body(),
        content_type=request.headers.get("content-type", "application/octet-stream"),
        source_uri=request.headers.get("x-source-uri"),
    )
    result = await service.upload_profile_image(image)
    return ProfileImageResponse(image_url=str(result.unwrap()))
