"""User registration routes (Register screen)."""

from fastapi import APIRouter, Depends, status

from api.v1.dependencies import get_session_service
from api.v1.schemas.user import (
    RegisteredUser,
    RegisterRequest,
    RegisterResponse,
    SpecialtyListResponse,
    SpecialtyOption,
)
from domain.entities.user import Specialty
from domain.services.forms import validate_registration_form
from domain.services.session_service import SessionService

router = APIRouter(prefix="/users", tags=["users"])
specialties_router = APIRouter(prefix="/specialties", tags=["users"])


@router.post(
    "",
    response_model=RegisterResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Register a user",
    responses={
        201: {"description": "Account created"},
        400: {"description": "Form validation failed"},
        409: {"description": "An account with this email already exists"},
    },
)
async def register(
    body: RegisterRequest,
    service: SessionService = Depends(get_session_service),
) -> RegisterResponse:
    """Create an account. The new user still has to log in afterwards."""
    draft = validate_registration_form(
        name=body.name,
        email=body.email,
        password=body.password,
        confirm_password=body.confirm_password,
        age=body.age,
        specialty=body.specialty,
    )
    result = await service.register(draft)
    new_id = result.unwrap()
    return RegisterResponse(data=RegisteredUser(id=str(new_id)))


@specialties_router.get(
    "",
    response_model=SpecialtyListResponse,
    summary="List specialties",
)
async def list_specialties() -> SpecialtyListResponse:
    """Options for the specialty picker."""
    return SpecialtyListResponse(
        data=[SpecialtyOption(value=s.value, label=s.label) for s in Specialty]
    )
