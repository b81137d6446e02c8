"""Pydantic schemas for users, sessions and profiles."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from domain.entities.session import SessionSnapshot
from domain.entities.user import UserRecord


class LoginRequest(BaseModel):
    """Login screen form."""

    email: str = ""
    password: str = ""


class RegisterRequest(BaseModel):
    """Registration screen form. Fields arrive as typed by the user."""

    name: str = ""
    email: str = ""
    password: str = ""
    confirm_password: str = ""
    age: int | str = ""
    specialty: str = ""


class ProfileUpdate(BaseModel):
    """Edit profile screen form."""

    name: str = ""
    email: str = ""
    age: int | str = ""
    specialty: str = ""


class UserResponse(BaseModel):
    """Profile as shown on the Home and Profile screens."""

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "id": "4f7c2b0e-5a1d-4c39-9b8e-0a4d2f6e1c11",
                "name": "Ana",
                "email": "ana@x.com",
                "age": 22,
                "specialty": "software",
                "specialty_label": "Software Development",
                "profile_image": "",
                "created_at": "2026-01-28T10:00:00+00:00",
                "updated_at": None,
            }
        },
    )

    id: str
    name: str
    email: str
    age: int
    specialty: str
    specialty_label: str
    profile_image: str = ""
    created_at: datetime
    updated_at: datetime | None = None

    @classmethod
    def from_record(cls, user: UserRecord) -> "UserResponse":
        return cls(**user.public_view())


class SessionResponse(BaseModel):
    """Current session state."""

    user: UserResponse | None = None
    is_authenticated: bool
    is_loading: bool
    show_splash: bool

    @classmethod
    def from_snapshot(cls, snapshot: SessionSnapshot) -> "SessionResponse":
        return cls(
            user=UserResponse.from_record(snapshot.user) if snapshot.user else None,
            is_authenticated=snapshot.is_authenticated,
            is_loading=snapshot.is_loading,
            show_splash=snapshot.show_splash,
        )


class ProfileDetailResponse(BaseModel):
    """Schema for the current profile."""

    data: UserResponse
    message: str | None = None


class RegisteredUser(BaseModel):
    id: str


class RegisterResponse(BaseModel):
    """Schema returned after a successful registration."""

    data: RegisteredUser
    message: str = "Your account has been created"


class ProfileImageResponse(BaseModel):
    image_url: str
    message: str = "Your profile photo has been updated"


class SpecialtyOption(BaseModel):
    value: str
    label: str


class SpecialtyListResponse(BaseModel):
    data: list[SpecialtyOption] = Field(default_factory=list)
