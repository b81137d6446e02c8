"""User domain entities."""

from dataclasses import dataclass, field, fields, replace
from datetime import datetime, timezone
from enum import StrEnum
from typing import Any, Mapping


class Specialty(StrEnum):
    """Closed list of specialties a user can pick at registration."""

    SOFTWARE = "software"
    ELECTROMECHANICS = "emca"
    ELECTRONICS = "eca"
    RENEWABLE_ENERGY = "energia"
    ACCOUNTING = "conta"
    AUTOMOTIVE = "auto"
    ARCHITECTURE = "arqui"
    GRAPHIC_DESIGN = "disenio"
    OTHER = "otra"

    @property
    def label(self) -> str:
        return _SPECIALTY_LABELS[self]


_SPECIALTY_LABELS: dict[Specialty, str] = {
    Specialty.SOFTWARE: "Software Development",
    Specialty.ELECTROMECHANICS: "Electromechanics",
    Specialty.ELECTRONICS: "Electronics",
    Specialty.RENEWABLE_ENERGY: "Renewable Energy",
    Specialty.ACCOUNTING: "Accounting",
    Specialty.AUTOMOTIVE: "Automotive Mechanics",
    Specialty.ARCHITECTURE: "Architecture",
    Specialty.GRAPHIC_DESIGN: "Graphic Design",
    Specialty.OTHER: "Other",
}


def specialty_label(tag: str) -> str:
    """Display label for a specialty tag, or the raw tag if it is unknown."""
    try:
        return Specialty(tag).label
    except ValueError:
        return tag


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


def _parse_timestamp(value: Any) -> datetime | None:
    if value is None or value == "":
        return None
    if isinstance(value, datetime):
        return value
    return datetime.fromisoformat(str(value))


@dataclass
class UserRecord:
    """Domain entity for a registered user.

    The password is stored and compared in plaintext, exactly as the
    backing store holds it. It is never hashed here.
    """

    id: str
    name: str
    email: str
    password: str
    age: int
    specialty: str
    profile_image: str = ""
    created_at: datetime = field(default_factory=utcnow)
    updated_at: datetime | None = None

    @classmethod
    def from_document(cls, id: str, data: Mapping[str, Any]) -> "UserRecord":
        """Build a record from a stored document's id and fields."""
        return cls(
            id=id,
            name=data.get("name", ""),
            email=data.get("email", ""),
            password=data.get("password", ""),
            age=int(data.get("age") or 0),
            specialty=data.get("specialty", ""),
            profile_image=data.get("profile_image") or "",
            created_at=_parse_timestamp(data.get("created_at")) or utcnow(),
            updated_at=_parse_timestamp(data.get("updated_at")),
        )

    def to_document(self) -> dict[str, Any]:
        """Field set written to the document store (id is store-assigned)."""
        document: dict[str, Any] = {
            "name": self.name,
            "email": self.email,
            "password": self.password,
            "age": self.age,
            "specialty": self.specialty,
            "profile_image": self.profile_image,
            "created_at": self.created_at.isoformat(),
        }
        if self.updated_at is not None:
            document["updated_at"] = self.updated_at.isoformat()
        return document

    def merged(self, changes: Mapping[str, Any]) -> "UserRecord":
        """Return a copy with the given attribute values applied."""
        known = {f.name for f in fields(self)} - {"id"}
        return replace(self, **{k: v for k, v in changes.items() if k in known})

    def public_view(self) -> dict[str, Any]:
        """Attributes safe to hand to the screens (no password)."""
        return {
            "id": self.id,
            "name": self.name,
            "email": self.email,
            "age": self.age,
            "specialty": self.specialty,
            "specialty_label": specialty_label(self.specialty),
            "profile_image": self.profile_image,
            "created_at": self.created_at,
            "updated_at": self.updated_at,
        }


@dataclass
class UserDraft:
    """Registration input. Age may still be the raw form text."""

    name: str
    email: str
    password: str
    age: int | str
    specialty: str

    def to_record(self, created_at: datetime) -> UserRecord:
        return UserRecord(
            id="",
            name=self.name,
            email=self.email,
            password=self.password,
            age=int(self.age),
            specialty=self.specialty,
            profile_image="",
            created_at=created_at,
        )


@dataclass
class ProfilePatch:
    """Partial profile update. Unset fields are left untouched."""

    name: str | None = None
    email: str | None = None
    age: int | None = None
    specialty: str | None = None

    def fields(self) -> dict[str, Any]:
        return {
            name: value
            for name, value in (
                ("name", self.name),
                ("email", self.email),
                ("age", self.age),
                ("specialty", self.specialty),
            )
            if value is not None
        }

    def is_empty(self) -> bool:
        return not self.fields()


@dataclass(frozen=True, slots=True)
class ImagePayload:
    """Binary image handed over by the image picker."""

    data: bytes
    content_type: str = "image/jpeg"
    source_uri: str | None = None

    def __bool__(self) -> bool:
        return bool(self.data)
