"""Form checks the screens run before calling the session service."""

import re
from typing import Any

from core.exceptions import FormValidationError, NoChangesError
from domain.entities.user import ProfilePatch, Specialty, UserDraft, UserRecord

EMAIL_PATTERN = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")
MIN_PASSWORD_LENGTH = 6
MIN_AGE = 1
MAX_AGE = 120
SPECIALTY_TAGS = frozenset(s.value for s in Specialty)


def is_valid_email(email: str) -> bool:
    return bool(EMAIL_PATTERN.fullmatch(email))


def parse_age(value: Any) -> int:
    """Parse the age field (form text or int) into an int within range."""
    if isinstance(value, bool):
        raise FormValidationError("Please enter a valid age", field="age")
    try:
        age = int(str(value).strip())
    except (TypeError, ValueError):
        raise FormValidationError("Please enter a valid age", field="age") from None
    if not MIN_AGE <= age <= MAX_AGE:
        raise FormValidationError("Please enter a valid age", field="age")
    return age


def _require_name(name: str) -> None:
    if not name.strip():
        raise FormValidationError("Name is required", field="name")


def _require_email(email: str) -> None:
    if not email.strip() or not is_valid_email(email):
        raise FormValidationError("Please enter a valid email", field="email")


def _require_specialty(specialty: str) -> None:
    if specialty not in SPECIALTY_TAGS:
        raise FormValidationError("Please select a specialty", field="specialty")


def validate_login_form(email: str, password: str) -> None:
    if not email.strip() or not password.strip():
        raise FormValidationError("Please complete all fields")
    if not is_valid_email(email):
        raise FormValidationError("Please enter a valid email", field="email")


def validate_registration_form(
    name: str,
    email: str,
    password: str,
    confirm_password: str,
    age: Any,
    specialty: str,
) -> UserDraft:
    """Validate the registration form in on-screen order and build a draft."""
    _require_name(name)
    _require_email(email)
    if len(password) < MIN_PASSWORD_LENGTH:
        raise FormValidationError(
            f"Password must be at least {MIN_PASSWORD_LENGTH} characters", field="password"
        )
    if password != confirm_password:
        raise FormValidationError("Passwords do not match", field="confirm_password")
    parsed_age = parse_age(age)
    _require_specialty(specialty)
    return UserDraft(
        name=name,
        email=email,
        password=password,
        age=parsed_age,
        specialty=specialty,
    )


def validate_profile_form(name: str, email: str, age: Any, specialty: str) -> ProfilePatch:
    _require_name(name)
    _require_email(email)
    parsed_age = parse_age(age)
    _require_specialty(specialty)
    return ProfilePatch(name=name, email=email, age=parsed_age, specialty=specialty)


def changed_fields(user: UserRecord, patch: ProfilePatch) -> ProfilePatch:
    """Keep only the fields that differ from the current profile.

    Raises:
        NoChangesError: if nothing differs
    """
    changes = {
        key: value for key, value in patch.fields().items() if getattr(user, key) != value
    }
    if not changes:
        raise NoChangesError()
    return ProfilePatch(**changes)
