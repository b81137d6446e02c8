"""Session value objects."""

from dataclasses import dataclass
from typing import Generic, TypeVar

from core.exceptions import AppException, ErrorCode
from domain.entities.user import UserRecord

T = TypeVar("T")


@dataclass(frozen=True, slots=True)
class OperationResult(Generic[T]):
    """Outcome of a session operation: a value on success, a typed error otherwise."""

    ok: bool
    value: T | None = None
    error: AppException | None = None

    @classmethod
    def success(cls, value: T | None = None) -> "OperationResult[T]":
        return cls(ok=True, value=value)

    @classmethod
    def failure(cls, error: AppException) -> "OperationResult[T]":
        return cls(ok=False, error=error)

    @property
    def error_code(self) -> ErrorCode | None:
        return self.error.error_code if self.error else None

    @property
    def message(self) -> str | None:
        return self.error.message if self.error else None

    def unwrap(self) -> T | None:
        """Return the value, or raise the carried error."""
        if self.error is not None:
            raise self.error
        return self.value


@dataclass(frozen=True, slots=True)
class SessionSnapshot:
    """Read-only view of the session state at one point in time."""

    user: UserRecord | None
    is_loading: bool
    show_splash: bool

    @property
    def is_authenticated(self) -> bool:
        return self.user is not None
