"""Custom exceptions and error codes."""

from enum import StrEnum
from typing import Any


class ErrorCode(StrEnum):
    """Standardized error codes surfaced to the screens."""

    # Authentication errors (401)
    INVALID_CREDENTIALS = "INVALID_CREDENTIALS"
    NO_ACTIVE_SESSION = "NO_ACTIVE_SESSION"

    # Not found errors (404)
    USER_NOT_FOUND = "USER_NOT_FOUND"

    # Validation errors (400)
    VALIDATION_ERROR = "VALIDATION_ERROR"
    NO_IMAGE = "NO_IMAGE"
    NO_CHANGES = "NO_CHANGES"

    # Conflict errors (409)
    EMAIL_TAKEN = "EMAIL_TAKEN"

    # Backend errors (502/503)
    UPDATE_FAILED = "UPDATE_FAILED"
    UPLOAD_FAILED = "UPLOAD_FAILED"
    BACKEND_ERROR = "BACKEND_ERROR"

    # Server errors (500)
    INTERNAL_ERROR = "INTERNAL_ERROR"


class AppException(Exception):
    """Base application exception."""

    def __init__(
        self,
        error_code: ErrorCode,
        message: str,
        status_code: int = 400,
        details: Any | None = None,
    ) -> None:
        self.error_code = error_code
        self.message = message
        self.status_code = status_code
        self.details = details
        super().__init__(self.message)


class UserNotFoundError(AppException):
    """No user record matches the given email."""

    def __init__(self, email: str) -> None:
        super().__init__(
            error_code=ErrorCode.USER_NOT_FOUND,
            message="User not found",
            status_code=404,
            details={"email": email},
        )


class InvalidCredentialsError(AppException):
    """The stored password does not match."""

    def __init__(self) -> None:
        super().__init__(
            error_code=ErrorCode.INVALID_CREDENTIALS,
            message="Incorrect password",
            status_code=401,
        )


class EmailTakenError(AppException):
    """An account already exists for this email."""

    def __init__(self, email: str) -> None:
        super().__init__(
            error_code=ErrorCode.EMAIL_TAKEN,
            message="An account with this email already exists",
            status_code=409,
            details={"email": email},
        )


class NoActiveSessionError(AppException):
    """The operation requires a logged-in user."""

    def __init__(self) -> None:
        super().__init__(
            error_code=ErrorCode.NO_ACTIVE_SESSION,
            message="No active user",
            status_code=401,
        )


class NoImageError(AppException):
    """No image payload was supplied."""

    def __init__(self) -> None:
        super().__init__(
            error_code=ErrorCode.NO_IMAGE,
            message="No image was provided",
            status_code=400,
        )


class UpdateFailedError(AppException):
    """The profile write was rejected or could not reach the store."""

    def __init__(self, reason: str | None = None) -> None:
        super().__init__(
            error_code=ErrorCode.UPDATE_FAILED,
            message="Error updating the profile",
            status_code=502,
            details={"reason": reason} if reason else None,
        )


class UploadFailedError(AppException):
    """Any step of the profile image upload failed."""

    def __init__(self, reason: str | None = None) -> None:
        super().__init__(
            error_code=ErrorCode.UPLOAD_FAILED,
            message="Error uploading the image",
            status_code=502,
            details={"reason": reason} if reason else None,
        )


class BackendError(AppException):
    """Transport or service fault raised by a store adapter."""

    def __init__(self, message: str = "Backend service unavailable", operation: str = "") -> None:
        super().__init__(
            error_code=ErrorCode.BACKEND_ERROR,
            message=message,
            status_code=503,
            details={"operation": operation} if operation else None,
        )


class FormValidationError(AppException):
    """A screen form failed client-side validation."""

    def __init__(self, message: str, field: str | None = None) -> None:
        super().__init__(
            error_code=ErrorCode.VALIDATION_ERROR,
            message=message,
            status_code=400,
            details={"field": field} if field else None,
        )


class NoChangesError(AppException):
    """The edit form was submitted without modifications."""

    def __init__(self) -> None:
        super().__init__(
            error_code=ErrorCode.NO_CHANGES,
            message="There are no changes to save",
            status_code=400,
        )
