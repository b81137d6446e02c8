"""Session service: the single authority for who is logged in.

Holds the current user, the loading flag and the one-shot splash flag, and
is the only component that talks to the document and blob stores. Every
operation returns an ``OperationResult``; backend faults are converted to
typed failures here and never propagate to the caller.
"""

import asyncio
from collections.abc import AsyncIterator, Callable
from contextlib import asynccontextmanager, suppress
from datetime import datetime

import structlog

from core.exceptions import (
    AppException,
    BackendError,
    EmailTakenError,
    FormValidationError,
    InvalidCredentialsError,
    NoActiveSessionError,
    NoImageError,
    UpdateFailedError,
    UploadFailedError,
    UserNotFoundError,
)
from domain.entities.session import OperationResult, SessionSnapshot
from domain.entities.user import ImagePayload, ProfilePatch, UserDraft, UserRecord, utcnow
from domain.repositories.blob_store import IBlobStore
from domain.repositories.document_store import IDocumentStore

logger = structlog.get_logger()

DEFAULT_SPLASH_DELAY_SECONDS = 3.0


class SessionService:
    """Session/profile state container for one running app instance."""

    def __init__(
        self,
        documents: IDocumentStore,
        blobs: IBlobStore,
        *,
        users_collection: str = "users",
        image_prefix: str = "profile_images",
        splash_delay: float = DEFAULT_SPLASH_DELAY_SECONDS,
        serialize_operations: bool = False,
        clock: Callable[[], datetime] = utcnow,
    ) -> None:
        self._documents = documents
        self._blobs = blobs
        self._collection = users_collection
        self._image_prefix = image_prefix.rstrip("/")
        self._splash_delay = splash_delay
        self._clock = clock
        # Off by default: concurrent operations are not serialized and the
        # last write to the in-memory user wins.
        self._lock: asyncio.Lock | None = asyncio.Lock() if serialize_operations else None

        self._user: UserRecord | None = None
        self._is_loading = True
        self._show_splash = True
        self._splash_task: asyncio.Task[None] | None = None
        self.splash_finished = asyncio.Event()

    # --- State ---

    @property
    def user(self) -> UserRecord | None:
        return self._user

    @property
    def is_loading(self) -> bool:
        return self._is_loading

    @property
    def show_splash(self) -> bool:
        return self._show_splash

    @property
    def splash_delay(self) -> float:
        return self._splash_delay

    def snapshot(self) -> SessionSnapshot:
        return SessionSnapshot(
            user=self._user,
            is_loading=self._is_loading,
            show_splash=self._show_splash,
        )

    # --- Splash timer ---

    def start(self) -> None:
        """Arm the splash timer. Must be called from a running event loop.

        The timer fires once; calling ``start`` again never re-arms it.
        """
        if self._splash_task is not None or self.splash_finished.is_set():
            return
        self._splash_task = asyncio.create_task(self._dismiss_splash())

    async def close(self) -> None:
        """Cancel a splash timer that has not fired yet."""
        task = self._splash_task
        if task is not None and not task.done():
            task.cancel()
            with suppress(asyncio.CancelledError):
                await task

    async def _dismiss_splash(self) -> None:
        await asyncio.sleep(self._splash_delay)
        self._show_splash = False
        self._is_loading = False
        self.splash_finished.set()
        logger.debug("splash_dismissed", delay_seconds=self._splash_delay)

    # --- Operations ---

    async def login(self, email: str, password: str) -> OperationResult[UserRecord]:
        """Log in by exact email match and plaintext password comparison."""
        async with self._exclusive():
            self._is_loading = True
            try:
                matches = await self._find_by_email(email)
                if not matches:
                    logger.info("login_rejected", reason="user_not_found")
                    return OperationResult.failure(UserNotFoundError(email))

                # Duplicate emails are possible; the store's first match wins.
                candidate = matches[0]
                if candidate.password != password:
                    logger.info("login_rejected", reason="invalid_credentials", user_id=candidate.id)
                    return OperationResult.failure(InvalidCredentialsError())

                self._user = candidate
                logger.info("login_succeeded", user_id=candidate.id)
                return OperationResult.success(candidate)
            except Exception as exc:
                return OperationResult.failure(self._backend_failure(exc, "login"))
            finally:
                self._is_loading = False

    async def register(self, draft: UserDraft) -> OperationResult[str]:
        """Create a user record. Does not log the new user in."""
        async with self._exclusive():
            self._is_loading = True
            try:
                try:
                    record = draft.to_record(created_at=self._clock())
                except (TypeError, ValueError):
                    return OperationResult.failure(
                        FormValidationError("Please enter a valid age", field="age")
                    )

                # Check-then-insert: two concurrent registrations can both pass.
                if await self._find_by_email(draft.email):
                    logger.info("registration_rejected", reason="email_taken")
                    return OperationResult.failure(EmailTakenError(draft.email))

                new_id = await self._documents.insert(self._collection, record.to_document())
                logger.info("user_registered", user_id=new_id)
                return OperationResult.success(new_id)
            except Exception as exc:
                return OperationResult.failure(self._backend_failure(exc, "register"))
            finally:
                self._is_loading = False

    async def logout(self) -> OperationResult[None]:
        """Clear the session user. Always succeeds."""
        async with self._exclusive():
            user_id = self._user.id if self._user else None
            self._user = None
            logger.info("logout", user_id=user_id)
            return OperationResult.success()

    async def update_profile(self, patch: ProfilePatch) -> OperationResult[UserRecord]:
        """Merge ``patch`` into the stored record, then into the session copy."""
        async with self._exclusive():
            user = self._user
            if user is None:
                return OperationResult.failure(NoActiveSessionError())

            changes = patch.fields()
            updated_at = self._clock()
            try:
                await self._documents.update(
                    self._collection,
                    user.id,
                    {**changes, "updated_at": updated_at.isoformat()},
                )
            except Exception as exc:
                logger.warning("profile_update_failed", user_id=user.id, error=str(exc))
                return OperationResult.failure(UpdateFailedError(str(exc)))

            updated = self._apply_locally(user, {**changes, "updated_at": updated_at})
            logger.info("profile_updated", user_id=user.id, fields=sorted(changes))
            return OperationResult.success(updated)

    async def upload_profile_image(self, image: ImagePayload | None) -> OperationResult[str]:
        """Upload a new profile image and link its public URL to the profile.

        A blob that was uploaded before a later step failed is not removed.
        """
        async with self._exclusive():
            user = self._user
            if user is None:
                return OperationResult.failure(NoActiveSessionError())
            if not image:
                return OperationResult.failure(NoImageError())

            now = self._clock()
            path = f"{self._image_prefix}/{user.id}_{int(now.timestamp() * 1000)}"
            try:
                handle = await self._blobs.upload(path, image.data, image.content_type)
                url = await self._blobs.public_url(handle)
                await self._documents.update(
                    self._collection,
                    user.id,
                    {"profile_image": url, "updated_at": now.isoformat()},
                )
            except Exception as exc:
                logger.warning("profile_image_upload_failed", user_id=user.id, path=path, error=str(exc))
                return OperationResult.failure(UploadFailedError(str(exc)))

            self._apply_locally(user, {"profile_image": url, "updated_at": now})
            logger.info(
                "profile_image_updated",
                user_id=user.id,
                path=path,
                source_uri=image.source_uri,
            )
            return OperationResult.success(url)

    # --- Helpers ---

    async def _find_by_email(self, email: str) -> list[UserRecord]:
        documents = await self._documents.query(self._collection, "email", email)
        return [UserRecord.from_document(doc.id, doc.data) for doc in documents]

    def _apply_locally(self, user: UserRecord, changes: dict) -> UserRecord:
        """Merge confirmed changes into the session copy.

        Merges into whatever the session holds now, so the last confirmed
        write wins. A user that logged out meanwhile is not brought back.
        """
        current = self._user
        if current is not None and current.id == user.id:
            self._user = current.merged(changes)
            return self._user
        return user.merged(changes)

    def _backend_failure(self, exc: Exception, operation: str) -> AppException:
        if isinstance(exc, AppException):
            logger.warning(f"{operation}_failed", error_code=exc.error_code.value, error=exc.message)
            return exc
        logger.error(f"{operation}_failed", error=str(exc), error_type=type(exc).__name__)
        return BackendError(str(exc) or "Backend service unavailable", operation=operation)

    @asynccontextmanager
    async def _exclusive(self) -> AsyncIterator[None]:
        if self._lock is None:
            yield
            return
        async with self._lock:
            yield
