"""Shared fixtures for unit tests."""

from datetime import datetime, timezone
from typing import Any
from uuid import uuid4

import pytest

from core.exceptions import BackendError
from domain.entities.user import UserDraft
from domain.repositories.blob_store import BlobHandle
from domain.repositories.document_store import Document
from domain.services.session_service import SessionService

FIXED_NOW = datetime(2026, 3, 1, 12, 0, 0, tzinfo=timezone.utc)


class FakeDocumentStore:
    """In-memory document store that records every call."""

    def __init__(self) -> None:
        self.collections: dict[str, dict[str, dict[str, Any]]] = {}
        self.calls: list[str] = []
        self.fail_on: set[str] = set()

    def _record(self, operation: str) -> None:
        self.calls.append(operation)
        if operation in self.fail_on:
            raise BackendError(f"{operation} unavailable", operation=operation)

    def count(self, collection: str = "users") -> int:
        return len(self.collections.get(collection, {}))

    def get(self, id: str, collection: str = "users") -> dict[str, Any]:
        return self.collections[collection][id]

    async def query(self, collection: str, field: str, value: Any) -> list[Document]:
        self._record("query")
        return [
            Document(id=doc_id, data=dict(data))
            for doc_id, data in self.collections.get(collection, {}).items()
            if data.get(field) == value
        ]

    async def insert(self, collection: str, data: dict[str, Any]) -> str:
        self._record("insert")
        doc_id = str(uuid4())
        self.collections.setdefault(collection, {})[doc_id] = dict(data)
        return doc_id

    async def update(self, collection: str, id: str, data: dict[str, Any]) -> None:
        self._record("update")
        documents = self.collections.get(collection, {})
        if id not in documents:
            raise BackendError(f"No document to update: {id}", operation="update")
        documents[id] = {**documents[id], **data}

    async def ping(self) -> None:
        self._record("ping")


class FakeBlobStore:
    """In-memory blob store with public URLs under a fake CDN."""

    base_url = "https://cdn.test/public"

    def __init__(self) -> None:
        self.objects: dict[str, tuple[bytes, str]] = {}
        self.calls: list[str] = []
        self.fail_on: set[str] = set()

    def _record(self, operation: str) -> None:
        self.calls.append(operation)
        if operation in self.fail_on:
            raise BackendError(f"{operation} unavailable", operation=operation)

    async def upload(self, path: str, payload: bytes, content_type: str) -> BlobHandle:
        self._record("upload")
        self.objects[path] = (payload, content_type)
        return BlobHandle(bucket="avatars", path=path)

    async def public_url(self, handle: BlobHandle) -> str:
        self._record("public_url")
        return f"{self.base_url}/{handle.bucket}/{handle.path}"


@pytest.fixture
def documents() -> FakeDocumentStore:
    """Create a fresh in-memory document store."""
    return FakeDocumentStore()


@pytest.fixture
def blobs() -> FakeBlobStore:
    """Create a fresh in-memory blob store."""
    return FakeBlobStore()


@pytest.fixture
def service(documents: FakeDocumentStore, blobs: FakeBlobStore) -> SessionService:
    """SessionService over the in-memory stores with a frozen clock."""
    return SessionService(documents, blobs, splash_delay=0.05, clock=lambda: FIXED_NOW)


@pytest.fixture
def ana_draft() -> UserDraft:
    return UserDraft(
        name="Ana",
        email="ana@x.com",
        password="secret1",
        age=22,
        specialty="software",
    )


def seed_user(store: FakeDocumentStore, **overrides: Any) -> str:
    """Put a user document straight into the store and return its id."""
    data = {
        "name": "Luis",
        "email": "luis@x.com",
        "password": "hunter22",
        "age": 30,
        "specialty": "eca",
        "profile_image": "",
        "created_at": FIXED_NOW.isoformat(),
    }
    data.update(overrides)
    doc_id = str(uuid4())
    store.collections.setdefault("users", {})[doc_id] = data
    return doc_id
