"""Blob store protocol."""

from dataclasses import dataclass
from typing import Protocol


@dataclass(frozen=True, slots=True)
class BlobHandle:
    """Reference to a stored object."""

    bucket: str
    path: str


class IBlobStore(Protocol):
    """Binary objects stored by path, each resolvable to a fetchable URL."""

    async def upload(self, path: str, payload: bytes, content_type: str) -> BlobHandle:
        """Store ``payload`` under ``path``."""
        ...

    async def public_url(self, handle: BlobHandle) -> str:
        """Resolve a public URL for a stored object."""
        ...
