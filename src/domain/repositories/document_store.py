"""Document store protocol."""

from dataclasses import dataclass, field
from typing import Any, Protocol


@dataclass(frozen=True, slots=True)
class Document:
    """A stored document: store-assigned id plus its field set."""

    id: str
    data: dict[str, Any] = field(default_factory=dict)


class IDocumentStore(Protocol):
    """Schema-less records grouped into named collections."""

    async def query(self, collection: str, field: str, value: Any) -> list[Document]:
        """Get every document whose ``field`` equals ``value``. Order is store-defined."""
        ...

    async def insert(self, collection: str, data: dict[str, Any]) -> str:
        """Insert one document and return its new identifier."""
        ...

    async def update(self, collection: str, id: str, data: dict[str, Any]) -> None:
        """Merge ``data`` into an existing document."""
        ...

    async def ping(self) -> None:
        """Raise if the store cannot be reached."""
        ...
