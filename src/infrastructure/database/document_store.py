"""SQLAlchemy implementation of the document store."""

from collections.abc import Iterator
from contextlib import contextmanager
from typing import Any

import structlog
from sqlalchemy import select, text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from core.exceptions import BackendError
from domain.repositories.document_store import Document
from infrastructure.database.models import DocumentModel, new_document_id

logger = structlog.get_logger()


@contextmanager
def _translate_errors(operation: str) -> Iterator[None]:
    try:
        yield
    except SQLAlchemyError as exc:
        logger.error("document_store_error", operation=operation, error=str(exc))
        raise BackendError(f"Document store {operation} failed", operation=operation) from exc


class SQLAlchemyDocumentStore:
    """SQLAlchemy implementation of IDocumentStore.

    Documents are rows of one JSON column keyed by collection name, so any
    top-level field can be matched by equality.
    """

    def __init__(self, session_factory: async_sessionmaker[AsyncSession]) -> None:
        self._session_factory = session_factory

    async def query(self, collection: str, field: str, value: Any) -> list[Document]:
        """Get every document in ``collection`` whose ``field`` equals ``value``."""
        element = DocumentModel.data[field]
        if isinstance(value, bool):
            condition = element.as_boolean() == value
        elif isinstance(value, int):
            condition = element.as_integer() == value
        elif isinstance(value, float):
            condition = element.as_float() == value
        else:
            condition = element.as_string() == str(value)

        stmt = select(DocumentModel).where(
            DocumentModel.collection == collection,
            condition,
        )
        with _translate_errors("query"):
            async with self._session_factory() as session:
                result = await session.execute(stmt)
                return [self._to_document(model) for model in result.scalars()]

    async def insert(self, collection: str, data: dict[str, Any]) -> str:
        """Insert a document and return its generated identifier."""
        model = DocumentModel(id=new_document_id(), collection=collection, data=dict(data))
        with _translate_errors("insert"):
            async with self._session_factory() as session:
                session.add(model)
                await session.commit()
        return model.id

    async def update(self, collection: str, id: str, data: dict[str, Any]) -> None:
        """Merge ``data`` into the stored fields of an existing document."""
        with _translate_errors("update"):
            async with self._session_factory() as session:
                stmt = select(DocumentModel).where(
                    DocumentModel.id == id,
                    DocumentModel.collection == collection,
                )
                result = await session.execute(stmt)
                model = result.scalar_one_or_none()
                if model is None:
                    raise BackendError(f"No document to update: {id}", operation="update")
                # Reassign so the JSON column is flagged dirty.
                model.data = {**model.data, **data}
                await session.commit()

    async def ping(self) -> None:
        with _translate_errors("ping"):
            async with self._session_factory() as session:
                await session.execute(text("SELECT 1"))

    def _to_document(self, model: DocumentModel) -> Document:
        return Document(id=model.id, data=dict(model.data or {}))
