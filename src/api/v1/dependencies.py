"""Dependency injection factories for API v1.

One running app instance holds exactly one session, so the session service
and the backend handles it depends on are process-wide singletons.
"""

from functools import lru_cache

import httpx
from sqlalchemy.ext.asyncio import AsyncEngine

from core.config import settings
from domain.services.session_service import SessionService
from infrastructure.database.document_store import SQLAlchemyDocumentStore
from infrastructure.database.session import create_engine, create_session_factory
from infrastructure.storage.supabase_storage import SupabaseBlobStore


@lru_cache
def get_engine() -> AsyncEngine:
    """Get the database engine."""
    return create_engine(settings)


@lru_cache
def get_document_store() -> SQLAlchemyDocumentStore:
    """Get the document store handle."""
    return SQLAlchemyDocumentStore(create_session_factory(get_engine()))


@lru_cache
def get_http_client() -> httpx.AsyncClient:
    """Get the shared HTTP client used for blob storage."""
    return httpx.AsyncClient(timeout=settings.storage_timeout_seconds)


@lru_cache
def get_blob_store() -> SupabaseBlobStore:
    """Get the blob store handle."""
    return SupabaseBlobStore(
        client=get_http_client(),
        storage_url=settings.storage_api_url,
        bucket=settings.storage_bucket,
        service_key=settings.supabase_service_role_key,
    )


@lru_cache
def get_session_service() -> SessionService:
    """Get the session service instance."""
    return SessionService(
        get_document_store(),
        get_blob_store(),
        users_collection=settings.users_collection,
        image_prefix=settings.profile_image_prefix,
        splash_delay=settings.splash_delay_seconds,
        serialize_operations=settings.serialize_session_operations,
    )
