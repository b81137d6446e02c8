"""Pytest configuration and fixtures."""

import os
import sys
from collections.abc import AsyncGenerator
from pathlib import Path

# Keep test runs off any real backend configured in a local .env
os.environ["SUPABASE_URL"] = ""
os.environ["DATABASE_URL"] = "sqlite+aiosqlite:///:memory:"

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.pool import StaticPool

# Add src to path
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from domain.services.session_service import SessionService
from infrastructure.database.document_store import SQLAlchemyDocumentStore
from infrastructure.database.models import Base

# Test database URL (SQLite in memory, one shared connection)
TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"


@pytest.fixture
async def engine() -> AsyncGenerator[AsyncEngine, None]:
    """Create a fresh in-memory database with all tables."""
    engine = create_async_engine(
        TEST_DATABASE_URL,
        echo=False,
        poolclass=StaticPool,
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest.fixture
def session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    """Create session factory."""
    return async_sessionmaker(
        bind=engine,
        class_=AsyncSession,
        expire_on_commit=False,
    )


@pytest.fixture
def document_store(
    session_factory: async_sessionmaker[AsyncSession],
) -> SQLAlchemyDocumentStore:
    """Document store over the in-memory database."""
    return SQLAlchemyDocumentStore(session_factory)


@pytest.fixture
def blob_store():
    """In-memory blob store (shared with the unit tests)."""
    from tests.unit.conftest import FakeBlobStore

    return FakeBlobStore()


@pytest.fixture
async def session_service(
    document_store: SQLAlchemyDocumentStore, blob_store
) -> AsyncGenerator[SessionService, None]:
    """Session service whose splash has already been dismissed."""
    service = SessionService(document_store, blob_store, splash_delay=0)
    service.start()
    await service.splash_finished.wait()
    yield service
    await service.close()


@pytest.fixture
async def client() -> AsyncGenerator[AsyncClient, None]:
    """Create async test client on the default app (no backend calls)."""
    from main import app

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as c:
        yield c


@pytest.fixture
async def app_client(
    session_service: SessionService,
    document_store: SQLAlchemyDocumentStore,
) -> AsyncGenerator[AsyncClient, None]:
    """
    Create a test client wired to the in-memory backend.

    This client:
    - Uses an in-memory SQLite document store
    - Uses an in-memory blob store
    - Overrides the session service and document store dependencies
    """
    from api.v1.dependencies import get_document_store, get_session_service
    from main import create_app

    app = create_app()
    app.dependency_overrides[get_session_service] = lambda: session_service
    app.dependency_overrides[get_document_store] = lambda: document_store

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as c:
        yield c

    app.dependency_overrides.clear()
