"""Database engine and session factory backing the document store."""

from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine

from core.config import Settings


def create_engine(settings: Settings) -> AsyncEngine:
    """Create the async engine for the configured database."""
    # Supabase uses Supavisor (connection pooler) in transaction mode.
    # asyncpg's prepared statement cache is incompatible with transaction-mode
    # pooling, so we disable it when connecting through the pooler.
    connect_args: dict = {}
    if "supabase.com" in settings.database_url:
        connect_args["statement_cache_size"] = 0

    return create_async_engine(
        settings.async_database_url,
        echo=settings.debug,
        pool_pre_ping=True,
        connect_args=connect_args,
    )


def create_session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    return async_sessionmaker(
        bind=engine,
        class_=AsyncSession,
        expire_on_commit=False,
        autoflush=False,
    )
