"""Application configuration using Pydantic Settings."""

from functools import lru_cache

from pydantic import Field, computed_field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Application
    app_name: str = Field(default="Profile Hub")
    app_env: str = Field(default="development")
    debug: bool = Field(default=False)

    # Server
    host: str = Field(default="0.0.0.0")
    port: int = Field(default=8000)

    # Logging
    log_level: str = Field(default="INFO")
    log_json: bool = Field(
        default=False,
        description="Render log lines as JSON instead of the console renderer",
    )

    # Document store
    database_url: str = Field(
        default="postgresql+asyncpg://localhost:5432/profile_hub",
        description="PostgreSQL connection URL backing the document store",
    )
    users_collection: str = Field(
        default="users",
        description="Collection holding user profile documents",
    )

    # Blob store (Supabase Storage)
    supabase_url: str = Field(
        default="",
        description="Supabase project URL (e.g. https://xyzabc.supabase.co)",
    )
    supabase_service_role_key: str = Field(
        default="",
        description="Supabase service role key used for storage uploads (keep secret)",
    )
    storage_bucket: str = Field(default="avatars")
    profile_image_prefix: str = Field(default="profile_images")
    storage_timeout_seconds: float = Field(default=30.0)

    # Session
    splash_delay_seconds: float = Field(
        default=3.0,
        description="Fixed delay before the splash screen is dismissed",
    )
    serialize_session_operations: bool = Field(
        default=False,
        description="Run session operations one at a time instead of concurrently",
    )

    # CORS
    cors_origins: str = Field(
        default="http://localhost:8081,http://localhost:19006",
        description="Comma-separated list of allowed origins",
    )

    @computed_field  # type: ignore[prop-decorator]
    @property
    def async_database_url(self) -> str:
        """Ensure the database URL uses the asyncpg driver scheme.

        Supabase and most hosts hand out a plain ``postgresql://`` URL.
        SQLAlchemy's async engine requires ``postgresql+asyncpg://``.
        """
        url = self.database_url
        if url.startswith("postgresql://"):
            url = url.replace("postgresql://", "postgresql+asyncpg://", 1)
        return url

    @computed_field  # type: ignore[prop-decorator]
    @property
    def storage_api_url(self) -> str:
        """Base URL of the Supabase Storage REST API."""
        if self.supabase_url:
            return f"{self.supabase_url.rstrip('/')}/storage/v1"
        return ""

    @computed_field  # type: ignore[prop-decorator]
    @property
    def is_production(self) -> bool:
        """Check if running in production environment."""
        return self.app_env == "production"

    @computed_field  # type: ignore[prop-decorator]
    @property
    def cors_origins_list(self) -> list[str]:
        """Parse CORS origins into a list."""
        return [origin.strip() for origin in self.cors_origins.split(",") if origin.strip()]


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()


settings = get_settings()
