"""Application settings using pydantic-settings.

Settings are loaded from environment variables with sensible defaults
for development. Production deployments should set all values explicitly.
"""

from functools import lru_cache

from pydantic import Field, SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict


class DatabaseSettings(BaseSettings):
    """Database connection settings.

    Environment variables:
        USERS_DB_HOST: Database host (default: localhost)
        USERS_DB_PORT: Database port (default: 5432)
        USERS_DB_DATABASE: Database name (default: users)
        USERS_DB_USERNAME: Database user (default: users)
        USERS_DB_PASSWORD: Database password (required in production)
        USERS_DB_POOL_SIZE: Connections kept in the engine pool (default: 10)
        USERS_DB_ECHO: Log every SQL statement (default: false)
    """

    model_config = SettingsConfigDict(
        env_prefix="USERS_DB_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    host: str = Field(default="localhost", description="Database host")
    port: int = Field(default=5432, description="Database port")
    database: str = Field(default="users", description="Database name")
    username: str = Field(default="users", description="Database username")
    password: SecretStr = Field(
        default=SecretStr(""),
        description="Database password",
    )
    pool_size: int = Field(
        default=10,
        description="Connections kept in the engine pool",
        ge=1,
        le=100,
    )
    echo: bool = Field(default=False, description="Log SQL statements")

    @property
    def connection_string(self) -> str:
        """Generate a connection string (without password for logging)."""
        return f"postgresql://{self.username}@{self.host}:{self.port}/{self.database}"


class CORSSettings(BaseSettings):
    """Cross-origin resource sharing settings.

    Environment variables:
        USERS_CORS_ALLOW_ORIGINS: JSON list of allowed origins (default: ["*"])
        USERS_CORS_ALLOW_CREDENTIALS: Allow cookies/credentials (default: false)

    The default allows every origin. Restrict it before exposing the API
    outside of a development machine.
    """

    model_config = SettingsConfigDict(
        env_prefix="USERS_CORS_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    allow_origins: list[str] = Field(
        default_factory=lambda: ["*"],
        description="Origins allowed to call the API",
    )
    allow_credentials: bool = Field(
        default=False,
        description="Whether credentials are allowed on cross-origin requests",
    )


class Settings(BaseSettings):
    """Main application settings aggregating all configuration sections."""

    model_config = SettingsConfigDict(
        env_prefix="USERS_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Application metadata
    app_name: str = Field(default="Users API", description="Application name")
    debug: bool = Field(default=False, description="Debug mode")
    host: str = Field(default="0.0.0.0", description="Bind address")
    port: int = Field(default=4000, description="Port the API listens on")

    @property
    def database(self) -> DatabaseSettings:
        """Get database settings."""
        return get_database_settings()

    @property
    def cors(self) -> CORSSettings:
        """Get CORS settings."""
        return get_cors_settings()


@lru_cache
def get_settings() -> Settings:
    """Get cached application settings.

    Uses lru_cache to ensure settings are only loaded once.
    """
    return Settings()


@lru_cache
def get_database_settings() -> DatabaseSettings:
    """Get cached database settings.

    Uses lru_cache to ensure settings are only loaded once.
    """
    return DatabaseSettings()


@lru_cache
def get_cors_settings() -> CORSSettings:
    """Get cached CORS settings."""
    return CORSSettings()
