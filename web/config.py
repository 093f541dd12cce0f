"""Configuration management using pydantic-settings."""
import os
from pathlib import Path

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Application settings.

    Built once at startup and handed to every component; nothing reads the
    environment after that.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"
    )

    # Environment
    environment: str = Field(
        default_factory=lambda: os.getenv("ENVIRONMENT", "development"),
        description="Environment: development, production"
    )

    # Authentication
    app_password: str | None = Field(None, description="Shared password that unlocks the ledger")
    jwt_secret: str | None = Field(None, description="Secret used to sign session tokens")
    jwt_expires_in: str = Field("24h", description="Session lifetime: <int><s|m|h|d>")

    # Database
    db_path: str = Field(
        "car-expense-tracker.db",
        description="SQLite file, relative paths resolve against the working directory"
    )

    # HTTP server
    host: str = Field("0.0.0.0", description="Bind address")
    port: int = Field(8080, description="Bind port")

    # Application
    debug: bool = Field(False, description="Debug mode (echo SQL)")
    log_level: str = Field("INFO", description="Logging level")
    log_dir: str = Field("logs", description="Directory for rotating log files")

    @field_validator("jwt_expires_in", mode="before")
    @classmethod
    def default_expires_in(cls, v):
        """Empty value means the default lifetime."""
        return v or "24h"

    @property
    def is_production(self) -> bool:
        return self.environment.lower() == "production"

    @property
    def database_path(self) -> Path:
        path = Path(self.db_path)
        if not path.is_absolute():
            path = Path.cwd() / path
        return path

    @property
    def database_url(self) -> str:
        """SQLAlchemy async URL for the configured SQLite file."""
        if self.db_path == ":memory:":
            return "sqlite+aiosqlite:///:memory:"
        return f"sqlite+aiosqlite:///{self.database_path}"
