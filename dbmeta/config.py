"""Configuration management for dbmeta."""

import os
from pathlib import Path
from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import Field
from typing import Optional


def _find_env_file() -> Optional[str]:
    """Find .env file in multiple locations.

    Search order:
    1. Current working directory
    2. ~/.dbmeta/.env
    3. Package directory (where this file is located)
    """
    # Current directory
    if os.path.exists(".env"):
        return ".env"

    # User config directory
    user_env = Path.home() / ".dbmeta" / ".env"
    if user_env.exists():
        return str(user_env)

    # Package directory
    package_dir = Path(__file__).parent.parent
    package_env = package_dir / ".env"
    if package_env.exists():
        return str(package_env)

    return None


class Settings(BaseSettings):
    """Application settings loaded from DBMETA_* environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="DBMETA_",
        env_file=_find_env_file(),
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Connection
    database: Optional[str] = Field(
        default=None,
        description="Default database path or URL"
    )
    backend: str = Field(
        default="auto",
        description="Database backend: auto, sqlite or duckdb"
    )
    read_only: bool = Field(
        default=True,
        description="Open databases in read-only mode"
    )

    # Default filters
    catalog: Optional[str] = Field(
        default=None,
        description="Default catalog filter"
    )
    schema_name: Optional[str] = Field(
        default=None,
        description="Default schema filter"
    )

    log_level: str = Field(
        default="WARNING",
        description="Logging level for the CLI"
    )


# Global settings instance
settings = Settings()
