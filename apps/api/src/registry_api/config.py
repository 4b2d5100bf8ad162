"""Configuration management for the User Registry API."""

import os
from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict


def _get_env_file_path() -> str:
    """Get the path to the .env file.

    Checks for ENV_FILE environment variable first, then defaults to
    .env in the API project directory (apps/api/.env).

    Returns:
        Path to the .env file
    """
    env_file = os.getenv("ENV_FILE")
    if env_file:
        return env_file

    # This file is apps/api/src/registry_api/config.py
    api_dir = Path(__file__).parent.parent.parent
    return str(api_dir / ".env")


class Settings(BaseSettings):
    """Application settings from environment variables."""

    # Application
    app_name: str = "user-registry"
    app_version: str = "1.0"
    environment: str = "development"
    log_level: str = "info"

    # API
    api_host: str = "localhost"
    api_port: int = 8000

    # UI
    ui_url: str = "http://localhost:5173"

    # Registry
    seed_users: bool = True

    # API documentation
    docs_title: str = "User Registry API"
    docs_description: str = "Documentation of the API for the User Registry application"
    contact_name: str = "Vlad"
    contact_url: str = "http://com.vlad.code.sample"
    contact_email: str = "vlad@email.com"
    license_name: str = "Free to use"

    model_config = SettingsConfigDict(
        env_file=_get_env_file_path(),
        case_sensitive=False,
        env_file_encoding="utf-8",
    )


def get_settings() -> Settings:
    """Get application settings."""
    return Settings()
