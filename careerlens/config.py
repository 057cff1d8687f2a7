"""Application configuration loaded from environment variables."""

from __future__ import annotations

import logging
from functools import lru_cache

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Central settings – values come from .env or environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        populate_by_name=True,
    )

    # Gemini (served through its OpenAI-compatible endpoint)
    gemini_api_key: str = Field(
        default="",
        validation_alias=AliasChoices("GEMINI_API_KEY", "NEXT_PUBLIC_GEMINI_API_KEY"),
    )
    gemini_model: str = "gemini-2.5-flash-lite"
    gemini_base_url: str = "https://generativelanguage.googleapis.com/v1beta/openai/"
    gemini_models_url: str = "https://generativelanguage.googleapis.com/v1beta/models"

    # Firebase admin (service account)
    firebase_project_id: str = ""
    firebase_client_email: str = ""
    firebase_private_key: str = ""

    # Firebase web client
    firebase_web_project_id: str = "careerlens-1"
    firebase_web_storage_bucket: str = ""
    firebase_functions_region: str = "us-central1"

    # Upstream endpoints
    career_updates_function_url: str = (
        "https://us-central1-careerlens-1.cloudfunctions.net/refreshCareerUpdates"
    )
    nptel_courses_url: str = "https://swayam.gov.in/api/v1/courses?category=NPTEL"
    http_timeout: float = 30.0

    # App
    app_host: str = "0.0.0.0"
    app_port: int = 8000
    log_level: str = "INFO"


@lru_cache
def get_settings() -> Settings:
    """Return cached singleton settings instance."""
    return Settings()


def setup_logging() -> None:
    """Configure root logger based on settings."""
    settings = get_settings()

    logging.basicConfig(
        level=getattr(logging, settings.log_level.upper(), logging.INFO),
        format="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
