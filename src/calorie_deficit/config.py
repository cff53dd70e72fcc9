"""Application configuration."""

import os

from pydantic_settings import BaseSettings, SettingsConfigDict

_ENVIRONMENT = os.getenv("ENVIRONMENT", "local")


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    nutritionix_api_id: str = ""
    nutritionix_api_key: str = ""
    nutritionix_base_url: str = "https://trackapi.nutritionix.com/v2"
    relay_host: str = "127.0.0.1"
    relay_port: int = 8002
    relay_base_url: str = "http://localhost:8002"
    environment: str = _ENVIRONMENT

    model_config = SettingsConfigDict(
        env_file=(f".env.{_ENVIRONMENT}", ".env"),
        extra="ignore",
    )
