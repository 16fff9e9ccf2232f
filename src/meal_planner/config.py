"""Application configuration."""

import os

from pydantic_settings import BaseSettings, SettingsConfigDict

_ENVIRONMENT = os.getenv("ENVIRONMENT", "local")


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    supabase_url: str
    supabase_service_key: str
    supabase_anon_key: str | None = None
    recipes_table: str = "recipes"
    tdee_table: str = "user_tdee"
    default_plan_days: int = 7
    log_level: str = "INFO"
    environment: str = _ENVIRONMENT

    model_config = SettingsConfigDict(
        env_file=(f".env.{_ENVIRONMENT}", ".env"),
        extra="ignore",
    )

    @property
    def auth_api_key(self) -> str:
        """Key sent as the apikey header on Supabase Auth lookups."""
        return self.supabase_anon_key or self.supabase_service_key
