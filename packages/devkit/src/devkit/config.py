from __future__ import annotations

from pydantic_settings import BaseSettings, SettingsConfigDict

from devkit.timezone import configure_uk_timezone


class ServiceSettings(BaseSettings):
    model_config = SettingsConfigDict(extra="ignore")

    SERVICE_NAME: str = "service"
    DATABASE_URL: str | None = None
    REDIS_URL: str | None = None
    SUPABASE_URL: str | None = None
    SUPABASE_SERVICE_ROLE_KEY: str | None = None
    DIRECTORY_STORE_BACKEND: str = "auto"
    FACILITY_CACHE_TTL_SECONDS: int = 300
    SITE_BASE_URL: str = "https://saunaandcold.co.uk"
    LOG_LEVEL: str = "INFO"


def load_settings(service_name: str) -> ServiceSettings:
    configure_uk_timezone()
    return ServiceSettings(SERVICE_NAME=service_name)
