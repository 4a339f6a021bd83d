"""Configuration settings for the application."""
from typing import Optional
from pydantic_settings import BaseSettings, SettingsConfigDict
from caseworker.logging_config import LOG_FORMAT


class Settings(BaseSettings):
    """Application settings."""

    app_name: str = "Caseworker Task API"
    debug: bool = False
    log_level: str = "INFO"
    log_format: str = LOG_FORMAT
    database_path: str = "tasks.db"

    # Bank holiday calendar
    holiday_source: str = "govuk"  # "govuk" or "static"
    bank_holidays_url: str = "https://www.gov.uk/bank-holidays.json"
    bank_holidays_file: Optional[str] = None
    holiday_region: str = "england-and-wales"
    holiday_fetch_timeout_seconds: float = 5.0
    holiday_cache_ttl_seconds: float = 3600.0
    holiday_cache_max_stale_seconds: float = 86400.0

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False, extra="ignore")


settings = Settings()
