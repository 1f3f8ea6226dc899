"""AppSettings -- Proxmox Monitor application configuration.

All environment variables are read via pydantic-settings.
DB_URL is required and will cause a startup failure if missing.
"""

from pydantic_settings import BaseSettings, SettingsConfigDict


class AppSettings(BaseSettings):
    """Proxmox Monitor settings, loaded from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    # Database - Required, application fails to start if missing
    DB_URL: str
    DB_ECHO: bool = False

    LOG_LEVEL: str = "INFO"

    # Populate an empty database with the demo inventory on startup
    SEED_DEMO_DATA: bool = False


settings = AppSettings()
