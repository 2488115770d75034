"""Runtime settings, read from API_BLUEPRINT_* environment variables or .env."""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Defaults for the CLI; explicit command line options win."""

    model_config = SettingsConfigDict(
        env_prefix="API_BLUEPRINT_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    scheme: str = Field("http", description="URL scheme used in the HOST line")
    host: str = Field("localhost", description="Host (and port) used in the HOST line")
    log_level: str = "WARNING"


def get_settings() -> Settings:
    return Settings()
