"""Application settings using Pydantic."""

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings."""

    app_name: str = Field(default="FlashStore")
    env: str = Field(default="dev")
    debug: bool = Field(default=True)
    secret_key: str = Field(default="change-me")
    session_max_age: int = Field(default=24 * 60 * 60)
    flash_key_prefix: str = Field(default="msg_")
    log_level: str = Field(default="INFO")

    model_config = SettingsConfigDict(
        env_file=".env",
        env_prefix="FLASH_",
        extra="ignore",
        case_sensitive=False,
    )


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
