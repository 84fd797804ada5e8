"""Configuration management for media-infer."""

from functools import lru_cache
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class DetectionSettings(BaseSettings):
    """Buffer acquisition configuration."""

    model_config = SettingsConfigDict(env_prefix="DETECTION_")

    # Bytes read from the start of a file before classification
    read_size: int = 1024 * 1024  # 1 MiB

    # Pad short reads with zero bytes up to read_size
    zero_pad: bool = True

    @field_validator("read_size")
    @classmethod
    def _positive_read_size(cls, value: int) -> int:
        if value <= 0:
            raise ValueError("read_size must be a positive number of bytes")
        return value


class Settings(BaseSettings):
    """Main application settings."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Application
    app_name: str = "media-infer"
    app_version: str = "0.1.0"

    # Logging
    log_level: str = "INFO"
    log_format: Literal["json", "console"] = "console"
    log_file: str | None = None

    # Sub-configs
    detection: DetectionSettings = Field(default_factory=DetectionSettings)


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
