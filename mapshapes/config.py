"""Library configuration from environment variables."""

from __future__ import annotations

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    env: str = "development"
    log_level: str = "info"

    # Reject negative radii and empty vertex lists at construction.
    # When off, the same checks only log a warning.
    strict_geometry: bool = True

    model_config = {
        "env_prefix": "MAPSHAPES_",
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "extra": "ignore",
    }


settings = Settings()


def get_settings() -> Settings:
    return settings
