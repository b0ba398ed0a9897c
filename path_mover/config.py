"""Application configuration."""

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Settings loaded from environment variables (``PATH_MOVER_*``) and ``.env``.

    Priority: environment variables > .env file > defaults
    """

    model_config = SettingsConfigDict(
        env_prefix="PATH_MOVER_", env_file=".env", env_file_encoding="utf-8", extra="ignore"
    )

    # Builder
    default_bezier_segments: int = Field(default=100, gt=0)  # polyline samples per Bezier

    # CLI
    sample_steps: int = Field(default=10, gt=0)  # rows printed by `path-mover sample`

    # Logging
    log_level: str = "INFO"
    log_json: bool = False  # JSON lines instead of human-readable output
    log_file: str | None = None  # also write to this rotating file


@lru_cache
def get_settings() -> Settings:
    return Settings()


settings = get_settings()
