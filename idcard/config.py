"""Application Configuration — environment-driven settings via pydantic-settings.

Invariants:
    - get_settings() is cached (lru_cache) — single instance per process
    - birth_floor_year and utc_offset_hours are range-checked at load time

Design Decisions:
    - pydantic-settings over raw os.environ: validation, type coercion, .env file support
    - Defaults provided for all settings: works out-of-the-box with the bundled dataset
"""

from functools import lru_cache
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False)

    # Parsing policy
    birth_floor_year: int = Field(default=1900, ge=1, le=9999)
    utc_offset_hours: int = Field(default=8, ge=-12, le=14)

    # GB/T 2260 dataset; None loads the bundled sample
    division_data_path: str | None = None

    @field_validator("division_data_path", mode="before")
    @classmethod
    def blank_path_is_default(cls, v: str | None) -> str | None:
        """DIVISION_DATA_PATH="" in .env means "use the bundled dataset"."""
        if isinstance(v, str) and not v.strip():
            return None
        return v

    # API
    cors_origins: list[str] = ["http://localhost:5173"]

    # Observability
    log_level: str = "INFO"
    log_format: Literal["json", "text"] = "json"


@lru_cache
def get_settings() -> Settings:
    return Settings()
