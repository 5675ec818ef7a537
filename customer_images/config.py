"""Application Configuration — environment-driven settings via pydantic-settings.

Invariants:
    - get_settings() is cached (lru_cache) — single instance per process
    - data_dir is relative to the working directory unless given as an absolute path

Design Decisions:
    - pydantic-settings over raw os.environ: validation, type coercion, .env file support
    - Defaults provided for every setting: works out-of-the-box for local runs
"""

from pathlib import Path
from functools import lru_cache

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from customer_images.core.domain_types import CUSTOMERS_STORAGE_KEY


class Settings(BaseSettings):
    """Application settings from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False)

    # Storage
    data_dir: Path = Path("data")
    customers_key: str = CUSTOMERS_STORAGE_KEY

    @field_validator("customers_key")
    @classmethod
    def key_not_blank(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("customers_key cannot be empty")
        return v

    # API
    cors_origins: list[str] = ["http://localhost:5173"]

    # Observability
    log_level: str = "INFO"
    log_format: str = "json"


@lru_cache
def get_settings() -> Settings:
    return Settings()
