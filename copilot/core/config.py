"""
Configuration module - loads all env vars using pydantic-settings.
This is the SINGLE SOURCE OF TRUTH for all config values.
"""

from functools import lru_cache
from typing import Literal, Optional
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # Storage
    storage_backend: Literal["memory", "sql"] = "memory"
    database_url: str = "sqlite:///./copilot.db"
    seed_sample_data: bool = True

    # Matching
    match_mode: Literal["exact", "fuzzy"] = "exact"
    fuzzy_bonus_max: int = Field(10, ge=0, le=100)
    random_seed: Optional[int] = None

    # Skill gap
    default_role: str = "Full-Stack Developer"
    role_requirements_path: Optional[str] = None

    # App
    debug: bool = False
    log_level: str = "INFO"

    # Pydantic v2 config
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8"
    )


@lru_cache()
def get_settings() -> Settings:
    return Settings()
