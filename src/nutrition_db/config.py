"""Application configuration."""

import os
from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict

_ENVIRONMENT = os.getenv("ENVIRONMENT", "local")


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    strict_numeric_input: bool = False
    food_delete_policy: Literal["block", "cascade"] = "block"
    load_sample_data: bool = True
    log_level: str = "INFO"
    environment: str = _ENVIRONMENT

    model_config = SettingsConfigDict(
        env_prefix="NUTRITION_DB_",
        env_file=(f".env.{_ENVIRONMENT}", ".env"),
        extra="ignore",
    )
