"""
Configuration settings for QBG index parameter resolution.
"""

from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Library settings, read from ``QBG_*`` environment variables or ``.env``."""

    app_name: str = Field(default="QBG Index Parameters", description="Application name")

    # Logging
    log_level: str = Field(default="INFO", description="Logging level")
    log_format: str = Field(
        default="%(asctime)s %(levelname)s %(name)s: %(message)s",
        description="logging.Formatter format string",
    )

    # Index defaults
    default_element_type: Literal["uint8", "float32", "float16"] = Field(
        default="float32", description="Element type used when an index config omits one"
    )

    model_config = SettingsConfigDict(env_prefix="QBG_", env_file=".env", env_file_encoding="utf-8")


# Global settings instance
settings = Settings()
