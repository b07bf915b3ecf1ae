"""
Configuration — typed, validated settings loaded from environment/.env.

Uses pydantic-settings to:
  - Load from environment variables (12-factor app)
  - Fall back to a .env file
  - Validate types and constraints at startup

Only AppSettings is a BaseSettings instance. Sub-settings are plain BaseModel
classes populated via env_nested_delimiter="__", so ADS_TXT_PARSE__MODE maps
to parse.mode and ADS_TXT_API__MAX_BODY_BYTES to api.max_body_bytes.
"""

from __future__ import annotations

import codecs
from pathlib import Path
from typing import Literal

from pydantic import BaseModel, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

# Project root .env: three levels above src/ads_txt/config.py, independent of the cwd.
_ENV_FILE = Path(__file__).parent.parent.parent / ".env"

ParseMode = Literal["strict", "lenient"]


class ParseSettings(BaseModel):
    """
    How ads.txt text is read and parsed.

    strict  — stop at the first line that is neither a record nor a variable
    lenient — keep going and report every such line
    """

    mode: ParseMode = Field(default="lenient", description="Default parse mode")
    encoding: str = Field(default="utf-8", description="Text encoding used to read files")

    @field_validator("encoding")
    @classmethod
    def validate_encoding(cls, value: str) -> str:
        """Reject codec names Python does not know."""
        try:
            codecs.lookup(value)
        except LookupError as e:
            raise ValueError(f"Unknown text encoding: {value!r}") from e
        return value


class ApiSettings(BaseModel):
    """HTTP service limits."""

    max_body_bytes: int = Field(
        default=1_048_576,
        ge=1,
        description="Largest ads.txt body accepted by POST /parse",
    )


class AppSettings(BaseSettings):
    """
    Root application settings — aggregates all sub-settings.

    Load order (highest priority first):
      1. Environment variables (ADS_TXT_ prefix)
      2. .env file
      3. Default values
    """

    model_config = SettingsConfigDict(
        env_prefix="ADS_TXT_",
        env_file=_ENV_FILE,
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
        extra="ignore",
    )

    parse: ParseSettings = Field(default_factory=lambda: ParseSettings())
    api: ApiSettings = Field(default_factory=lambda: ApiSettings())

    log_level: str = Field(default="INFO")
