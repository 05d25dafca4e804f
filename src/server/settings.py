from __future__ import annotations

import os
from functools import lru_cache
from pathlib import Path
from typing import List

from dotenv import load_dotenv
from pydantic import BaseModel, Field, field_validator

load_dotenv(override=False)


DEFAULT_CORS_ORIGINS = ["http://localhost:5173", "http://localhost:5174"]


class Settings(BaseModel):
    """Runtime configuration for the page list API."""

    environment: str = Field(default_factory=lambda: os.getenv("ENVIRONMENT", "dev"))
    pages_path: Path = Field(default_factory=lambda: Path(os.getenv("PAGES_PATH", "artifacts/pages.json")))
    indent_width: int = Field(default_factory=lambda: int(os.getenv("PAGE_INDENT_WIDTH", "2")))
    cors_origins: List[str] = Field(default_factory=lambda: os.getenv("CORS_ORIGINS"))

    model_config = {
        "frozen": True,
        "validate_default": True,
    }

    @field_validator("cors_origins", mode="before")
    @classmethod
    def _split_origins(cls, value: object) -> List[str]:
        if value is None:
            return list(DEFAULT_CORS_ORIGINS)
        if isinstance(value, str):
            if not value.strip():
                return list(DEFAULT_CORS_ORIGINS)
            return [origin.strip() for origin in value.split(",") if origin.strip()]
        return list(value)

    @field_validator("indent_width")
    @classmethod
    def _non_negative_indent(cls, value: int) -> int:
        if value < 0:
            raise ValueError("PAGE_INDENT_WIDTH must be zero or greater.")
        return value


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return a cached Settings instance for FastAPI dependency injection."""

    return Settings()


__all__ = ["Settings", "get_settings", "DEFAULT_CORS_ORIGINS"]
