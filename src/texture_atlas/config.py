"""Environment configuration; loads .env locally via python-dotenv."""

from __future__ import annotations

import logging
import os

from dotenv import load_dotenv
from pydantic import BaseModel, Field, field_validator

# Does not override variables already set in the environment
load_dotenv()

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


class Settings(BaseModel):
    """Defaults used when callers leave a packing option unset."""

    packer: str = Field(default="binary_tree", description="Default packer name")
    log_level: str = Field(default="INFO", description="Logging level name")

    @field_validator("log_level")
    @classmethod
    def _known_level(cls, value: str) -> str:
        level = value.strip().upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Unknown log level '{value}'")
        return level


def get_settings() -> Settings:
    """Read settings from the current environment."""
    return Settings(
        packer=os.getenv("TEXTURE_ATLAS_PACKER", "binary_tree"),
        log_level=os.getenv("TEXTURE_ATLAS_LOG_LEVEL", "INFO"),
    )


def setup_logging(log_level: str | int | None = None) -> None:
    """Setup basic logging configuration."""
    if log_level is None:
        log_level = get_settings().log_level
    logging.basicConfig(
        level=log_level,
        format=LOG_FORMAT,
        datefmt="%H:%M:%S",
    )
