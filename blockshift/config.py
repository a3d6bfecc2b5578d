"""
Settings read from the environment.

BLOCKSHIFT_LOG_LEVEL                  logging level name (default WARNING)
BLOCKSHIFT_SUPPRESS_TRANSFORM_ERRORS  1/true/yes/on to turn transform exceptions into misses
"""

import logging
import os

from pydantic import BaseModel


_TRUE_VALUES = {"1", "true", "yes", "on"}


class Settings(BaseModel):
    log_level: str = "WARNING"
    suppress_transform_errors: bool = False


def get_settings() -> Settings:
    return Settings(
        log_level=os.getenv("BLOCKSHIFT_LOG_LEVEL", "WARNING").upper(),
        suppress_transform_errors=os.getenv("BLOCKSHIFT_SUPPRESS_TRANSFORM_ERRORS", "").strip().lower() in _TRUE_VALUES,
    )


def configure_logging(level: str | int | None = None) -> None:
    if level is None:
        level = get_settings().log_level
    logging.basicConfig(
        level=level,
        format='%(levelname)s:%(name)s: %(message)s',
        force=True
    )
