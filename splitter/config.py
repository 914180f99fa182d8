"""Configuration for the file splitter."""
import logging
from functools import lru_cache
from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings

LOG_FORMAT = '%(asctime)s - %(levelname)s - %(message)s'


class Settings(BaseSettings):
    app_name: str = "large-file-splitter"
    log_level: str = "WARNING"
    copy_block_size: int = Field(default=1024 * 1024, gt=0)

    class Config:
        env_prefix = "SPLITTER_"


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()


def configure_logging(level: Optional[str] = None) -> None:
    """Send diagnostics to stderr; console status lines stay on stdout."""
    level_name = (level or get_settings().log_level).upper()
    logging.basicConfig(
        level=getattr(logging, level_name, logging.WARNING),
        format=LOG_FORMAT,
    )
