"""Application configuration loaded from environment variables."""

from __future__ import annotations

import logging
from pathlib import Path

from pydantic_settings import BaseSettings

from tft.dates import DEFAULT_DISPLAY_FORMAT

PACKAGE_RULES_DIR = Path(__file__).parent / "rules"


class Settings(BaseSettings):
    """All configuration is loaded from .env or TFT_* environment variables."""

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8", "env_prefix": "TFT_", "extra": "ignore"}

    log_level: str = "WARNING"

    # Rule file with category labels and citations
    rules_dir: str = str(PACKAGE_RULES_DIR)
    rule_file: str = "crrlj_3_3"

    # Display
    date_display_format: str = DEFAULT_DISPLAY_FORMAT

    @property
    def rules_path(self) -> Path:
        return Path(self.rules_dir)


def get_settings() -> Settings:
    return Settings()


def setup_logging(level: str | int = "WARNING", verbose: bool = False) -> None:
    """Configure root logging once for the CLI."""
    if verbose:
        level = logging.DEBUG
    logging.basicConfig(
        level=level.upper() if isinstance(level, str) else level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S",
    )
