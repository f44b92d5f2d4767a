"""Runtime settings read from the environment (and an optional .env file)."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

INVENTORY_PATH_VAR = "CHECKOUT_INVENTORY_PATH"
LOG_LEVEL_VAR = "CHECKOUT_LOG_LEVEL"

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Settings:
    """Process-wide settings.

    ``inventory_path`` is None when no override is configured, in which case
    the bundled inventory definition is used.
    """

    inventory_path: Path | None = None
    log_level: str = "WARNING"

    @classmethod
    def from_env(cls) -> "Settings":
        load_dotenv()
        raw_path = os.getenv(INVENTORY_PATH_VAR)
        level = os.getenv(LOG_LEVEL_VAR, "WARNING").strip().upper()
        if level not in logging.getLevelNamesMapping():
            logger.warning("Unknown %s %r, using WARNING", LOG_LEVEL_VAR, level)
            level = "WARNING"

        match raw_path:
            case str(p) if p.strip():
                inventory_path: Path | None = Path(p.strip())
            case _:
                inventory_path = None

        return cls(inventory_path=inventory_path, log_level=level)


def configure_logging(settings: Settings | None = None) -> None:
    """Apply the configured level to the package logger."""
    settings = settings or Settings.from_env()
    logging.getLogger("checkout").setLevel(settings.log_level)
