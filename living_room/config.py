"""Configuration defaults, environment overrides, and logging setup.

WHY: Centralizes the few configurable values so they are easy to find and
override without touching code. Deployments set them in a .env file.

HOW: python-dotenv loads the .env file on import. Values are module-level
constants read from os.environ with defaults. configure_logging() is the
single place where the package's logging format is decided.

RULES:
- All defaults can be overridden via environment variables
- Boolean settings accept "true"/"false" (case-insensitive)
- Library modules never call configure_logging(); applications do
"""

from __future__ import annotations

import logging
import os

from dotenv import load_dotenv

# Load .env from the project root (where the script is run from)
load_dotenv()

# ---------------------------------------------------------------------------
# Defaults
# ---------------------------------------------------------------------------

LOG_FORMAT = "%(asctime)s %(name)s %(levelname)s %(message)s"

LOG_LEVEL = os.getenv("LIVING_ROOM_LOG_LEVEL", "WARNING")
VALIDATE_TERMS = os.getenv("LIVING_ROOM_VALIDATE_TERMS", "true").lower() == "true"
DEFAULT_DESERIALIZER = os.getenv("LIVING_ROOM_DEFAULT_DESERIALIZER", "json")


def configure_logging(level: str | None = None) -> None:
    """Configure root logging for an application embedding the converter.

    WHY: The package itself only emits DEBUG records from its adapters.
    Applications that want to see them need one call, not a copy of the
    format string.

    RULES:
    - level defaults to LIVING_ROOM_LOG_LEVEL
    - Unknown level names raise ValueError
    """
    name = (level or LOG_LEVEL).upper()
    numeric = logging.getLevelName(name)
    if not isinstance(numeric, int):
        raise ValueError(f"Unknown log level: {name!r}")
    logging.basicConfig(level=numeric, format=LOG_FORMAT)
