"""Configuration: database path, API binding, CORS and randomness settings."""

from __future__ import annotations

import os
from pathlib import Path

# Database
DB_PATH = Path(os.getenv("VAMOS_DB_PATH", "data/vamos.db"))

# API
API_HOST = os.getenv("VAMOS_API_HOST", "0.0.0.0")
API_PORT = int(os.getenv("VAMOS_API_PORT", "8080"))

# Comma-separated list; "*" allows any origin
CORS_ORIGINS = [
    origin.strip()
    for origin in os.getenv("VAMOS_CORS_ORIGINS", "*").split(",")
    if origin.strip()
]

LOG_LEVEL = os.getenv("VAMOS_LOG_LEVEL", "INFO").upper()


class ConfigError(ValueError):
    """An environment variable holds an unusable value."""


def get_random_seed() -> int | None:
    """Seed for the mix random source, or None for an unseeded generator."""
    raw = os.getenv("VAMOS_RANDOM_SEED", "").strip()
    if not raw:
        return None
    try:
        return int(raw)
    except ValueError as e:
        raise ConfigError(f"VAMOS_RANDOM_SEED must be an integer, got {raw!r}") from e
