"""App-wide configuration, overridable through environment variables."""

import os


def _env_flag(name: str, default: bool = False) -> bool:
    value = os.environ.get(name)
    if value is None:
        return default
    return value.strip().lower() in {"1", "true", "yes", "on"}


class Config:
    CORS_ORIGINS = [
        origin.strip()
        for origin in os.environ.get(
            "NETWORTH_CORS_ORIGINS",
            "http://localhost:3000,http://localhost:5173,http://127.0.0.1:3000,http://127.0.0.1:5173",
        ).split(",")
        if origin.strip()
    ]

    # reject nonsensical parameter sets before projecting
    STRICT_VALIDATION = _env_flag("NETWORTH_STRICT_VALIDATION")

    LOG_LEVEL = os.environ.get("NETWORTH_LOG_LEVEL", "INFO").upper()

    PROJECTION_CACHE_SIZE = int(os.environ.get("NETWORTH_CACHE_SIZE", "256"))


class TestingConfig(Config):
    TESTING = True
    LOG_LEVEL = "DEBUG"
