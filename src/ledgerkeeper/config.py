"""Runtime settings loaded from the environment."""

import os
from dataclasses import dataclass
from typing import Mapping, Optional


class SettingsError(ValueError):
    """An environment variable holds an invalid value."""


@dataclass(frozen=True)
class Settings:
    """Application settings.

    Immutable so a running app cannot drift from its configuration.
    """

    database_url: Optional[str] = None
    db_path: Optional[str] = None
    log_level: str = "INFO"
    rate_limit: int = 60
    rate_window_seconds: float = 60.0
    write_retries: int = 0


def _int(env: Mapping[str, str], key: str, default: int, minimum: int) -> int:
    raw = env.get(key)
    if raw is None or raw == "":
        return default
    try:
        value = int(raw)
    except ValueError:
        raise SettingsError(f"{key} must be an integer, got '{raw}'") from None
    if value < minimum:
        raise SettingsError(f"{key} must be at least {minimum}, got {value}")
    return value


def load_settings(env: Optional[Mapping[str, str]] = None) -> Settings:
    """Build Settings from LEDGERKEEPER_* environment variables.

    Args:
        env: Mapping to read from (defaults to os.environ)

    Returns:
        Settings instance

    Raises:
        SettingsError: If a numeric variable is malformed or out of range
    """
    if env is None:
        env = os.environ

    window = env.get("LEDGERKEEPER_RATE_WINDOW")
    try:
        rate_window_seconds = float(window) if window else 60.0
    except ValueError:
        raise SettingsError(f"LEDGERKEEPER_RATE_WINDOW must be a number, got '{window}'") from None
    if rate_window_seconds <= 0:
        raise SettingsError("LEDGERKEEPER_RATE_WINDOW must be positive")

    return Settings(
        database_url=env.get("LEDGERKEEPER_DATABASE_URL") or None,
        db_path=env.get("LEDGERKEEPER_DB_PATH") or None,
        log_level=(env.get("LEDGERKEEPER_LOG_LEVEL") or "INFO").upper(),
        rate_limit=_int(env, "LEDGERKEEPER_RATE_LIMIT", 60, minimum=1),
        rate_window_seconds=rate_window_seconds,
        write_retries=_int(env, "LEDGERKEEPER_WRITE_RETRIES", 0, minimum=0),
    )
