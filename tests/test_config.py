"""Tests for settings and logging setup."""

import logging
import pytest

from ledgerkeeper.config import Settings, SettingsError, load_settings
from ledgerkeeper.logging_config import setup_logging, teardown_logging


def test_defaults():
    assert load_settings({}) == Settings()


def test_reads_environment():
    settings = load_settings(
        {
            "LEDGERKEEPER_DATABASE_URL": "postgresql://church@db/finance",
            "LEDGERKEEPER_DB_PATH": "/tmp/ledger.db",
            "LEDGERKEEPER_LOG_LEVEL": "debug",
            "LEDGERKEEPER_RATE_LIMIT": "10",
            "LEDGERKEEPER_RATE_WINDOW": "30.5",
            "LEDGERKEEPER_WRITE_RETRIES": "2",
        }
    )

    assert settings.database_url == "postgresql://church@db/finance"
    assert settings.db_path == "/tmp/ledger.db"
    assert settings.log_level == "DEBUG"
    assert settings.rate_limit == 10
    assert settings.rate_window_seconds == 30.5
    assert settings.write_retries == 2


@pytest.mark.parametrize(
    "env",
    [
        {"LEDGERKEEPER_RATE_LIMIT": "many"},
        {"LEDGERKEEPER_RATE_LIMIT": "0"},
        {"LEDGERKEEPER_WRITE_RETRIES": "-1"},
        {"LEDGERKEEPER_RATE_WINDOW": "soon"},
        {"LEDGERKEEPER_RATE_WINDOW": "0"},
    ],
)
def test_invalid_values(env):
    with pytest.raises(SettingsError):
        load_settings(env)


def test_setup_logging_does_not_stack_handlers():
    try:
        setup_logging("INFO")
        root = setup_logging("DEBUG")

        owned = [h for h in root.handlers if getattr(h, "_ledgerkeeper", False)]
        assert len(owned) == 1
        assert root.level == logging.DEBUG
        assert logging.getLogger("sqlalchemy.engine").level == logging.WARNING
    finally:
        teardown_logging()

    assert not [h for h in logging.getLogger().handlers if getattr(h, "_ledgerkeeper", False)]


def test_setup_logging_rejects_unknown_level():
    with pytest.raises(ValueError):
        setup_logging("LOUD")


def test_cli_log_level_defaults_to_settings_default():
    from ledgerkeeper.cli.main import cli

    option = next(param for param in cli.params if param.name == "log_level")
    assert option.default == Settings().log_level == "INFO"
