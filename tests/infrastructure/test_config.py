"""Tests for building Settings from the environment."""

from pathlib import Path

import pytest

from eventmgmt.infrastructure.config import Settings


def test_defaults():
    settings = Settings.from_env({})
    assert settings.data_dir == Path("data")
    assert settings.log_level == "INFO"
    assert settings.environment == "development"
    assert not settings.is_production


def test_reads_environment():
    settings = Settings.from_env(
        {
            "EVENTMGMT_DATA_DIR": "/srv/events",
            "LOG_LEVEL": "debug",
            "ENVIRONMENT": "Production",
        }
    )
    assert settings.data_dir == Path("/srv/events")
    assert settings.log_level == "DEBUG"
    assert settings.is_production


def test_settings_are_immutable():
    settings = Settings.from_env({})
    with pytest.raises(AttributeError):
        settings.log_level = "DEBUG"  # type: ignore[misc]
