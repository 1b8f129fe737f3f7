import pytest

import config.development
from config import get_settings_module, load_settings


@pytest.mark.parametrize(
    "env, expected",
    [
        ("production", "config.production"),
        ("PROD", "config.production"),
        ("testing", "config.testing"),
        ("development", "config.development"),
        ("staging", "config.development"),
    ],
)
def test_settings_module_follows_app_env(monkeypatch, env, expected):
    monkeypatch.setenv("APP_ENV", env)
    assert get_settings_module() == expected


def test_default_is_development(monkeypatch):
    monkeypatch.delenv("APP_ENV", raising=False)
    assert get_settings_module() == "config.development"


def test_testing_settings_fill_gaps_from_defaults():
    settings = load_settings("testing")

    assert settings.SETTINGS_MODULE == "config.testing"
    assert settings.TESTING is True
    assert settings.LOG_LEVEL == "WARNING"
    assert settings.AUTO_INIT_DB is False
    assert settings.LATE_CUTOFF_HOUR == 9
    assert settings.RECENT_HISTORY_LIMIT == 7
    assert settings.DB_CONFIG["database"] == "attendance_test"


def test_numeric_settings_are_coerced(monkeypatch):
    monkeypatch.setattr(config.development, "LATE_CUTOFF_HOUR", "10")
    assert load_settings("development").LATE_CUTOFF_HOUR == 10
