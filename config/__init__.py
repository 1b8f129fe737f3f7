"""Settings for the attendance tracker.

APP_ENV selects one of the modules in this package. Anything a module leaves
out falls back to DEFAULTS, so load_settings() always returns a complete set.
"""

from __future__ import annotations

import importlib
import os
from types import SimpleNamespace

ENVIRONMENTS = {
    "development": "config.development",
    "dev": "config.development",
    "production": "config.production",
    "prod": "config.production",
    "testing": "config.testing",
    "test": "config.testing",
}

DEFAULTS = {
    "DEBUG": False,
    "TESTING": False,
    "LOG_LEVEL": "INFO",
    "LOG_JSON": False,
    "LATE_CUTOFF_HOUR": 9,
    "RECENT_HISTORY_LIMIT": 7,
    "AUTO_INIT_DB": False,
    "AUTO_SEED_DB": False,
}

REQUIRED = ("SECRET_KEY", "DB_CONFIG")


def get_settings_module(env: str | None = None) -> str:
    """Module path for env (default: APP_ENV); unknown names fall back to development."""
    name = (env or os.getenv("APP_ENV") or "development").strip().lower()
    return ENVIRONMENTS.get(name, "config.development")


def load_settings(env: str | None = None) -> SimpleNamespace:
    module_name = get_settings_module(env)
    module = importlib.import_module(module_name)

    values = dict(DEFAULTS)
    values.update({key: value for key, value in vars(module).items() if key.isupper()})
    missing = [key for key in REQUIRED if key not in values]
    if missing:
        raise RuntimeError(f"{module_name} is missing required settings: {', '.join(missing)}")

    values["LATE_CUTOFF_HOUR"] = int(values["LATE_CUTOFF_HOUR"])
    values["RECENT_HISTORY_LIMIT"] = int(values["RECENT_HISTORY_LIMIT"])
    values["SETTINGS_MODULE"] = module_name
    return SimpleNamespace(**values)
