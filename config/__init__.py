"""Environment selection for the settings modules.

``APP_ENV`` names the environment; unknown or missing values run with the
development settings.
"""

import importlib
import os
from types import ModuleType

_ENVIRONMENTS = {
    "prod": "production",
    "production": "production",
    "test": "testing",
    "testing": "testing",
    "dev": "development",
    "development": "development",
}


def get_settings_module() -> str:
    env = os.getenv("APP_ENV", "development").strip().lower()
    return f"config.{_ENVIRONMENTS.get(env, 'development')}"


def load_settings() -> ModuleType:
    return importlib.import_module(get_settings_module())
