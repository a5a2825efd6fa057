"""Settings selection.

FLEXITIME_ENV (or APP_ENV) names the settings module; a `.env` file in the
working directory is loaded first so it can set either variable.
"""

import importlib
import os
from types import ModuleType

from dotenv import load_dotenv

_ENVIRONMENTS = {
    "dev": "development",
    "development": "development",
    "test": "testing",
    "testing": "testing",
    "prod": "production",
    "production": "production",
}


def get_settings_module() -> str:
    env = os.getenv("FLEXITIME_ENV") or os.getenv("APP_ENV") or "development"
    return "config." + _ENVIRONMENTS.get(env.strip().lower(), "development")


def load_settings() -> ModuleType:
    load_dotenv(override=False)
    return importlib.import_module(get_settings_module())
