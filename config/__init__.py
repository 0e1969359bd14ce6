"""Settings modules for the dashboard.

``APP_ENV`` picks one of them; unknown values fall back to development.
"""
import os

_ENV_ALIASES = {
    "prod": "production",
    "production": "production",
    "test": "testing",
    "testing": "testing",
    "dev": "development",
    "development": "development",
}


def get_settings_module() -> str:
    env = os.getenv("APP_ENV", "development").strip().lower()
    return f"config.{_ENV_ALIASES.get(env, 'development')}"
