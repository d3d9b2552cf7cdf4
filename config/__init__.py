"""Settings modules selected by the APP_ENV environment variable."""
import os

_ALIASES = {
    "prod": "production",
    "production": "production",
    "test": "testing",
    "testing": "testing",
}


def get_settings_module() -> str:
    env = os.getenv("APP_ENV", "development").lower()
    # anything unrecognised falls back to development
    return f"config.{_ALIASES.get(env, 'development')}"
