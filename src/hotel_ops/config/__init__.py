import os


def get_settings_module() -> str:
    # APP_ENV picks the settings module, defaulting to development
    env = os.getenv("APP_ENV", "development").lower()

    if env in {"prod", "production"}:
        return "hotel_ops.config.production"

    if env in {"test", "testing"}:
        return "hotel_ops.config.testing"

    return "hotel_ops.config.development"


def _optional_int(value):
    if value is None or str(value).strip() == "":
        return None
    return int(value)
