"""
Application configuration.

Values come from the process environment (a local .env file is loaded first).
`create_app(config_overrides)` applies overrides on top of this class, which is
how the test-suite swaps in an in-memory Mongo client and fake credentials.
"""
import os
from pathlib import Path

from dotenv import load_dotenv

load_dotenv()

PACKAGE_DIR = Path(__file__).resolve().parent


def _env(*names, default=None):
    """Return the first non-empty environment variable among `names`."""
    for name in names:
        value = os.getenv(name)
        if value:
            return value
    return default


def _env_bool(name: str, default: bool = False) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in ("1", "true", "yes", "on")


class Config:
    SECRET_KEY = _env("SECRET_KEY", default="dev-secret-change-me")
    LOG_LEVEL = _env("LOG_LEVEL", default="INFO")

    # Database
    MONGODB_URI = _env("MONGODB_URI", default="mongodb://localhost:27017")
    MONGODB_DB = _env("MONGODB_DB", default="carbooking")
    MONGO_CLIENT_CLASS = None  # tests inject mongomock.MongoClient

    # SMTP relay (Gmail over SSL unless told otherwise)
    EMAIL_USER = _env("EMAIL_USER")
    EMAIL_PASS = _env("EMAIL_PASS")
    ADMIN_EMAIL = _env("ADMIN_EMAIL")
    MAIL_SERVER = _env("MAIL_SERVER", default="smtp.gmail.com")
    MAIL_PORT = int(_env("MAIL_PORT", default="465"))
    MAIL_USE_SSL = _env_bool("MAIL_USE_SSL", default=True)
    MAIL_USE_TLS = _env_bool("MAIL_USE_TLS", default=False)

    # PayPal
    PAYPAL_CLIENT_ID = _env("NEXT_PUBLIC_PAYPAL_CLIENT_ID", "PAYPAL_CLIENT_ID")
    PAYPAL_CLIENT_SECRET = _env("PAYPAL_CLIENT_SECRET")
    PAYPAL_MODE = _env("PAYPAL_MODE", default="sandbox")

    # TomTom
    TOMTOM_API_KEY = _env("NEXT_PUBLIC_TOMTOM_API_KEY", "TOMTOM_API_KEY")

    # Clerk (admin access gate)
    CLERK_PUBLISHABLE_KEY = _env("NEXT_PUBLIC_CLERK_PUBLISHABLE_KEY", "CLERK_PUBLISHABLE_KEY")
    CLERK_SECRET_KEY = _env("CLERK_SECRET_KEY")
    ADMIN_PATH_PREFIX = "/admin"

    # Misc
    CORS_ORIGINS = [o.strip() for o in _env("CORS_ORIGINS", default="*").split(",") if o.strip()]
    UPLOAD_FOLDER = _env("UPLOAD_FOLDER", default=str(PACKAGE_DIR / "static" / "uploads"))
    MAX_CONTENT_LENGTH = 8 * 1024 * 1024
    DISPLAY_TIMEZONE = _env("DISPLAY_TIMEZONE", default="UTC")
    HTTP_TIMEOUT = float(_env("HTTP_TIMEOUT", default="10"))


def apply_mail_settings(config) -> None:
    """Derive the Flask-Mail keys from EMAIL_USER / EMAIL_PASS."""
    user = config.get("EMAIL_USER")
    password = config.get("EMAIL_PASS")
    config["MAIL_USERNAME"] = user
    config["MAIL_PASSWORD"] = password
    config["MAIL_DEFAULT_SENDER"] = user
    config["MAIL_CONFIGURED"] = bool(user and password)
    if not config.get("ADMIN_EMAIL"):
        config["ADMIN_EMAIL"] = user
