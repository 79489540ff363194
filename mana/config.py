# mana/config.py
import os
from dotenv import load_dotenv

load_dotenv()

def _as_bool(val: str | None, default=False) -> bool:
    if val is None:
        return default
    return str(val).strip().lower() in {"1", "true", "yes", "on"}

def _as_list(val: str | None, default: list[str]) -> list[str]:
    if not val:
        return list(default)
    return [v.strip() for v in val.split(",") if v.strip()]

class Config:
    # --- Core ---
    SECRET_KEY = os.getenv("SECRET_KEY") or os.getenv("AUTH_SECRET", "mana-industrial-dev-secret")
    APP_VERSION = os.getenv("APP_VERSION")
    SITE_URL = os.getenv("SITE_URL", "https://mana-industrial.com")

    # DB
    SQLALCHEMY_DATABASE_URI = (
        os.getenv("SQLALCHEMY_DATABASE_URI")
        or os.getenv("DATABASE_URL")
        or "sqlite:///mana.db"
    )
    SQLALCHEMY_TRACK_MODIFICATIONS = False
    SQLALCHEMY_ENGINE_OPTIONS = {"pool_pre_ping": True}

    # CSRF (HTML forms only; the JSON API is exempt)
    WTF_CSRF_TIME_LIMIT = None

    # --- i18n ---
    LANGUAGES = _as_list(os.getenv("LANGUAGES"), ["en", "fr", "ar"])
    RTL_LANGUAGES = {"ar"}
    BABEL_DEFAULT_LOCALE = os.getenv("BABEL_DEFAULT_LOCALE", "en")
    BABEL_DEFAULT_TIMEZONE = os.getenv("BABEL_DEFAULT_TIMEZONE", "UTC")

    # --- Admin auth token ---
    AUTH_COOKIE_NAME = os.getenv("AUTH_COOKIE_NAME", "mana_admin_token")
    AUTH_TOKEN_SALT = os.getenv("AUTH_TOKEN_SALT", "mana-admin-session")
    AUTH_TOKEN_MAX_AGE = int(os.getenv("AUTH_TOKEN_MAX_AGE", str(8 * 60 * 60)))  # 8h
    ADMIN_ROLE = "ADMIN"

    # --- Uploads / media host ---
    MAX_CONTENT_LENGTH = int(os.getenv("MAX_CONTENT_LENGTH", str(25 * 1024 * 1024)))  # 25MB
    CV_MAX_BYTES = int(os.getenv("CV_MAX_BYTES", str(5 * 1024 * 1024)))  # 5MB
    CLOUDINARY_CLOUD_NAME = os.getenv("CLOUDINARY_CLOUD_NAME")
    CLOUDINARY_API_KEY = os.getenv("CLOUDINARY_API_KEY")
    CLOUDINARY_API_SECRET = os.getenv("CLOUDINARY_API_SECRET")
    CLOUDINARY_FOLDER = os.getenv("CLOUDINARY_FOLDER", "mana-uploads")
    UPLOAD_TIMEOUT = int(os.getenv("UPLOAD_TIMEOUT", "30"))

    # --- Rendered page data ---
    PAGE_CACHE_SECONDS = int(os.getenv("PAGE_CACHE_SECONDS", "300"))

    # --- Logging ---
    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
    LOG_DIR = os.getenv("LOG_DIR", "logs")
    LOG_FILENAME = os.getenv("LOG_FILENAME", "mana.log")
    LOG_JSON = _as_bool(os.getenv("LOG_JSON", "0"))

    # --- Sentry ---
    SENTRY_DSN = os.getenv("SENTRY_DSN", "")
    SENTRY_TRACES_SAMPLE_RATE = float(os.getenv("SENTRY_TRACES_SAMPLE_RATE", "0.0"))

    # --- Security cookies (recommended for prod) ---
    SESSION_COOKIE_SECURE = _as_bool(os.getenv("SESSION_COOKIE_SECURE", "1"))
    SESSION_COOKIE_HTTPONLY = True
    SESSION_COOKIE_SAMESITE = os.getenv("SESSION_COOKIE_SAMESITE", "Lax")
    PREFERRED_URL_SCHEME = os.getenv("PREFERRED_URL_SCHEME", "https")


class TestConfig(Config):
    TESTING = True
    SECRET_KEY = "test-secret"
    SQLALCHEMY_DATABASE_URI = "sqlite://"
    SQLALCHEMY_ENGINE_OPTIONS = {}
    WTF_CSRF_ENABLED = False
    SESSION_COOKIE_SECURE = False
    CLOUDINARY_CLOUD_NAME = "demo-cloud"
    CLOUDINARY_API_KEY = "key-123"
    CLOUDINARY_API_SECRET = "secret-456"
    LOG_LEVEL = "WARNING"
    SENTRY_DSN = ""
