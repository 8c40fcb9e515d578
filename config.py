"""
config.py - Application configuration classes.
"""

import os
import socket

from assets.types import BuildOptions, DEFAULT_CACHE_DIR

BASE_DIR = os.path.dirname(os.path.abspath(__file__))


def detect_dev_host(hostname=None):
    """Development machines are named ``dev...``."""
    if hostname is None:
        hostname = socket.gethostname()
    return hostname[:3] == "dev"


def _env_flag(name, default=None):
    value = os.environ.get(name)
    if value is None or value == "":
        return default
    return value.strip().lower() in ("1", "true", "yes", "on")


class Config:
    """Base configuration."""
    SECRET_KEY = os.environ.get("SECRET_KEY", "combiner-dev-key")
    BASE_DIR = BASE_DIR

    # Assets
    ASSETS_DIRS = {
        "js": os.environ.get("ASSETS_JS_DIR", os.path.join(BASE_DIR, "static", "js")),
        "css": os.environ.get("ASSETS_CSS_DIR", os.path.join(BASE_DIR, "static", "css")),
    }
    # Host named "dev..." unless ASSETS_DEV_HOST is set; picks minify/debug defaults
    ASSETS_DEV_HOST = _env_flag("ASSETS_DEV_HOST", detect_dev_host())
    ASSETS_CACHE_ENABLED = _env_flag("ASSETS_CACHE_ENABLED", True)
    ASSETS_CACHE_CREATE = _env_flag("ASSETS_CACHE_CREATE", True)
    ASSETS_CACHE_DIR = os.environ.get("ASSETS_CACHE_DIR", DEFAULT_CACHE_DIR)
    # None means "derive from ASSETS_DEV_HOST"
    ASSETS_MINIFY = _env_flag("ASSETS_MINIFY")
    ASSETS_DEBUG = _env_flag("ASSETS_DEBUG")
    ASSETS_MAX_AGE = 3600

    # Cache admin
    CACHE_ADMIN_KEY = os.environ.get("CACHE_ADMIN_KEY", "combiner-admin")

    # Compression
    COMPRESS_MIMETYPES = [
        "text/css", "text/javascript",
        "application/javascript", "application/x-javascript",
        "application/json",
    ]
    COMPRESS_MIN_SIZE = 256

    # Rate limiting
    RATELIMIT_DEFAULT = "600/minute"
    RATELIMIT_STORAGE_URI = "memory://"
    RATELIMIT_HEADERS_ENABLED = True

    # Logging
    LOG_DIR = os.path.join(BASE_DIR, "logs")
    LOG_LEVEL = "INFO"


class DevelopmentConfig(Config):
    DEBUG = True
    LOG_LEVEL = "DEBUG"


class ProductionConfig(Config):
    DEBUG = False
    ASSETS_MAX_AGE = 86400


class TestingConfig(Config):
    TESTING = True
    ASSETS_DEV_HOST = False
    ASSETS_MINIFY = None
    ASSETS_DEBUG = None
    RATELIMIT_ENABLED = False
    LOG_DIR = None
    COMPRESS_REGISTER = False


config_map = {
    "development": DevelopmentConfig,
    "production": ProductionConfig,
    "testing": TestingConfig,
}


def build_options_from_config(config):
    """Resolve BuildOptions from a Flask config (or any mapping)."""
    return BuildOptions.resolve(
        is_dev_host=config.get("ASSETS_DEV_HOST", False),
        cache_enabled=config.get("ASSETS_CACHE_ENABLED", True),
        cache_create=config.get("ASSETS_CACHE_CREATE", True),
        cache_dir=config.get("ASSETS_CACHE_DIR", DEFAULT_CACHE_DIR),
        minify=config.get("ASSETS_MINIFY"),
        debug=config.get("ASSETS_DEBUG"),
    )
