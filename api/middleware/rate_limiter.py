"""
rate_limiter.py - Flask-Limiter setup.

Limits come from the app config (RATELIMIT_DEFAULT, RATELIMIT_STORAGE_URI,
RATELIMIT_ENABLED) so each environment can tune them.
"""
import logging
from flask_limiter import Limiter
from flask_limiter.util import get_remote_address

logger = logging.getLogger("combiner")

limiter = Limiter(key_func=get_remote_address)


def init_limiter(app):
    """Initialize rate limiter on the Flask app."""
    limiter.init_app(app)
    logger.info(
        f"Rate limiter initialised: default={app.config.get('RATELIMIT_DEFAULT')}, "
        f"enabled={app.config.get('RATELIMIT_ENABLED', True)}"
    )
    return limiter
