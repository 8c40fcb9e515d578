"""
health.py - /api/health endpoint for readiness and liveness probes.
"""
import os
import logging
from flask import Blueprint, jsonify
from datetime import datetime

logger = logging.getLogger("combiner")

health_bp = Blueprint("health", __name__, url_prefix="/api")

_options = None


def init_health_bp(options):
    global _options
    _options = options


def _cache_writable():
    if _options is None or not _options.cache_enabled:
        return None
    cache_dir = _options.cache_dir
    return os.path.isdir(cache_dir) and os.access(cache_dir, os.W_OK | os.X_OK)


@health_bp.route("/health")
def health():
    """Health check / liveness probe."""
    writable = _cache_writable()
    checks = {
        "status": "ok" if writable is not False else "degraded",
        "timestamp": datetime.utcnow().isoformat() + "Z",
        "cache_enabled": bool(_options and _options.cache_enabled),
        "cache_writable": writable,
        "minify": bool(_options and _options.minify),
        "debug": bool(_options and _options.debug),
    }
    status_code = 200 if writable is not False else 503
    return jsonify(checks), status_code
