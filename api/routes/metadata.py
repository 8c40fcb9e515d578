"""
metadata.py - /api/cache endpoints for cache stats and maintenance.
"""
import logging
from flask import Blueprint, current_app, jsonify, request

from api.schemas.asset_schema import CacheStatsSchema
from cache.asset_cache import cache_stats

logger = logging.getLogger("combiner")

meta_bp = Blueprint("meta", __name__, url_prefix="/api")

_store = None
_stats_schema = CacheStatsSchema()


def init_meta_bp(store):
    global _store
    _store = store


def _authorized():
    admin_key = request.headers.get("X-Admin-Key", "")
    return admin_key == current_app.config["CACHE_ADMIN_KEY"]


@meta_bp.route("/cache/stats")
def cache_stats_endpoint():
    return jsonify(_stats_schema.dump(cache_stats.to_dict()))


@meta_bp.route("/cache/clear", methods=["POST"])
def cache_clear():
    if not _authorized():
        return jsonify({"error": "Unauthorized"}), 403
    removed = _store.clear() if _store else 0
    cache_stats.record_clear()
    return jsonify({
        "status": "cleared",
        "removed": removed,
        "stats": _stats_schema.dump(cache_stats.to_dict()),
    })
