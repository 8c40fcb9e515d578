"""
error_handler.py - Centralized error handling for the Flask app.
"""
import logging
import traceback
from flask import jsonify

from api.schemas.common import ErrorSchema
from assets.errors import AssetError

logger = logging.getLogger("combiner")

_error_schema = ErrorSchema()


def _error_response(status, error, message, errors=None):
    body = {"error": error, "message": message}
    if errors:
        body["errors"] = errors
    return jsonify(_error_schema.dump(body)), status


def register_error_handlers(app):
    """Register all error handlers on the Flask app."""

    @app.errorhandler(AssetError)
    def asset_error(e):
        if e.status_code >= 500:
            logger.error(f"{e.title}: {e}\n{traceback.format_exc()}")
        else:
            logger.warning(f"{e.title}: {e}")
        return _error_response(e.status_code, e.title, str(e))

    @app.errorhandler(400)
    def bad_request(e):
        return _error_response(400, "Bad Request", str(e))

    @app.errorhandler(403)
    def forbidden(e):
        return _error_response(403, "Forbidden", str(e))

    @app.errorhandler(404)
    def not_found(e):
        return _error_response(404, "Not Found", str(e))

    @app.errorhandler(429)
    def rate_limited(e):
        return _error_response(429, "Rate Limited", "Too many requests. Please slow down.")

    @app.errorhandler(500)
    def internal_error(e):
        logger.error(f"Internal error: {e}\n{traceback.format_exc()}")
        return _error_response(500, "Internal Server Error", "Something went wrong.")
