"""
app.py - Application factory for the asset combiner.

Usage:
    flask --app "app:create_app('production')" run
"""

import os
from flask import Flask
from flask_compress import Compress

from config import config_map, build_options_from_config

from api.middleware.rate_limiter import init_limiter
from api.middleware.error_handler import register_error_handlers
from assets.pipeline import AssetPipeline
from services.logger import setup_logging

from api.routes.assets import assets_bp, init_assets_bp
from api.routes.health import health_bp, init_health_bp
from api.routes.metadata import meta_bp, init_meta_bp


def create_app(config_name="development", overrides=None):
    """Flask application factory."""
    app = Flask(__name__)

    # ── Configuration ──
    app.config.from_object(config_map[config_name])
    if overrides:
        app.config.update(overrides)

    # ── Setup Logging ──
    logger = setup_logging(app.config["LOG_DIR"], app.config["LOG_LEVEL"])
    logger.info(f"Starting asset combiner ({config_name} mode)")

    # ── Initialize Extensions ──
    Compress(app)
    init_limiter(app)
    register_error_handlers(app)

    # ── Initialize Core Services ──
    options = build_options_from_config(app.config)
    pipeline = AssetPipeline(options)
    logger.info(
        f"Asset options: cache={options.cache_enabled} dir={options.cache_dir} "
        f"minify={options.minify} debug={options.debug}"
    )

    # ── Initialize Blueprint Dependencies ──
    init_assets_bp(pipeline, app.config["ASSETS_DIRS"], app.config["ASSETS_MAX_AGE"])
    init_health_bp(options)
    init_meta_bp(pipeline.store)

    # ── Register Blueprints ──
    app.register_blueprint(assets_bp)
    app.register_blueprint(health_bp)
    app.register_blueprint(meta_bp)

    app.extensions["asset_pipeline"] = pipeline
    return app


if __name__ == "__main__":
    create_app(os.environ.get("FLASK_ENV", "development")).run(host="0.0.0.0", port=5000)
