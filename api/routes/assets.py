"""
assets.py - /assets endpoint serving combined JS and CSS.

    GET /assets/css/reset,layout,print

resolves ``reset.css``, ``layout.css`` and ``print.css`` in the configured
CSS directory and returns them combined.
"""
import logging
from flask import Blueprint, request, make_response
from marshmallow import ValidationError

from api.schemas.asset_schema import AssetRequestSchema
from assets.errors import InvalidAssetName, UnknownAssetType
from assets.paths import parse_file_list
from services.logger import asset_extra

logger = logging.getLogger("combiner")

assets_bp = Blueprint("assets", __name__, url_prefix="/assets")

_request_schema = AssetRequestSchema()

# These get set by the app factory
_pipeline = None
_asset_dirs = {}
_max_age = 0


def init_assets_bp(pipeline, asset_dirs, max_age=0):
    global _pipeline, _asset_dirs, _max_age
    _pipeline = pipeline
    _asset_dirs = dict(asset_dirs)
    _max_age = max_age


def _load_request(asset_type, names):
    try:
        return _request_schema.load({"type": asset_type, "names": names})
    except ValidationError as e:
        if "type" in e.messages:
            raise UnknownAssetType(f"Unknown type: {asset_type!r}") from e
        raise InvalidAssetName("; ".join(e.messages.get("names", []))) from e


@assets_bp.route("/<asset_type>/<path:names>")
def serve(asset_type, names):
    data = _load_request(asset_type, names)
    asset_type = data["asset_type"]

    files = parse_file_list(data["names"], _asset_dirs.get(asset_type.value, ""), asset_type)
    result = _pipeline.fetch(
        files, asset_type, if_none_match=request.headers.get("If-None-Match")
    )

    if result.not_modified:
        response = make_response("", 304)
    else:
        response = make_response(result.content, 200)
    response.headers["Content-Type"] = result.content_type
    if result.etag:
        response.headers["ETag"] = result.etag
    if _max_age and not _pipeline.options.debug:
        response.headers["Cache-Control"] = f"public, max-age={_max_age}"
    logger.info(f"Served {asset_type.value} [{names}]",
                extra=asset_extra(result, response.status_code, files))
    return response
