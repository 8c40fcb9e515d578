"""
asset_schema.py - Marshmallow schemas for asset requests.
"""
from marshmallow import Schema, fields, validate, validates, ValidationError, post_load

from assets.types import AssetType


class AssetRequestSchema(Schema):
    asset_type = fields.String(
        required=True,
        data_key="type",
        validate=validate.OneOf(
            [t.value for t in AssetType], error="Unknown type"
        ),
    )
    names = fields.String(required=True)

    @validates("names")
    def validate_names(self, value, **kwargs):
        if not value or not value.strip(" ,/"):
            raise ValidationError("At least one file name is required")

    @post_load
    def to_asset_type(self, data, **kwargs):
        data["asset_type"] = AssetType.parse(data["asset_type"])
        return data


class CacheStatsSchema(Schema):
    hits = fields.Integer()
    misses = fields.Integer()
    total_requests = fields.Integer()
    hit_rate_pct = fields.Float()
    invalidations = fields.Integer()
    not_modified = fields.Integer()
    cache_clears = fields.Integer()
    last_clear = fields.String(allow_none=True)
