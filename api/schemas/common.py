"""
common.py - Shared schemas.
"""
from marshmallow import Schema, fields


class ErrorSchema(Schema):
    error = fields.String()
    message = fields.String()
    errors = fields.Dict()
