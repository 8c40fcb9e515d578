"""
types.py - Asset types and per-build options.
"""
import os
from collections import namedtuple
from enum import Enum

from assets.errors import UnknownAssetType

DEFAULT_CACHE_DIR = "/tmp/cb_min"


class AssetType(Enum):
    JS = "js"
    CSS = "css"

    @property
    def extension(self):
        return self.value

    @property
    def mime_type(self):
        return _MIME_TYPES[self]

    @property
    def content_type(self):
        return f"{self.mime_type};charset=utf-8"

    @classmethod
    def parse(cls, value):
        """Accept an ``AssetType`` or its name (``"js"``, ``"CSS"``, ...)."""
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            raise UnknownAssetType(f"Unknown type: {value!r}") from None


_MIME_TYPES = {
    AssetType.JS: "application/x-javascript",
    AssetType.CSS: "text/css",
}


_BuildOptionsBase = namedtuple(
    "_BuildOptionsBase",
    ["cache_enabled", "cache_create", "cache_dir", "minify", "debug"],
)


class BuildOptions(_BuildOptionsBase):
    """Immutable options for a single build.

    ``minify`` and ``debug`` default to opposite values derived from
    ``is_dev_host``: development hosts get readable, annotated output,
    everything else gets minified output. Explicit values always win.
    """
    __slots__ = ()

    @classmethod
    def resolve(cls, is_dev_host=False, cache_enabled=True, cache_create=True,
                cache_dir=DEFAULT_CACHE_DIR, minify=None, debug=None):
        if cache_dir is not None:
            cache_dir = str(cache_dir).rstrip(os.sep) or os.sep
        return cls(
            cache_enabled=bool(cache_enabled),
            cache_create=bool(cache_create),
            cache_dir=cache_dir,
            minify=(not is_dev_host) if minify is None else bool(minify),
            debug=bool(is_dev_host) if debug is None else bool(debug),
        )
