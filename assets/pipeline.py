"""
pipeline.py - Cache-aware delivery of combined assets.

Ties the builder and the cache store together and decides whether the client
copy is still current. Knows nothing about HTTP beyond entity tags, so it can
be driven from a web route, a CLI or a test.
"""
import re
import logging

from assets.builder import AssetBuilder
from assets.paths import resolve_paths
from assets.types import AssetType
from cache.asset_cache import AssetCacheStore, cache_stats, make_asset_cache_key

logger = logging.getLogger("combiner")

# Compressed variants get the content coding appended to their entity tag.
_CODING_SUFFIX = re.compile(r':(?:gzip|br|deflate|zstd)"$')


class AssetResult:
    """Outcome of a fetch. ``content`` is empty when ``not_modified``."""

    def __init__(self, asset_type, content=b"", etag=None, not_modified=False,
                 source=None, key=None):
        self.asset_type = asset_type
        self.content = content
        self.etag = etag
        self.not_modified = not_modified
        self.source = source
        self.key = key

    @property
    def content_type(self):
        return self.asset_type.content_type

    def __repr__(self):
        return (f"<AssetResult {self.asset_type.value} source={self.source} "
                f"not_modified={self.not_modified} size={len(self.content)}>")


def etag_matches(etag, if_none_match):
    """Check an ``If-None-Match`` header value against ``etag``."""
    if not etag or not if_none_match:
        return False
    for candidate in if_none_match.split(","):
        candidate = candidate.strip()
        if candidate == "*":
            return True
        if candidate.startswith("W/"):
            candidate = candidate[2:]
        if candidate == etag or _CODING_SUFFIX.sub('"', candidate) == etag:
            return True
    return False


class AssetPipeline:
    """Serve combined files, rebuilding only when the cache is missing or stale."""

    def __init__(self, options, builder=None, store=None, stats=cache_stats):
        self.options = options
        self.builder = builder or AssetBuilder(options)
        self.stats = stats
        self.store = store
        if self.store is None and options.cache_enabled:
            self.store = AssetCacheStore(options.cache_dir, create=options.cache_create)

    def cache_key(self, files, asset_type):
        return make_asset_cache_key(
            files, asset_type, minify=self.options.minify, debug=self.options.debug
        )

    def fetch(self, files, asset_type, if_none_match=None):
        asset_type = AssetType.parse(asset_type)
        if not files:
            return AssetResult(asset_type, source="empty")

        files = resolve_paths(files)

        if not self.options.cache_enabled:
            content = self.builder.build(files, asset_type)
            if self.options.debug:
                content = b"/* built on the fly */\n\n" + content
            return AssetResult(asset_type, content, source="build")

        key = self.cache_key(files, asset_type)
        entry = self.store.lookup(key)

        if entry is not None and self.store.is_stale(entry, files):
            logger.info("Cache entry is older than its sources, rebuilding",
                        extra={"asset_type": asset_type.value, "asset_key": key})
            self.store.invalidate(entry)
            self.stats.record_invalidation()
            entry = None

        if entry is not None and etag_matches(entry.etag, if_none_match):
            self.stats.record_not_modified()
            return AssetResult(asset_type, etag=entry.etag, not_modified=True,
                               source="cache", key=key)

        if entry is None:
            self.stats.record_miss()
            entry = self.store.store(key, self.builder.build(files, asset_type))
            source, note = "build", "created"
        else:
            self.stats.record_hit()
            source, note = "cache", "loaded"

        content = entry.content
        etag = entry.etag
        if self.options.debug:
            # The provenance comment differs per request, so no entity tag.
            content = f"/* {note} cache file: {entry.path} */\n\n".encode("utf-8") + content
            etag = None
        return AssetResult(asset_type, content, etag=etag, source=source, key=key)
