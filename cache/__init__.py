# cache/__init__.py
from .asset_cache import (
    make_asset_cache_key,
    make_etag,
    cache_stats,
    AssetCacheStore,
    CacheEntry,
    CacheStats,
)

__all__ = [
    "make_asset_cache_key", "make_etag", "cache_stats",
    "AssetCacheStore", "CacheEntry", "CacheStats",
]
