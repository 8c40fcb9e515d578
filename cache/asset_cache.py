"""
asset_cache.py - On-disk cache for combined assets.

Entries live in a flat directory, one file per key, holding exactly the built
bytes. The entry's own modification time is the only metadata: an entry is
stale as soon as any of its source files is newer.
"""
import os
import zlib
import hashlib
import logging
import tempfile
from datetime import datetime
from threading import Lock

from assets.errors import CacheDirUnavailable, CacheWriteFailed, FileNotFound
from assets.types import AssetType

logger = logging.getLogger("combiner")


# ── Cache key generator ────────────────────────────────────────────────────

def make_asset_cache_key(files, asset_type, minify=False, debug=False):
    """
    Generate a deterministic cache key for a file set.

    The digest covers the ordered, ";"-joined real paths, so the same files
    in a different order produce a different key. Active options are
    appended as dotted attributes, the type as the extension:
    ``<md5>.min.css``, ``<md5>.dbg.js``, ``<md5>.js``.
    """
    asset_type = AssetType.parse(asset_type)
    joined = ";".join(os.path.realpath(f) for f in files)
    digest = hashlib.md5(joined.encode("utf-8")).hexdigest()

    attributes = []
    if minify:
        attributes.append("min")
    if debug:
        attributes.append("dbg")
    suffix = "".join(f".{a}" for a in attributes)
    return f"{digest}{suffix}.{asset_type.extension}"


def make_etag(key, size, mtime_ns):
    """Quoted entity tag from the entry's identity: key, size and mtime."""
    return f'"{zlib.crc32(key.encode("utf-8")):x}-{size:x}-{mtime_ns:x}"'


# ── Entries ───────────────────────────────────────────────────────────────

class CacheEntry:
    """A snapshot of one cache file: its bytes and the stat they came with."""

    def __init__(self, key, path, content, mtime, mtime_ns):
        self.key = key
        self.path = path
        self.content = content
        self.mtime = mtime
        self.mtime_ns = mtime_ns

    @property
    def size(self):
        return len(self.content)

    @property
    def etag(self):
        return make_etag(self.key, self.size, self.mtime_ns)

    def __repr__(self):
        return f"<CacheEntry {self.key} size={self.size}>"


class AssetCacheStore:
    """Flat directory of built artifacts."""

    def __init__(self, cache_dir, create=True):
        self.cache_dir = cache_dir
        if not os.path.isdir(cache_dir):
            if not create:
                raise CacheDirUnavailable(cache_dir)
            try:
                os.makedirs(cache_dir, mode=0o755, exist_ok=True)
            except OSError as e:
                raise CacheDirUnavailable(cache_dir) from e
            logger.info(f"Created asset cache directory {cache_dir}")

    def entry_path(self, key):
        return os.path.join(self.cache_dir, key)

    def lookup(self, key):
        """Return the CacheEntry for ``key``, or None if there is none."""
        path = self.entry_path(key)
        try:
            with open(path, "rb") as f:
                st = os.fstat(f.fileno())
                content = f.read()
        except FileNotFoundError:
            return None
        return CacheEntry(key, path, content, st.st_mtime, st.st_mtime_ns)

    @staticmethod
    def is_stale(entry, source_files):
        """True if any source file was modified after the entry was written."""
        for filename in source_files:
            try:
                mtime_ns = os.stat(filename).st_mtime_ns
            except FileNotFoundError:
                raise FileNotFound(filename) from None
            if mtime_ns > entry.mtime_ns:
                return True
        return False

    def invalidate(self, entry):
        try:
            os.unlink(entry.path)
        except FileNotFoundError:
            # Another request got there first.
            pass
        logger.info(f"Invalidated cache entry {entry.key}")

    def store(self, key, content):
        """
        Write ``content`` under ``key`` and return the new entry.

        The bytes go to a temporary file in the cache directory first and are
        renamed into place, so readers never see a partial artifact.
        """
        path = self.entry_path(key)
        tmp_path = None
        try:
            fd, tmp_path = tempfile.mkstemp(prefix=f".{key}.", suffix=".tmp", dir=self.cache_dir)
            with os.fdopen(fd, "wb") as f:
                f.write(content)
                f.flush()
                os.fsync(f.fileno())
                st = os.fstat(f.fileno())
            os.chmod(tmp_path, 0o644)
            os.replace(tmp_path, path)
        except OSError as e:
            if tmp_path is not None and os.path.exists(tmp_path):
                os.unlink(tmp_path)
            raise CacheWriteFailed(path, e) from e

        logger.info(f"Stored cache entry {key} ({len(content)} bytes)")
        return CacheEntry(key, path, content, st.st_mtime, st.st_mtime_ns)

    def clear(self):
        """Remove every entry. Returns the number of files removed."""
        removed = 0
        for name in os.listdir(self.cache_dir):
            path = os.path.join(self.cache_dir, name)
            if not os.path.isfile(path):
                continue
            try:
                os.unlink(path)
                removed += 1
            except FileNotFoundError:
                pass
        logger.info(f"Cleared {removed} cache entries from {self.cache_dir}")
        return removed


# ── Cache stats tracking ──────────────────────────────────────────────────

class CacheStats:
    """Hit/miss counter (in-memory, resets on restart)."""

    def __init__(self):
        self._lock = Lock()
        self.hits = 0
        self.misses = 0
        self.invalidations = 0
        self.not_modified = 0
        self.clears = 0
        self.last_clear = None

    @property
    def total(self):
        return self.hits + self.misses

    @property
    def hit_rate(self):
        return round(self.hits / self.total * 100, 1) if self.total > 0 else 0.0

    def record_hit(self):
        with self._lock:
            self.hits += 1

    def record_miss(self):
        with self._lock:
            self.misses += 1

    def record_invalidation(self):
        with self._lock:
            self.invalidations += 1

    def record_not_modified(self):
        with self._lock:
            self.not_modified += 1

    def record_clear(self):
        with self._lock:
            self.clears += 1
            self.last_clear = datetime.utcnow().isoformat() + "Z"
            # Reset counters after clear
            self.hits = 0
            self.misses = 0
            self.invalidations = 0
            self.not_modified = 0

    def to_dict(self):
        return {
            "hits": self.hits,
            "misses": self.misses,
            "total_requests": self.total,
            "hit_rate_pct": self.hit_rate,
            "invalidations": self.invalidations,
            "not_modified": self.not_modified,
            "cache_clears": self.clears,
            "last_clear": self.last_clear,
        }


# Singleton stats instance
cache_stats = CacheStats()
