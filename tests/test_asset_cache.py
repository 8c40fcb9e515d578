import os
import shutil

import pytest

from assets.errors import CacheDirUnavailable, CacheWriteFailed, FileNotFound
from assets.types import AssetType
from cache.asset_cache import AssetCacheStore, CacheStats, make_asset_cache_key
from conftest import bump_mtime


# ── Keys ──

def test_key_is_deterministic(css_files):
    assert make_asset_cache_key(css_files, AssetType.CSS, True, False) == \
        make_asset_cache_key(list(css_files), "css", True, False)


def test_key_depends_on_order(css_files):
    assert make_asset_cache_key(css_files, AssetType.CSS) != \
        make_asset_cache_key(list(reversed(css_files)), AssetType.CSS)


def test_key_depends_on_type_and_flags(css_files):
    keys = {
        make_asset_cache_key(css_files, t, minify, debug)
        for t in AssetType
        for minify in (False, True)
        for debug in (False, True)
    }
    assert len(keys) == 8


def test_key_suffixes(css_files):
    digest = make_asset_cache_key(css_files, AssetType.CSS).split(".")[0]
    assert len(digest) == 32
    assert make_asset_cache_key(css_files, AssetType.CSS) == f"{digest}.css"
    assert make_asset_cache_key(css_files, AssetType.CSS, minify=True) == f"{digest}.min.css"
    assert make_asset_cache_key(css_files, AssetType.JS, True, True) == f"{digest}.min.dbg.js"


def test_key_uses_real_paths(css_dir, css_files, monkeypatch):
    monkeypatch.chdir(css_dir)
    assert make_asset_cache_key(["a.css", "b.css"], AssetType.CSS) == \
        make_asset_cache_key(css_files, AssetType.CSS)


def test_key_is_a_plain_file_name(css_files):
    key = make_asset_cache_key(css_files, AssetType.CSS, True, True)
    assert os.sep not in key
    assert os.path.basename(key) == key


# ── Store ──

def test_creates_missing_directory(cache_dir):
    AssetCacheStore(str(cache_dir / "nested" / "deeper"))
    assert (cache_dir / "nested" / "deeper").is_dir()


def test_missing_directory_without_create(cache_dir):
    with pytest.raises(CacheDirUnavailable):
        AssetCacheStore(str(cache_dir), create=False)


def test_lookup_missing_entry(cache_dir):
    assert AssetCacheStore(str(cache_dir)).lookup("nothing.css") is None


def test_store_then_lookup(cache_dir):
    store = AssetCacheStore(str(cache_dir))
    stored = store.store("k.css", b".a{}\n")
    found = store.lookup("k.css")

    assert found.content == b".a{}\n"
    assert found.path == os.path.join(str(cache_dir), "k.css")
    assert found.etag == stored.etag
    assert found.mtime_ns == stored.mtime_ns
    assert os.listdir(cache_dir) == ["k.css"]


def test_etag_changes_when_entry_is_rewritten(cache_dir):
    store = AssetCacheStore(str(cache_dir))
    first = store.store("k.css", b".a{}")
    second = store.store("k.css", b".a{color:red}")
    assert first.etag != second.etag
    assert first.etag.startswith('"') and first.etag.endswith('"')


def test_is_stale(cache_dir, css_files):
    store = AssetCacheStore(str(cache_dir))
    entry = store.store("k.css", b"x")

    older = entry.mtime_ns - 10_000_000_000
    for f in css_files:
        os.utime(f, ns=(older, older))
    assert not store.is_stale(entry, css_files)

    bump_mtime(css_files[1], entry.mtime_ns)
    assert store.is_stale(entry, css_files)


def test_same_mtime_is_not_stale(cache_dir, css_files):
    store = AssetCacheStore(str(cache_dir))
    entry = store.store("k.css", b"x")
    os.utime(css_files[0], ns=(entry.mtime_ns, entry.mtime_ns))
    os.utime(css_files[1], ns=(entry.mtime_ns, entry.mtime_ns))
    assert not store.is_stale(entry, css_files)


def test_is_stale_with_deleted_source(cache_dir, css_files):
    store = AssetCacheStore(str(cache_dir))
    entry = store.store("k.css", b"x")
    os.unlink(css_files[1])
    with pytest.raises(FileNotFound) as excinfo:
        store.is_stale(entry, css_files)
    assert excinfo.value.reference == css_files[1]


def test_invalidate_tolerates_missing_file(cache_dir):
    store = AssetCacheStore(str(cache_dir))
    entry = store.store("k.css", b"x")
    store.invalidate(entry)
    store.invalidate(entry)
    assert store.lookup("k.css") is None


def test_store_failure_raises(cache_dir):
    store = AssetCacheStore(str(cache_dir))
    shutil.rmtree(cache_dir)
    with pytest.raises(CacheWriteFailed) as excinfo:
        store.store("k.css", b"x")
    assert "k.css" in str(excinfo.value)


def test_clear(cache_dir):
    store = AssetCacheStore(str(cache_dir))
    store.store("a.css", b"a")
    store.store("b.js", b"b")
    assert store.clear() == 2
    assert os.listdir(cache_dir) == []


# ── Stats ──

def test_stats_hit_rate_and_clear():
    stats = CacheStats()
    stats.record_hit()
    stats.record_hit()
    stats.record_hit()
    stats.record_miss()
    assert stats.to_dict()["hit_rate_pct"] == 75.0

    stats.record_clear()
    data = stats.to_dict()
    assert data["total_requests"] == 0
    assert data["cache_clears"] == 1
    assert data["last_clear"].endswith("Z")
