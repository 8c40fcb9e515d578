import os
import sys
from pathlib import Path

import pytest

sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

from assets.types import BuildOptions
from cache.asset_cache import CacheStats


@pytest.fixture
def css_dir(tmp_path):
    src = tmp_path / "css"
    src.mkdir()
    (src / "a.css").write_text(".x{color:blue}")
    (src / "b.css").write_text(".y{color:green}")
    return src


@pytest.fixture
def css_files(css_dir):
    return [os.path.realpath(css_dir / "a.css"), os.path.realpath(css_dir / "b.css")]


@pytest.fixture
def js_dir(tmp_path):
    src = tmp_path / "js"
    src.mkdir()
    (src / "one.js").write_text("function one ( a ) {\n  return a + 1;\n}\n")
    (src / "two.js").write_text("var two = one( 1 );\n")
    return src


@pytest.fixture
def cache_dir(tmp_path):
    return tmp_path / "cache"


@pytest.fixture
def make_options(cache_dir):
    def factory(**kwargs):
        kwargs.setdefault("cache_dir", str(cache_dir))
        kwargs.setdefault("minify", True)
        kwargs.setdefault("debug", False)
        return BuildOptions.resolve(**kwargs)
    return factory


@pytest.fixture
def stats():
    return CacheStats()


@pytest.fixture
def app(tmp_path, css_dir, js_dir, cache_dir):
    from app import create_app
    return create_app("testing", overrides={
        "ASSETS_CACHE_DIR": str(cache_dir),
        "ASSETS_DIRS": {"css": str(css_dir), "js": str(js_dir)},
    })


@pytest.fixture
def client(app):
    return app.test_client()


def bump_mtime(path, reference_ns, seconds=10):
    """Move ``path``'s mtime ``seconds`` past ``reference_ns``."""
    ns = reference_ns + seconds * 1_000_000_000
    os.utime(path, ns=(ns, ns))
