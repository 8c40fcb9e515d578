# assets/__init__.py
from .errors import (
    AssetError,
    CacheDirUnavailable,
    CacheWriteFailed,
    FileNotFound,
    FileUnreadable,
    InvalidAssetName,
    UnknownAssetType,
)
from .types import AssetType, BuildOptions
from .paths import parse_file_list, resolve_paths
from .tokenizer import Token, tokenize
from .annotator import LineAnnotator, add_line_numbers
from .css_min import minify_css
from .js_min import minify_js
from .builder import AssetBuilder

__all__ = [
    "AssetError", "CacheDirUnavailable", "CacheWriteFailed", "FileNotFound",
    "FileUnreadable", "InvalidAssetName", "UnknownAssetType",
    "AssetType", "BuildOptions", "parse_file_list", "resolve_paths",
    "Token", "tokenize", "LineAnnotator", "add_line_numbers",
    "minify_css", "minify_js", "AssetBuilder",
]
