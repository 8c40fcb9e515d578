"""
paths.py - Resolve logical asset references to absolute filesystem paths.
"""
import os

from assets.errors import FileNotFound, InvalidAssetName
from assets.types import AssetType


def resolve_paths(references, base_dir=""):
    """
    Resolve each reference to its canonical absolute path.

    Relative references are looked up below ``base_dir``. Order is kept.
    Raises FileNotFound for the first reference that does not point at a
    regular file.
    """
    resolved = []
    for reference in references:
        candidate = reference
        if base_dir and not os.path.isabs(candidate):
            candidate = os.path.join(base_dir, candidate)
        real = os.path.realpath(candidate)
        if not os.path.isfile(real):
            raise FileNotFound(reference)
        resolved.append(real)
    return tuple(resolved)


def parse_file_list(segment, directory, asset_type):
    """
    Turn a request path segment like ``"a,b,c"`` into file names.

    ``directory`` is put in front and the type's extension at the back, so
    ``parse_file_list("a, b", "styles", AssetType.CSS)`` gives
    ``["styles/a.css", "styles/b.css"]``.
    """
    asset_type = AssetType.parse(asset_type)
    directory = (directory or "").rstrip(os.sep)

    files = []
    for name in segment.strip("/").split(","):
        name = name.strip()
        if not name:
            continue
        if name in (".", "..") or "/" in name or os.sep in name or "\x00" in name:
            raise InvalidAssetName(f"Invalid file name: {name!r}")
        filename = f"{name}.{asset_type.extension}"
        files.append(os.path.join(directory, filename) if directory else filename)
    return files
