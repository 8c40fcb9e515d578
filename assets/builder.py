"""
builder.py - Concatenate (and minify or annotate) a list of source files.

The builder never looks at the cache. Its only side effect is reading the
source files.
"""
import os
import logging
from datetime import datetime

from assets.annotator import add_line_numbers
from assets.css_min import minify_css
from assets.errors import FileUnreadable
from assets.js_min import minify_js
from assets.paths import resolve_paths
from assets.types import AssetType

logger = logging.getLogger("combiner")


class AssetBuilder:
    """Builds the combined artifact for one set of files."""

    def __init__(self, options, js_minifier=minify_js, css_minifier=minify_css):
        self.options = options
        self._minifiers = {
            AssetType.JS: js_minifier,
            AssetType.CSS: css_minifier,
        }

    def build(self, files, asset_type):
        """
        Return the combined artifact as UTF-8 bytes.

        ``files`` may be relative or absolute; they are resolved first and
        FileNotFound is raised for any that does not exist.
        """
        asset_type = AssetType.parse(asset_type)
        files = resolve_paths(files)
        parts = []

        if self.options.debug:
            parts.append(self.manifest_header(files))

        for filename in files:
            if self.options.debug:
                parts.append(self.file_separator(filename))
            parts.append(self.process(self.read(filename), asset_type))
            parts.append("\n")

        content = "".join(parts)
        logger.debug(f"Built {asset_type.value} from {len(files)} file(s), {len(content)} chars")
        return content.encode("utf-8")

    def process(self, text, asset_type):
        if self.options.minify:
            return self._minifiers[asset_type](text)
        if self.options.debug:
            return add_line_numbers(text)
        return text

    @staticmethod
    def read(filename):
        try:
            with open(filename, encoding="utf-8") as f:
                return f.read()
        except (OSError, UnicodeDecodeError) as e:
            raise FileUnreadable(filename, e) from e

    @staticmethod
    def manifest_header(files):
        """Table of the combined files and their modification times."""
        width = max(len(f) for f in files) if files else 0
        lines = ["/* ", " * Combined files (in this order):"]
        for filename in files:
            mtime = datetime.fromtimestamp(os.path.getmtime(filename))
            lines.append(f" *    {filename:<{width}} [{mtime:%d.%m.%Y %H:%M:%S}]")
        lines.append(" */")
        return "\n".join(lines) + "\n"

    @staticmethod
    def file_separator(filename):
        dashes = "-" * max(69 - len(filename), 3)
        return f"\n/* --- {filename} {dashes} */\n"
