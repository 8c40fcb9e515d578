"""
build_assets.py - Combine and minify assets from the command line.

Usage:
    python scripts/build_assets.py --type css static/css/reset.css static/css/layout.css
    python scripts/build_assets.py --type js --warm-cache static/js/*.js
    python scripts/build_assets.py --type js --debug -o combined.js a.js b.js

Without ``--warm-cache`` the artifact is built on the fly and written to
stdout (or ``--output``). With it, the cache entry is (re)built and its key
and entity tag are printed.
"""

import os
import sys
import logging
import argparse

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from assets.builder import AssetBuilder
from assets.errors import AssetError
from assets.pipeline import AssetPipeline
from assets.types import AssetType, BuildOptions, DEFAULT_CACHE_DIR
from config import detect_dev_host
from services.logger import setup_logging

logger = logging.getLogger("combiner")


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Combine and minify JS/CSS files.")
    parser.add_argument("files", nargs="+", help="source files, in output order")
    parser.add_argument("--type", required=True, choices=[t.value for t in AssetType])
    parser.add_argument("--minify", dest="minify", action="store_true", default=None)
    parser.add_argument("--no-minify", dest="minify", action="store_false")
    parser.add_argument("--debug", dest="debug", action="store_true", default=None)
    parser.add_argument("--no-debug", dest="debug", action="store_false")
    parser.add_argument("--cache-dir", default=DEFAULT_CACHE_DIR)
    parser.add_argument("--warm-cache", action="store_true",
                        help="store the result in the cache directory")
    parser.add_argument("-o", "--output", help="write the artifact here instead of stdout")
    parser.add_argument("--log-level", default="WARNING")
    return parser.parse_args(argv)


def build(args):
    """Run the build described by ``args``. Returns the artifact bytes."""
    options = BuildOptions.resolve(
        is_dev_host=detect_dev_host(),
        cache_enabled=args.warm_cache,
        cache_dir=args.cache_dir,
        minify=args.minify,
        debug=args.debug,
    )

    if not args.warm_cache:
        return AssetBuilder(options).build(args.files, args.type)

    pipeline = AssetPipeline(options)
    result = pipeline.fetch(args.files, args.type)
    print(f"{result.key} {result.etag or '-'} ({result.source})", file=sys.stderr)
    return pipeline.store.lookup(result.key).content


def main(argv=None):
    args = parse_args(argv)
    setup_logging(log_dir=None, log_level=args.log_level)

    try:
        content = build(args)
    except AssetError as e:
        logger.error(str(e))
        return 1

    if args.output:
        with open(args.output, "wb") as f:
            f.write(content)
        logger.info(f"Wrote {len(content)} bytes to {args.output}")
    else:
        sys.stdout.buffer.write(content)
    return 0


if __name__ == "__main__":
    sys.exit(main())
