"""
Regenerate the blog's index.html from the post files on disk.

Usage:
    python -m htmlblog.rebuild_index [--blog-dir DIR]
"""

import argparse
import logging
from pathlib import Path

from . import config
from .errors import StorageFailure
from .store import PostStore


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description=__doc__.strip().splitlines()[0])
    parser.add_argument(
        "--blog-dir",
        type=Path,
        default=config.BLOG_DIR,
        help=f"Directory holding the post files (default: {config.BLOG_DIR})",
    )
    args = parser.parse_args(argv)
    logging.basicConfig(level=config.LOG_LEVEL, format="%(levelname)s %(name)s: %(message)s")

    store = PostStore(args.blog_dir)
    try:
        count = store.rebuild_index()
    except StorageFailure as exc:
        raise SystemExit(f"{exc.message}: {args.blog_dir}")
    print(f"Rebuilt {store.index_path}: {count} posts.")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
