"""Directory-backed post store.

Every post lives in ``<slug>.html`` inside one directory, next to a generated
``index.html`` listing. :class:`PostStore` is the only code that touches that
directory; the HTTP layer talks to it through list/get/create/update/delete,
so a different backend could replace it as long as the index stays in step
with the posts after every mutation.
"""

from __future__ import annotations

import logging
import os
import tempfile
from functools import wraps
from pathlib import Path
from typing import Dict, List, Optional

from . import codec, config
from .errors import Conflict, InvalidInput, InvalidSlug, NotFound, StorageFailure
from .index_page import render_index, sort_summaries
from .serializer import WriteSerializer
from .validation import clean_text, derive_slug, is_valid_date, is_valid_slug

logger = logging.getLogger(__name__)


def storage_errors(message: str):
    """Turn filesystem errors raised by the wrapped operation into StorageFailure."""

    def decorator(method):
        @wraps(method)
        def wrapped(self, *args, **kwargs):
            try:
                return method(self, *args, **kwargs)
            except (OSError, UnicodeDecodeError) as exc:
                logger.exception("%s in %s", message, self.root)
                raise StorageFailure(message) from exc

        return wrapped

    return decorator


def validate_fields(title, date, body) -> Dict[str, str]:
    title = clean_text(title)
    body = clean_text(body)
    if not title:
        raise InvalidInput("Title required")
    if not is_valid_date(date):
        raise InvalidInput("Valid date required (YYYY-MM-DD)")
    if not body:
        raise InvalidInput("Body required")
    return {"title": title, "date": date, "body": body}


def _atomic_write_text(path: Path, content: str) -> None:
    fd, tmp_path = tempfile.mkstemp(dir=str(path.parent), prefix=f".{path.name}.", suffix=".tmp")
    try:
        with os.fdopen(fd, "w", encoding="utf-8") as fh:
            fh.write(content)
        os.replace(tmp_path, str(path))
    except BaseException:
        try:
            os.unlink(tmp_path)
        except OSError:
            pass
        raise


class PostStore:
    def __init__(
        self,
        root: Path,
        serializer: Optional[WriteSerializer] = None,
        index_name: str = config.INDEX_NAME,
    ) -> None:
        self.root = Path(root)
        self.serializer = serializer or WriteSerializer()
        self.index_name = index_name

    @property
    def index_path(self) -> Path:
        return self.root / self.index_name

    def path_for(self, slug: str) -> Path:
        return self.root / f"{slug}.html"

    def _check_slug(self, slug) -> None:
        # The index page shares the directory, so its stem is not a usable slug
        if not is_valid_slug(slug) or self.path_for(slug) == self.index_path:
            raise InvalidSlug()

    def _post_files(self) -> List[Path]:
        if not self.root.is_dir():
            return []
        return [p for p in self.root.glob("*.html") if p.name != self.index_name and p.is_file()]

    def _read(self, path: Path) -> Dict[str, str]:
        return codec.decode(path.read_text(encoding="utf-8"))

    def _summaries(self) -> List[Dict[str, str]]:
        posts = []
        for path in self._post_files():
            try:
                fields = self._read(path)
            except FileNotFoundError:
                # Removed by a mutation since the directory was scanned
                continue
            posts.append({"slug": path.stem, "title": fields["title"], "date": fields["date"]})
        return sort_summaries(posts)

    def _write_index(self) -> int:
        posts = self._summaries()
        _atomic_write_text(self.index_path, render_index(posts))
        return len(posts)

    def _write_post(self, slug: str, fields: Dict[str, str]) -> None:
        self.root.mkdir(parents=True, exist_ok=True)
        _atomic_write_text(self.path_for(slug), codec.encode(dict(fields, slug=slug)))

    # -- reads (not serialized) ----------------------------------------------

    @storage_errors("Failed to list posts")
    def list(self) -> List[Dict[str, str]]:
        return self._summaries()

    @storage_errors("Failed to read post")
    def get(self, slug: str) -> Dict[str, str]:
        self._check_slug(slug)
        path = self.path_for(slug)
        try:
            fields = self._read(path)
        except FileNotFoundError:
            raise NotFound() from None
        return dict(fields, slug=slug)

    # -- mutations (serialized) ----------------------------------------------

    def create(self, slug: Optional[str], title, date, body) -> Dict[str, str]:
        """Store a new post; ``slug`` falls back to one derived from the title."""
        fields = validate_fields(title, date, body)
        slug = slug or derive_slug(fields["title"])
        self._check_slug(slug)
        return self.serializer.run(self._create, slug, fields)

    @storage_errors("Failed to create post")
    def _create(self, slug: str, fields: Dict[str, str]) -> Dict[str, str]:
        if self.path_for(slug).exists():
            raise Conflict("A post with this slug already exists")
        self._write_post(slug, fields)
        self._write_index()
        logger.info("Created post %s", slug)
        return {"slug": slug, "title": fields["title"], "date": fields["date"]}

    def update(self, slug: str, title, date, body) -> Dict[str, str]:
        """Replace title, date and body of an existing post."""
        self._check_slug(slug)
        fields = validate_fields(title, date, body)
        return self.serializer.run(self._update, slug, fields)

    @storage_errors("Failed to update post")
    def _update(self, slug: str, fields: Dict[str, str]) -> Dict[str, str]:
        if not self.path_for(slug).is_file():
            raise NotFound()
        self._write_post(slug, fields)
        self._write_index()
        logger.info("Updated post %s", slug)
        return {"slug": slug, "title": fields["title"], "date": fields["date"]}

    def delete(self, slug: str) -> None:
        self._check_slug(slug)
        self.serializer.run(self._delete, slug)

    @storage_errors("Failed to delete post")
    def _delete(self, slug: str) -> None:
        path = self.path_for(slug)
        if not path.is_file():
            raise NotFound()
        path.unlink()
        self._write_index()
        logger.info("Deleted post %s", slug)

    @storage_errors("Failed to rebuild index")
    def _rebuild(self) -> int:
        self.root.mkdir(parents=True, exist_ok=True)
        return self._write_index()

    def rebuild_index(self) -> int:
        """Regenerate the index from the files on disk; returns the post count."""
        return self.serializer.run(self._rebuild)
