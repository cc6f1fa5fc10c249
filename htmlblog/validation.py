"""Field checks applied before any file I/O."""

from __future__ import annotations

import re
from typing import Any, Optional

from slugify import slugify

SLUG_MIN_LEN = 2
SLUG_MAX_LEN = 100

# Lowercase letters, digits and internal hyphens only
SLUG_RE = re.compile(r"[a-z0-9][a-z0-9-]*[a-z0-9]")
DATE_RE = re.compile(r"[0-9]{4}-[0-9]{2}-[0-9]{2}")
NON_ALNUM_RE = re.compile(r"[^A-Za-z0-9]+")


def is_valid_slug(slug: Any) -> bool:
    if not isinstance(slug, str):
        return False
    if not SLUG_MIN_LEN <= len(slug) <= SLUG_MAX_LEN:
        return False
    return SLUG_RE.fullmatch(slug) is not None


def is_valid_date(date: Any) -> bool:
    return isinstance(date, str) and DATE_RE.fullmatch(date) is not None


def derive_slug(title: str) -> str:
    """Build a slug from a post title.

    Anything outside ASCII letters and digits becomes a hyphen first, so
    accented or non-Latin letters are dropped rather than transliterated and
    digit groups like ``1,000`` stay separated.

    The result may still be invalid (e.g. a title with no letters or digits
    gives ``""``); callers run it through :func:`is_valid_slug`.
    """
    return slugify(NON_ALNUM_RE.sub("-", title or ""), max_length=SLUG_MAX_LEN)


def clean_text(value: Optional[Any]) -> str:
    """Return *value* trimmed, or ``""`` for anything that is not a string."""
    if not isinstance(value, str):
        return ""
    return value.strip()
