"""The generated blog listing page (``index.html``)."""

from __future__ import annotations

import html
import re
from typing import Dict, Iterable, List

from .templating import render

ENTRY_RE = re.compile(
    r'<li>\s*<span class="post-date">(.*?)</span>\s*'
    r'<a href="[^"]*">([a-z0-9-]*)\.txt &mdash; (.*?)</a>\s*</li>',
    re.S,
)


def sort_summaries(summaries: Iterable[Dict[str, str]]) -> List[Dict[str, str]]:
    # ISO dates are fixed width, so string order is calendar order
    return sorted(summaries, key=lambda p: p.get("date", ""), reverse=True)


def render_index(summaries: Iterable[Dict[str, str]]) -> str:
    return render("blog_index.html", posts=sort_summaries(summaries))


def parse_index(document: str) -> List[Dict[str, str]]:
    """Read the ``{slug, title, date}`` entries back out of an index page."""
    return [
        {
            "slug": slug,
            "title": html.unescape(title.strip()),
            "date": html.unescape(date.strip()),
        }
        for date, slug, title in ENTRY_RE.findall(document or "")
    ]
