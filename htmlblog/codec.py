"""Encode post records into standalone HTML pages and read them back.

The page layout is the public blog's, so decoding works by locating a few
fixed markers in the document rather than by parsing HTML:

* ``<h1 class="post-title">`` holds the title,
* ``<p class="post-date">`` holds the date,
* ``<div class="post-body">`` wraps one ``<p>`` per body paragraph.

Every value is HTML-escaped on the way in (``& < > " '``), so user text can
never produce one of these markers itself. Decoding is permissive: a marker
that is missing yields an empty string instead of an error, which lets the
store list hand-edited or foreign files without failing the whole listing.
"""

from __future__ import annotations

import html
import re
from typing import Dict, List

from .templating import render

TITLE_RE = re.compile(r'<h1 class="post-title">(.*?)</h1>', re.S)
DATE_RE = re.compile(r'<p class="post-date">(.*?)</p>', re.S)
BODY_RE = re.compile(r'<div class="post-body">(.*?)</div>', re.S)
PARAGRAPH_RE = re.compile(r"<p>(.*?)</p>", re.S)
# Paragraphs are separated by blank lines (whitespace-only lines count)
PARAGRAPH_BREAK_RE = re.compile(r"\n\s*\n")


def split_paragraphs(body: str) -> List[str]:
    paragraphs = (p.strip() for p in PARAGRAPH_BREAK_RE.split(body or ""))
    return [p for p in paragraphs if p]


def encode(record: Dict[str, str]) -> str:
    """Render a post record as a complete HTML page."""
    return render(
        "blog_post.html",
        slug=record.get("slug", ""),
        title=record.get("title", ""),
        date=record.get("date", ""),
        paragraphs=split_paragraphs(record.get("body", "")),
    )


def _extract(pattern: re.Pattern, document: str) -> str:
    match = pattern.search(document)
    return html.unescape(match.group(1).strip()) if match else ""


def decode(document: str) -> Dict[str, str]:
    """Recover ``{title, date, body}`` from a page produced by :func:`encode`."""
    document = document or ""
    body = ""
    body_match = BODY_RE.search(document)
    if body_match:
        body = "\n\n".join(
            html.unescape(p.strip()) for p in PARAGRAPH_RE.findall(body_match.group(1))
        )
    return {
        "title": _extract(TITLE_RE, document),
        "date": _extract(DATE_RE, document),
        "body": body,
    }
