"""Tests for the generated listing page."""

from htmlblog.index_page import parse_index, render_index

SUMMARIES = [
    {"slug": "old-post", "title": "Old", "date": "2023-05-01"},
    {"slug": "new-post", "title": "New", "date": "2024-02-10"},
    {"slug": "mid-post", "title": "Mid", "date": "2023-12-31"},
]


def test_entries_sorted_newest_first():
    entries = parse_index(render_index(SUMMARIES))
    assert [e["slug"] for e in entries] == ["new-post", "mid-post", "old-post"]


def test_input_not_mutated():
    summaries = list(SUMMARIES)
    render_index(summaries)
    assert summaries == SUMMARIES


def test_titles_escaped():
    document = render_index([{"slug": "xss", "title": "<b>bold</b> & co", "date": "2024-01-01"}])
    assert "<b>bold</b>" not in document
    assert parse_index(document) == [
        {"slug": "xss", "title": "<b>bold</b> & co", "date": "2024-01-01"}
    ]


def test_links_point_at_post_files():
    document = render_index(SUMMARIES[:1])
    assert 'href="/blog/old-post.html"' in document


def test_empty_listing():
    assert parse_index(render_index([])) == []
