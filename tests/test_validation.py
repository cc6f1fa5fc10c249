"""Tests for slug and date validation."""

import pytest

from htmlblog.validation import clean_text, derive_slug, is_valid_date, is_valid_slug


class TestIsValidSlug:
    @pytest.mark.parametrize("slug", ["a1", "my-post-2024", "ab", "x" * 100])
    def test_accepts(self, slug):
        assert is_valid_slug(slug)

    @pytest.mark.parametrize(
        "slug",
        ["A", "-abc", "abc-", "a", "a" * 101, "", None, "ab\n", "my_post", "../etc", 42],
    )
    def test_rejects(self, slug):
        assert not is_valid_slug(slug)


class TestIsValidDate:
    def test_iso_date(self):
        assert is_valid_date("2024-01-15")

    @pytest.mark.parametrize("date", ["2024-1-15", "15/01/2024", "2024-01-15\n", "", None])
    def test_rejects_other_shapes(self, date):
        assert not is_valid_date(date)


class TestDeriveSlug:
    def test_basic_title(self):
        assert derive_slug("Hello World") == "hello-world"

    def test_collapses_punctuation_runs(self):
        assert derive_slug("  Rust -- vs. Python?! ") == "rust-vs-python"

    def test_truncates_to_limit(self):
        slug = derive_slug("word " * 60)
        assert len(slug) <= 100
        assert is_valid_slug(slug)

    def test_no_alphanumerics_gives_invalid_slug(self):
        assert not is_valid_slug(derive_slug("!!! ???"))

    def test_digit_groups_stay_separated(self):
        assert derive_slug("1,000 Days") == "1-000-days"

    def test_accents_not_transliterated(self):
        assert derive_slug("Café") == "caf"

    def test_non_latin_title_gives_invalid_slug(self):
        assert derive_slug("日本語") == ""
        assert not is_valid_slug(derive_slug("日本語"))

    def test_apostrophe_becomes_hyphen(self):
        assert derive_slug("Don't Panic") == "don-t-panic"


def test_clean_text_ignores_non_strings():
    assert clean_text("  hi ") == "hi"
    assert clean_text(None) == ""
    assert clean_text(["x"]) == ""
