"""Tests for src/naming.py — slugs and date prefixes."""

from datetime import date

import pytest
from draftsman.naming import (
    dasherize,
    date_prefix,
    draft_filename,
    is_published_filename,
    parse_publish_date,
    published_filename,
    slugify,
    strip_date_prefix,
)


class TestSlugify:
    def test_spaces_become_underscores(self):
        assert slugify("Hello World") == "hello_world"

    def test_lowercases(self):
        assert slugify("RSpec Tips") == "rspec_tips"

    def test_punctuation_becomes_dashes(self):
        assert slugify("What's New?") == "what-s-new"

    def test_runs_collapse_to_one_dash(self):
        assert slugify("Ruby: the good parts") == "ruby-_the_good_parts"

    def test_existing_dashes_kept(self):
        assert slugify("Pre-release notes") == "pre-release_notes"

    def test_accented_letters_kept(self):
        assert slugify("Café Crème") == "café_crème"

    def test_decomposed_accents_normalized(self):
        assert slugify("Cafe\u0301") == "café"

    def test_non_latin_letters_kept(self):
        assert slugify("日本語") == "日本語"
        assert slugify("Привет Мир") == "привет_мир"

    def test_only_punctuation_is_empty(self):
        assert slugify("?!") == ""

    def test_dasherize_trims_edges(self):
        assert dasherize("--a/b--") == "a-b"

    def test_draft_filename(self):
        assert draft_filename("Hello World") == "hello_world.md"


class TestDatePrefix:
    def test_date_prefix(self):
        assert date_prefix(date(2024, 3, 1)) == "2024-03-01-"

    def test_published_filename(self):
        assert published_filename("hello_world.md", date(2024, 3, 1)) == (
            "2024-03-01-hello_world.md"
        )

    def test_strip_prefix(self):
        assert strip_date_prefix("2024-03-01-hello_world.md") == "hello_world.md"

    def test_strip_without_prefix_is_unchanged(self):
        assert strip_date_prefix("hello_world.md") == "hello_world.md"

    def test_strip_only_leading_prefix(self):
        assert strip_date_prefix("notes-2024-03-01-x.md") == "notes-2024-03-01-x.md"

    def test_non_ascii_digits_are_not_a_date(self):
        name = "\u0662\u0660\u0662\u0664-\u0660\u0663-\u0660\u0661-x.md"
        assert strip_date_prefix(name) == name
        assert not is_published_filename(name)

    @pytest.mark.parametrize(
        "name",
        [
            "hello.md",
            "2024-03-01-hello.md",
            "2024-03-01-2023-01-01-hello.md",
            "2024-03-01-",
            "",
        ],
    )
    def test_strip_is_idempotent(self, name):
        once = strip_date_prefix(name)
        assert strip_date_prefix(once) == once

    def test_strip_inverts_publish(self):
        name = "hello_world.md"
        assert strip_date_prefix(published_filename(name, date(2024, 3, 1))) == name


class TestPublishedFilename:
    def test_published_name_detected(self):
        assert is_published_filename("2024-03-01-hello.md")

    def test_draft_name_not_published(self):
        assert not is_published_filename("hello.md")

    def test_prefix_alone_not_published(self):
        assert not is_published_filename("2024-03-01-")

    def test_parse_publish_date(self):
        assert parse_publish_date("2024-03-01-hello.md") == date(2024, 3, 1)

    def test_parse_publish_date_missing(self):
        assert parse_publish_date("hello.md") is None

    def test_parse_publish_date_impossible_date(self):
        assert parse_publish_date("2024-13-45-hello.md") is None
