"""Unit tests for stringkit.normalize."""

import pytest

from stringkit.normalize import (
    is_blank,
    normalize_whitespace,
    sanitize_filename,
    slugify,
    strip_diacritics,
)


class TestStripDiacritics:
    def test_accents_removed(self):
        assert strip_diacritics("Crème brûlée") == "Creme brulee"

    def test_decomposed_input(self):
        assert strip_diacritics("Cre\u0300me") == "Creme"

    def test_letters_without_decomposition_kept(self):
        assert strip_diacritics("ø ß") == "ø ß"


class TestSlugify:
    """slugify() defaults and options."""

    @pytest.mark.parametrize("text, expected", [
        ("Hello, Wörld!", "hello-world"),
        ("  Multiple   spaces  ", "multiple-spaces"),
        ("C++ vs. Rust", "c-vs-rust"),
        ("snake_case_value", "snake-case-value"),
        ("Ελληνικά κείμενα", "ελληνικα-κειμενα"),
        ("---", ""),
    ])
    def test_defaults(self, text, expected):
        assert slugify(text) == expected

    def test_custom_separator(self):
        assert slugify("Hello World", separator="_") == "hello_world"

    def test_keep_case(self):
        assert slugify("Hello World", lower=False) == "Hello-World"

    def test_no_trim(self):
        assert slugify(" Hello ", trim=False) == "-hello-"

    def test_regex_special_separator(self):
        assert slugify("a b  c", separator=".") == "a.b.c"

    def test_empty_separator(self):
        assert slugify("Hello World", separator="") == "helloworld"


class TestSanitizeFilename:
    def test_reserved_characters_replaced(self):
        assert sanitize_filename('a/b\\c:d*e?f"g<h>i|j') == "a-b-c-d-e-f-g-h-i-j"

    def test_whitespace_collapsed(self):
        assert sanitize_filename("my   report\t2024.pdf") == "my report 2024.pdf"

    def test_trailing_dots_removed(self):
        assert sanitize_filename("notes...") == "notes"

    def test_empty_becomes_untitled(self):
        assert sanitize_filename("   ") == "untitled"

    def test_max_length(self):
        assert sanitize_filename("abcdefgh", max_length=3) == "abc"

    def test_custom_replacement(self):
        assert sanitize_filename("a/b", replacement="_") == "a_b"


class TestNormalizeWhitespace:
    def test_collapse(self):
        assert normalize_whitespace("  a \t b\n\nc  ") == "a b c"

    def test_preserve_newlines(self):
        text = "a  b\r\nc\r\r\r\rd\u2028e"
        assert normalize_whitespace(text, preserve_newlines=True) == "a b\nc\n\nd\ne"


class TestIsBlank:
    @pytest.mark.parametrize("text", ["", " ", "\t\n", "\u3000"])
    def test_blank(self, text):
        assert is_blank(text)

    def test_not_blank(self):
        assert not is_blank(" x ")
