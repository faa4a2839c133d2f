"""Shared test fixtures for the stringkit test suite.

WHY: Several modules test properties (metric laws, idempotence, bounds)
over the same varied sample strings, and the capability tests need fresh
backend instances independent of the process-wide configuration.

HOW: SAMPLE_TEXTS covers ASCII, accents (composed and decomposed), emoji,
whitespace variety and the empty string. Backend fixtures return new
instances of each registered backend.

RULES:
- Sample texts are plain literals; tests must not mutate them.
"""

from typing import List

import pytest

from stringkit.capabilities.codecs import StdlibBase64Codec, UnavailableBase64Codec
from stringkit.capabilities.graphemes import CodePointSegmenter, UnicodeGraphemeSegmenter
from stringkit.capabilities.lists import LocaleListFormatter, PlainListFormatter


SAMPLE_TEXTS: List[str] = [
    "",
    "a",
    "kitten",
    "sitting",
    "The quick brown fox jumps over the lazy dog",
    "fooBarBaz",
    "don't stop",
    "Crème brûlée",
    "Cre\u0300me bru\u0302le\u0301e",
    "  leading and trailing  ",
    "tabs\tand\nnewlines\r\nmixed",
    "snake_case_value",
    "HTTPServer2Go",
    "\U0001F1F8\U0001F1EA flag",
    "123 456",
]


@pytest.fixture
def sample_texts():
    """Varied input strings for property-style tests."""
    return list(SAMPLE_TEXTS)


@pytest.fixture
def unicode_segmenter():
    return UnicodeGraphemeSegmenter()


@pytest.fixture
def codepoint_segmenter():
    return CodePointSegmenter()


@pytest.fixture
def locale_list_formatter():
    return LocaleListFormatter()


@pytest.fixture
def plain_list_formatter():
    return PlainListFormatter()


@pytest.fixture
def stdlib_codec():
    return StdlibBase64Codec()


@pytest.fixture
def unavailable_codec():
    return UnavailableBase64Codec("browser")
