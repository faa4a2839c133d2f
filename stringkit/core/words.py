"""Word segmentation shared by the case converters.

WHY: camelCase, snake_case, kebab-case, CONSTANT_CASE and initials all need
the same notion of a "word": a run of letters and digits, with camelCase
humps treated as boundaries and apostrophes ignored ("don't" is one word).

HOW: Four regex passes. Apostrophes are deleted, a space is inserted at each
lowercase/digit → uppercase hump, every run of non-alphanumeric characters
becomes one space, and the trimmed result is split on whitespace.

RULES:
- Case is preserved; callers lowercase or uppercase as they need
- Only ASCII humps split ("fooBar" → "foo", "Bar"); other scripts keep
  their letters together
- Text with no letters or digits yields an empty list, never [""]
- Word wrapping does NOT use this module; it tokenizes on whitespace
"""

from __future__ import annotations

import re
from typing import List

_APOSTROPHE_RE = re.compile("['\u2019]")
_HUMP_RE = re.compile(r"([a-z0-9])([A-Z])")

# [\W_] is anything that is neither a letter nor a number.
_SEPARATOR_RE = re.compile(r"[\W_]+")


def split_words(text: str) -> List[str]:
    """Split text into its words.

    Args:
        text: Arbitrary input text.

    Returns:
        Words in left-to-right order, each non-empty.

    Example:
        >>> split_words("fooBarBaz")
        ['foo', 'Bar', 'Baz']
        >>> split_words("don't stop")
        ['dont', 'stop']
    """
    without_apostrophes = _APOSTROPHE_RE.sub("", text)
    spaced = _HUMP_RE.sub(r"\1 \2", without_apostrophes)
    spaced = _SEPARATOR_RE.sub(" ", spaced).strip()
    if not spaced:
        return []
    return spaced.split()


def words(text: str) -> List[str]:
    """Return the words of text (public alias of split_words)."""
    return split_words(text)
