"""Grapheme-aware counting and reversal.

WHY: len("é") is 2 when the accent is a combining mark, and reversing a
flag emoji per code point yields a different flag. Counting and reversing
should work on what a reader sees as one character.

HOW: Both functions segment text with the process-wide grapheme backend
(stringkit.capabilities), or with an explicitly passed segmenter.

RULES:
- With the "codepoint" backend these behave like len() and text[::-1]
"""

from __future__ import annotations

from typing import Optional

from stringkit.capabilities import GraphemeSegmenter, get_grapheme_segmenter


def count_graphemes(text: str, segmenter: Optional[GraphemeSegmenter] = None) -> int:
    """Count user-perceived characters in text."""
    return len((segmenter or get_grapheme_segmenter()).segment(text))


def reverse_graphemes(text: str, segmenter: Optional[GraphemeSegmenter] = None) -> str:
    """Reverse text without splitting combining marks or emoji sequences."""
    return "".join(reversed((segmenter or get_grapheme_segmenter()).segment(text)))
