"""Grapheme segmenter backends.

WHY: Reversing or counting "characters" per code point splits accented
letters from their combining marks and tears emoji sequences apart.

HOW: UnicodeGraphemeSegmenter walks the string once, starting a new
cluster at every code point except those that attach to the previous one
(combining marks, ZWJ joins, variation selectors, emoji modifiers, tag
characters, the second regional indicator of a flag, LF after CR).
CodePointSegmenter is the plain per-code-point fallback.

RULES:
- Covers the common cases of UAX #29 extended grapheme clusters, not
  Hangul syllable composition or Indic conjuncts
- Joining the clusters always reproduces the input exactly
"""

from __future__ import annotations

import unicodedata

from stringkit.capabilities.base import GraphemeSegmenter

_ZWJ = "\u200d"
_EXTEND_CATEGORIES = frozenset({"Mn", "Me", "Mc"})


def _is_regional_indicator(char: str) -> bool:
    return 0x1F1E6 <= ord(char) <= 0x1F1FF


def _is_extender(char: str) -> bool:
    code = ord(char)
    return (
        unicodedata.category(char) in _EXTEND_CATEGORIES
        or 0xFE00 <= code <= 0xFE0F  # variation selectors
        or 0xE0100 <= code <= 0xE01EF  # variation selectors supplement
        or 0x1F3FB <= code <= 0x1F3FF  # emoji skin tone modifiers
        or 0xE0020 <= code <= 0xE007F  # tag characters
    )


class UnicodeGraphemeSegmenter(GraphemeSegmenter):
    """Clusters code points into user-perceived characters."""

    @property
    def name(self) -> str:
        return "unicode"

    def segment(self, text: str) -> list[str]:
        clusters: list[str] = []
        i = 0
        length = len(text)
        while i < length:
            start = i
            char = text[i]
            i += 1
            if char == "\r" and i < length and text[i] == "\n":
                i += 1
            elif _is_regional_indicator(char):
                if i < length and _is_regional_indicator(text[i]):
                    i += 1
            while i < length:
                if _is_extender(text[i]):
                    i += 1
                elif text[i] == _ZWJ:
                    i += 1
                    if i < length:
                        i += 1
                else:
                    break
            clusters.append(text[start:i])
        return clusters


class CodePointSegmenter(GraphemeSegmenter):
    """One cluster per code point."""

    @property
    def name(self) -> str:
        return "codepoint"

    def segment(self, text: str) -> list[str]:
        return list(text)
