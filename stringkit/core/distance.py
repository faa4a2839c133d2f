"""Levenshtein edit distance and normalised similarity.

WHY: Fuzzy matching ("did you mean ...?", near-duplicate detection) needs
the minimum number of single-character edits between two strings, and a
0..1 score that is comparable across string lengths.

HOW: Classic dynamic programming, reduced to one rolling row. The shorter
string indexes the row, so auxiliary memory is min(len(a), len(b)) + 1
integers while time stays O(len(a) * len(b)).

RULES:
- Insert, delete and substitute each cost 1, so the distance is symmetric
  and swapping a/b before the main loop is safe
- Characters are compared per code point; composed and decomposed forms of
  the same glyph count as different
- similarity("", "") is exactly 1.0
- Never allocate the full (n+1) x (m+1) table
"""

from __future__ import annotations

import logging

logger = logging.getLogger(__name__)

# Above this many cell updates a DEBUG record is emitted so slow calls can be
# traced back to their inputs.
_LARGE_INPUT_CELLS = 10_000_000


def levenshtein(a: str, b: str) -> int:
    """Return the edit distance between a and b.

    Args:
        a: First string.
        b: Second string.

    Returns:
        Minimum number of insertions, deletions and substitutions that turn
        a into b.

    Example:
        >>> levenshtein("kitten", "sitting")
        3
    """
    if a == b:
        return 0
    if not a:
        return len(b)
    if not b:
        return len(a)
    if len(a) > len(b):
        a, b = b, a

    if len(a) * len(b) > _LARGE_INPUT_CELLS:
        logger.debug("levenshtein on large input: %d x %d", len(a), len(b))

    row = list(range(len(a) + 1))
    for j, b_char in enumerate(b, start=1):
        diagonal = row[0]
        row[0] = j
        for i, a_char in enumerate(a, start=1):
            above = row[i]
            cost = 0 if a_char == b_char else 1
            row[i] = min(
                above + 1,  # deletion
                row[i - 1] + 1,  # insertion
                diagonal + cost,  # substitution
            )
            diagonal = above
    return row[len(a)]


def similarity(a: str, b: str) -> float:
    """Return 1 - levenshtein(a, b) / max(len(a), len(b)), in [0, 1].

    Example:
        >>> similarity("abc", "abc")
        1.0
        >>> similarity("abc", "xyz")
        0.0
    """
    longest = max(len(a), len(b))
    if longest == 0:
        return 1.0
    return 1.0 - levenshtein(a, b) / longest
