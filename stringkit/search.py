"""Substring helpers: any-of tests, replace-all, text between markers."""

from __future__ import annotations

import re
from typing import Iterable, List, Optional, Union


def starts_with_any(text: str, prefixes: Iterable[str]) -> bool:
    return any(text.startswith(p) for p in prefixes)


def ends_with_any(text: str, suffixes: Iterable[str]) -> bool:
    return any(text.endswith(s) for s in suffixes)


def contains_any(text: str, needles: Iterable[str]) -> bool:
    return any(n in text for n in needles)


def replace_all(text: str, search: Union[str, re.Pattern[str]], replacement: str) -> str:
    """Replace every occurrence of search (a string or compiled pattern).

    The replacement is inserted literally in both cases; backreferences
    such as ``\\1`` are not expanded. An empty search string is a no-op.
    """
    if isinstance(search, str):
        if not search:
            return text
        return text.replace(search, replacement)
    return search.sub(lambda _: replacement, text)


def between(text: str, start: str, end: str, from_index: int = 0) -> Optional[str]:
    """Return the text between the first start marker and the next end marker.

    Args:
        text: Text to search.
        start: Opening marker.
        end: Closing marker, searched after the opening marker.
        from_index: Position to start searching for the opening marker.

    Returns:
        The enclosed text, or None if either marker is missing.

    Example:
        >>> between("a [b] c", "[", "]")
        'b'
    """
    i = text.find(start, from_index)
    if i == -1:
        return None
    j = text.find(end, i + len(start))
    if j == -1:
        return None
    return text[i + len(start):j]


def between_all(text: str, start: str, end: str) -> List[str]:
    """Return every non-overlapping enclosed substring, left to right."""
    found = []
    idx = 0
    while idx < len(text):
        i = text.find(start, idx)
        if i == -1:
            break
        j = text.find(end, i + len(start))
        if j == -1:
            break
        found.append(text[i + len(start):j])
        next_idx = j + len(end)
        if next_idx <= idx:
            break
        idx = next_idx
    return found


__all__ = [
    "starts_with_any",
    "ends_with_any",
    "contains_any",
    "replace_all",
    "between",
    "between_all",
]
