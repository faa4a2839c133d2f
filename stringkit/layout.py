"""Fixed-width layout: truncation, padding, masking, affixes.

WHY: Table cells, status lines and log fields need strings of a known
width, and secrets need to be shown partially (the last four digits of a
card number, say).

HOW: Plain slicing. Widths are measured in code points, like len().

RULES:
- truncate/truncate_middle never return more than max_length characters
  when max_length >= 0
- When max_length leaves no room for the ellipsis, a cut ellipsis is
  returned instead of raising
- mask never reveals more than the original string
"""

from __future__ import annotations

import math

TRUNCATE_DIRECTIONS = ("end", "start", "middle")


def truncate(
    text: str,
    max_length: int,
    ellipsis: str = "…",
    keep_words: bool = False,
) -> str:
    """Cut text to max_length characters, ending with ellipsis.

    Args:
        text: Text to truncate.
        max_length: Maximum length including the ellipsis.
        ellipsis: Marker appended when text is cut.
        keep_words: Cut at the last space before the limit, if any.

    Returns:
        The original text if it fits, else the truncated text.

    Example:
        >>> truncate("Hello World", 8)
        'Hello W…'
        >>> truncate("Hello World", 8, keep_words=True)
        'Hello…'
    """
    if len(text) <= max_length:
        return text
    if max_length <= len(ellipsis):
        return ellipsis[:max_length]
    cut = max_length - len(ellipsis)
    if keep_words:
        last_space = text[:cut].rfind(" ")
        if last_space > 0:
            cut = last_space
    return text[:cut] + ellipsis


def truncate_middle(text: str, max_length: int, ellipsis: str = "…") -> str:
    """Cut the middle of text, e.g. "abcdefghij" → "abcd…hij" (8)."""
    if len(text) <= max_length:
        return text
    if max_length <= len(ellipsis):
        return ellipsis[:max_length]
    keep = max_length - len(ellipsis)
    head = math.ceil(keep / 2)
    tail = len(text) - keep // 2
    return text[:head] + ellipsis + text[tail:]


def center(text: str, width: int, pad_char: str = " ") -> str:
    """Pad both sides to width; the extra character goes on the right."""
    if len(text) >= width:
        return text
    total = width - len(text)
    left = total // 2
    return pad_char * left + text + pad_char * (total - left)


def to_fixed_length(
    text: str,
    length: int,
    pad_char: str = " ",
    truncate_direction: str = "end",
) -> str:
    """Pad on the right or cut so the result is exactly length characters.

    Args:
        text: Input text.
        length: Target length.
        pad_char: Padding character.
        truncate_direction: Where characters are removed when text is too
            long: "end", "start" or "middle".

    Raises:
        ValueError: If truncate_direction is not a known direction.
    """
    if truncate_direction not in TRUNCATE_DIRECTIONS:
        raise ValueError(
            "Unknown truncate direction '{}'. Available: {}".format(
                truncate_direction, ", ".join(TRUNCATE_DIRECTIONS)
            )
        )
    length = max(0, length)
    if len(text) == length:
        return text
    if len(text) < length:
        return text + pad_char * (length - len(text))
    if truncate_direction == "start":
        return text[len(text) - length:]
    if truncate_direction == "middle":
        half = length // 2
        return text[:half] + text[len(text) - (length - half):]
    return text[:length]


def mask(
    text: str,
    show_start: int = 0,
    show_end: int = 4,
    mask_char: str = "•",
) -> str:
    """Hide all but the first show_start and last show_end characters.

    Example:
        >>> mask("4111111111111111")
        '••••••••••••1111'
    """
    show_start = max(0, show_start)
    show_end = max(0, show_end)
    if show_start + show_end >= len(text):
        return text
    hidden = len(text) - show_start - show_end
    return text[:show_start] + mask_char * hidden + text[len(text) - show_end:]


def ensure_prefix(text: str, prefix: str) -> str:
    return text if text.startswith(prefix) else prefix + text


def ensure_suffix(text: str, suffix: str) -> str:
    return text if text.endswith(suffix) else text + suffix
