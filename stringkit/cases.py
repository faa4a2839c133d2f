"""Case conversion: camel, Pascal, snake, kebab, constant, title, sentence.

WHY: Identifiers move between naming conventions (JSON keys, Python
attributes, environment variables, CSS classes), and headings need title
or sentence case.

HOW: The identifier converters split text with core.words.split_words and
join the words with the target convention. camel/Pascal lowercase the
input before splitting; snake/kebab/constant split the original text (so
camel humps become word boundaries) and strip diacritics from each word.

RULES:
- to_camel_case/to_pascal_case lowercase first, so existing humps are NOT
  word boundaries: to_camel_case("fooBar") == "foobar"
- to_title_case keeps separators (whitespace, dashes, slashes, brackets,
  quotes, ":;!?") exactly as they were
- Small words stay lowercase unless they are the first or last token
"""

from __future__ import annotations

import re
from typing import Iterable

from stringkit.core.words import split_words
from stringkit.normalize import normalize_whitespace, strip_diacritics

DEFAULT_SMALL_WORDS = frozenset({
    "a", "an", "and", "as", "at", "but", "by", "for", "in", "of",
    "on", "or", "the", "to", "nor", "per", "vs", "via",
})

_TITLE_SEPARATOR_CHARS = r"""\-–—/:;!?"'()\[\]"""
_TITLE_SPLIT_RE = re.compile(r"(\s+|[" + _TITLE_SEPARATOR_CHARS + r"])")
_TITLE_SEPARATOR_RE = re.compile(r"[" + _TITLE_SEPARATOR_CHARS + r"]")


def capitalize(text: str) -> str:
    """Uppercase the first character, leave the rest untouched."""
    if not text:
        return ""
    return text[0].upper() + text[1:]


def decapitalize(text: str) -> str:
    """Lowercase the first character, leave the rest untouched."""
    if not text:
        return ""
    return text[0].lower() + text[1:]


def to_camel_case(text: str) -> str:
    """Convert to camelCase, e.g. "hello world" → "helloWorld"."""
    parts = split_words(text.lower())
    if not parts:
        return ""
    return parts[0] + "".join(capitalize(w) for w in parts[1:])


def to_pascal_case(text: str) -> str:
    """Convert to PascalCase, e.g. "hello world" → "HelloWorld"."""
    return "".join(capitalize(w) for w in split_words(text.lower()))


def to_snake_case(text: str) -> str:
    """Convert to snake_case, e.g. "fooBar Café" → "foo_bar_cafe"."""
    return "_".join(strip_diacritics(w).lower() for w in split_words(text))


def to_kebab_case(text: str) -> str:
    """Convert to kebab-case, e.g. "fooBar Café" → "foo-bar-cafe"."""
    return "-".join(strip_diacritics(w).lower() for w in split_words(text))


def to_constant_case(text: str) -> str:
    """Convert to CONSTANT_CASE, e.g. "fooBar" → "FOO_BAR"."""
    return "_".join(strip_diacritics(w).upper() for w in split_words(text))


def to_sentence_case(text: str) -> str:
    """Collapse whitespace, uppercase the first character, lowercase the rest."""
    normalized = normalize_whitespace(text)
    if not normalized:
        return ""
    return normalized[0].upper() + normalized[1:].lower()


def to_title_case(
    text: str,
    small_words: Iterable[str] = (),
    force_upper: Iterable[str] = (),
) -> str:
    """Title-case text, keeping small words lowercase.

    Args:
        text: Input text.
        small_words: Extra words to keep lowercase (added to
            DEFAULT_SMALL_WORDS).
        force_upper: Words always written fully uppercase, e.g. "NASA".

    Returns:
        The title-cased text.

    Example:
        >>> to_title_case("the lord of the rings")
        'The Lord of the Rings'
    """
    small = DEFAULT_SMALL_WORDS | {w.lower() for w in small_words}
    force = {w.upper() for w in force_upper}

    tokens = _TITLE_SPLIT_RE.split(text)
    last = len(tokens) - 1
    out = []
    for idx, token in enumerate(tokens):
        if token.isspace() or _TITLE_SEPARATOR_RE.search(token):
            out.append(token)
            continue
        if token.upper() in force:
            out.append(token.upper())
            continue
        lower = token.lower()
        if idx != 0 and idx != last and lower in small:
            out.append(lower)
        else:
            out.append(capitalize(lower))
    return "".join(out)


def initials(text: str, max_letters: int = 2) -> str:
    """Uppercase first letters of the first max_letters words."""
    letters = [w[0] for w in split_words(text)][:max(0, max_letters)]
    return "".join(letters).upper()
