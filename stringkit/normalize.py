"""Normalisation: diacritics, slugs, filenames, whitespace.

WHY: User-entered titles end up in URLs, file names and keys. They need
accents folded, unsafe characters replaced and whitespace tidied.

HOW: Unicode NFD decomposition followed by removal of combining diacritical
marks, then regex replacement passes.

RULES:
- strip_diacritics only removes U+0300–U+036F; letters without a
  decomposition (ø, ł, ß) are left alone
- slugify keeps Unicode letters and numbers from any script
- sanitize_filename never returns an empty string
"""

from __future__ import annotations

import re
import unicodedata

_COMBINING_MARKS_RE = re.compile("[\u0300-\u036f]")
_NON_ALNUM_RE = re.compile(r"[\W_]+")
_FILENAME_RESERVED_RE = re.compile(r'[\\/:*?"<>|\0]')
_WHITESPACE_RE = re.compile(r"\s+")
_TRAILING_DOTS_RE = re.compile(r"\.+$")
_LINE_BREAKS_RE = re.compile("\r\n?|\u2028|\u2029")
_INLINE_SPACE_RE = re.compile(r"[ \t\f\v]+")
_BLANK_LINES_RE = re.compile(r"\n{3,}")


def strip_diacritics(text: str) -> str:
    """Remove accents, e.g. "Crème brûlée" → "Creme brulee"."""
    return _COMBINING_MARKS_RE.sub("", unicodedata.normalize("NFD", text))


def slugify(
    text: str,
    lower: bool = True,
    separator: str = "-",
    trim: bool = True,
) -> str:
    """Convert text to a URL-friendly slug.

    Args:
        text: Input text.
        lower: Lowercase the result.
        separator: Replacement for every run of non-alphanumeric characters.
        trim: Remove a leading/trailing separator.

    Returns:
        The slug.

    Example:
        >>> slugify("Hello, Wörld!")
        'hello-world'
    """
    slug = _NON_ALNUM_RE.sub(lambda _: separator, strip_diacritics(text))
    if separator:
        escaped = re.escape(separator)
        slug = re.sub("(?:{}){{2,}}".format(escaped), lambda _: separator, slug)
        if trim:
            slug = re.sub("^{0}|{0}$".format(escaped), "", slug)
    if lower:
        slug = slug.lower()
    return slug


def sanitize_filename(text: str, replacement: str = "-", max_length: int = 255) -> str:
    """Make text safe to use as a file name on Windows, macOS and Linux.

    Reserved characters become ``replacement``, whitespace runs become a
    single space, trailing dots are dropped and the result is cut to
    ``max_length``. An empty result becomes "untitled".
    """
    name = strip_diacritics(text)
    name = _FILENAME_RESERVED_RE.sub(lambda _: replacement, name)
    name = _WHITESPACE_RE.sub(" ", name)
    name = _TRAILING_DOTS_RE.sub("", name)
    name = name.strip()
    if not name:
        name = "untitled"
    return name[:max_length]


def normalize_whitespace(text: str, preserve_newlines: bool = False) -> str:
    """Collapse whitespace runs to single spaces and trim.

    With preserve_newlines, line breaks are normalised to "\\n", runs of
    spaces/tabs collapse, and at most one blank line is kept in a row.
    """
    if preserve_newlines:
        normalized = _LINE_BREAKS_RE.sub("\n", text)
        normalized = _INLINE_SPACE_RE.sub(" ", normalized)
        return _BLANK_LINES_RE.sub("\n\n", normalized).strip()
    return _WHITESPACE_RE.sub(" ", text).strip()


def is_blank(text: str) -> bool:
    """True if text is empty or only whitespace."""
    return not text or text.isspace()
