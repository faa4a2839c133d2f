"""Escaping and stripping: regex, HTML, ANSI, punctuation."""

from __future__ import annotations

import re
import unicodedata

_REGEX_SPECIAL_RE = re.compile(r"[.*+?^${}()|\[\]\\]")
_HTML_TAG_RE = re.compile(r"<[^>]*>")
_ANSI_RE = re.compile(
    "[\u001b\u009b][\\[\\]()#;?]*(?:[0-9]{1,4}(?:;[0-9]{0,4})*)?[0-9A-ORZcf-nqry=><]"
)

# Order matters: "&" first when escaping, "&amp;" last when unescaping.
_HTML_ESCAPES = (
    ("&", "&amp;"),
    ("<", "&lt;"),
    (">", "&gt;"),
    ('"', "&quot;"),
    ("'", "&#39;"),
)


def escape_regex(text: str) -> str:
    """Backslash-escape regex metacharacters so text matches literally."""
    return _REGEX_SPECIAL_RE.sub(lambda m: "\\" + m.group(0), text)


def escape_html(text: str) -> str:
    """Escape the five HTML-significant characters."""
    for char, entity in _HTML_ESCAPES:
        text = text.replace(char, entity)
    return text


def unescape_html(text: str) -> str:
    """Reverse escape_html; other entities are left untouched."""
    for char, entity in reversed(_HTML_ESCAPES):
        text = text.replace(entity, char)
    return text


def strip_html(text: str) -> str:
    """Remove anything that looks like a tag. Not an HTML parser."""
    return _HTML_TAG_RE.sub("", text)


def strip_ansi(text: str) -> str:
    """Remove ANSI terminal escape sequences (colours, cursor moves)."""
    return _ANSI_RE.sub("", text)


def remove_punctuation(text: str) -> str:
    """Remove every character in a Unicode punctuation category (P*)."""
    return "".join(c for c in text if not unicodedata.category(c).startswith("P"))
