"""List formatter backends.

WHY: "a, b, and c" is English; Swedish writes "a, b och c" and German
"a, b und c". humanize_list() should follow the caller's locale where we
know the rules and degrade to a fixed English join where we do not.

HOW: LocaleListFormatter looks up the locale's conjunction/disjunction
words and serial-comma rule in _LOCALE_PATTERNS (exact tag first, then the
primary language subtag). Unknown locales are delegated to
PlainListFormatter, the fixed "a, b and c" / "a, b or c" join.

RULES:
- Locale tags are matched case-insensitively; "_" and "-" are equivalent
- "unit" lists are comma-joined with no conjunction in every known locale
- Plain joining treats "unit" like "conjunction"
- Zero items → "", one item → the item itself
"""

from __future__ import annotations

import logging
from typing import NamedTuple, Sequence

from stringkit.capabilities.base import ListFormatter

logger = logging.getLogger(__name__)

LIST_KINDS = ("conjunction", "disjunction", "unit")


class _ListPattern(NamedTuple):
    conjunction: str
    disjunction: str
    serial_comma: bool = False


_LOCALE_PATTERNS: dict[str, _ListPattern] = {
    "en": _ListPattern("and", "or", serial_comma=True),
    "en-gb": _ListPattern("and", "or"),
    "en-au": _ListPattern("and", "or"),
    "en-in": _ListPattern("and", "or"),
    "sv": _ListPattern("och", "eller"),
    "da": _ListPattern("og", "eller"),
    "nb": _ListPattern("og", "eller"),
    "no": _ListPattern("og", "eller"),
    "fi": _ListPattern("ja", "tai"),
    "de": _ListPattern("und", "oder"),
    "nl": _ListPattern("en", "of"),
    "fr": _ListPattern("et", "ou"),
    "es": _ListPattern("y", "o"),
    "it": _ListPattern("e", "o"),
    "pt": _ListPattern("e", "ou"),
}


def _check_kind(kind: str) -> None:
    if kind not in LIST_KINDS:
        raise ValueError(
            "Unknown list kind '{}'. Available: {}".format(kind, ", ".join(LIST_KINDS))
        )


def _resolve_pattern(locale: str) -> _ListPattern | None:
    tag = locale.strip().lower().replace("_", "-")
    if tag in _LOCALE_PATTERNS:
        return _LOCALE_PATTERNS[tag]
    return _LOCALE_PATTERNS.get(tag.split("-", 1)[0])


class PlainListFormatter(ListFormatter):
    """Fixed English-style join without a serial comma."""

    @property
    def name(self) -> str:
        return "plain"

    def format(self, items: Sequence[str], locale: str, kind: str) -> str:
        _check_kind(kind)
        if len(items) <= 1:
            return "".join(items)
        word = "or" if kind == "disjunction" else "and"
        return "{} {} {}".format(", ".join(items[:-1]), word, items[-1])


class LocaleListFormatter(ListFormatter):
    """Per-locale conjunction words, falling back to PlainListFormatter."""

    def __init__(self) -> None:
        self._fallback = PlainListFormatter()

    @property
    def name(self) -> str:
        return "locale"

    def format(self, items: Sequence[str], locale: str, kind: str) -> str:
        _check_kind(kind)
        pattern = _resolve_pattern(locale)
        if pattern is None:
            logger.debug("No list pattern for locale %r, using plain join", locale)
            return self._fallback.format(items, locale, kind)

        if len(items) <= 1:
            return "".join(items)
        if kind == "unit":
            return ", ".join(items)

        word = pattern.conjunction if kind == "conjunction" else pattern.disjunction
        head = ", ".join(items[:-1])
        if pattern.serial_comma and len(items) > 2:
            head += ","
        return "{} {} {}".format(head, word, items[-1])
