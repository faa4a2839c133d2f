"""Capability registry: pluggable backends selected once at import.

WHY: Grapheme segmentation, list joining and base64 coding each have
alternative implementations. Choosing one per call would make results
depend on call order; choosing one per process keeps every call
consistent and keeps the choice out of the text functions.

HOW: Each *_BACKENDS dict maps a name to a backend class (not instance).
select_*() resolves a name to an instance;
the module resolves the configured names once, on import, and the
get_*() accessors return those shared instances.

RULES:
- Keys are lowercase identifiers, also accepted from configuration
- Unknown grapheme/list backend names raise ValueError listing choices
- An unknown base64 backend resolves to UnavailableBase64Codec, so the
  error surfaces as UnsupportedEnvironmentError at call time
"""

from __future__ import annotations

import logging

from stringkit import config
from stringkit.capabilities.base import Base64Codec, GraphemeSegmenter, ListFormatter
from stringkit.capabilities.codecs import (
    StdlibBase64Codec,
    UnavailableBase64Codec,
    UnsupportedEnvironmentError,
)
from stringkit.capabilities.graphemes import CodePointSegmenter, UnicodeGraphemeSegmenter
from stringkit.capabilities.lists import LIST_KINDS, LocaleListFormatter, PlainListFormatter

logger = logging.getLogger(__name__)

GRAPHEME_BACKENDS: dict[str, type[GraphemeSegmenter]] = {
    "unicode": UnicodeGraphemeSegmenter,
    "codepoint": CodePointSegmenter,
}

LIST_BACKENDS: dict[str, type[ListFormatter]] = {
    "locale": LocaleListFormatter,
    "plain": PlainListFormatter,
}

BASE64_BACKENDS: dict[str, type[Base64Codec]] = {
    "stdlib": StdlibBase64Codec,
}


def _unknown(kind: str, name: str, registry: dict) -> ValueError:
    return ValueError(
        "Unknown {} backend '{}'. Available: {}".format(kind, name, ", ".join(registry))
    )


def select_grapheme_segmenter(name: str) -> GraphemeSegmenter:
    """Instantiate the grapheme backend registered under name."""
    if name not in GRAPHEME_BACKENDS:
        raise _unknown("grapheme", name, GRAPHEME_BACKENDS)
    return GRAPHEME_BACKENDS[name]()


def select_list_formatter(name: str) -> ListFormatter:
    """Instantiate the list backend registered under name."""
    if name not in LIST_BACKENDS:
        raise _unknown("list", name, LIST_BACKENDS)
    return LIST_BACKENDS[name]()


def select_base64_codec(name: str) -> Base64Codec:
    """Instantiate the base64 backend registered under name.

    Unknown names do not raise here; the returned codec raises
    UnsupportedEnvironmentError when used.
    """
    if name not in BASE64_BACKENDS:
        logger.debug("Base64 backend %r not available", name)
        return UnavailableBase64Codec(name)
    return BASE64_BACKENDS[name]()


_grapheme_segmenter = select_grapheme_segmenter(config.GRAPHEME_BACKEND)
_list_formatter = select_list_formatter(config.LIST_BACKEND)
_base64_codec = select_base64_codec(config.BASE64_BACKEND)

logger.debug(
    "Capabilities: graphemes=%s lists=%s base64=%s",
    _grapheme_segmenter.name,
    _list_formatter.name,
    _base64_codec.name,
)


def get_grapheme_segmenter() -> GraphemeSegmenter:
    return _grapheme_segmenter


def get_list_formatter() -> ListFormatter:
    return _list_formatter


def get_base64_codec() -> Base64Codec:
    return _base64_codec


__all__ = [
    "BASE64_BACKENDS",
    "GRAPHEME_BACKENDS",
    "LIST_BACKENDS",
    "LIST_KINDS",
    "Base64Codec",
    "GraphemeSegmenter",
    "ListFormatter",
    "UnsupportedEnvironmentError",
    "get_base64_codec",
    "get_grapheme_segmenter",
    "get_list_formatter",
    "select_base64_codec",
    "select_grapheme_segmenter",
    "select_list_formatter",
]
