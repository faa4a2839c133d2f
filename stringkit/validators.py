"""Pragmatic validators for e-mail, UUID, URL and hex colour strings.

WHY: Form input and config values need a quick sanity check before use.
These are deliberately loose; they reject obvious garbage, they do not
implement the full RFCs.

HOW: Anchored regexes, except is_url which parses with urllib.parse.

RULES:
- Every validator returns a bool and never raises
- is_uuid accepts versions 1-5 with the RFC 4122 variant, any letter case
- is_url requires a scheme; http(s), ftp and ws(s) also need a host
"""

from __future__ import annotations

import re
from urllib.parse import urlsplit

_EMAIL_RE = re.compile(r"[^\s@]+@[^\s@]+\.[^\s@]{2,}")
_UUID_RE = re.compile(
    r"[0-9a-f]{8}-[0-9a-f]{4}-[1-5][0-9a-f]{3}-[89ab][0-9a-f]{3}-[0-9a-f]{12}",
    re.IGNORECASE,
)
_HEX_COLOR_RE = re.compile(r"#(?:[0-9a-fA-F]{3}|[0-9a-fA-F]{6}|[0-9a-fA-F]{4}|[0-9a-fA-F]{8})")
_SCHEME_RE = re.compile(r"[A-Za-z][A-Za-z0-9+.\-]*")

# Schemes whose URLs are meaningless without a host.
_HOST_SCHEMES = frozenset({"http", "https", "ftp", "ws", "wss"})


def is_email(text: str) -> bool:
    return _EMAIL_RE.fullmatch(text) is not None


def is_uuid(text: str) -> bool:
    return _UUID_RE.fullmatch(text) is not None


def is_hex_color(text: str) -> bool:
    """True for #rgb, #rgba, #rrggbb and #rrggbbaa."""
    return _HEX_COLOR_RE.fullmatch(text) is not None


def is_url(text: str) -> bool:
    """True if text parses as an absolute URL."""
    candidate = text.strip()
    if not candidate or any(c.isspace() for c in candidate):
        return False
    try:
        parts = urlsplit(candidate)
        # Accessing port validates it (raises ValueError when out of range).
        parts.port
    except ValueError:
        return False
    if not parts.scheme or not _SCHEME_RE.fullmatch(parts.scheme):
        return False
    if parts.scheme.lower() in _HOST_SCHEMES:
        return bool(parts.hostname)
    return True
