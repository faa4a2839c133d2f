"""Base64 and URL-safe base64 for text.

WHY: Tokens, cursors and data URIs carry text as base64; URL-safe base64
without padding is what JWT-style tokens and query parameters expect.

HOW: Standard base64 goes through the configured codec backend. The
URL-safe variants translate the alphabet ("+/" ↔ "-_") and drop/restore
"=" padding around it.

RULES:
- Text is always encoded as UTF-8
- base64url_encode output never contains "+", "/" or "="
- base64url_decode accepts input with or without padding
- UnsupportedEnvironmentError propagates when no codec is available
"""

from __future__ import annotations

from typing import Optional

from stringkit.capabilities import Base64Codec, get_base64_codec

_TO_URLSAFE = str.maketrans("+/", "-_")
_FROM_URLSAFE = str.maketrans("-_", "+/")


def base64_encode(text: str, codec: Optional[Base64Codec] = None) -> str:
    """Encode text as standard, padded base64.

    Raises:
        UnsupportedEnvironmentError: If no base64 codec is available.
    """
    return (codec or get_base64_codec()).encode(text)


def base64_decode(data: str, codec: Optional[Base64Codec] = None) -> str:
    """Decode standard base64 to text.

    Raises:
        UnsupportedEnvironmentError: If no base64 codec is available.
        ValueError: If data is not valid base64 or not valid UTF-8.
    """
    return (codec or get_base64_codec()).decode(data)


def base64url_encode(text: str, codec: Optional[Base64Codec] = None) -> str:
    """Encode text as URL-safe base64 without padding."""
    return base64_encode(text, codec).rstrip("=").translate(_TO_URLSAFE)


def base64url_decode(data: str, codec: Optional[Base64Codec] = None) -> str:
    """Decode URL-safe base64, padded or not."""
    standard = data.translate(_FROM_URLSAFE)
    remainder = len(standard) % 4
    if remainder:
        standard += "=" * (4 - remainder)
    return base64_decode(standard, codec)
