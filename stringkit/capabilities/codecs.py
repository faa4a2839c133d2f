"""Base64 codec backends.

WHY: Base64 helpers must behave identically wherever the package runs, and
fail loudly (not silently return garbage) when no codec is configured.

HOW: StdlibBase64Codec round-trips through UTF-8 with the base64 module.
UnavailableBase64Codec is selected when the configured backend name is
unknown; every call raises UnsupportedEnvironmentError.

RULES:
- encode() always emits padded, standard-alphabet base64
- decode() rejects characters outside the base64 alphabet (binascii.Error,
  a ValueError subclass) and invalid UTF-8 (UnicodeDecodeError)
"""

from __future__ import annotations

import base64

from stringkit.capabilities.base import Base64Codec


class UnsupportedEnvironmentError(RuntimeError):
    """Raised when base64 coding is requested but no codec is available.

    WHY: Callers need a typed error to tell a misconfigured environment
    apart from bad input data.

    HOW: Raised by UnavailableBase64Codec on every encode/decode call.

    RULES:
    - Message names the configured backend
    - Fatal to that call; never retried internally
    """


class StdlibBase64Codec(Base64Codec):
    """Base64 via the standard library."""

    @property
    def name(self) -> str:
        return "stdlib"

    def encode(self, text: str) -> str:
        return base64.b64encode(text.encode("utf-8")).decode("ascii")

    def decode(self, data: str) -> str:
        return base64.b64decode(data, validate=True).decode("utf-8")


class UnavailableBase64Codec(Base64Codec):
    """Placeholder for a backend that could not be resolved."""

    def __init__(self, requested: str) -> None:
        self._requested = requested

    @property
    def name(self) -> str:
        return "unavailable"

    def _fail(self, operation: str) -> UnsupportedEnvironmentError:
        return UnsupportedEnvironmentError(
            "Base64 {} not supported in this environment "
            "(backend '{}' is not available)".format(operation, self._requested)
        )

    def encode(self, text: str) -> str:
        raise self._fail("encode")

    def decode(self, data: str) -> str:
        raise self._fail("decode")
