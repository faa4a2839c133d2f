"""Configuration constants and .env loading.

WHY: A few behaviours are environment-dependent: which grapheme, list and
base64 backends the library uses, and the defaults the CLI offers. Keeping
them as plain module-level values makes them easy to find and override.

HOW: python-dotenv loads the .env file on import. Every value is read with
os.getenv() and a literal default, so the package works with no .env at all.

RULES:
- Library function defaults are NOT read from here; only backend selection
  and CLI defaults are
- Backend names are validated where they are used (capabilities package)
- load_log_level() and load_wrap_width() never raise; bad values fall
  back to WARNING and 80
"""

from __future__ import annotations

import logging
import os

from dotenv import load_dotenv

load_dotenv()

# ---------------------------------------------------------------------------
# Capability backends
# ---------------------------------------------------------------------------

GRAPHEME_BACKEND = os.getenv("STRINGKIT_GRAPHEME_BACKEND", "unicode").strip().lower()
LIST_BACKEND = os.getenv("STRINGKIT_LIST_BACKEND", "locale").strip().lower()
BASE64_BACKEND = os.getenv("STRINGKIT_BASE64_BACKEND", "stdlib").strip().lower()

# ---------------------------------------------------------------------------
# CLI defaults
# ---------------------------------------------------------------------------

DEFAULT_LOCALE = os.getenv("STRINGKIT_DEFAULT_LOCALE", "en")


def load_wrap_width() -> int:
    """Read STRINGKIT_WRAP_WIDTH; non-numeric values fall back to 80."""
    try:
        return int(os.getenv("STRINGKIT_WRAP_WIDTH", "80").strip())
    except ValueError:
        return 80


DEFAULT_WRAP_WIDTH = load_wrap_width()


def load_log_level() -> int:
    """Resolve STRINGKIT_LOG_LEVEL to a logging level number.

    WHY: The CLI should be quiet by default but debuggable without code
    changes.

    HOW: Reads the variable at call time (not import time) so tests can
    monkeypatch the environment.

    RULES:
    - Accepts standard level names, case-insensitive
    - Unknown or empty values return logging.WARNING
    """
    name = os.getenv("STRINGKIT_LOG_LEVEL", "WARNING").strip().upper()
    level = logging.getLevelName(name)
    if isinstance(level, int):
        return level
    return logging.WARNING
