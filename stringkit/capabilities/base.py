"""Abstract capability interfaces.

WHY: Grapheme segmentation, locale-aware list joining and base64 coding
each have more than one possible implementation. The functions that use
them should not care which one is active.

HOW: One ABC per capability. Concrete backends live in sibling modules and
are registered by name in capabilities/__init__.py.

RULES:
- Subclasses MUST implement ``name`` and the capability method(s)
- Backends are stateless; one instance is shared by every caller
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Sequence


class GraphemeSegmenter(ABC):
    """Splits text into user-perceived characters."""

    @property
    @abstractmethod
    def name(self) -> str:
        """Registry key, e.g. 'unicode'."""

    @abstractmethod
    def segment(self, text: str) -> list[str]:
        """Return the grapheme clusters of text, in order."""


class ListFormatter(ABC):
    """Joins items into a human-readable list ("a, b and c")."""

    @property
    @abstractmethod
    def name(self) -> str:
        """Registry key, e.g. 'locale'."""

    @abstractmethod
    def format(self, items: Sequence[str], locale: str, kind: str) -> str:
        """Join items for the given locale and list kind.

        Args:
            items: Already stringified items.
            locale: BCP-47 tag such as "en" or "sv-SE".
            kind: "conjunction", "disjunction" or "unit".
        """


class Base64Codec(ABC):
    """Encodes text to base64 and back, via UTF-8."""

    @property
    @abstractmethod
    def name(self) -> str:
        """Registry key, e.g. 'stdlib'."""

    @abstractmethod
    def encode(self, text: str) -> str:
        """Return the standard (padded) base64 form of text."""

    @abstractmethod
    def decode(self, data: str) -> str:
        """Decode standard base64 back to text."""
