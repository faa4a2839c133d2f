"""Greedy word wrap with optional long-word breaking, and dedent.

WHY: CLI help, plain-text e-mails and log output need text reflowed to a
fixed column width. Each source line is reflowed on its own so paragraph
structure (including blank lines) survives.

HOW: Each source line is split into alternating word and whitespace tokens
(whitespace is kept so inter-word spacing is reproduced). Tokens are packed
greedily into a _LineBuffer; when a token does not fit the buffer is
flushed as an output line. With break_long_words, words wider than the
line are chopped into width-sized chunks.

RULES:
- width <= 0 disables wrapping: the result is indent + text, unchanged
- \\r\\n, \\r and \\n all end a source line; the output uses ``newline``
- Every source line yields at least one output line (blank lines survive)
- Flushed lines are right-trimmed of whitespace, then prefixed with indent
- ``width`` bounds the content; the indent is not counted against it
- A whitespace run that does not fit is dropped, not carried over
- Without break_long_words, an over-long word sits alone on its own line
- A word chopped into exact multiples of width leaves an empty current
  line, which is still flushed at the end of the source line
"""

from __future__ import annotations

import re
from typing import List

_LINE_BREAK_RE = re.compile(r"\r\n?|\n")
_TOKEN_RE = re.compile(r"(\s+)")


class _LineBuffer:
    """Completed lines plus the line being filled, scoped to one call."""

    def __init__(self, width: int, indent: str) -> None:
        self.width = width
        self.indent = indent
        self.lines: List[str] = []
        self.current = ""

    def fits(self, token: str) -> bool:
        return len(self.current) + len(token) <= self.width

    def flush(self, text: str) -> None:
        self.lines.append(self.indent + text)

    def flush_current(self) -> None:
        self.flush(self.current.rstrip())
        self.current = ""

    def break_word(self, token: str) -> None:
        """Fill the current line from token, then emit width-sized chunks."""
        space_left = self.width - len(self.current)
        if space_left > 0:
            self.flush(self.current + token[:space_left])
            rest = token[space_left:]
        else:
            # No room left. Words on the line are emitted, bare whitespace is dropped.
            if self.current.rstrip():
                self.flush(self.current.rstrip())
            rest = token
        self.current = ""
        for start in range(0, len(rest), self.width):
            chunk = rest[start:start + self.width]
            if len(chunk) == self.width:
                self.flush(chunk)
            else:
                self.current = chunk


def _wrap_line(line: str, buffer: _LineBuffer, break_long_words: bool) -> None:
    for token in _TOKEN_RE.split(line):
        if not token:
            continue
        is_space = token.isspace()
        oversized = break_long_words and not is_space and len(token) > buffer.width
        if buffer.fits(token) or (not buffer.current and not oversized):
            buffer.current += token
            continue

        if is_space:
            # Forced break; the whitespace itself is discarded.
            buffer.flush_current()
        elif oversized:
            buffer.break_word(token)
        else:
            buffer.flush_current()
            buffer.current = token
    buffer.flush_current()


def word_wrap(
    text: str,
    width: int = 80,
    break_long_words: bool = False,
    indent: str = "",
    newline: str = "\n",
) -> str:
    """Wrap text so each line's content is at most ``width`` characters.

    Args:
        text: Input text, possibly spanning several lines.
        width: Maximum content width per output line.
        break_long_words: Chop words longer than ``width`` across lines.
        indent: Prefix added to every output line.
        newline: Separator placed between output lines.

    Returns:
        The wrapped text.

    Example:
        >>> word_wrap("The quick brown fox", width=10)
        'The quick\\nbrown fox'
    """
    if width <= 0:
        return indent + text

    buffer = _LineBuffer(width, indent)
    for line in _LINE_BREAK_RE.split(text):
        _wrap_line(line, buffer, break_long_words)
    return newline.join(buffer.lines)


def dedent(text: str, trim: bool = True) -> str:
    """Remove the common leading indentation from every line.

    Blank lines do not count towards the common indentation. With ``trim``
    the leading and trailing newlines are removed first. Only lines that
    actually start with that many spaces are shifted.
    """
    if trim:
        text = text.strip("\n")
    lines = text.split("\n")
    min_indent = None
    for line in lines:
        if not line.strip():
            continue
        indent = len(line) - len(line.lstrip())
        min_indent = indent if min_indent is None else min(min_indent, indent)
    if not min_indent:
        return text
    prefix = " " * min_indent
    return "\n".join(
        line[min_indent:] if line.startswith(prefix) else line for line in lines
    )
