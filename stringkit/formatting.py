"""Human-facing formatting: ordinals, list joining, templates.

WHY: Messages shown to people read better as "1st", "a, b, and c" and
"Hello Ada" than as raw numbers, lists and format strings.

HOW: ordinal() uses the English suffix rules; humanize_list() delegates
to the process-wide list formatter (see stringkit.capabilities);
template() substitutes {name} placeholders with a single regex pass.

RULES:
- template() never evaluates expressions; placeholders are plain keys
- Unknown placeholders are kept verbatim unless strict=True, which
  replaces them with ""
- None values render as ""
- Placeholder keys are stripped of surrounding whitespace before lookup
"""

from __future__ import annotations

import re
from typing import Any, Iterable, Mapping, Optional, Union

from stringkit.capabilities import ListFormatter, get_list_formatter
from stringkit.escape import escape_regex

_ORDINAL_SUFFIXES = ("th", "st", "nd", "rd")


def ordinal(n: int) -> str:
    """Return n with its English ordinal suffix, e.g. 1 → "1st", 12 → "12th"."""
    v = abs(n) % 100
    if 11 <= v <= 13:
        suffix = "th"
    elif v % 10 < 4:
        suffix = _ORDINAL_SUFFIXES[v % 10]
    else:
        suffix = "th"
    return "{}{}".format(n, suffix)


def humanize_list(
    items: Iterable[Union[str, int, float]],
    locale: str = "en",
    kind: str = "conjunction",
    formatter: Optional[ListFormatter] = None,
) -> str:
    """Join items into a readable list.

    Args:
        items: Values to list; each is converted with str().
        locale: BCP-47 locale tag, e.g. "en", "sv-SE".
        kind: "conjunction" (and), "disjunction" (or) or "unit" (commas).
        formatter: Backend override; defaults to the configured one.

    Returns:
        The joined list.

    Raises:
        ValueError: If kind is not a known list kind.

    Example:
        >>> humanize_list(["a", "b", "c"])
        'a, b, and c'
    """
    backend = formatter or get_list_formatter()
    return backend.format([str(item) for item in items], locale, kind)


def template(
    text: str,
    variables: Mapping[str, Any],
    start: str = "{",
    end: str = "}",
    strict: bool = False,
) -> str:
    """Substitute ``{key}`` placeholders from variables.

    Args:
        text: Template text.
        variables: Values by key.
        start: Opening delimiter.
        end: Closing delimiter.
        strict: Replace unknown placeholders with "" instead of keeping them.

    Returns:
        The rendered text.

    Example:
        >>> template("Hello {name}!", {"name": "Ada"})
        'Hello Ada!'
    """
    if not text:
        return ""
    # Placeholders never span a line break.
    placeholder = re.compile("{}(.*?){}".format(escape_regex(start), escape_regex(end)))

    def _render(match: "re.Match[str]") -> str:
        key = match.group(1)
        name = key.strip()
        if name in variables:
            value = variables[name]
            return "" if value is None else _to_text(value)
        return "" if strict else start + key + end

    return placeholder.sub(_render, text)


def _to_text(value: Any) -> str:
    # Booleans render lowercase so templates read the same as JSON input.
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)
