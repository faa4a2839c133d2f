"""stringkit: pure string utilities.

WHY: The same handful of string chores (case conversion, slugs, escaping,
fuzzy matching, wrapping, masking, templating) recur in every project.
This package collects them as small, stateless, well-tested functions.

HOW: Three algorithmic cores live in stringkit.core (word segmentation,
Levenshtein distance, greedy word wrap). Thin modules build on them by
concern: cases, normalize, escape, layout, search, validators, formatting,
graphemes, encoding. Environment-dependent pieces (grapheme clustering,
locale list joining, base64) are pluggable backends in
stringkit.capabilities, selected once at import from configuration.

RULES:
- Every public function is pure and re-entrant; no shared mutable state
- Functions are total: bad widths/lengths hit documented degenerate
  branches instead of raising. Exceptions: base64 (codec unavailable or
  bad data) and unknown enumerated option values (ValueError)
- Validators return bool and never raise
- Everything public is importable from the top-level package

Usage:
    from stringkit import slugify, levenshtein, word_wrap
    slugify("Hello, Wörld!")            # 'hello-world'
    levenshtein("kitten", "sitting")    # 3
    word_wrap("The quick brown fox", width=10)
"""

__version__ = "0.1.0"

from stringkit.capabilities import UnsupportedEnvironmentError
from stringkit.cases import (
    capitalize,
    decapitalize,
    initials,
    to_camel_case,
    to_constant_case,
    to_kebab_case,
    to_pascal_case,
    to_sentence_case,
    to_snake_case,
    to_title_case,
)
from stringkit.core import dedent, levenshtein, similarity, split_words, word_wrap, words
from stringkit.encoding import base64_decode, base64_encode, base64url_decode, base64url_encode
from stringkit.escape import (
    escape_html,
    escape_regex,
    remove_punctuation,
    strip_ansi,
    strip_html,
    unescape_html,
)
from stringkit.formatting import humanize_list, ordinal, template
from stringkit.graphemes import count_graphemes, reverse_graphemes
from stringkit.layout import (
    center,
    ensure_prefix,
    ensure_suffix,
    mask,
    to_fixed_length,
    truncate,
    truncate_middle,
)
from stringkit.normalize import (
    is_blank,
    normalize_whitespace,
    sanitize_filename,
    slugify,
    strip_diacritics,
)
from stringkit.search import (
    between,
    between_all,
    contains_any,
    ends_with_any,
    replace_all,
    starts_with_any,
)
from stringkit.validators import is_email, is_hex_color, is_url, is_uuid

__all__ = [
    "__version__",
    "UnsupportedEnvironmentError",
    # core
    "split_words",
    "words",
    "levenshtein",
    "similarity",
    "word_wrap",
    "dedent",
    # cases
    "capitalize",
    "decapitalize",
    "initials",
    "to_camel_case",
    "to_constant_case",
    "to_kebab_case",
    "to_pascal_case",
    "to_sentence_case",
    "to_snake_case",
    "to_title_case",
    # normalize
    "is_blank",
    "normalize_whitespace",
    "sanitize_filename",
    "slugify",
    "strip_diacritics",
    # escape
    "escape_html",
    "escape_regex",
    "remove_punctuation",
    "strip_ansi",
    "strip_html",
    "unescape_html",
    # layout
    "center",
    "ensure_prefix",
    "ensure_suffix",
    "mask",
    "to_fixed_length",
    "truncate",
    "truncate_middle",
    # search
    "between",
    "between_all",
    "contains_any",
    "ends_with_any",
    "replace_all",
    "starts_with_any",
    # validators
    "is_email",
    "is_hex_color",
    "is_url",
    "is_uuid",
    # formatting
    "humanize_list",
    "ordinal",
    "template",
    # graphemes
    "count_graphemes",
    "reverse_graphemes",
    # encoding
    "base64_decode",
    "base64_encode",
    "base64url_decode",
    "base64url_encode",
]
