"""Core algorithms: word segmentation, edit distance, word wrap.

WHY: These three modules carry the only non-trivial algorithms in the
package; everything else is direct string manipulation built on top.

HOW: words.py splits text into words for the case converters,
distance.py computes Levenshtein distance with a rolling row, wrap.py
packs tokens greedily into fixed-width lines.

RULES:
- Pure functions only; no module-level mutable state
- No dependency on the capabilities package
"""

from stringkit.core.distance import levenshtein, similarity
from stringkit.core.words import split_words, words
from stringkit.core.wrap import dedent, word_wrap

__all__ = [
    "levenshtein",
    "similarity",
    "split_words",
    "words",
    "dedent",
    "word_wrap",
]
