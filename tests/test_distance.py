"""Unit tests for Levenshtein distance and similarity.

WHY: Fuzzy matching thresholds are tuned against these numbers; an
off-by-one in the rolling row silently shifts every score.

HOW: Known distances, metric laws over the sample texts, similarity
bounds, a long-input smoke test, and a tracemalloc check that memory
follows the shorter input rather than the product of both lengths.
"""

import itertools
import tracemalloc

import pytest

from stringkit.core.distance import levenshtein, similarity


class TestLevenshtein:
    """Known distances and fast paths."""

    def test_kitten_sitting(self):
        assert levenshtein("kitten", "sitting") == 3

    def test_identical(self):
        assert levenshtein("same", "same") == 0

    def test_empty_a(self):
        assert levenshtein("", "abc") == 3

    def test_empty_b(self):
        assert levenshtein("abcd", "") == 4

    def test_both_empty(self):
        assert levenshtein("", "") == 0

    def test_single_substitution(self):
        assert levenshtein("flaw", "flow") == 1

    def test_insertions_only(self):
        assert levenshtein("abc", "xaybzc") == 3

    def test_completely_different(self):
        assert levenshtein("abc", "xyz") == 3

    def test_case_sensitive(self):
        assert levenshtein("a", "A") == 1

    def test_composed_vs_decomposed_differs(self):
        assert levenshtein("\u00e9", "e\u0301") == 2

    def test_long_inputs(self):
        a = "ab" * 300
        b = "ba" * 300
        assert levenshtein(a, b) == 2

    def test_memory_follows_shorter_input(self):
        short = "x" * 10
        long = "y" * 100_000
        tracemalloc.start()
        try:
            result = levenshtein(short, long)
            _, peak = tracemalloc.get_traced_memory()
        finally:
            tracemalloc.stop()
        assert result == 100_000
        # A full 11 x 100_001 table would need several megabytes.
        assert peak < 256 * 1024


class TestMetricLaws:
    """Identity, symmetry, triangle inequality and length lower bound."""

    def test_identity(self, sample_texts):
        for a in sample_texts:
            assert levenshtein(a, a) == 0

    def test_symmetry(self, sample_texts):
        for a, b in itertools.combinations(sample_texts, 2):
            assert levenshtein(a, b) == levenshtein(b, a)

    def test_triangle_inequality(self, sample_texts):
        subset = sample_texts[:8]
        for a, b, c in itertools.product(subset, repeat=3):
            assert levenshtein(a, c) <= levenshtein(a, b) + levenshtein(b, c)

    def test_length_difference_lower_bound(self, sample_texts):
        for a, b in itertools.combinations(sample_texts, 2):
            assert levenshtein(a, b) >= abs(len(a) - len(b))


class TestSimilarity:
    """similarity() stays in [0, 1] and hits the documented endpoints."""

    def test_identical_is_one(self):
        assert similarity("abc", "abc") == 1

    def test_disjoint_is_zero(self):
        assert similarity("abc", "xyz") == 0

    def test_both_empty_is_one(self):
        assert similarity("", "") == 1.0

    def test_one_empty_is_zero(self):
        assert similarity("", "abc") == 0.0

    def test_partial(self):
        assert similarity("kitten", "sitting") == pytest.approx(1 - 3 / 7)

    def test_bounds(self, sample_texts):
        for a, b in itertools.product(sample_texts, repeat=2):
            assert 0.0 <= similarity(a, b) <= 1.0

    def test_self_similarity(self, sample_texts):
        for a in sample_texts:
            assert similarity(a, a) == 1.0
