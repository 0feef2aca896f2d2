"""Unit tests for rand/sampling.py — choice, sample (indexed and reservoir), shuffle."""

from __future__ import annotations

from collections import Counter
from itertools import permutations

import pytest

from drawkit.errors import EmptyInput, InsufficientPopulation, InvalidArgument
from drawkit.rand import RandomSource, choice, sample, shuffle
from tests.unit.helpers import CHI2_CRITICAL_999, chi_squared


def _stream(n: int):
    """A population that is iterable but not index-addressable."""
    return (i for i in range(n))


# ============================================================================
# choice
# ============================================================================


class TestChoice:
    def test_sequence(self, rng):
        assert choice(rng, ["only"]) == "only"
        assert choice(rng, "abc") in "abc"

    def test_stream(self, rng):
        assert choice(rng, _stream(10)) in range(10)

    def test_set(self, rng):
        assert choice(rng, {"a", "b"}) in {"a", "b"}

    @pytest.mark.parametrize("empty", [[], (), "", set(), iter([])])
    def test_empty(self, rng, empty):
        with pytest.raises(EmptyInput):
            choice(rng, empty)

    def test_stream_uniform(self, rng):
        counts = Counter(choice(rng, _stream(4)) for _ in range(8000))
        assert set(counts) == {0, 1, 2, 3}
        assert chi_squared(counts, 2000) < CHI2_CRITICAL_999[3]

    def test_stream_matches_size_one_reservoir(self, settings):
        """Streaming choice consumes the same draws as a size-1 reservoir sample."""
        for seed in range(20):
            a = RandomSource(seed, settings=settings)
            b = RandomSource(seed, settings=settings)
            assert choice(a, _stream(50)) == sample(b, _stream(50), 1)[0]


# ============================================================================
# sample — argument handling
# ============================================================================


class TestSampleArguments:
    def test_negative_k(self, rng):
        with pytest.raises(InvalidArgument):
            sample(rng, [1, 2, 3], -1)
        with pytest.raises(InvalidArgument):
            sample(rng, [1, 2, 3], -1, with_replacement=True)

    def test_zero_k_empty_population(self, rng):
        assert sample(rng, [], 0) == []
        assert sample(rng, [], 0, with_replacement=True) == []
        assert sample(rng, _stream(0), 0) == []

    def test_zero_k(self, rng):
        assert sample(rng, [1, 2, 3], 0) == []

    @pytest.mark.parametrize("with_replacement", [False, True])
    def test_empty_population(self, rng, with_replacement):
        with pytest.raises(EmptyInput):
            sample(rng, [], 2, with_replacement)
        with pytest.raises(EmptyInput):
            sample(rng, _stream(0), 2, with_replacement)

    def test_returns_list(self, rng):
        assert isinstance(sample(rng, (1, 2, 3), 2), list)
        assert isinstance(sample(rng, "abc", 2, with_replacement=True), list)


# ============================================================================
# sample — without replacement (reservoir)
# ============================================================================


class TestSampleWithoutReplacement:
    @pytest.mark.parametrize("n, k", [(10, 3), (10, 10), (1, 1), (100, 50)])
    def test_distinct_members(self, rng, n, k):
        population = list(range(n))
        for pop in (population, _stream(n)):
            result = sample(rng, pop, k)
            assert len(result) == k
            assert len(set(result)) == k
            assert set(result) <= set(population)

    def test_full_population_is_permutation(self, rng):
        assert sorted(sample(rng, _stream(20), 20)) == list(range(20))

    def test_insufficient_population(self, rng):
        with pytest.raises(InsufficientPopulation, match="sample size larger than population"):
            sample(rng, [1, 2, 3], 4)
        with pytest.raises(InsufficientPopulation):
            sample(rng, _stream(3), 4)

    def test_insufficient_population_is_invalid_argument(self, rng):
        with pytest.raises(InvalidArgument):
            sample(rng, [1, 2], 3)

    def test_inclusion_frequency_uniform(self, rng):
        """Each of n elements lands in a k-sample with probability k/n."""
        counts: Counter = Counter()
        trials = 6000
        for _ in range(trials):
            counts.update(sample(rng, _stream(5), 2))
        expected = trials * 2 / 5
        assert chi_squared(counts, expected) < CHI2_CRITICAL_999[4]

    def test_subset_frequency_uniform(self, rng):
        """All C(4, 2) = 6 subsets are equally likely."""
        counts = Counter(frozenset(sample(rng, [0, 1, 2, 3], 2)) for _ in range(6000))
        assert len(counts) == 6
        assert chi_squared(counts, 1000) < CHI2_CRITICAL_999[5]

    def test_reservoir_order(self, settings):
        """With no replacements the result keeps the first k elements in order."""
        src = RandomSource(0, settings=settings)
        assert sample(src, _stream(3), 3) == [0, 1, 2]

    def test_method(self, rng):
        assert len(rng.sample(range(10), 4)) == 4


# ============================================================================
# sample — with replacement
# ============================================================================


class TestSampleWithReplacement:
    def test_sequence_size(self, rng):
        result = sample(rng, ["a", "b"], 50, with_replacement=True)
        assert len(result) == 50
        assert set(result) == {"a", "b"}

    def test_k_larger_than_population(self, rng):
        assert len(sample(rng, _stream(3), 10, with_replacement=True)) == 10

    def test_single_element_stream(self, rng):
        assert sample(rng, _stream(1), 4, with_replacement=True) == [0, 0, 0, 0]

    def test_sequence_uniform(self, rng):
        counts = Counter(sample(rng, list(range(10)), 10_000, with_replacement=True))
        assert chi_squared(counts, 1000) < CHI2_CRITICAL_999[9]

    def test_stream_uniform(self, rng):
        counts: Counter = Counter()
        for _ in range(4000):
            counts.update(sample(rng, _stream(5), 5, with_replacement=True))
        assert set(counts) == set(range(5))
        assert chi_squared(counts, 4000) < CHI2_CRITICAL_999[4]

    def test_stream_traversed_once(self, rng):
        seen = []

        def population():
            for i in range(6):
                seen.append(i)
                yield i

        sample(rng, population(), 3, with_replacement=True)
        assert seen == list(range(6))


# ============================================================================
# shuffle
# ============================================================================


class TestShuffle:
    def test_permutation(self, rng):
        xs = [5, 3, 3, 9, 1]
        result = shuffle(rng, xs)
        assert sorted(result) == sorted(xs)
        assert xs == [5, 3, 3, 9, 1]

    def test_accepts_iterables(self, rng):
        assert sorted(shuffle(rng, _stream(5))) == [0, 1, 2, 3, 4]
        assert shuffle(rng, []) == []

    def test_all_permutations_equally_likely(self, settings):
        counts = Counter(
            tuple(shuffle(RandomSource(seed, settings=settings), [1, 2, 3]))
            for seed in range(10_000)
        )
        assert set(counts) == set(permutations([1, 2, 3]))
        assert chi_squared(counts, 10_000 / 6) < CHI2_CRITICAL_999[5]

    def test_method(self, rng):
        assert sorted(rng.shuffle("abc")) == ["a", "b", "c"]
