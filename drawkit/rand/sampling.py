"""Collection sampling: choice, sample and shuffle.

Sequences (``collections.abc.Sequence``: O(1) indexing, known length) are
sampled by drawing indices. Anything else (generators, iterators, sets, dict
views) is traversed exactly once with reservoir sampling, using O(k) memory.

Results are plain lists; convert to another container at the call site.

Examples::

    from drawkit.rand import RandomSource, choice, sample, shuffle

    rng = RandomSource(1)
    choice(rng, ["a", "b", "c"])                      # one element
    sample(rng, range(100), 3)                        # 3 distinct elements
    sample(rng, (x * x for x in range(10)), 4, True)  # 4 draws with replacement
    shuffle(rng, [1, 2, 3])                           # e.g. [3, 1, 2]
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence
from itertools import islice
from typing import TYPE_CHECKING, TypeVar

from drawkit.errors import EmptyInput, InsufficientPopulation, InvalidArgument

if TYPE_CHECKING:
    from drawkit.rand.source import RandomSource

logger = logging.getLogger(__name__)

T = TypeVar("T")

_MISSING = object()


def choice(source: RandomSource, xs: Iterable[T]) -> T:
    """Return one uniformly random element of *xs*.

    Raises:
        EmptyInput: *xs* has no elements.
    """
    if isinstance(xs, Sequence):
        if not xs:
            raise EmptyInput("collection is empty")
        return xs[source.next_index(len(xs))]

    # reservoir of size 1: same draws as a size-1 reservoir without replacement
    it = iter(xs)
    chosen = next(it, _MISSING)
    if chosen is _MISSING:
        raise EmptyInput("collection is empty")
    for i, x in enumerate(it, start=2):
        if source.next_index(i) == 0:
            chosen = x
    return chosen  # type: ignore[return-value]


def sample(
    source: RandomSource,
    xs: Iterable[T],
    k: int,
    with_replacement: bool = False,
) -> list[T]:
    """Draw *k* elements from *xs*.

    Args:
        source: Random source to draw from.
        xs: Population. Sequences are indexed, other iterables are streamed once.
        k: Sample size. ``0`` always returns ``[]``.
        with_replacement: Draw independently (elements may repeat) instead of
            returning a uniformly random *k*-subset.

    Returns:
        A list of *k* elements. Without replacement the order is reservoir
        order, not population order.

    Raises:
        InvalidArgument: *k* is negative.
        EmptyInput: the population is empty and *k* is positive.
        InsufficientPopulation: without replacement, *k* exceeds the population.
    """
    if k < 0:
        raise InvalidArgument("sample size must be non-negative")
    if k == 0:
        return []
    if with_replacement:
        return _sample_with_replacement(source, xs, k)
    return _sample_without_replacement(source, xs, k)


def shuffle(source: RandomSource, xs: Iterable[T]) -> list[T]:
    """Return a new list holding a uniformly random permutation of *xs*."""
    result = list(xs)
    source.generator.shuffle(result)
    return result


def _sample_with_replacement(source: RandomSource, xs: Iterable[T], k: int) -> list[T]:
    if isinstance(xs, Sequence):
        n = len(xs)
        if n == 0:
            raise EmptyInput("population is empty")
        return [xs[source.next_index(n)] for _ in range(k)]

    # k independent reservoirs of size 1, filled in a single pass
    logger.debug("Streaming sample with replacement (k=%d)", k)
    it = iter(xs)
    first = next(it, _MISSING)
    if first is _MISSING:
        raise EmptyInput("population is empty")
    buffer = [first] * k
    i = 2
    for x in it:
        p = 1.0 / i
        for j in range(k):
            if source.next_double() < p:
                buffer[j] = x
        i += 1
    return buffer  # type: ignore[return-value]


def _sample_without_replacement(source: RandomSource, xs: Iterable[T], k: int) -> list[T]:
    # Algorithm R
    it = iter(xs)
    buffer = list(islice(it, k))
    if not buffer:
        raise EmptyInput("population is empty")
    if len(buffer) < k:
        raise InsufficientPopulation()
    seen = k
    for x in it:
        seen += 1
        j = source.next_index(seen)
        if j < k:
            buffer[j] = x
    logger.debug("Reservoir sample of %d from population of %d", k, seen)
    return buffer
