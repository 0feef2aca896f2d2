"""RandomSource: a seedable wrapper around ``random.Random``.

The source is the only mutable state in ``drawkit.rand``: every draw advances
the wrapped generator and nothing else. For a fixed seed and a fixed sequence
of calls the output is reproducible.

A source is not thread-safe. Keep one per thread, or guard a shared one with
your own lock.

Examples::

    from drawkit.rand import RandomSource

    rng = RandomSource(42)
    rng.next_int(0, 10)                # 0 <= n < 10
    rng.next_gaussian(100.0, 15.0)     # normal draw
    rng.next_triangular(0, 10, 3)      # peaked at 3
    rng.random_alphanumeric(12)        # 'a8Zk2...'
    rng.sample(range(1000), 5)         # 5 distinct elements
"""

from __future__ import annotations

import logging
import math
import random
from collections.abc import Iterable
from typing import TypeVar

from drawkit.errors import InvalidArgument
from drawkit.rand import sampling, strings
from drawkit.settings import Settings, get_settings

logger = logging.getLogger(__name__)

T = TypeVar("T")

# next_float() precision, matching an IEEE single-precision mantissa
_FLOAT_BITS = 24


class RandomSource:
    """Seedable pseudo-random source with range, distribution and sampling helpers.

    Args:
        seed: Explicit seed. Falls back to ``Settings.seed``, then OS entropy.
        rng: An existing ``random.Random`` to wrap instead of creating one.
            Takes precedence over *seed*.
        settings: Override the cached settings (mostly for tests).
    """

    def __init__(
        self,
        seed: int | None = None,
        *,
        rng: random.Random | None = None,
        settings: Settings | None = None,
    ):
        self._settings = settings or get_settings()
        if rng is not None:
            self._random = rng
            logger.debug("RandomSource wrapping %s", type(rng).__name__)
            return
        if seed is None:
            seed = self._settings.seed
        self._random = random.Random(seed)
        logger.debug("RandomSource created (seed=%s)", seed)

    @property
    def generator(self) -> random.Random:
        """The wrapped generator."""
        return self._random

    def seed(self, value: int | None) -> None:
        """Reseed the wrapped generator. ``None`` reseeds from OS entropy."""
        self._random.seed(value)
        logger.debug("RandomSource reseeded (seed=%s)", value)

    # ------------------------------------------------------------------
    # Primitives
    # ------------------------------------------------------------------

    def next_bits(self, k: int) -> int:
        """Non-negative int with *k* random bits."""
        if k < 0:
            raise InvalidArgument(f"bit count must be non-negative, got {k}")
        if k == 0:
            return 0
        return self._random.getrandbits(k)

    def next_bytes(self, count: int) -> bytes:
        """Create *count* random bytes."""
        if count < 0:
            raise InvalidArgument(f"byte count must be non-negative, got {count}")
        return self._random.randbytes(count)

    def next_index(self, bound: int) -> int:
        """Uniform int in ``[0, bound)``."""
        if bound <= 0:
            raise InvalidArgument(f"bound must be positive, got {bound}")
        return self._random.randrange(bound)

    # ------------------------------------------------------------------
    # Uniform ranges
    # ------------------------------------------------------------------

    def next_int(self, start_inclusive: int, end_exclusive: int) -> int:
        """Random integer within ``[start_inclusive, end_exclusive)``."""
        if end_exclusive <= start_inclusive:
            raise InvalidArgument(
                f"empty range [{start_inclusive}, {end_exclusive})"
            )
        return start_inclusive + self._random.randrange(end_exclusive - start_inclusive)

    def next_long(self, start_inclusive: int, end_exclusive: int) -> int:
        """Random integer within ``[start_inclusive, end_exclusive)``.

        By default this truncates a double draw, which loses precision on
        ranges wider than 2**53. ``Settings.exact_long_ranges`` switches to an
        integer-native draw identical to :meth:`next_int`.
        """
        if self._settings.exact_long_ranges:
            return self.next_int(start_inclusive, end_exclusive)
        return int(self.next_double(start_inclusive, end_exclusive))

    def next_double(self, start_inclusive: float = 0.0, end_inclusive: float = 1.0) -> float:
        """Random double within the given range (``[0, 1)`` with no arguments)."""
        return start_inclusive + (end_inclusive - start_inclusive) * self._random.random()

    def next_float(self, start_inclusive: float = 0.0, end_inclusive: float = 1.0) -> float:
        """Like :meth:`next_double` but with single-precision granularity."""
        u = self._random.getrandbits(_FLOAT_BITS) / (1 << _FLOAT_BITS)
        return start_inclusive + (end_inclusive - start_inclusive) * u

    # ------------------------------------------------------------------
    # Distributions
    # ------------------------------------------------------------------

    def next_gaussian(self, mu: float = 0.0, sigma: float = 1.0) -> float:
        """Gaussian distribution. *mu* is the mean, *sigma* the standard deviation."""
        return mu + self._random.gauss(0.0, 1.0) * sigma

    def next_normal(self, mu: float = 0.0, sigma: float = 1.0) -> float:
        return self.next_gaussian(mu, sigma)

    def next_log_normal(self, mu: float, sigma: float) -> float:
        """Log normal distribution.

        The natural logarithm of the result is normally distributed with mean
        *mu* and standard deviation *sigma*. *sigma* must be greater than zero.
        """
        return math.exp(self.next_gaussian(mu, sigma))

    def next_exponential(self, lambd: float) -> float:
        """Exponential distribution. *lambd* is 1.0 divided by the desired mean.

        Results range over ``[0, inf)`` for positive *lambd* and ``(-inf, 0]``
        for negative *lambd*.
        """
        if lambd == 0:
            raise InvalidArgument("lambd must be nonzero")
        return -math.log(1.0 - self._random.random()) / lambd

    def next_pareto(self, alpha: float) -> float:
        """Pareto distribution. *alpha* is the shape parameter."""
        u = 1.0 - self._random.random()
        return 1.0 / math.pow(u, 1.0 / alpha)

    def next_weibull(self, alpha: float, beta: float) -> float:
        """Weibull distribution. *alpha* is the scale and *beta* the shape."""
        u = 1.0 - self._random.random()
        return alpha * math.pow(-math.log(u), 1.0 / beta)

    def next_triangular(self, low: float, high: float, mode: float) -> float:
        """Triangular distribution bounded by *low* and *high*, peaking at *mode*."""
        if not low < high:
            raise InvalidArgument(f"low must be below high, got low={low} high={high}")
        if not low <= mode <= high:
            raise InvalidArgument(f"mode {mode} outside [{low}, {high}]")
        u = self._random.random()
        if u < (mode - low) / (high - low):
            return low + math.sqrt(u * (high - low) * (mode - low))
        return high - math.sqrt((1.0 - u) * (high - low) * (high - mode))

    # ------------------------------------------------------------------
    # Strings and collections (see drawkit.rand.strings / drawkit.rand.sampling)
    # ------------------------------------------------------------------

    def random_string(self, count: int, chars: Iterable[str] | None = None) -> str:
        return strings.random_string(self, count, chars)

    def random_alphanumeric(self, count: int) -> str:
        return strings.random_alphanumeric(self, count)

    def random_alphabetic(self, count: int) -> str:
        return strings.random_alphabetic(self, count)

    def random_numeric(self, count: int) -> str:
        return strings.random_numeric(self, count)

    def random_ascii(self, count: int) -> str:
        return strings.random_ascii(self, count)

    def choice(self, xs: Iterable[T]) -> T:
        return sampling.choice(self, xs)

    def sample(self, xs: Iterable[T], k: int, with_replacement: bool = False) -> list[T]:
        return sampling.sample(self, xs, k, with_replacement)

    def shuffle(self, xs: Iterable[T]) -> list[T]:
        return sampling.shuffle(self, xs)
