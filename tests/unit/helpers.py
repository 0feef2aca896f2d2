"""Shared helpers for unit tests — scripted generators, statistics."""

from __future__ import annotations

import random
from collections.abc import Iterable


class ScriptedRandom(random.Random):
    """``random.Random`` whose ``random()`` replays a fixed list of values."""

    def __init__(self, values: Iterable[float]):
        super().__init__(0)
        self._values = iter(values)

    def random(self) -> float:
        return next(self._values)


def chi_squared(observed: dict, expected: float) -> float:
    """Pearson chi-squared statistic against a uniform expectation."""
    return sum((count - expected) ** 2 / expected for count in observed.values())


# upper 0.1% critical values of the chi-squared distribution, by degrees of freedom
CHI2_CRITICAL_999 = {2: 13.816, 3: 16.266, 4: 18.467, 5: 20.515, 9: 27.877}
