"""Exceptions raised by the sampling and text helpers."""

from __future__ import annotations


class DrawkitError(Exception):
    """Base class for every drawkit error."""


class InvalidArgument(DrawkitError, ValueError):
    """Malformed parameters such as a negative size or an empty alphabet."""


class EmptyInput(DrawkitError, ValueError):
    """The operation needs at least one element but the input is empty."""


class InsufficientPopulation(InvalidArgument):
    """Sampling without replacement asked for more elements than exist."""

    def __init__(self, message: str = "sample size larger than population"):
        super().__init__(message)
