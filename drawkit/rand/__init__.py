"""Seedable random draws, distributions, random strings and collection sampling."""

from drawkit.rand.sampling import choice, sample, shuffle
from drawkit.rand.source import RandomSource
from drawkit.rand.strings import (
    random_alphabetic,
    random_alphanumeric,
    random_ascii,
    random_numeric,
    random_string,
)

__all__ = [
    "RandomSource",
    "choice",
    "sample",
    "shuffle",
    "random_string",
    "random_alphanumeric",
    "random_alphabetic",
    "random_numeric",
    "random_ascii",
]
