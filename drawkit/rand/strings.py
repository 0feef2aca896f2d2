"""Random string generation.

Every character is drawn independently and uniformly from an alphabet (with
replacement) using one ``next_index`` draw per character.

Examples::

    from drawkit.rand import RandomSource
    from drawkit.rand.strings import random_string, random_numeric

    rng = RandomSource(7)
    random_string(rng, 5, "ab")     # e.g. 'abbab'
    random_string(rng, 0, "")       # ''
    random_numeric(rng, 6)          # e.g. '402918'
"""

from __future__ import annotations

import string
import sys
from collections.abc import Iterable
from typing import TYPE_CHECKING

from drawkit.errors import InvalidArgument

if TYPE_CHECKING:
    from drawkit.rand.source import RandomSource

ALPHABETIC = string.ascii_letters
NUMERIC = string.digits
ALPHANUMERIC = ALPHABETIC + NUMERIC
ASCII_PRINTABLE = "".join(chr(c) for c in range(32, 127))

_SURROGATES = range(0xD800, 0xE000)


def random_string(source: RandomSource, count: int, chars: Iterable[str] | None = None) -> str:
    """Draw a string of exactly *count* characters from *chars*.

    Args:
        source: Random source to draw from.
        count: Length of the result. ``0`` always yields ``""``.
        chars: Alphabet as a string or iterable of characters. ``None`` means
            any Unicode code point except surrogates.

    Raises:
        InvalidArgument: *count* is negative, or the alphabet is empty while
            *count* is positive.
    """
    if count < 0:
        raise InvalidArgument(f"requested string length {count} is less than 0")
    if count == 0:
        return ""
    if chars is None:
        return _random_code_points(source, count)

    alphabet = chars if isinstance(chars, str) else "".join(chars)
    if not alphabet:
        raise InvalidArgument("the chars alphabet must not be empty")
    n = len(alphabet)
    return "".join(alphabet[source.next_index(n)] for _ in range(count))


def random_alphanumeric(source: RandomSource, count: int) -> str:
    return random_string(source, count, ALPHANUMERIC)


def random_alphabetic(source: RandomSource, count: int) -> str:
    return random_string(source, count, ALPHABETIC)


def random_numeric(source: RandomSource, count: int) -> str:
    return random_string(source, count, NUMERIC)


def random_ascii(source: RandomSource, count: int) -> str:
    """Printable ASCII, code points 32 through 126."""
    return random_string(source, count, ASCII_PRINTABLE)


def _random_code_points(source: RandomSource, count: int) -> str:
    out: list[str] = []
    while len(out) < count:
        cp = source.next_index(sys.maxunicode + 1)
        if cp in _SURROGATES:
            continue
        out.append(chr(cp))
    return "".join(out)
