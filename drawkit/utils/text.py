"""String escaping, case, whitespace, padding and distance helpers.

Escaping binds to the standard library (``html``, ``json``,
``xml.sax.saxutils``). Java literals are handled with a translation table.

Examples::

    from drawkit.utils.text import escape_csv, split_camel_case, left_pad, distance_to

    escape_csv('say "hi", bob')       # '"say ""hi"", bob"'
    split_camel_case("ASFRules")      # ['ASF', 'Rules']
    left_pad("7", 3, "0")             # '007'
    distance_to("kitten", "sitting")  # 3
"""

from __future__ import annotations

import html
import json
import re
import string
import textwrap
import unicodedata
from xml.sax.saxutils import escape as _xml_escape

from drawkit.errors import InvalidArgument

_CSV_SPECIALS = (",", '"', "\r", "\n")

_JAVA_ESCAPES = {
    '"': '\\"',
    "\\": "\\\\",
    "\b": "\\b",
    "\n": "\\n",
    "\t": "\\t",
    "\f": "\\f",
    "\r": "\\r",
}
_JAVA_UNESCAPES = {
    "b": "\b",
    "n": "\n",
    "t": "\t",
    "f": "\f",
    "r": "\r",
    '"': '"',
    "'": "'",
    "\\": "\\",
}
_JAVA_ESCAPE_RE = re.compile(r"\\(u+[0-9a-fA-F]{4}|[0-3]?[0-7]{1,2}|.)", re.DOTALL)

_XML_ENTITY_RE = re.compile(r"&(#x[0-9a-fA-F]+|#[0-9]+|lt|gt|amp|quot|apos);")
_XML_ENTITIES = {"lt": "<", "gt": ">", "amp": "&", "quot": '"', "apos": "'"}

_PUNCTUATION = frozenset(string.punctuation)


# ---------------------------------------------------------------------------
# Accents and escaping
# ---------------------------------------------------------------------------


def strip_accents(text: str) -> str:
    """Remove diacritics, e.g. ``"éclair"`` → ``"eclair"``."""
    decomposed = unicodedata.normalize("NFD", text)
    return "".join(ch for ch in decomposed if not unicodedata.combining(ch))


def escape_csv(text: str) -> str:
    """Quote a CSV column if it contains a comma, quote or line break."""
    if not any(ch in text for ch in _CSV_SPECIALS):
        return text
    return '"' + text.replace('"', '""') + '"'


def unescape_csv(text: str) -> str:
    """Undo :func:`escape_csv`. Quoted values without special characters pass through."""
    if len(text) < 2 or text[0] != '"' or text[-1] != '"':
        return text
    inner = text[1:-1]
    if not any(ch in inner for ch in _CSV_SPECIALS):
        return text
    return inner.replace('""', '"')


def escape_html(text: str) -> str:
    """Escape ``& < > "`` as HTML entities."""
    return html.escape(text, quote=False).replace('"', "&quot;")


def unescape_html(text: str) -> str:
    """Replace named and numeric HTML entities with their characters."""
    return html.unescape(text)


def escape_java(text: str) -> str:
    """Escape *text* using Java string literal rules.

    Quotes, backslashes and control characters get backslash escapes;
    everything outside printable ASCII becomes ``\\uXXXX`` (UTF-16 units).
    """
    out = []
    for ch in text:
        if ch in _JAVA_ESCAPES:
            out.append(_JAVA_ESCAPES[ch])
        elif 32 <= ord(ch) < 127:
            out.append(ch)
        else:
            out.extend(f"\\u{unit:04X}" for unit in _utf16_units(ch))
    return "".join(out)


def unescape_java(text: str) -> str:
    """Unescape Java literals (``\\n``, ``\\"``, ``\\u00e9``, octal escapes)."""

    def _replace(m: re.Match) -> str:
        body = m.group(1)
        if body[0] == "u":
            return chr(int(body.lstrip("u"), 16))
        if body[0] in "01234567":
            return chr(int(body, 8))
        return _JAVA_UNESCAPES.get(body, body)

    unescaped = _JAVA_ESCAPE_RE.sub(_replace, text)
    # \uXXXX pairs decode to lone surrogates; recombine them
    return unescaped.encode("utf-16", "surrogatepass").decode("utf-16", "surrogatepass")


def escape_json(text: str) -> str:
    """Escape *text* for a JSON string body (no surrounding quotes)."""
    return json.dumps(text)[1:-1].replace("/", "\\/")


def unescape_json(text: str) -> str:
    """Unescape a JSON string body."""
    return json.loads(f'"{text}"', strict=False)  # type: ignore[no-any-return]


def escape_xml(text: str) -> str:
    """Escape the five predefined XML entities."""
    return _xml_escape(text, {'"': "&quot;", "'": "&apos;"})


def unescape_xml(text: str) -> str:
    """Replace predefined XML entities and numeric character references."""

    def _replace(m: re.Match) -> str:
        ref = m.group(1)
        if ref.startswith("#x"):
            return chr(int(ref[2:], 16))
        if ref.startswith("#"):
            return chr(int(ref[1:]))
        return _XML_ENTITIES[ref]

    # single pass so "&amp;lt;" stays "&lt;"
    return _XML_ENTITY_RE.sub(_replace, text)


# ---------------------------------------------------------------------------
# Whitespace and case
# ---------------------------------------------------------------------------


def split_on_whitespace(text: str) -> list[str]:
    return text.split()


def normalize_space(text: str) -> str:
    """Strip both ends and collapse internal whitespace runs to one space."""
    return " ".join(text.split())


def split_camel_case(text: str) -> list[str]:
    """Split by Unicode character category, keeping camel-case words whole.

    Examples::

        split_camel_case("fooBar")     # ['foo', 'Bar']
        split_camel_case("ASFRules")   # ['ASF', 'Rules']
        split_camel_case("foo200Bar")  # ['foo', '200', 'Bar']
        split_camel_case("ab   de")    # ['ab', '   ', 'de']
    """
    if not text:
        return []
    parts = []
    token_start = 0
    current = unicodedata.category(text[0])
    for pos in range(1, len(text)):
        kind = unicodedata.category(text[pos])
        if kind == current:
            continue
        if kind == "Ll" and current == "Lu":
            # the last uppercase letter starts the new word
            new_start = pos - 1
            if new_start != token_start:
                parts.append(text[token_start:new_start])
                token_start = new_start
        else:
            parts.append(text[token_start:pos])
            token_start = pos
        current = kind
    parts.append(text[token_start:])
    return parts


def title_case(text: str) -> str:
    """Lowercase everything, then capitalise the first letter after whitespace."""
    out = []
    capitalize_next = True
    for ch in text.lower():
        if ch.isspace():
            capitalize_next = True
            out.append(ch)
        elif capitalize_next:
            out.append(ch.title())
            capitalize_next = False
        else:
            out.append(ch)
    return "".join(out)


def swap_case(text: str) -> str:
    return text.swapcase()


def abbreviate(text: str, max_width: int) -> str:
    """Truncate *text* to *max_width* characters ending in ``"..."``.

    Examples::

        abbreviate("abcdefg", 6)   # "abc..."
        abbreviate("abcdefg", 7)   # "abcdefg"
    """
    if max_width < 4:
        raise InvalidArgument("minimum abbreviation width is 4")
    if len(text) <= max_width:
        return text
    return text[: max_width - 3] + "..."


def word_wrap(text: str, wrap_length: int) -> str:
    """Wrap each line on spaces at *wrap_length*. Long words are not broken."""
    width = max(1, wrap_length)
    return "\n".join(
        textwrap.fill(line, width=width, break_long_words=False, break_on_hyphens=False)
        for line in text.splitlines()
    )


def distance_to(a: str, b: str) -> int:
    """Levenshtein edit distance between *a* and *b*."""
    if len(a) < len(b):
        a, b = b, a
    previous = list(range(len(b) + 1))
    for i, ca in enumerate(a, start=1):
        current = [i]
        for j, cb in enumerate(b, start=1):
            current.append(min(
                previous[j] + 1,
                current[j - 1] + 1,
                previous[j - 1] + (ca != cb),
            ))
        previous = current
    return previous[-1]


# ---------------------------------------------------------------------------
# Character class predicates
# ---------------------------------------------------------------------------


def is_whitespace(text: str) -> bool:
    """True if *text* contains only whitespace. The empty string counts."""
    return not text.strip()


def is_alpha(text: str) -> bool:
    return text.isalpha()


def is_alphanumeric(text: str) -> bool:
    return text.isalnum()


def is_numeric(text: str) -> bool:
    """True if *text* is non-empty and made only of Unicode decimal digits."""
    return text.isdecimal()


def is_ascii(text: str) -> bool:
    """True if *text* contains only ASCII. The empty string counts."""
    return text.isascii()


def is_ascii_printable(text: str) -> bool:
    return all(32 <= ord(ch) < 127 for ch in text)


def is_punctuation(text: str) -> bool:
    """True if *text* is non-empty and only ASCII punctuation ``!"#$%&'()*+,-./:;<=>?@[\\]^_`{|}~``."""
    return bool(text) and all(ch in _PUNCTUATION for ch in text)


# ---------------------------------------------------------------------------
# Padding
# ---------------------------------------------------------------------------


def left_pad(text: str, size: int, pad: str = " ") -> str:
    """Pad on the left to *size* characters, repeating *pad* as needed."""
    pads = size - len(text)
    if pads <= 0:
        return text
    return _padding(pads, pad) + text


def right_pad(text: str, size: int, pad: str = " ") -> str:
    """Pad on the right to *size* characters, repeating *pad* as needed."""
    pads = size - len(text)
    if pads <= 0:
        return text
    return text + _padding(pads, pad)


def center(text: str, size: int, pad: str = " ") -> str:
    """Center *text* in *size* characters. The right side gets any odd pad."""
    pads = size - len(text)
    if pads <= 0:
        return text
    return right_pad(left_pad(text, len(text) + pads // 2, pad), size, pad)


def _padding(count: int, pad: str) -> str:
    pad = pad or " "
    return (pad * (count // len(pad) + 1))[:count]


def _utf16_units(ch: str) -> list[int]:
    data = ch.encode("utf-16-be")
    return [int.from_bytes(data[i : i + 2], "big") for i in range(0, len(data), 2)]
