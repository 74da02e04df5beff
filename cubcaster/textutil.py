"""String helpers with the exact semantics the scene parser relies on."""

from __future__ import annotations

from collections.abc import Iterator
from typing import IO, AnyStr

BUFFER_SIZE = 10000

_WHITESPACE = "\t\n\v\f\r "
_DIGITS = "0123456789"


def atoi(text: str) -> int:
    """Parse a leading integer: skip whitespace, one optional sign, then digits.

    Anything after the digits is ignored; text without digits gives 0.
    """
    rest = text.lstrip(_WHITESPACE)
    sign = 1
    if rest[:1] in ("+", "-"):
        if rest[0] == "-":
            sign = -1
        rest = rest[1:]
    value = 0
    for char in rest:
        if char not in _DIGITS:
            break
        value = value * 10 + (ord(char) - ord("0"))
    return sign * value


def split_lines(text: str, sep: str = "\n") -> list[str]:
    """Split on a separator, keeping empty fields between separators.

    One empty field is dropped at each end, so a single leading or trailing
    separator leaves no empty string behind, while runs of separators keep
    the empty fields between them.
    """
    if len(sep) != 1:
        raise ValueError("separator must be a single character")
    parts = text.split(sep)
    if parts and parts[0] == "":
        parts.pop(0)
    if parts and parts[-1] == "":
        parts.pop()
    return parts


def find_within(haystack: str, needle: str, limit: int) -> int | None:
    """Index of needle in the first limit characters of haystack, or None.

    When limit does not reach past the needle, a match of the first limit
    characters at the very start also counts.
    """
    if len(haystack) < len(needle):
        return None
    if not needle:
        return 0
    if limit <= 0:
        return None
    if limit <= len(needle) and haystack[:limit] == needle[:limit]:
        return 0
    for start in range(min(limit, len(haystack))):
        if haystack.startswith(needle, start, limit):
            return start
    return None


def trim(text: str, chars: str) -> str:
    """Remove every character in chars from both ends of text."""
    return text.strip(chars)


def substr(text: str, start: int, length: int) -> str:
    """Up to length characters of text beginning at start."""
    if start < 0 or length < 0:
        raise ValueError("start and length must not be negative")
    if start >= len(text):
        return ""
    return text[start:start + length]


def _codes(text: str) -> list[int]:
    return [ord(char) for char in text]


def compare(a: str, b: str) -> int:
    """Difference of the first differing character codes, 0 when equal.

    The end of a string counts as code 0.
    """
    return compare_prefix(a, b, max(len(a), len(b)))


def compare_prefix(a: str, b: str, n: int) -> int:
    """Like compare, but looking at no more than n characters."""
    left = _codes(a[:n])
    right = _codes(b[:n])
    width = max(len(left), len(right))
    left += [0] * (width - len(left))
    right += [0] * (width - len(right))
    for x, y in zip(left, right):
        if x != y:
            return x - y
    return 0


def read_lines(stream: IO[AnyStr]) -> Iterator[AnyStr]:
    """Yield the lines of a stream, each with its newline except maybe the last."""
    pending = None
    newline = None
    while True:
        chunk = stream.read(BUFFER_SIZE)
        if not chunk:
            break
        if newline is None:
            newline = b"\n" if isinstance(chunk, bytes) else "\n"
            pending = chunk[:0]
        pending += chunk
        *complete, pending = pending.split(newline)
        for line in complete:
            yield line + newline
    if pending:
        yield pending