"""Small string helpers with C-library style semantics."""

from __future__ import annotations

from itertools import zip_longest

_SPACES = frozenset("\t\n\v\f\r ")


def atoi(text: str) -> int:
    """Parse a leading integer, skipping whitespace; stop at the first non-digit."""
    i = 0
    while i < len(text) and text[i] in _SPACES:
        i += 1
    sign = 1
    if i < len(text) and text[i] in "+-":
        if text[i] == "-":
            sign = -1
        i += 1
    value = 0
    for ch in text[i:]:
        if not ("0" <= ch <= "9"):
            break
        value = value * 10 + (ord(ch) - ord("0"))
    return sign * value


def itoa(n: int) -> str:
    """Return the decimal representation of an integer."""
    return str(n)


def split_words(text: str, sep: str) -> list[str]:
    """Split on a separator character, dropping empty pieces."""
    return [word for word in text.split(sep) if word]


def trim(text: str, charset: str) -> str:
    """Remove characters in ``charset`` from both ends of ``text``."""
    return text.strip(charset)


def substring(text: str, start: int, length: int) -> str:
    """Return up to ``length`` characters of ``text`` starting at ``start``."""
    if start >= len(text):
        return ""
    return text[start:start + length]


def find_within(haystack: str, needle: str, length: int) -> int:
    """Find ``needle`` wholly inside the first ``length`` characters.

    Returns the index of the first match, or -1 when there is none.
    """
    if length < 0:
        raise ValueError("length must not be negative")
    return haystack[:length].find(needle)


def compare(a: str, b: str, n: int) -> int:
    """Compare at most ``n`` characters; return the first difference of codes."""
    for ca, cb in zip_longest(a[:n], b[:n], fillvalue="\0"):
        if ca != cb:
            return ord(ca) - ord(cb)
    return 0