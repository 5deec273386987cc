"""Conversions between decimal text and integers."""

from __future__ import annotations

from duckgame.ft.chars import is_digit

_WHITESPACE = frozenset(" \t\n\v\f\r")


def atoi(text: str) -> int:
    """Parse a leading decimal integer from ``text``.

    Leading whitespace (space and ``\\t\\n\\v\\f\\r``) is skipped, then one
    optional ``+`` or ``-`` sign, then ASCII digits up to the first
    non-digit. Text with no digits at that point gives 0.
    """
    if not isinstance(text, str):
        raise TypeError(f"expected str, got {type(text).__name__}")
    pos = 0
    while pos < len(text) and text[pos] in _WHITESPACE:
        pos += 1
    sign = 1
    if pos < len(text) and text[pos] in "+-":
        if text[pos] == "-":
            sign = -1
        pos += 1
    total = 0
    while pos < len(text) and is_digit(text[pos]):
        total = total * 10 + (ord(text[pos]) - ord("0"))
        pos += 1
    return sign * total


def itoa(n: int) -> str:
    """Render ``n`` as decimal text, with a leading ``-`` when negative."""
    if isinstance(n, bool) or not isinstance(n, int):
        raise TypeError(f"expected int, got {type(n).__name__}")
    if n < 0:
        return "-" + itoa(-n)
    digits = []
    while True:
        n, remainder = divmod(n, 10)
        digits.append(chr(ord("0") + remainder))
        if n == 0:
            break
    return "".join(reversed(digits))