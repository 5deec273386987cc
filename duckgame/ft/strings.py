"""String helpers: searching, comparing, bounded copying, slicing and splitting.

Positions are returned as indices into the string (``None`` when nothing is
found) rather than pointers. A search for the NUL character ``"\\0"`` finds the
position just past the last character, where a terminator would sit.
"""

from __future__ import annotations

from typing import Callable, MutableSequence, Optional, Tuple, Union

CharLike = Union[int, str]


def _char(c: CharLike) -> str:
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return c
    if isinstance(c, bool) or not isinstance(c, int):
        raise TypeError(f"expected an int or a one-character str, got {type(c).__name__}")
    return chr(c)


def _non_negative(name: str, value: int) -> None:
    if value < 0:
        raise ValueError(f"{name} must not be negative, got {value}")


def strchr(s: str, c: CharLike) -> Optional[int]:
    """Index of the first ``c`` in ``s``; ``len(s)`` for NUL; ``None`` if absent."""
    ch = _char(c)
    if ch == "\0":
        return len(s)
    index = s.find(ch)
    return None if index < 0 else index


def strrchr(s: str, c: CharLike) -> Optional[int]:
    """Index of the last ``c`` in ``s``; ``len(s)`` for NUL; ``None`` if absent."""
    ch = _char(c)
    if ch == "\0":
        return len(s)
    index = s.rfind(ch)
    return None if index < 0 else index


def strncmp(s1: str, s2: str, n: int) -> int:
    """Compare at most ``n`` characters, stopping at the end of ``s1``.

    Returns the difference of the first pair of differing character codes,
    treating the end of a string as code 0, or 0 when they match.
    """
    _non_negative("n", n)
    for i in range(n):
        a = ord(s1[i]) if i < len(s1) else 0
        b = ord(s2[i]) if i < len(s2) else 0
        if a != b or a == 0:
            return a - b
    return 0


def strnstr(haystack: str, needle: str, length: int) -> Optional[int]:
    """Index of ``needle`` lying wholly within the first ``length`` characters
    of ``haystack``, or ``None``. An empty needle is found at 0."""
    _non_negative("length", length)
    if not needle:
        return 0
    if length == 0:
        return None
    index = haystack.find(needle, 0, length)
    return None if index < 0 else index


def strlcpy(src: str, dstsize: int) -> Tuple[str, int]:
    """Copy ``src`` into a destination of ``dstsize`` slots, one kept for NUL.

    Returns the copied text and the full length of ``src``; a result shorter
    than that length means the copy was truncated. With ``dstsize`` 0 nothing
    is copied.
    """
    _non_negative("dstsize", dstsize)
    copied = src[: dstsize - 1] if dstsize > 0 else ""
    return copied, len(src)


def strlcat(dst: str, src: str, dstsize: int) -> Tuple[str, int]:
    """Append ``src`` to ``dst`` within a buffer of ``dstsize`` slots.

    Returns the resulting text and the length the full concatenation would
    have needed. If ``dst`` already fills the buffer it is returned unchanged
    together with ``dstsize + len(src)``.
    """
    _non_negative("dstsize", dstsize)
    dst_len = min(len(dst), dstsize)
    if dstsize <= dst_len:
        return dst, dstsize + len(src)
    room = dstsize - dst_len - 1
    return dst + src[:room], dst_len + len(src)


def substr(s: str, start: int, length: int) -> str:
    """At most ``length`` characters of ``s`` from ``start``; empty past the end."""
    _non_negative("start", start)
    _non_negative("length", length)
    if start >= len(s):
        return ""
    return s[start:start + length]


def strjoin(s1: str, s2: str) -> str:
    """Concatenate two strings."""
    return s1 + s2


def strtrim(s: str, charset: str) -> str:
    """Remove characters in ``charset`` from both ends of ``s``."""
    return s.strip(charset)


def split(s: str, sep: CharLike) -> list[str]:
    """Split ``s`` on the character ``sep``, dropping empty pieces."""
    ch = _char(sep)
    if ch == "\0":
        return [s] if s else []
    return [piece for piece in s.split(ch) if piece]


def strmapi(s: str, func: Callable[[int, str], str]) -> str:
    """Build a new string from ``func(index, char)`` for every character."""
    return "".join(func(i, ch) for i, ch in enumerate(s))


def striteri(
    s: MutableSequence[str], func: Callable[[int, str], Optional[str]]
) -> None:
    """Call ``func(index, char)`` on each element of ``s`` in place.

    ``s`` is a mutable sequence of characters. A non-``None`` return value
    replaces the character at that index.
    """
    if isinstance(s, (str, bytes)):
        raise TypeError("striteri needs a mutable sequence of characters")
    for i, ch in enumerate(list(s)):
        replacement = func(i, ch)
        if replacement is not None:
            s[i] = replacement