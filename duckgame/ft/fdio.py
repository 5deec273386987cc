"""Write characters, strings and numbers to a text stream."""

from __future__ import annotations

import sys
from typing import Optional, TextIO, Union

from duckgame.ft.convert import itoa

CharLike = Union[int, str]


def _target(stream: Optional[TextIO]) -> TextIO:
    return sys.stdout if stream is None else stream


def put_char(c: CharLike, stream: Optional[TextIO] = None) -> None:
    """Write one character (a one-character str or a code) to ``stream``."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        ch = c
    elif isinstance(c, int) and not isinstance(c, bool):
        ch = chr(c)
    else:
        raise TypeError(f"expected an int or a one-character str, got {type(c).__name__}")
    _target(stream).write(ch)


def put_str(s: str, stream: Optional[TextIO] = None) -> None:
    """Write ``s`` to ``stream``."""
    _target(stream).write(s)


def put_endl(s: str, stream: Optional[TextIO] = None) -> None:
    """Write ``s`` followed by a newline to ``stream``."""
    out = _target(stream)
    put_str(s, out)
    put_char("\n", out)


def put_nbr(n: int, stream: Optional[TextIO] = None) -> None:
    """Write ``n`` in decimal to ``stream``."""
    put_str(itoa(n), stream)