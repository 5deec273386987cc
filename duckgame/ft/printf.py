"""A small ``printf`` supporting the conversions ``c s p d i u x X %``.

Integers are taken as C would see them: ``%d``/``%i`` wrap to a signed
32-bit value, ``%u``/``%x``/``%X`` to an unsigned 32-bit value and ``%p`` to
an unsigned 64-bit address written as ``0x`` and lowercase hex. A ``None``
string prints as ``(null)``. An unknown conversion prints nothing, and a
lone ``%`` at the end of the template is dropped.
"""

from __future__ import annotations

import re
import sys
from typing import Any, Iterator, Optional, TextIO

_DIRECTIVE = re.compile(r"%(.?)", re.DOTALL)

_UINT32 = 0xFFFFFFFF
_UINT64 = 0xFFFFFFFFFFFFFFFF


def _require_int(spec: str, value: Any) -> int:
    if not isinstance(value, int):
        raise TypeError(f"%{spec} expects an int, got {type(value).__name__}")
    return int(value)


def _signed32(value: int) -> int:
    value &= _UINT32
    return value - (1 << 32) if value >= 1 << 31 else value


def _format_char(value: Any) -> str:
    if isinstance(value, str):
        if len(value) != 1:
            raise ValueError(f"%c expects a single character, got {value!r}")
        return value
    return chr(_require_int("c", value))


def _format_str(value: Any) -> str:
    if value is None:
        return "(null)"
    if not isinstance(value, str):
        raise TypeError(f"%s expects a str, got {type(value).__name__}")
    return value


def _format_pointer(value: Any) -> str:
    if value is None:
        address = 0
    elif isinstance(value, int):
        address = int(value)
    else:
        address = id(value)
    return "0x" + format(address & _UINT64, "x")


def _convert(spec: str, args: Iterator[Any]) -> str:
    if spec == "%":
        return "%"
    if spec not in "cspdiuxX" or not spec:
        return ""
    try:
        value = next(args)
    except StopIteration:
        raise TypeError(f"not enough arguments for %{spec}") from None
    if spec == "c":
        return _format_char(value)
    if spec == "s":
        return _format_str(value)
    if spec == "p":
        return _format_pointer(value)
    number = _require_int(spec, value)
    if spec in "di":
        return str(_signed32(number))
    if spec == "u":
        return str(number & _UINT32)
    return format(number & _UINT32, spec)


def format_string(template: str, *args: Any) -> str:
    """Return ``template`` with its conversions filled in from ``args``."""
    remaining = iter(args)
    pieces = []
    pos = 0
    for match in _DIRECTIVE.finditer(template):
        pieces.append(template[pos:match.start()])
        pieces.append(_convert(match.group(1), remaining))
        pos = match.end()
    pieces.append(template[pos:])
    return "".join(pieces)


def printf(template: str, *args: Any, stream: Optional[TextIO] = None) -> int:
    """Write the formatted text to ``stream`` (stdout by default).

    Returns the number of characters written.
    """
    text = format_string(template, *args)
    (sys.stdout if stream is None else stream).write(text)
    return len(text)