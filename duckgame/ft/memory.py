"""Byte buffer helpers: fill, copy, move, search and compare."""

from __future__ import annotations

from typing import Optional


def _check_span(name: str, buf_len: int, n: int) -> None:
    if n < 0:
        raise ValueError(f"{name}: length must not be negative, got {n}")
    if n > buf_len:
        raise ValueError(f"{name}: length {n} exceeds buffer size {buf_len}")


def memset(buf: bytearray, value: int, length: int) -> bytearray:
    """Set the first ``length`` bytes of ``buf`` to ``value`` (taken mod 256)."""
    _check_span("memset", len(buf), length)
    buf[:length] = bytes([value & 0xFF]) * length
    return buf


def bzero(buf: bytearray, length: int) -> None:
    """Zero the first ``length`` bytes of ``buf``."""
    if length == 0:
        return
    memset(buf, 0, length)


def calloc(count: int, size: int) -> bytearray:
    """Return a zero-filled buffer of ``count * size`` bytes."""
    if count < 0 or size < 0:
        raise ValueError("count and size must not be negative")
    return bytearray(count * size)


def memcpy(dst: Optional[bytearray], src: Optional[bytes], n: int) -> Optional[bytearray]:
    """Copy ``n`` bytes from ``src`` to the start of ``dst`` and return ``dst``.

    When both buffers are ``None`` nothing is copied and ``None`` is returned.
    """
    if dst is None and src is None:
        return None
    if dst is None or src is None:
        raise ValueError("memcpy: both dst and src are required")
    _check_span("memcpy", len(src), n)
    _check_span("memcpy", len(dst), n)
    dst[:n] = src[:n]
    return dst


def memmove(buf: bytearray, dst_offset: int, src_offset: int, n: int) -> bytearray:
    """Copy ``n`` bytes within ``buf`` from ``src_offset`` to ``dst_offset``.

    The regions may overlap; the result is as if the source were copied
    to a temporary first.
    """
    if dst_offset < 0 or src_offset < 0:
        raise ValueError("memmove: offsets must not be negative")
    _check_span("memmove", len(buf) - src_offset, n)
    _check_span("memmove", len(buf) - dst_offset, n)
    buf[dst_offset:dst_offset + n] = bytes(buf[src_offset:src_offset + n])
    return buf


def memchr(data: bytes, value: int, n: int) -> Optional[int]:
    """Return the index of the first byte equal to ``value`` within the first
    ``n`` bytes of ``data``, or ``None`` if there is none."""
    _check_span("memchr", len(data), n)
    index = data.find(bytes([value & 0xFF]), 0, n)
    return None if index < 0 else index


def memcmp(a: bytes, b: bytes, n: int) -> int:
    """Compare the first ``n`` bytes of ``a`` and ``b``.

    Returns the difference of the first pair of differing bytes, or 0.
    """
    _check_span("memcmp", len(a), n)
    _check_span("memcmp", len(b), n)
    return next((x - y for x, y in zip(a[:n], b[:n]) if x != y), 0)