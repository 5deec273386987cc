import pytest

from duckgame.ft.memory import bzero, calloc, memchr, memcmp, memcpy, memmove, memset


def test_memset_fills_prefix_only():
    buf = bytearray(b"hello world")
    result = memset(buf, ord("x"), 5)
    assert result is buf
    assert buf == b"xxxxx world"


def test_memset_truncates_value_to_byte():
    buf = bytearray(3)
    memset(buf, 0x141, 3)
    assert buf == bytes([0x41]) * 3


def test_memset_rejects_overflow():
    with pytest.raises(ValueError):
        memset(bytearray(2), 0, 3)


def test_bzero_zeroes_prefix():
    buf = bytearray(b"abcdef")
    bzero(buf, 4)
    assert buf == b"\x00\x00\x00\x00ef"


def test_bzero_zero_length_is_noop():
    buf = bytearray(b"abc")
    bzero(buf, 0)
    assert buf == b"abc"


def test_calloc_size_and_content():
    buf = calloc(4, 3)
    assert len(buf) == 12
    assert all(byte == 0 for byte in buf)
    assert calloc(0, 8) == bytearray()


def test_calloc_negative_rejected():
    with pytest.raises(ValueError):
        calloc(-1, 4)


def test_memcpy_copies_prefix():
    dst = bytearray(b"..........")
    src = b"duck"
    result = memcpy(dst, src, len(src))
    assert result is dst
    assert bytes(dst[: len(src)]) == src
    assert bytes(dst[len(src):]) == b"." * (len(dst) - len(src))


def test_memcpy_both_none():
    assert memcpy(None, None, 3) is None


def test_memcpy_one_none_rejected():
    with pytest.raises(ValueError):
        memcpy(bytearray(3), None, 3)


def test_memmove_forward_overlap():
    buf = bytearray(b"abcdefgh")
    memmove(buf, 2, 0, 5)
    assert buf == b"ababcdeh"


def test_memmove_backward_overlap():
    buf = bytearray(b"abcdefgh")
    memmove(buf, 0, 2, 5)
    assert buf == b"cdefgfgh"


def test_memmove_out_of_range():
    with pytest.raises(ValueError):
        memmove(bytearray(4), 2, 0, 3)


def test_memchr_finds_first_occurrence():
    data = b"so long and thanks"
    assert memchr(data, ord("o"), len(data)) == data.index(b"o")
    assert memchr(data, ord("z"), len(data)) is None


def test_memchr_respects_limit():
    data = b"abcabc"
    assert memchr(data, ord("c"), 2) is None
    assert memchr(data, ord("c"), 3) == 2


def test_memchr_finds_nul_byte():
    data = b"ab\x00cd"
    assert memchr(data, 0, len(data)) == data.index(b"\x00")


def test_memcmp_equal_and_zero_length():
    assert memcmp(b"abc", b"abc", 3) == 0
    assert memcmp(b"abc", b"xyz", 0) == 0


def test_memcmp_returns_byte_difference():
    assert memcmp(b"abc", b"abd", 3) == ord("c") - ord("d")
    assert memcmp(b"abd", b"abc", 3) > 0


def test_memcmp_compares_unsigned_bytes():
    assert memcmp(b"\xff", b"\x01", 1) > 0


def test_memcmp_ignores_bytes_past_n():
    assert memcmp(b"abX", b"abY", 2) == 0


def test_memcmp_is_antisymmetric():
    pairs = [(b"duck", b"dusk"), (b"\x00\x10", b"\x00\x01"), (b"same", b"same")]
    for a, b in pairs:
        assert memcmp(a, b, len(a)) == -memcmp(b, a, len(a))