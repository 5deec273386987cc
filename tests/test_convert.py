import pytest

from duckgame.ft.convert import atoi, itoa


@pytest.mark.parametrize("n", [0, 1, -1, 7, -42, 1000, 2147483647, -2147483648])
def test_itoa_atoi_round_trip(n):
    assert atoi(itoa(n)) == n


@pytest.mark.parametrize("n", [0, 9, 10, -10, 123456789, -987654321])
def test_itoa_matches_builtin_decimal(n):
    assert itoa(n) == str(n)


def test_itoa_int_min():
    assert itoa(-2147483648) == "-2147483648"


def test_itoa_zero():
    assert itoa(0) == "0"


def test_itoa_rejects_non_int():
    with pytest.raises(TypeError):
        itoa("5")
    with pytest.raises(TypeError):
        itoa(True)


def test_atoi_skips_whitespace_and_stops_at_non_digit():
    assert atoi("   -42abc") == -42
    assert atoi("\t\n\v\f\r 7") == 7
    assert atoi("+15 16") == 15


def test_atoi_double_sign_gives_zero():
    assert atoi("+-5") == 0


def test_atoi_empty_gives_zero():
    assert atoi("") == 0


def test_atoi_leading_text_gives_zero_like_empty():
    assert atoi("abc12") == atoi("")


def test_atoi_int_min_text():
    assert atoi("-2147483648") == -2147483648


def test_atoi_rejects_non_str():
    with pytest.raises(TypeError):
        atoi(12)