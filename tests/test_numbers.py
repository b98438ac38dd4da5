import pytest

from pushswap.numbers import INT_MAX, INT_MIN, atoi, itoa


@pytest.mark.parametrize("text", ["123456789", "123456", "5", "-42", "0"])
def test_atoi_plain_numbers(text):
    assert atoi(text) == int(text)


def test_atoi_stops_at_first_non_digit():
    assert atoi("12Three45678") == 12
    assert atoi("+42 BLAH!") == atoi("42")


def test_atoi_no_digits_is_zero():
    assert atoi("Hello World!") == atoi("0")
    assert atoi("") == atoi("-")


def test_atoi_skips_leading_whitespace():
    assert atoi("     +42") == atoi("42")
    assert atoi("\t\n\v\f\r 42") == atoi("42")


def test_atoi_only_one_sign():
    assert atoi("+-42") == atoi("")
    assert atoi("--1") == atoi("")


def test_atoi_whitespace_after_sign_ends_number():
    assert atoi("- 5") == atoi("")


def test_atoi_limits():
    assert atoi("2147483647") == INT_MAX
    assert atoi("-2147483648") == INT_MIN


def test_atoi_wraps_past_limits():
    assert atoi("2147483648") == INT_MIN
    assert atoi("-2147483649") == INT_MAX


@pytest.mark.parametrize("n", [0, 1, -1, 1234, -5678, INT_MAX, INT_MIN])
def test_itoa_round_trip(n):
    assert atoi(itoa(n)) == n


def test_itoa_values():
    assert itoa(-5678) == "-5678"
    assert itoa(0) == "0"
    assert itoa(INT_MIN) == "-2147483648"


def test_itoa_rejects_non_integer():
    with pytest.raises(TypeError):
        itoa(3.5)