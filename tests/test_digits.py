import pytest
from hypothesis import given
from hypothesis import strategies as st

from bigkit.digits import (
    add_leading_zeroes,
    add_trailing_zeroes,
    get_larger_and_smaller,
    is_power_of_10,
    is_valid_number,
    strip_leading_zeroes,
)

digit_strings = st.text(alphabet="0123456789", min_size=1, max_size=40)


@pytest.mark.parametrize("num", ["0", "123", "000", ""])
def test_is_valid_number_accepts_digits(num):
    assert is_valid_number(num) is True


@pytest.mark.parametrize("num", ["-1", "+5", "12a", " 1", "1.0"])
def test_is_valid_number_rejects_other_characters(num):
    assert is_valid_number(num) is False


def test_strip_all_zeroes_gives_zero():
    assert strip_leading_zeroes("0000") == "0"


def test_strip_empty_gives_zero():
    assert strip_leading_zeroes("") == "0"


def test_strip_keeps_significant_digits():
    assert strip_leading_zeroes("00120") == "120"


@given(digit_strings)
def test_strip_preserves_value(num):
    result = strip_leading_zeroes(num)
    assert int(result) == int(num)
    assert result == "0" or not result.startswith("0")


@given(digit_strings, st.integers(min_value=0, max_value=20))
def test_leading_zeroes_roundtrip(num, count):
    padded = add_leading_zeroes(num, count)
    assert len(padded) == len(num) + count
    assert padded.endswith(num)
    assert strip_leading_zeroes(padded) == strip_leading_zeroes(num)


@given(digit_strings, st.integers(min_value=0, max_value=20))
def test_trailing_zeroes_scale(num, count):
    assert int(add_trailing_zeroes(num, count)) == int(num) * 10**count


def test_get_larger_and_smaller_pads():
    assert get_larger_and_smaller("12", "345") == ("345", "012")


@given(
    st.integers(min_value=0, max_value=10**30).map(str),
    st.integers(min_value=0, max_value=10**30).map(str),
)
def test_get_larger_and_smaller_orders(a, b):
    larger, smaller = get_larger_and_smaller(a, b)
    assert len(larger) == len(smaller)
    assert int(larger) == max(int(a), int(b))
    assert int(smaller) == min(int(a), int(b))


@pytest.mark.parametrize("num", ["1", "10", "1000000000000000000000"])
def test_is_power_of_10_true(num):
    assert is_power_of_10(num) is True


@pytest.mark.parametrize("num", ["0", "2", "1010", "11", "20", ""])
def test_is_power_of_10_false(num):
    assert is_power_of_10(num) is False