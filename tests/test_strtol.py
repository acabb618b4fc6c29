import pytest

from randolib.strtol import LONG_MAX, LONG_MIN, strtol


def test_simple_decimal():
    assert strtol("123", 10) == (123, 3)


def test_whitespace_sign_and_trailing_text():
    assert strtol("  \t-42abc", 10) == (-42, 6)


def test_plus_sign():
    assert strtol("+7", 10) == (7, 2)


def test_hex_with_prefix_base16():
    result = strtol("0x1F", 16)
    assert result.value == int("1F", 16)
    assert result.end == 4


def test_base0_detects_hex():
    assert strtol("0Xff", 0).value == int("ff", 16)


def test_base0_detects_octal():
    assert strtol("0755", 0) == (int("755", 8), 4)


def test_base0_decimal():
    assert strtol("987", 0) == (987, 3)


def test_prefix_without_digits_consumes_nothing():
    assert strtol("0x", 16) == (0, 0)
    assert strtol("0xg", 0) == (0, 0)


def test_no_digits():
    assert strtol("abc", 10) == (0, 0)
    assert strtol("   ", 10) == (0, 0)
    assert strtol("", 10) == (0, 0)


def test_base36_letters_either_case():
    assert strtol("zZ", 36).value == int("zz", 36)


def test_digit_out_of_base_stops():
    assert strtol("1289", 8) == (int("12", 8), 2)


def test_long_limits_round_trip():
    assert strtol(str(LONG_MAX), 10).value == LONG_MAX
    assert strtol(str(LONG_MIN), 10).value == LONG_MIN


def test_overflow_clamps_and_consumes_all_digits():
    text = "99999999999999999999999"
    assert strtol(text, 10) == (LONG_MAX, len(text))
    assert strtol("-" + text, 10) == (LONG_MIN, len(text) + 1)


@pytest.mark.parametrize("base", [-1, 1, 37])
def test_invalid_base(base):
    with pytest.raises(ValueError):
        strtol("10", base)