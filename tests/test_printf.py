import pytest

from randolib.printf import snprintf


def test_plain_text():
    assert snprintf(64, "hello world") == "hello world"


def test_signed_decimal():
    assert snprintf(64, "a %d b", -5) == "a -5 b"
    assert snprintf(64, "%d", 0) == "0"
    assert snprintf(64, "%d", 123) == "123"


def test_unsigned_decimal_max():
    assert snprintf(64, "%u", 0xFFFFFFFF) == str(0xFFFFFFFF)


def test_hex_and_pointer():
    assert snprintf(64, "%x", 255) == "ff"
    assert snprintf(64, "%x", 0) == "0"
    assert snprintf(64, "%p", 0x1000) == "0x1000"
    assert snprintf(64, "%P", 0) == "0x0"


def test_string_argument():
    assert snprintf(64, "[%s]", "abc") == "[abc]"


def test_percent_literal():
    assert snprintf(64, "100%%") == "100%"


def test_backslash_escapes():
    assert snprintf(64, "a\\nb\\tc\\\\") == "a\nb\tc\\"


def test_truncation_to_bufsize_minus_one():
    assert snprintf(4, "hello") == "hel"
    assert snprintf(3, "%d", 12345) == "12"
    assert snprintf(1, "anything") == ""


def test_truncation_never_exceeds_limit():
    for size in range(1, 20):
        assert len(snprintf(size, "%s-%d-%x", "abcdef", -42, 0xBEEF)) <= size - 1


def test_truncation_is_prefix_of_full_output():
    full = snprintf(128, "%s=%u", "key", 987654)
    for size in range(1, len(full) + 2):
        assert full.startswith(snprintf(size, "%s=%u", "key", 987654))


def test_invalid_bufsize():
    with pytest.raises(ValueError):
        snprintf(0, "x")


def test_unknown_conversion():
    with pytest.raises(ValueError):
        snprintf(64, "%q", 1)


def test_unknown_escape():
    with pytest.raises(ValueError):
        snprintf(64, "\\z")


def test_missing_argument():
    with pytest.raises(TypeError):
        snprintf(64, "%d")


def test_out_of_range_unsigned():
    with pytest.raises(ValueError):
        snprintf(64, "%u", -1)
    with pytest.raises(ValueError):
        snprintf(64, "%x", 2**32)