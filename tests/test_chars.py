import string

import pytest

from solong.chars import (
    isalnum,
    isalpha,
    isascii,
    isdigit,
    isprint,
    memchr,
    memcmp,
    tolower,
    toupper,
)


def test_isalnum_matches_ascii_alnum():
    for code in range(128):
        assert isalnum(code) == chr(code).isalnum()


def test_isalnum_accepts_str():
    assert isalnum("z") is True
    assert isalnum(":") is False


def test_isalpha_letters_except_capital_a():
    for code in range(128):
        if chr(code) == "A":
            continue
        assert isalpha(code) == chr(code).isalpha()


def test_isalpha_range_starts_after_capital_a():
    assert isalpha("A") is False
    assert isalpha("B") is True


def test_isalpha_negative_is_not_letter():
    assert isalpha(-1) is False


def test_isdigit_all_digits():
    assert all(isdigit(ch) for ch in string.digits)
    assert not any(isdigit(ch) for ch in string.ascii_letters)


def test_isascii_bounds():
    assert isascii(0) is True
    assert isascii(127) is True
    assert isascii(128) is False
    assert isascii(-1) is False


def test_isprint_bounds():
    assert isprint(" ") is True
    assert isprint("~") is True
    assert isprint(31) is False
    assert isprint(127) is False


def test_single_character_required():
    with pytest.raises(ValueError):
        isdigit("12")


def test_case_mapping_round_trip():
    for ch in string.ascii_lowercase:
        assert tolower(toupper(ch)) == ch
        assert toupper(ch) == ch.upper()
    for ch in string.ascii_uppercase:
        assert tolower(ch) == ch.lower()


def test_case_mapping_keeps_type_and_other_values():
    assert tolower(ord("Q")) == ord("q")
    assert toupper(";") == ";"
    assert tolower("é") == "é"


def test_memcmp_equal_prefix():
    assert memcmp(b"abc", b"abd", 2) == 0


def test_memcmp_sign():
    assert memcmp(b"abc", b"abd", 3) < 0
    assert memcmp(b"abd", b"abc", 3) > 0
    assert memcmp(b"\xff", b"\x01", 1) == 0xFF - 0x01


def test_memcmp_short_buffer():
    with pytest.raises(ValueError):
        memcmp(b"ab", b"abc", 3)


def test_memchr_finds_first():
    assert memchr(b"hello", ord("l"), 5) == b"llo"
    assert memchr(b"hello", "l", 5) == b"llo"


def test_memchr_wraps_large_values():
    assert memchr(b"\x00\x01\x02\x03", 2 + 256, 3) == b"\x02\x03"


def test_memchr_limited_to_n():
    assert memchr(b"hello", b"o", 3) is None


def test_memchr_short_buffer():
    with pytest.raises(ValueError):
        memchr(b"hi", "h", 5)