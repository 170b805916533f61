import pytest

from solong.strutil import (
    atoi,
    itoa,
    split,
    strchr,
    strlcat,
    strlcpy,
    strmapi,
    strncmp,
    strnstr,
    strrchr,
    strtrim,
    substr,
)


@pytest.mark.parametrize("n", [0, 7, -7, 123456, -2147483647, 2147483647])
def test_atoi_itoa_round_trip(n):
    assert atoi(itoa(n)) == n


def test_itoa_matches_str():
    for n in (0, -5, 98765):
        assert itoa(n) == str(n)


def test_atoi_skips_whitespace_and_stops_at_non_digit():
    assert atoi(" \t\n\v\f\r+123abc") == atoi("123")
    assert atoi("   -45xyz") == -atoi("45")


def test_atoi_no_digits_is_zero():
    assert atoi("abc") == 0
    assert atoi("") == 0
    assert atoi("-") == 0


def test_atoi_wraps_to_32_bits():
    assert atoi("2147483648") == -2147483648
    assert atoi("-2147483648") == -2147483648


def test_split_source_example():
    assert split("hello:world", ":") == ["hello", "world"]


def test_split_drops_empty_pieces():
    parts = split("::a::b:::c::", ":")
    assert parts == ["a", "b", "c"]
    assert all(parts)


def test_split_only_separators():
    assert split(":::", ":") == []
    assert split("", ":") == []


def test_split_rejects_long_separator():
    with pytest.raises(ValueError):
        split("a,b", ",,")


def test_strtrim_source_example():
    result = strtrim("Helolo", "Hoe")
    assert result == "lol"
    assert "Helolo".find(result) >= 0


def test_strtrim_keeps_inner_characters():
    assert strtrim("xxaxbxx", "x") == "axb"


def test_strtrim_empty_set_and_full_trim():
    assert strtrim("  text  ", "") == "  text  "
    assert strtrim("aaaa", "a") == ""


def test_substr_basic_and_bounds():
    text = "01234"
    assert substr(text, 1, 3) == text[1:4]
    assert substr(text, 10, 10) == ""
    assert substr(text, 2, 100) == text[2:]
    assert substr(text, 0, 0) == ""


def test_substr_negative_rejected():
    with pytest.raises(ValueError):
        substr("abc", -1, 2)


def test_strnstr_source_example():
    haystack = "loxlhelw"
    assert strnstr(haystack, "xl", 6) == haystack[2:]


def test_strnstr_match_must_fit_within_n():
    assert strnstr("loxlhelw", "xl", 3) is None
    assert strnstr("loxlhelw", "xl", 4) == "xlhelw"


def test_strnstr_empty_needle_and_missing():
    assert strnstr("hay", "", 0) == "hay"
    assert strnstr("hay", "zz", 3) is None


def test_strncmp_equal_and_limited():
    assert strncmp("abc", "abc", 3) == 0
    assert strncmp("abc", "abd", 2) == 0
    assert strncmp("abc", "xyz", 0) == 0


def test_strncmp_sign_and_antisymmetry():
    assert strncmp("abc", "abd", 3) < 0
    assert strncmp("abd", "abc", 3) == -strncmp("abc", "abd", 3)
    assert strncmp("abc", "ab", 5) == ord("c")


def test_strchr_finds_first():
    text = "tripouille"
    assert strchr(text, "i") == text[text.index("i"):]
    assert strchr(text, "z") is None


def test_strchr_terminator_and_int_codes():
    assert strchr("hello", "\0") == ""
    assert strchr("tripouille", ord("t") + 256) == "tripouille"


def test_strrchr_finds_last():
    text = "Hello World"
    assert strrchr(text, "o") == text[text.rindex("o"):]
    assert strrchr(text, "q") is None
    assert strrchr(text, 0) == ""


def test_strchr_rejects_multi_character():
    with pytest.raises(ValueError):
        strchr("abc", "ab")


def test_strlcpy_truncates_and_reports_length():
    src = "the cake is a lie !"
    copied, length = strlcpy(src, 5)
    assert copied == src[:4]
    assert length == len(src)


def test_strlcpy_zero_size_and_large_size():
    assert strlcpy("abc", 0) == ("", 3)
    assert strlcpy("abc", 50) == ("abc", 3)


def test_strlcat_appends_within_size():
    dst = "there is no stars in the sky"
    src = "the cake is a lie !"
    result, length = strlcat(dst, src, len(dst) + len(src) + 1)
    assert result == dst + src
    assert length == len(dst) + len(src)


def test_strlcat_truncates():
    result, length = strlcat("abc", "defgh", 6)
    assert result.startswith("abc")
    assert len(result) == 5
    assert length == 8


def test_strlcat_size_not_larger_than_dst():
    assert strlcat("abcdef", "xyz", 4) == ("abcdef", 4 + 3)


def test_strmapi_passes_index_and_char():
    text = "hello"
    seen = []

    def record(i, ch):
        seen.append((i, ch))
        return ch.upper()

    assert strmapi(text, record) == text.upper()
    assert seen == list(enumerate(text))


def test_strmapi_shift_by_index():
    result = strmapi("aaaa", lambda i, c: chr(ord(c) + i))
    assert [ord(ch) - ord("a") for ch in result] == [0, 1, 2, 3]
    assert strmapi("", lambda i, c: c) == ""