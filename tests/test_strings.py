import pytest

from ftkit.strings import (
    atoi,
    itoa,
    strchr,
    strcmp,
    strncmp,
    strnstr,
    strrchr,
)


@pytest.mark.parametrize(
    "text, expected",
    [
        ("     o1khg", 0),
        ("   \t\t+123", 123),
        ("   \t\t++123", 0),
        ("   \t\t-123", -123),
        ("   \t\t123", 123),
        ("123a1", 123),
    ],
)
def test_atoi_cases(text, expected):
    assert atoi(text) == expected


def test_atoi_all_whitespace_kinds_skipped():
    assert atoi("\t\n\v\f\r 42") == 42


def test_atoi_empty_and_sign_only():
    assert atoi("") == 0
    assert atoi("-") == 0


def test_atoi_int_limits():
    assert atoi("-2147483648") == -2147483648
    assert atoi("2147483647") == 2147483647


def test_atoi_wraps_past_int_range():
    assert atoi("2147483648") == -2147483648


def test_atoi_rejects_non_string():
    with pytest.raises(TypeError):
        atoi(12)


def test_itoa_value():
    assert itoa(21) == "21"
    assert itoa(0) == "0"
    assert itoa(-2147483648) == "-2147483648"


@pytest.mark.parametrize("n", [0, 7, -7, 21, 1000, -2147483648, 2147483647])
def test_itoa_atoi_round_trip(n):
    assert atoi(itoa(n)) == n


def test_itoa_rejects_non_int():
    with pytest.raises(TypeError):
        itoa("5")
    with pytest.raises(TypeError):
        itoa(True)


def test_strchr_first_character():
    assert strchr("bonjour", "b") == 0


def test_strchr_finds_first_occurrence():
    text = "dezotoito"
    index = strchr(text, "o")
    assert text[index] == "o"
    assert "o" not in text[:index]


def test_strchr_accepts_int_code():
    assert strchr("bonjour", ord("j")) == strchr("bonjour", "j")


def test_strchr_missing_and_nul():
    assert strchr("bonjour", "z") is None
    assert strchr("bonjour", "\0") == len("bonjour")
    assert strchr("bonjour", 0) == len("bonjour")


def test_strchr_bad_char():
    with pytest.raises(TypeError):
        strchr("abc", "ab")


def test_strrchr_finds_last_occurrence():
    text = "dezotoitu"
    index = strrchr(text, "o")
    assert text[index] == "o"
    assert "o" not in text[index + 1:]


def test_strrchr_first_position_and_missing():
    assert strrchr("dezotoitu", "d") == 0
    assert strrchr("dezotoitu", "x") is None
    assert strrchr("", "x") is None


def test_strrchr_nul_is_end():
    assert strrchr("dezotoitu", "\0") == len("dezotoitu")


def test_strcmp_equal():
    assert strcmp("Gabriel", "Gabriel") == 0
    assert strcmp("", "") == 0


def test_strcmp_difference_of_first_mismatch():
    assert strcmp("Gabriel", "Hsouz") == ord("G") - ord("H")


def test_strcmp_prefix_is_smaller():
    assert strcmp("abc", "abcd") < 0
    assert strcmp("abcd", "abc") == ord("d")


def test_strcmp_antisymmetric():
    assert strcmp("apple", "apricot") == -strcmp("apricot", "apple")


def test_strcmp_bytes():
    assert strcmp(b"abc", b"abd") == ord("c") - ord("d")


def test_strncmp_limited():
    assert strncmp("Gabriel", "Gabrooo", 4) == 0
    assert strncmp("Gabriel", "Gabrooo", 5) == ord("i") - ord("o")
    assert strncmp("Gabriel", "Hsouz", 0) == 0


def test_strncmp_agrees_with_strcmp_for_large_n():
    assert strncmp("abc", "abd", 100) == strcmp("abc", "abd")


def test_strncmp_negative_n():
    with pytest.raises(ValueError):
        strncmp("a", "b", -1)


def test_strnstr_found_within_limit():
    haystack = "dezotoito"
    index = strnstr(haystack, "oi", 7)
    assert haystack[index:index + 2] == "oi"
    assert index + 2 <= 7


def test_strnstr_not_within_limit():
    assert strnstr("dezotoito", "oi", 6) is None


def test_strnstr_empty_needle():
    assert strnstr("dezotoito", "", 0) == 0


def test_strnstr_missing():
    assert strnstr("dezotoito", "xyz", 9) is None


def test_strnstr_repeated_prefix():
    haystack = "aab"
    index = strnstr(haystack, "ab", 3)
    assert haystack[index:index + 2] == "ab"
    assert strnstr("ab", "aa", 2) is None


def test_strnstr_negative_n():
    with pytest.raises(ValueError):
        strnstr("abc", "a", -2)