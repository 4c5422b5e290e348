import string

import pytest

from pokewalk.chars import (
    atoi,
    isalnum,
    isalpha,
    isascii,
    isdigit,
    isprint,
    itoa,
    tolower,
    toupper,
)


@pytest.mark.parametrize("c", list(string.ascii_letters))
def test_isalpha_accepts_letters(c):
    assert isalpha(c) is True
    assert isalpha(ord(c)) is True


@pytest.mark.parametrize("c", list(string.digits + string.punctuation + " \t"))
def test_isalpha_rejects_non_letters(c):
    assert isalpha(c) is False


def test_isalpha_rejects_code_seven():
    assert isalpha(7) is False


def test_isdigit_matches_ascii_digits():
    for code in range(256):
        assert isdigit(code) == (chr(code) in string.digits)


def test_isalnum_is_union_of_alpha_and_digit():
    for code in range(256):
        assert isalnum(code) == (isalpha(code) or isdigit(code))


def test_isascii_bounds():
    assert isascii(0) is True
    assert isascii(127) is True
    assert isascii(128) is False
    assert isascii(129) is False
    assert isascii(-1) is False


def test_isprint_bounds():
    assert isprint(31) is False
    assert isprint(" ") is True
    assert isprint("~") is True
    assert isprint(127) is False
    assert isprint(49) is True


def test_isprint_matches_printable_ascii():
    printable = set(string.printable) - set("\t\n\r\x0b\x0c")
    for code in range(128):
        assert isprint(code) == (chr(code) in printable)


def test_toupper_letters():
    for c in string.ascii_lowercase:
        assert toupper(c) == c.upper()
        assert toupper(ord(c)) == ord(c.upper())


def test_tolower_letters():
    for c in string.ascii_uppercase:
        assert tolower(c) == c.lower()
        assert tolower(ord(c)) == ord(c.lower())


def test_case_conversion_leaves_others_alone():
    for c in string.digits + string.punctuation + " ":
        assert toupper(c) == c
        assert tolower(c) == c
    assert toupper("A") == "A"
    assert tolower("b") == "b"


def test_case_round_trip():
    for c in string.ascii_letters:
        assert tolower(toupper(c)) == c.lower()
        assert toupper(tolower(c)) == c.upper()


def test_character_functions_reject_long_strings():
    with pytest.raises(ValueError):
        isalpha("ab")
    with pytest.raises(ValueError):
        toupper("")


def test_character_functions_reject_other_types():
    with pytest.raises(TypeError):
        isdigit(1.5)


def test_atoi_example():
    assert atoi("  -123447") == -123447


@pytest.mark.parametrize(
    "text, expected",
    [
        ("42", 42),
        ("+42", 42),
        ("\t\n\v\f\r 42", 42),
        ("-0", 0),
        ("", 0),
        ("abc", 0),
        ("12abc34", 12),
        ("--5", 0),
        ("+-5", 0),
        ("- 5", 0),
    ],
)
def test_atoi_cases(text, expected):
    assert atoi(text) == expected


def test_itoa_min_int():
    assert itoa(-2147483648) == "-2147483648"


def test_itoa_max_int():
    assert itoa(2147483647) == "2147483647"


def test_itoa_zero():
    assert itoa(0) == "0"


@pytest.mark.parametrize("n", [1, -1, 9, 10, -10, 12345, -987654, 2147483647, -2147483647])
def test_itoa_atoi_round_trip(n):
    assert atoi(itoa(n)) == n


def test_itoa_sign_prefix():
    for n in range(-50, 51):
        text = itoa(n)
        assert text.startswith("-") == (n < 0)
        assert all(isdigit(ch) for ch in text.lstrip("-"))


def test_itoa_rejects_non_int():
    with pytest.raises(TypeError):
        itoa("12")