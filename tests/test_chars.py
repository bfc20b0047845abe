import string

import pytest

from printfmt.chars import (
    atoi,
    is_alnum,
    is_alpha,
    is_ascii,
    is_digit,
    is_print,
    itoa,
    to_lower,
    to_upper,
)


@pytest.mark.parametrize("c", list(string.ascii_letters))
def test_letters_are_alpha_and_alnum(c):
    assert is_alpha(c) is True
    assert is_alnum(c) is True
    assert is_digit(c) is False


@pytest.mark.parametrize("c", list(string.digits))
def test_digits(c):
    assert is_digit(c) is True
    assert is_alnum(c) is True
    assert is_alpha(c) is False


@pytest.mark.parametrize("c", ["!", " ", "@", "[", "`", "{", "\n"])
def test_non_alnum(c):
    assert is_alnum(c) is False


def test_is_alpha_accepts_integer_codes():
    assert is_alpha(ord("q")) is True
    assert is_alpha(ord("q") + 128) is False


def test_is_ascii_bounds():
    assert is_ascii(0) is True
    assert is_ascii(127) is True
    assert is_ascii(128) is False
    assert is_ascii(-1) is False
    assert is_ascii("é") is False


def test_is_print_bounds():
    assert is_print(" ") is True
    assert is_print("~") is True
    assert is_print(127) is False
    assert is_print("\t") is False


def test_printable_ascii_matches_printable_set():
    for code in range(128):
        expected = chr(code) in string.printable and chr(code) not in "\t\n\r\x0b\x0c"
        assert is_print(code) is expected


def test_classification_rejects_multichar_strings():
    with pytest.raises(ValueError):
        is_alpha("ab")
    with pytest.raises(ValueError):
        is_digit("")


@pytest.mark.parametrize("c", list(string.ascii_lowercase))
def test_to_upper_lowercase_letters(c):
    assert to_upper(c) == c.upper()
    assert to_lower(to_upper(c)) == c


@pytest.mark.parametrize("c", ["1", "!", "é", "Z", " "])
def test_to_upper_leaves_others(c):
    assert to_upper(c) == c


@pytest.mark.parametrize("c", ["1", "!", "ß", "z", " "])
def test_to_lower_leaves_others(c):
    assert to_lower(c) == c


def test_case_conversion_keeps_integer_type():
    assert to_upper(ord("m")) == ord("M")
    assert to_lower(ord("M")) == ord("m")


@pytest.mark.parametrize(
    "text,expected",
    [
        ("42", 42),
        ("   -123abc", -123),
        ("\t\n\v\f\r 7", 7),
        ("+15", 15),
        ("-0", 0),
    ],
)
def test_atoi_plain(text, expected):
    assert atoi(text) == expected


@pytest.mark.parametrize("text", ["+-5", "-+5", "--5", "++5", "-a-5"])
def test_atoi_multiple_signs_gives_zero(text):
    assert atoi(text) == 0


@pytest.mark.parametrize("text", ["", "abc", "   ", "- 5"])
def test_atoi_no_digits_gives_zero(text):
    assert atoi(text) == 0


def test_atoi_int_limits():
    assert atoi("2147483647") == 2147483647
    assert atoi("-2147483648") == -2147483648


def test_atoi_wraps_past_int_range():
    assert atoi("2147483648") == -2147483648


@pytest.mark.parametrize("n", [0, 5, -5, 10, -10, 2147483647, -2147483648, 1234567])
def test_itoa_round_trip(n):
    assert atoi(itoa(n)) == n
    assert itoa(n) == str(n)


def test_itoa_negative_prefix():
    text = itoa(-54)
    assert text.startswith("-")
    assert text[1:] == itoa(54)


def test_itoa_rejects_non_integer():
    with pytest.raises(TypeError):
        itoa("12")
    with pytest.raises(TypeError):
        itoa(1.5)