import string

import pytest

from mdnorm.chars import (
    REPLACEMENT_CHAR,
    is_ascii_letter,
    is_ascii_punctuation_char,
    is_ascii_space_char,
    is_end_of_line_char,
    is_non_space_char,
    is_punctuation_char,
    is_unicode_white_space_char,
    is_white_space_char,
)

ASCII_PUNCTUATION = "!\"#$%&'()*+,-./:;<=>?@[\\]^_`{|}~"
ASCII_WHITE_SPACE = " \t\n\v\f\r"


def test_replacement_char_is_fffd() -> None:
    assert REPLACEMENT_CHAR == "\ufffd"


@pytest.mark.parametrize("char", ["\n", "\r"])
def test_end_of_line_accepts_line_feed_and_carriage_return(char: str) -> None:
    assert is_end_of_line_char(char)


@pytest.mark.parametrize("char", [" ", "\t", "\v", "\f", "\u2028", "\u0085", "a"])
def test_end_of_line_rejects_other_characters(char: str) -> None:
    assert not is_end_of_line_char(char)


def test_white_space_is_exactly_the_six_ascii_characters() -> None:
    accepted = {chr(code) for code in range(0x3000 + 1) if is_white_space_char(chr(code))}
    assert accepted == set(ASCII_WHITE_SPACE)


@pytest.mark.parametrize("char", ["\u00a0", "\u2003", "\u3000", "\u1680"])
def test_white_space_rejects_unicode_space_separators(char: str) -> None:
    assert not is_white_space_char(char)
    assert is_non_space_char(char)


@pytest.mark.parametrize("char", [" ", "\t", "\n", "\r", "\f"])
def test_white_space_classes_agree_on_ascii(char: str) -> None:
    assert is_white_space_char(char)
    assert is_unicode_white_space_char(char)


def test_vertical_tab_is_not_unicode_white_space() -> None:
    assert is_white_space_char("\v")
    assert not is_unicode_white_space_char("\v")


@pytest.mark.parametrize(
    "char",
    ["\u00a0", "\u1680", "\u2000", "\u2003", "\u200a", "\u202f", "\u205f", "\u3000"],
)
def test_unicode_white_space_accepts_space_separators(char: str) -> None:
    assert is_unicode_white_space_char(char)


@pytest.mark.parametrize("char", ["\u200b", "\u2028", "\u2029", "\u0085", "\ufeff", "x", "#"])
def test_unicode_white_space_rejects_non_separators(char: str) -> None:
    assert not is_unicode_white_space_char(char)


def test_non_space_negates_white_space() -> None:
    for code in range(0x250):
        char = chr(code)
        assert is_non_space_char(char) is (not is_white_space_char(char))


def test_ascii_punctuation_is_exactly_thirty_two_characters() -> None:
    accepted = {chr(code) for code in range(0x110) if is_ascii_punctuation_char(chr(code))}
    assert len(accepted) == 32
    assert accepted == set(ASCII_PUNCTUATION)


@pytest.mark.parametrize("char", list(string.ascii_letters + string.digits + " "))
def test_ascii_punctuation_rejects_letters_digits_and_space(char: str) -> None:
    assert not is_ascii_punctuation_char(char)


def test_punctuation_covers_all_ascii_punctuation() -> None:
    for char in ASCII_PUNCTUATION:
        assert is_punctuation_char(char), char


@pytest.mark.parametrize("char", list("$+<=>^`|~"))
def test_punctuation_includes_ascii_symbol_supplement(char: str) -> None:
    assert is_punctuation_char(char)


@pytest.mark.parametrize(
    "char",
    ["¡", "«", "»", "—", "‿", "「", "」", "。", "¿", "\U00010100"],
)
def test_punctuation_accepts_unicode_punctuation_categories(char: str) -> None:
    assert is_punctuation_char(char)


@pytest.mark.parametrize("char", ["€", "£", "©", "×", "a", "7", " ", "é", "\U0001f600"])
def test_punctuation_rejects_symbols_outside_supplement(char: str) -> None:
    assert not is_punctuation_char(char)


def test_ascii_letter_accepts_only_ascii_alphabet() -> None:
    accepted = {chr(code) for code in range(0x250) if is_ascii_letter(chr(code))}
    assert accepted == set(string.ascii_letters)


@pytest.mark.parametrize("char", ["é", "α", "Ж", "1", "_"])
def test_ascii_letter_rejects_non_ascii_letters(char: str) -> None:
    assert not is_ascii_letter(char)


def test_ascii_space_helper() -> None:
    assert is_ascii_space_char(" ")
    assert not is_ascii_space_char("\u00a0")


@pytest.mark.parametrize("value", ["", "ab", "  ", "\u00a0\u00a0"])
def test_predicates_reject_non_codepoint_strings(value: str) -> None:
    assert not is_end_of_line_char(value)
    assert not is_white_space_char(value)
    assert not is_unicode_white_space_char(value)
    assert not is_ascii_punctuation_char(value)
    assert not is_punctuation_char(value)
    assert not is_ascii_letter(value)
    assert is_non_space_char(value)
