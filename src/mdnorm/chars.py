"""Character classes used by the CommonMark grammar."""
from __future__ import annotations

import regex

REPLACEMENT_CHAR = "\ufffd"

# https://spec.commonmark.org/0.31.2/#line-ending
END_OF_LINE_CHARS: frozenset[str] = frozenset("\n\r")

# https://spec.commonmark.org/0.31.2/#whitespace-character
WHITE_SPACE_CHARS: frozenset[str] = frozenset(" \t\n\v\f\r")

# https://spec.commonmark.org/0.31.2/#ascii-punctuation-character
ASCII_PUNCTUATION_CHARS: frozenset[str] = frozenset("!\"#$%&'()*+,-./:;<=>?@[\\]^_`{|}~")

ASCII_LETTERS: frozenset[str] = frozenset("ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz")

# Math and modifier symbols that CommonMark counts as punctuation even though
# Unicode files them under Sc/Sk/Sm rather than P*.
PUNCTUATION_SUPPLEMENT: frozenset[str] = frozenset("$+<=>^`|~")

UNICODE_WHITE_SPACE_PATTERN = regex.compile(r"[\p{Zs}\t\r\n\f]")
PUNCTUATION_PATTERN = regex.compile(r"[\p{Pc}\p{Pd}\p{Ps}\p{Pe}\p{Pi}\p{Pf}\p{Po}]")

_ASCII_UNICODE_WHITE_SPACE: frozenset[str] = frozenset(
    chr(code) for code in range(128) if UNICODE_WHITE_SPACE_PATTERN.fullmatch(chr(code))
)
_ASCII_PUNCTUATION_LIKE: frozenset[str] = frozenset(
    chr(code)
    for code in range(128)
    if chr(code) in PUNCTUATION_SUPPLEMENT or PUNCTUATION_PATTERN.fullmatch(chr(code))
)


def is_end_of_line_char(char: str) -> bool:
    return char in END_OF_LINE_CHARS


def is_white_space_char(char: str) -> bool:
    """Return whether ``char`` is ASCII whitespace as the core grammar uses it.

    Space, tab, line feed, vertical tab, form feed and carriage return.
    """

    return char in WHITE_SPACE_CHARS


def is_unicode_white_space_char(char: str) -> bool:
    """Return whether ``char`` is a Unicode whitespace character.

    That is any code point in the Zs category, or a tab, carriage return,
    line feed or form feed. Vertical tab is not included. Used by the
    emphasis flanking rules.
    """

    if char.isascii():
        return char in _ASCII_UNICODE_WHITE_SPACE
    return UNICODE_WHITE_SPACE_PATTERN.fullmatch(char) is not None


def is_non_space_char(char: str) -> bool:
    return not is_white_space_char(char)


def is_ascii_punctuation_char(char: str) -> bool:
    return char in ASCII_PUNCTUATION_CHARS


def is_punctuation_char(char: str) -> bool:
    """Return whether ``char`` is a punctuation character.

    Anything in the Unicode classes Pc, Pd, Pe, Pf, Pi, Po or Ps, plus the
    ASCII symbols in :data:`PUNCTUATION_SUPPLEMENT`.
    """

    if char.isascii():
        return char in _ASCII_PUNCTUATION_LIKE
    return PUNCTUATION_PATTERN.fullmatch(char) is not None


def is_ascii_letter(char: str) -> bool:
    return char in ASCII_LETTERS


def is_ascii_space_char(char: str) -> bool:
    return char == " "


__all__ = [
    "REPLACEMENT_CHAR",
    "ASCII_PUNCTUATION_CHARS",
    "PUNCTUATION_SUPPLEMENT",
    "WHITE_SPACE_CHARS",
    "is_end_of_line_char",
    "is_white_space_char",
    "is_unicode_white_space_char",
    "is_non_space_char",
    "is_ascii_punctuation_char",
    "is_punctuation_char",
    "is_ascii_letter",
    "is_ascii_space_char",
]
