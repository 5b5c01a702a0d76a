"""Whole-text normalization helpers applied before and during parsing."""
from __future__ import annotations

from typing import List

import regex

from .chars import REPLACEMENT_CHAR, is_ascii_space_char

TAB_STOP = 4

_WHITE_SPACE_RUN = regex.compile(r"[ \t\n\v\f\r]+")


def strip_ascii_spaces(text: str) -> str:
    """Remove leading and trailing ASCII spaces (U+0020) only."""

    return text.strip(" ")


def strip_ascii_spaces_and_newlines(text: str) -> str:
    """Remove leading and trailing ASCII spaces and line feeds.

    Carriage returns and tabs are left in place.
    """

    return text.strip(" \n")


def collapse_whitespace(text: str) -> str:
    """Collapse each whitespace span to a single ASCII space.

    Whitespace here is the six-character class of
    :func:`mdnorm.chars.is_white_space_char`; Unicode space separators such as
    U+00A0 are kept as content. Leading and trailing whitespace is dropped.
    """

    return " ".join(word for word in _WHITE_SPACE_RUN.split(text) if word)


def strip_atx_suffix(text: str) -> str:
    """Strip an ATX heading closing sequence (if any) from ``text``.

    The ``#`` run only counts as a closing sequence when a space separates it
    from the heading content. One separating space is consumed with it.
    """

    stripped = text.rstrip(" ").rstrip("#")
    if not stripped or not is_ascii_space_char(stripped[-1]):
        return text
    return stripped[:-1]


def detab(text: str) -> str:
    """Convert tabs to spaces using a 4-column tab stop.

    Operates on a single line: columns are counted from the start of ``text``
    and are not reset at embedded line breaks, so split documents into lines
    first (see :func:`mdnorm.lines.prepare_lines`).
    """

    chunks = text.split("\t")
    padded: List[str] = []
    for chunk in chunks[:-1]:
        width = len(chunk) - len(chunk) % TAB_STOP + TAB_STOP
        padded.append(chunk.ljust(width, " "))
    padded.append(chunks[-1])
    return "".join(padded)


def replace_null_chars(text: str) -> str:
    """Replace null characters (U+0000) with the replacement character (U+FFFD)."""

    return text.replace("\x00", REPLACEMENT_CHAR)


__all__ = [
    "TAB_STOP",
    "strip_ascii_spaces",
    "strip_ascii_spaces_and_newlines",
    "collapse_whitespace",
    "strip_atx_suffix",
    "detab",
    "replace_null_chars",
]
