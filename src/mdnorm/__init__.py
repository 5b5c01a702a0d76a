"""CommonMark character classes and text normalization primitives."""
from .chars import (
    REPLACEMENT_CHAR,
    is_ascii_letter,
    is_ascii_punctuation_char,
    is_end_of_line_char,
    is_non_space_char,
    is_punctuation_char,
    is_unicode_white_space_char,
    is_white_space_char,
)
from .lines import prepare_document, prepare_line, prepare_lines, split_lines
from .text import (
    collapse_whitespace,
    detab,
    replace_null_chars,
    strip_ascii_spaces,
    strip_ascii_spaces_and_newlines,
    strip_atx_suffix,
)
from .version import __version__

__all__ = [
    "REPLACEMENT_CHAR",
    "is_end_of_line_char",
    "is_white_space_char",
    "is_unicode_white_space_char",
    "is_non_space_char",
    "is_ascii_punctuation_char",
    "is_punctuation_char",
    "is_ascii_letter",
    "strip_ascii_spaces",
    "strip_ascii_spaces_and_newlines",
    "collapse_whitespace",
    "strip_atx_suffix",
    "detab",
    "replace_null_chars",
    "split_lines",
    "prepare_line",
    "prepare_lines",
    "prepare_document",
    "__version__",
]
