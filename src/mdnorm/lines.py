"""Per-line preprocessing applied before block-level scanning."""
from __future__ import annotations

from typing import List

import regex

from .text import detab, replace_null_chars

LINE_ENDING_PATTERN = regex.compile(r"\r\n|\r|\n")


def split_lines(text: str) -> List[str]:
    """Split ``text`` on CommonMark line endings (``\\r\\n``, ``\\r``, ``\\n``).

    The returned lines carry no line ending. A line ending at the very end of
    ``text`` terminates the last line rather than opening an empty one.
    """

    if not text:
        return []
    lines = LINE_ENDING_PATTERN.split(text)
    if lines[-1] == "":
        lines.pop()
    return lines


def prepare_line(line: str) -> str:
    return detab(replace_null_chars(line))


def prepare_lines(text: str) -> List[str]:
    return [prepare_line(line) for line in split_lines(text)]


def prepare_document(text: str) -> str:
    """Prepare every line of ``text`` and rejoin them with ``\\n`` endings."""

    return "".join(f"{line}\n" for line in prepare_lines(text))


__all__ = ["split_lines", "prepare_line", "prepare_lines", "prepare_document"]
