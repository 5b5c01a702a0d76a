"""Named registry of character predicates and text transforms."""
from __future__ import annotations

from functools import reduce
from typing import Callable, Dict, Iterable, Mapping, Tuple

from . import chars, text
from .lines import prepare_line

Predicate = Callable[[str], bool]
Transform = Callable[[str], str]

BUILTIN_PREDICATES: Tuple[Tuple[str, Predicate], ...] = (
    ("end_of_line", chars.is_end_of_line_char),
    ("white_space", chars.is_white_space_char),
    ("unicode_white_space", chars.is_unicode_white_space_char),
    ("non_space", chars.is_non_space_char),
    ("ascii_punctuation", chars.is_ascii_punctuation_char),
    ("punctuation", chars.is_punctuation_char),
    ("ascii_letter", chars.is_ascii_letter),
)

BUILTIN_TRANSFORMS: Tuple[Tuple[str, Transform], ...] = (
    ("strip_ascii_spaces", text.strip_ascii_spaces),
    ("strip_ascii_spaces_and_newlines", text.strip_ascii_spaces_and_newlines),
    ("collapse_whitespace", text.collapse_whitespace),
    ("strip_atx_suffix", text.strip_atx_suffix),
    ("detab", text.detab),
    ("replace_null_chars", text.replace_null_chars),
    ("prepare_line", prepare_line),
)

BUILTIN_TRANSFORM_NAMES = frozenset(name for name, _ in BUILTIN_TRANSFORMS)


class Registry:
    """Runtime registry for built-in and user provided predicates and transforms."""

    def __init__(self) -> None:
        self._predicates: Dict[str, Predicate] = {}
        self._transforms: Dict[str, Transform] = {}

    def register_predicate(self, name: str, predicate: Predicate, override: bool = False) -> None:
        if not override and name in self._predicates:
            raise ValueError(f"Predicate already registered: {name}")
        self._predicates[name] = predicate

    def register_transform(self, name: str, transform: Transform, override: bool = False) -> None:
        if not override and name in self._transforms:
            raise ValueError(f"Transform already registered: {name}")
        self._transforms[name] = transform

    def unregister(self, name: str) -> None:
        self._predicates.pop(name, None)
        self._transforms.pop(name, None)

    def predicate(self, name: str) -> Predicate:
        try:
            return self._predicates[name]
        except KeyError as exc:
            raise KeyError(f"Unknown predicate: {name}") from exc

    def transform(self, name: str) -> Transform:
        try:
            return self._transforms[name]
        except KeyError as exc:
            raise KeyError(f"Unknown transform: {name}") from exc

    def predicates(self) -> Mapping[str, Predicate]:
        return dict(self._predicates)

    def transforms(self) -> Mapping[str, Transform]:
        return dict(self._transforms)

    def clear(self) -> None:
        self._predicates.clear()
        self._transforms.clear()


def load_builtins(registry: Registry) -> Registry:
    for name, predicate in BUILTIN_PREDICATES:
        registry.register_predicate(name, predicate)
    for name, transform in BUILTIN_TRANSFORMS:
        registry.register_transform(name, transform)
    return registry


def default_registry() -> Registry:
    return load_builtins(Registry())


def compose(names: Iterable[str], registry: Registry | None = None) -> Transform:
    """Resolve ``names`` and return a transform applying them left to right.

    Names are resolved eagerly so an unknown name fails here rather than on
    first use.
    """

    source = registry or default_registry()
    steps = [source.transform(name) for name in names]

    def _apply(value: str) -> str:
        return reduce(lambda current, step: step(current), steps, value)

    return _apply


def classify(char: str, registry: Registry | None = None) -> Tuple[str, ...]:
    source = registry or default_registry()
    return tuple(name for name, predicate in source.predicates().items() if predicate(char))


__all__ = [
    "Predicate",
    "Transform",
    "Registry",
    "BUILTIN_TRANSFORM_NAMES",
    "load_builtins",
    "default_registry",
    "compose",
    "classify",
]
