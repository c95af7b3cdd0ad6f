"""Initials extraction from free-form display names."""

from __future__ import annotations

import numbers
from collections.abc import Mapping

from unidecode import unidecode

from monogram_core.errors import ConfigError, InvalidInput


def collapse_whitespace(text: str) -> str:
    return " ".join(text.split())


def to_ascii(text: str) -> str:
    """Transliterate to the closest ASCII; characters with no equivalent are dropped."""
    return unidecode(text, errors="ignore")


def coerce_name(value: object) -> str:
    if value is None:
        return ""
    if isinstance(value, str):
        return value
    if isinstance(value, numbers.Number):
        return str(value)
    if isinstance(value, (bytes, bytearray, Mapping, list, tuple, set, frozenset)):
        raise InvalidInput(f"Passed value cannot be a {type(value).__name__}")
    if type(value).__str__ is object.__str__:
        raise InvalidInput("Passed object must have a __str__ method")
    return str(value)


def build_initials(name: str, length: int = 2) -> str:
    """Initials from an already collapsed name.

    A single word yields its first ``length`` characters; several words yield
    the first character of each word, in order, truncated to ``length``.
    """
    name = name.upper()
    if not name:
        return ""
    words = name.split(" ")
    if len(words) == 1:
        return name[:length]
    return "".join(word[:1] for word in words)[:length]


def get_initials(name: object, length: int = 2, fold_ascii: bool = False) -> str:
    if length < 1:
        raise ConfigError(f"initials length must be >= 1, got {length}")
    text = collapse_whitespace(coerce_name(name))
    if fold_ascii:
        text = collapse_whitespace(to_ascii(text))
    return build_initials(text, length)
