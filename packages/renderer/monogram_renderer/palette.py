"""Deterministic color selection keyed on initials."""

from __future__ import annotations

from collections.abc import Sequence

from monogram_core.config import DEFAULT_BACKGROUND, DEFAULT_FOREGROUND


def initials_number(initials: str) -> int:
    return sum(ord(ch) for ch in initials)


def pick(initials: str, palette: Sequence[str], default: str) -> str:
    # Palette order is part of the output: reordering recolors cached names.
    if not initials or not palette:
        return default
    return palette[initials_number(initials) % len(palette)]


def select_background(initials: str, palette: Sequence[str]) -> str:
    return pick(initials, palette, DEFAULT_BACKGROUND)


def select_foreground(initials: str, palette: Sequence[str]) -> str:
    return pick(initials, palette, DEFAULT_FOREGROUND)
