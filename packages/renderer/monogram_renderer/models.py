"""Typed renderer models."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class BorderMode(str, Enum):
    FOREGROUND = "foreground"
    BACKGROUND = "background"
    LITERAL = "literal"


@dataclass(frozen=True)
class BorderColor:
    mode: BorderMode
    value: str | None = None

    @classmethod
    def parse(cls, raw: str | None) -> "BorderColor":
        if raw == BorderMode.FOREGROUND.value:
            return cls(BorderMode.FOREGROUND)
        if raw == BorderMode.BACKGROUND.value:
            return cls(BorderMode.BACKGROUND)
        return cls(BorderMode.LITERAL, raw)

    def resolve(self, foreground: str, background: str) -> str | None:
        if self.mode is BorderMode.FOREGROUND:
            return foreground
        if self.mode is BorderMode.BACKGROUND:
            return background
        return self.value


@dataclass(frozen=True)
class ResolvedAvatar:
    initials: str
    shape: str
    chars: int
    background: str
    foreground: str
    font: str
    font_size: int
    width: int
    height: int
    border_size: int
    border_color: str | None
