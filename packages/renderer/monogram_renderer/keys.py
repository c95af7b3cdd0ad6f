"""Cache keys derived from every parameter that changes avatar pixels."""

from __future__ import annotations

import hashlib

from .models import ResolvedAvatar


# Order is fixed; reordering invalidates every stored avatar.
KEY_FIELDS = (
    "initials",
    "shape",
    "chars",
    "font",
    "font_size",
    "width",
    "height",
    "border_size",
    "border_color",
    "background",
    "foreground",
)

# Whitespace collapsing strips U+001F from names, so it never occurs in initials.
KEY_DELIMITER = "\x1f"


def key_material(resolved: ResolvedAvatar) -> str:
    parts = []
    for name in KEY_FIELDS:
        value = getattr(resolved, name)
        parts.append("" if value is None else str(value))
    return KEY_DELIMITER.join(parts)


def derive_key(resolved: ResolvedAvatar) -> str:
    return hashlib.sha256(key_material(resolved).encode("utf-8")).hexdigest()
