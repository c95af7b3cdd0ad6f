"""Error taxonomy shared by the avatar packages."""

from __future__ import annotations


class AvatarError(Exception):
    """Base class for every error raised by monogram."""


class InvalidInput(AvatarError, TypeError):
    """The display name has no text representation."""


class UnsupportedShape(AvatarError, ValueError):
    def __init__(self, shape: str) -> None:
        super().__init__(f"Shape [{shape}] currently not supported.")
        self.shape = shape


class ResourceUnavailable(AvatarError, OSError):
    """A directory or file the caller asked for cannot be used."""


class ConfigError(AvatarError, ValueError):
    """Configuration values rejected at construction time."""
