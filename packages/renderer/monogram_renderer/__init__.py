"""Renderer package for deterministic initials avatars."""

from .avatar import Avatar, AvatarFactory, get_initials
from .builder import build, build_image, encode_png, resolve_avatar, to_data_url
from .fonts import DEFAULT_FONT, FontResolver
from .keys import KEY_FIELDS, derive_key
from .models import BorderColor, BorderMode, ResolvedAvatar
from .palette import select_background, select_foreground
from .shapes import SHAPES, Circle, Shape, Square, get_shape, list_shapes, register_shape

__all__ = [
    "Avatar",
    "AvatarFactory",
    "BorderColor",
    "BorderMode",
    "Circle",
    "DEFAULT_FONT",
    "FontResolver",
    "KEY_FIELDS",
    "ResolvedAvatar",
    "SHAPES",
    "Shape",
    "Square",
    "build",
    "build_image",
    "derive_key",
    "encode_png",
    "get_initials",
    "get_shape",
    "list_shapes",
    "register_shape",
    "resolve_avatar",
    "select_background",
    "select_foreground",
    "to_data_url",
]
