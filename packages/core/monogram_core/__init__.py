"""Core services for avatar settings, errors, caching, and logging."""

from .cache import CacheStore, FileCacheStore, MemoryCacheStore, ensure_directory
from .config import (
    DEFAULT_BACKGROUND,
    DEFAULT_FOREGROUND,
    AvatarConfig,
    BorderConfig,
    config_from_dict,
    config_to_dict,
    load_config,
    save_config,
)
from .errors import AvatarError, ConfigError, InvalidInput, ResourceUnavailable, UnsupportedShape

__all__ = [
    "AvatarConfig",
    "AvatarError",
    "BorderConfig",
    "CacheStore",
    "ConfigError",
    "DEFAULT_BACKGROUND",
    "DEFAULT_FOREGROUND",
    "FileCacheStore",
    "InvalidInput",
    "MemoryCacheStore",
    "ResourceUnavailable",
    "UnsupportedShape",
    "config_from_dict",
    "config_to_dict",
    "ensure_directory",
    "load_config",
    "save_config",
]
