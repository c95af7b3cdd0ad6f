"""Fluent avatar API on top of the pure builder functions."""

from __future__ import annotations

from dataclasses import replace
from pathlib import Path

from PIL import Image

from monogram_core.cache import CacheStore, FileCacheStore, MemoryCacheStore, ensure_directory
from monogram_core.config import AvatarConfig, BorderConfig
from monogram_core.errors import ResourceUnavailable
from monogram_core.logging_setup import get_logger

from .builder import build_image, encode_png, png_compress_level, resolve_avatar, to_data_url
from .fonts import FontResolver
from .initials import coerce_name
from .initials import get_initials as _get_initials
from .keys import derive_key
from .models import ResolvedAvatar


_log = get_logger("avatar")


class Avatar:
    """One avatar request.

    Setters only touch configuration. Colors, font and initials are derived
    from scratch by :meth:`resolve` on every output call, so a half-resolved
    state is never observable.
    """

    def __init__(self, name: object, config: AvatarConfig, cache: CacheStore, fonts: FontResolver) -> None:
        self._name = coerce_name(name)
        self._config = config
        self._cache = cache
        self._fonts = fonts
        self._background: str | None = None
        self._foreground: str | None = None

    @property
    def name(self) -> str:
        return self._name

    @property
    def config(self) -> AvatarConfig:
        return self._config

    def set_background(self, color: str) -> "Avatar":
        self._background = color
        return self

    def set_foreground(self, color: str) -> "Avatar":
        self._foreground = color
        return self

    def set_dimension(self, width: int, height: int | None = None) -> "Avatar":
        self._config = replace(self._config, width=width, height=height or width)
        return self

    def set_font_size(self, size: int) -> "Avatar":
        self._config = replace(self._config, font_size=size)
        return self

    def set_border(self, size: int, color: str) -> "Avatar":
        self._config = replace(self._config, border=BorderConfig(size=size, color=color))
        return self

    def set_shape(self, shape: str) -> "Avatar":
        self._config = replace(self._config, shape=shape)
        return self

    def set_chars(self, chars: int) -> "Avatar":
        self._config = replace(self._config, chars=chars)
        return self

    def resolve(self) -> ResolvedAvatar:
        return resolve_avatar(
            self._name,
            self._config,
            background=self._background,
            foreground=self._foreground,
            fonts=self._fonts,
        )

    @property
    def initials(self) -> str:
        return self.resolve().initials

    @property
    def cache_key(self) -> str:
        return derive_key(self.resolve())

    def render(self) -> Image.Image:
        return build_image(self.resolve(), self._fonts)

    def to_png(self, quality: int = 90) -> bytes:
        """PNG bytes, cached under the pixel key.

        ``quality`` only sets the compression of the first encoding; later calls
        for the same key return the cached bytes whatever quality they pass.
        """
        resolved = self.resolve()
        return self._cache.remember_forever(
            derive_key(resolved),
            lambda: encode_png(build_image(resolved, self._fonts), quality),
        )

    def to_data_url(self) -> str:
        return to_data_url(self.to_png())

    def save(self, path: Path | str, quality: int = 90) -> Path:
        path = Path(path)
        image = self.render()
        path.parent.mkdir(parents=True, exist_ok=True)
        image.save(path, format="PNG", compress_level=png_compress_level(quality))
        _log.info(f"avatar saved path={path}", extra={"event": "avatar_saved"})
        return path

    def cached_path(self, quality: int = 90) -> Path:
        """Path of ``<cache_dir>/<key>.png``, rendering it first when missing.

        ``quality`` applies only when the file is written; an existing entry is
        returned as is since the key covers pixels, not compression.
        """
        if self._config.cache_dir is None:
            raise ResourceUnavailable("no cache directory configured")
        store = FileCacheStore(self._config.cache_dir, suffix=".png")
        resolved = self.resolve()
        key = derive_key(resolved)
        store.remember_forever(key, lambda: encode_png(build_image(resolved, self._fonts), quality))
        return store.path_for(key)


class AvatarFactory:
    """Holds the shared, read-only configuration and hands out :class:`Avatar` requests."""

    def __init__(
        self,
        config: AvatarConfig | None = None,
        cache: CacheStore | None = None,
        fonts: FontResolver | None = None,
    ) -> None:
        self.config = config or AvatarConfig()
        if self.config.cache_dir is not None:
            ensure_directory(self.config.cache_dir)
        self.cache = cache if cache is not None else MemoryCacheStore()
        self.fonts = fonts or FontResolver(self.config.font_dir)

    def create(self, name: object) -> Avatar:
        return Avatar(name, self.config, self.cache, self.fonts)

    def get_initials(self, name: object, length: int | None = None) -> str:
        return _get_initials(name, length or self.config.chars, fold_ascii=self.config.ascii)


def get_initials(name: object, length: int = 2) -> str:
    return _get_initials(name, length)
