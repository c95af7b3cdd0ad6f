"""Font selection and lookup with a bounded search path."""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path

from PIL import ImageFont

from monogram_core.logging_setup import get_logger


DEFAULT_FONT = "default"
BUNDLED_FONT_DIR = Path(__file__).resolve().parent / "fonts"

_log = get_logger("fonts")


class FontResolver:
    """Maps initials to a font file.

    Entries are searched as given (absolute or caller-relative path), then in
    the deployment font directory, then in the fonts bundled with the package.
    The first existing file wins; otherwise Pillow's built-in font is used.
    """

    def __init__(self, font_dir: Path | None = None, bundled_dir: Path = BUNDLED_FONT_DIR) -> None:
        self.font_dir = Path(font_dir) if font_dir is not None else None
        self.bundled_dir = bundled_dir

    def search_dirs(self) -> list[Path | None]:
        dirs: list[Path | None] = [None]
        if self.font_dir is not None:
            dirs.append(self.font_dir)
        dirs.append(self.bundled_dir)
        return dirs

    @staticmethod
    def select(initials: str, fonts: Sequence[str]) -> str | None:
        if not initials or not fonts:
            return None
        return fonts[ord(initials[0]) % len(fonts)]

    def resolve(self, initials: str, fonts: Sequence[str]) -> str:
        entry = self.select(initials, fonts)
        if entry is None:
            return DEFAULT_FONT

        for folder in self.search_dirs():
            candidate = Path(entry) if folder is None else folder / entry
            if candidate.is_file():
                return str(candidate)

        _log.debug(f"font not found entry={entry}, using built-in font", extra={"event": "font_fallback"})
        return DEFAULT_FONT

    def load(self, font: str, size: int):
        if font != DEFAULT_FONT:
            try:
                return ImageFont.truetype(font, size)
            except OSError as exc:
                _log.warning(
                    f"font unavailable path={font}: {exc}",
                    extra={"event": "font_unavailable"},
                )
        return ImageFont.load_default(size=size)
