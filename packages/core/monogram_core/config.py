"""Avatar settings schema and load/save helpers."""

from __future__ import annotations

import json
import os
import platform
from dataclasses import asdict, dataclass, field, fields
from pathlib import Path
from typing import Any

from .errors import ConfigError


DEFAULT_BACKGROUND = "#cccccc"
DEFAULT_FOREGROUND = "#ffffff"

MATERIAL_BACKGROUNDS = (
    "#f44336",
    "#E91E63",
    "#9C27B0",
    "#673AB7",
    "#3F51B5",
    "#2196F3",
    "#03A9F4",
    "#00BCD4",
    "#009688",
    "#4CAF50",
    "#8BC34A",
    "#CDDC39",
    "#FFC107",
    "#FF9800",
    "#FF5722",
)

# camelCase keys accepted in JSON files for compatibility with older configs.
_ALIASES = {
    "fontSize": "font_size",
    "cachePath": "cache_dir",
    "cacheDir": "cache_dir",
    "fontDir": "font_dir",
}


@dataclass(frozen=True)
class BorderConfig:
    size: int = 1
    # Literal color, or "foreground" / "background" to reuse the resolved color.
    color: str = "foreground"


@dataclass(frozen=True)
class AvatarConfig:
    shape: str = "circle"
    chars: int = 2
    backgrounds: tuple[str, ...] = MATERIAL_BACKGROUNDS
    foregrounds: tuple[str, ...] = ("#FFFFFF",)
    # File names searched in font_dir and the bundled fonts folder; empty uses Pillow's built-in font.
    fonts: tuple[str, ...] = ()
    font_size: int = 48
    width: int = 100
    height: int = 100
    ascii: bool = False
    border: BorderConfig = field(default_factory=BorderConfig)
    cache_dir: Path | None = None
    font_dir: Path | None = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "shape", str(self.shape or "").strip().lower())
        object.__setattr__(self, "backgrounds", tuple(self.backgrounds))
        object.__setattr__(self, "foregrounds", tuple(self.foregrounds))
        object.__setattr__(self, "fonts", tuple(str(f) for f in self.fonts))
        if self.cache_dir is not None:
            object.__setattr__(self, "cache_dir", Path(self.cache_dir))
        if self.font_dir is not None:
            object.__setattr__(self, "font_dir", Path(self.font_dir))
        if isinstance(self.border, dict):
            object.__setattr__(self, "border", _merge(BorderConfig, self.border))

        if not self.shape:
            raise ConfigError("shape must not be empty")
        if self.chars < 1:
            raise ConfigError(f"chars must be >= 1, got {self.chars}")
        for name in ("width", "height", "font_size"):
            if getattr(self, name) <= 0:
                raise ConfigError(f"{name} must be positive, got {getattr(self, name)}")
        if self.border.size < 0:
            raise ConfigError(f"border size must be >= 0, got {self.border.size}")


DEFAULT_CONFIG = AvatarConfig()


def config_path() -> Path:
    override = os.environ.get("MONOGRAM_CONFIG")
    if override:
        return Path(override).expanduser()
    system = platform.system()
    if system == "Windows":
        base = Path(os.environ.get("APPDATA", Path.home() / "AppData" / "Roaming"))
        return base / "Monogram" / "config.json"
    if system == "Darwin":
        return Path.home() / "Library" / "Application Support" / "Monogram" / "config.json"
    return Path.home() / ".config" / "monogram" / "config.json"


def _merge(dataclass_type, raw: dict[str, Any]):
    names = {f.name for f in fields(dataclass_type)}
    return dataclass_type(**{k: v for k, v in raw.items() if k in names})


def _normalize(data: dict[str, Any]) -> dict[str, Any]:
    out = {_ALIASES.get(k, k): v for k, v in data.items()}

    if "shape" in out:
        out["shape"] = str(out["shape"]).strip().lower() or "circle"
    for key in ("chars", "font_size", "width", "height"):
        if key in out:
            out[key] = max(1, int(out[key]))
    for key in ("backgrounds", "foregrounds", "fonts"):
        if key in out and out[key] is None:
            out[key] = []
        elif key in out and isinstance(out[key], str):
            out[key] = [out[key]]
    if "ascii" in out:
        out["ascii"] = bool(out["ascii"])

    border = dict(out.get("border") or {})
    if border.get("size") is None:
        border.pop("size", None)
    else:
        border["size"] = max(0, int(border["size"]))
    if not border.get("color"):
        border.pop("color", None)
    out["border"] = _merge(BorderConfig, border)
    return out


def config_from_dict(raw: dict[str, Any]) -> AvatarConfig:
    try:
        return _merge(AvatarConfig, _normalize(raw))
    except ConfigError:
        raise
    except (TypeError, ValueError) as exc:
        raise ConfigError(f"invalid avatar config: {exc}") from exc


def load_config(path: Path | None = None) -> AvatarConfig:
    path = path or config_path()
    if not path.exists():
        return AvatarConfig()

    try:
        raw = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, ValueError):
        return AvatarConfig()
    if not isinstance(raw, dict):
        return AvatarConfig()

    return config_from_dict(raw)


def config_to_dict(cfg: AvatarConfig) -> dict[str, Any]:
    data = asdict(cfg)
    for key in ("backgrounds", "foregrounds", "fonts"):
        data[key] = list(data[key])
    for key in ("cache_dir", "font_dir"):
        data[key] = str(data[key]) if data[key] is not None else None
    return data


def save_config(cfg: AvatarConfig, path: Path | None = None) -> Path:
    path = path or config_path()
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(config_to_dict(cfg), indent=2, sort_keys=True), encoding="utf-8")
    return path
