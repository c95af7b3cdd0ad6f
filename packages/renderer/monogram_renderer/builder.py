"""Avatar composition: resolve parameters, paint the shape, center the initials."""

from __future__ import annotations

import base64
from io import BytesIO

from PIL import Image, ImageDraw

from monogram_core.config import AvatarConfig
from monogram_core.logging_setup import get_logger

from .fonts import FontResolver
from .initials import get_initials
from .models import BorderColor, ResolvedAvatar
from .palette import select_background, select_foreground
from .shapes import get_shape


_log = get_logger("builder")


def resolve_avatar(
    name: object,
    config: AvatarConfig,
    background: str | None = None,
    foreground: str | None = None,
    fonts: FontResolver | None = None,
) -> ResolvedAvatar:
    """Compute every attribute that determines the rendered pixels.

    ``background`` and ``foreground`` override the palette selection. The
    result depends only on the arguments, so equal inputs give equal avatars
    and equal cache keys.
    """
    initials = get_initials(name, config.chars, fold_ascii=config.ascii)
    fg = foreground or select_foreground(initials, config.foregrounds)
    bg = background or select_background(initials, config.backgrounds)
    resolver = fonts or FontResolver(config.font_dir)

    return ResolvedAvatar(
        initials=initials,
        shape=config.shape,
        chars=config.chars,
        background=bg,
        foreground=fg,
        font=resolver.resolve(initials, config.fonts),
        font_size=config.font_size,
        width=config.width,
        height=config.height,
        border_size=config.border.size,
        border_color=BorderColor.parse(config.border.color).resolve(fg, bg),
    )


def _draw_centered_text(draw: ImageDraw.ImageDraw, resolved: ResolvedAvatar, font) -> None:
    if not resolved.initials:
        return
    left, top, right, bottom = draw.textbbox((0, 0), resolved.initials, font=font)
    x = (resolved.width - (right - left)) / 2 - left
    y = (resolved.height - (bottom - top)) / 2 - top
    draw.text((x, y), resolved.initials, font=font, fill=resolved.foreground)


def build_image(resolved: ResolvedAvatar, fonts: FontResolver | None = None) -> Image.Image:
    # Unknown shapes fail before a canvas exists.
    shape = get_shape(resolved.shape)
    resolver = fonts or FontResolver()

    image = Image.new("RGBA", (resolved.width, resolved.height), (0, 0, 0, 0))
    draw = ImageDraw.Draw(image)
    shape.render(
        draw,
        resolved.width,
        resolved.height,
        resolved.border_size,
        resolved.background,
        resolved.border_color,
    )
    _draw_centered_text(draw, resolved, resolver.load(resolved.font, resolved.font_size))

    _log.debug(
        f"avatar rendered initials={resolved.initials!r} shape={resolved.shape} size={resolved.width}x{resolved.height}",
        extra={"event": "avatar_rendered"},
    )
    return image


def build(name: object, config: AvatarConfig) -> Image.Image:
    resolver = FontResolver(config.font_dir)
    return build_image(resolve_avatar(name, config, fonts=resolver), resolver)


def png_compress_level(quality: int) -> int:
    quality = max(0, min(100, int(quality)))
    return round((100 - quality) * 9 / 100)


def encode_png(image: Image.Image, quality: int = 90) -> bytes:
    buf = BytesIO()
    image.save(buf, format="PNG", compress_level=png_compress_level(quality))
    return buf.getvalue()


def to_data_url(png: bytes) -> str:
    b64 = base64.b64encode(png).decode("ascii")
    return f"data:image/png;base64,{b64}"
