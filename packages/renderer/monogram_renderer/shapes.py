"""Named background shapes painted behind the initials."""

from __future__ import annotations

from PIL import ImageDraw

from monogram_core.errors import UnsupportedShape


class Shape:
    """Fill plus optional stroke of the avatar backing region."""

    name = ""

    def render(
        self,
        draw: ImageDraw.ImageDraw,
        width: int,
        height: int,
        border_size: int,
        background: str,
        border_color: str | None,
    ) -> None:
        raise NotImplementedError

    @staticmethod
    def _stroke(border_size: int, border_color: str | None) -> tuple[str | None, int]:
        if border_size <= 0 or not border_color:
            return None, 0
        return border_color, border_size


SHAPES: dict[str, Shape] = {}


def register_shape(cls: type[Shape]) -> type[Shape]:
    if not cls.name:
        raise ValueError(f"{cls.__name__} must define a shape name")
    SHAPES[cls.name.lower()] = cls()
    return cls


def get_shape(name: str) -> Shape:
    shape = SHAPES.get((name or "").lower())
    if shape is None:
        raise UnsupportedShape(name)
    return shape


def list_shapes() -> list[str]:
    return sorted(SHAPES.keys())


@register_shape
class Circle(Shape):
    name = "circle"

    def render(self, draw, width, height, border_size, background, border_color) -> None:
        diameter = width - border_size
        if diameter <= 0:
            return
        cx, cy = width / 2, height / 2
        r = diameter / 2
        outline, stroke = self._stroke(border_size, border_color)
        draw.ellipse((cx - r, cy - r, cx + r, cy + r), fill=background, outline=outline, width=stroke)


@register_shape
class Square(Shape):
    name = "square"

    def render(self, draw, width, height, border_size, background, border_color) -> None:
        inner_w = width - border_size * 2
        inner_h = height - border_size * 2
        if inner_w <= 0 or inner_h <= 0:
            return
        x0 = y0 = border_size
        outline, stroke = self._stroke(border_size, border_color)
        draw.rectangle(
            (x0, y0, x0 + inner_w - 1, y0 + inner_h - 1),
            fill=background,
            outline=outline,
            width=stroke,
        )
