"""Pillow rasterizer for clock face draw primitives."""

from __future__ import annotations

import base64
import math
from functools import lru_cache
from io import BytesIO
from typing import Iterable

from PIL import Image, ImageDraw, ImageFont

from .colors import to_rgba
from .models import Circle, DrawPrimitive, Line, PaintStyle, Text

_PREFERRED_FONTS = ("DejaVuSans.ttf", "Arial.ttf")


@lru_cache(maxsize=32)
def _font(size: int):
    for name in _PREFERRED_FONTS:
        try:
            return ImageFont.truetype(name, size)
        except OSError:
            continue
    return ImageFont.load_default(size=size)


def _font_px(size: float) -> int:
    return max(1, int(round(size)))


def font_metrics(size: float) -> tuple[float, float]:
    if size <= 0:
        return 0.0, 0.0
    ascent, descent = _font(_font_px(size)).getmetrics()
    return float(ascent), float(descent)


def _stroke_px(width: float) -> int:
    # Zero width means hairline, as on the host canvas.
    return max(1, int(round(width)))


class ClockRasterizer:
    """Paints primitives in order onto a transparent RGBA canvas."""

    def rasterize(self, primitives: Iterable[DrawPrimitive], width: int, height: int) -> Image.Image:
        # Pillow cannot encode an empty image; a zero-size face becomes one blank pixel.
        image = Image.new("RGBA", (max(1, width), max(1, height)), (0, 0, 0, 0))
        for primitive in primitives:
            alpha = (primitive.color >> 24) & 0xFF
            if alpha == 0:
                continue
            if alpha == 0xFF:
                self._draw(image, primitive)
                continue
            # ImageDraw overwrites RGBA pixels; translucent ink goes through a layer.
            layer = Image.new("RGBA", image.size, (0, 0, 0, 0))
            self._draw(layer, primitive)
            image.alpha_composite(layer)
        return image

    def _draw(self, image: Image.Image, primitive: DrawPrimitive) -> None:
        draw = ImageDraw.Draw(image)
        if isinstance(primitive, Circle):
            self._draw_circle(draw, primitive)
        elif isinstance(primitive, Line):
            self._draw_line(draw, primitive)
        elif isinstance(primitive, Text):
            self._draw_text(image, primitive)

    @staticmethod
    def metrics(size: float) -> tuple[float, float]:
        return font_metrics(size)

    def _draw_circle(self, draw: ImageDraw.ImageDraw, c: Circle) -> None:
        if c.radius <= 0:
            return
        fill = to_rgba(c.color)
        cx, cy = c.center.x, c.center.y
        if c.paint == PaintStyle.FILL:
            draw.ellipse((cx - c.radius, cy - c.radius, cx + c.radius, cy + c.radius), fill=fill)
            return
        # Pillow strokes inward from the bounding box; the host strokes centered on the path.
        width = _stroke_px(c.stroke_width)
        outer = c.radius + width / 2
        draw.ellipse((cx - outer, cy - outer, cx + outer, cy + outer), outline=fill, width=width)

    def _draw_line(self, draw: ImageDraw.ImageDraw, line: Line) -> None:
        draw.line(
            [(line.start.x, line.start.y), (line.end.x, line.end.y)],
            fill=to_rgba(line.color),
            width=_stroke_px(line.stroke_width),
        )

    def _draw_text(self, image: Image.Image, text: Text) -> None:
        if text.size < 1 or not text.text:
            return
        font = _font(_font_px(text.size))
        fill = to_rgba(text.color)
        x, y = text.position.x, text.position.y
        if text.scale_x == 1.0 and text.letter_spacing == 0.0:
            ImageDraw.Draw(image).text((x, y), text.text, font=font, fill=fill, anchor="ms")
            return

        # Lay the glyphs out on a coverage mask, squeeze it, then stamp the color through it.
        ascent, descent = font.getmetrics()
        gap = text.letter_spacing * text.size
        advances = [font.getlength(ch) for ch in text.text]
        pad = _font_px(text.size)
        strip_w = max(1, math.ceil(sum(advances) + gap * (len(advances) - 1))) + 2 * pad
        mask = Image.new("L", (strip_w, ascent + descent), 0)
        draw = ImageDraw.Draw(mask)
        cursor = float(pad)
        for ch, advance in zip(text.text, advances):
            draw.text((cursor, ascent), ch, font=font, fill=255, anchor="ls")
            cursor += advance + gap

        scaled_w = max(1, round(strip_w * text.scale_x))
        mask = mask.resize((scaled_w, mask.height), Image.Resampling.BICUBIC)
        left = round(x - scaled_w / 2)
        top = round(y - ascent)
        image.paste(fill, (left, top, left + scaled_w, top + mask.height), mask)


def png_bytes(image: Image.Image) -> bytes:
    buf = BytesIO()
    image.save(buf, format="PNG")
    return buf.getvalue()


def preview_data_url(image: Image.Image) -> str:
    b64 = base64.b64encode(png_bytes(image)).decode("ascii")
    return f"data:image/png;base64,{b64}"
