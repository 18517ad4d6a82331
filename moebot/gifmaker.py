"""Render text as a two-frame GIF that hides the text behind a placeholder."""

from __future__ import annotations

import io
import math
from collections.abc import Callable
from functools import lru_cache

from PIL import Image, ImageDraw, ImageFont

LINE_SPACE = 16
X_BORDER = 30
Y_BORDER = 14
MAX_WIDTH = 500
DEFAULT_TEXT = "Hover to view"
VIEW_DELAY_MS = 1500
# GIF frame delays are stored in 16 bits of hundredths of a second.
HOLD_DELAY_MS = 65535 * 10
FONT_SIZE = 16

_GRAYS = (0x00, 0x33, 0x66, 0x99, 0xCC, 0xFF)
_PALETTE = [level for gray in _GRAYS for level in (gray, gray, gray)]
_BLACK = 0
_WHITE = len(_GRAYS) - 1

Measure = Callable[[str], int]


@lru_cache(maxsize=1)
def _font() -> ImageFont.ImageFont | ImageFont.FreeTypeFont:
    try:
        return ImageFont.load_default(size=FONT_SIZE)
    except TypeError:
        return ImageFont.load_default()


def _measure(text: str) -> int:
    """Width of ``text`` in whole pixels when drawn with the GIF font."""
    return math.ceil(_font().getlength(text.replace("\n", " ")))


def format_line(text: str, measure: Measure) -> list[str]:
    """Wrap one line at spaces so each piece fits inside the image borders."""
    limit = MAX_WIDTH - X_BORDER
    result = [text]
    current = text
    while measure(current) > limit:
        fragments = current.split(" ")
        result.append("")
        # Keep at least one word on each line so wrapping always progresses.
        for i in range(len(fragments) - 2, 0, -1):
            if measure(current) <= limit:
                break
            current = " ".join(fragments[:i])
            result[-2] = current
            result[-1] = " ".join(fragments[i:])
        current = result[-1]
    return result


def format_text_size(text: str, default: str, measure: Measure) -> tuple[str, tuple[int, int]]:
    """Wrap ``text`` and work out the image size needed to show it.

    Returns the wrapped text and the image's ``(width, height)``. Text no
    wider than ``default`` gets an image sized for ``default``.
    """
    if measure(default) >= measure(text):
        return text, (measure(default) + X_BORDER, Y_BORDER + LINE_SPACE)

    lines = [piece for line in text.split("\n") for piece in format_line(line, measure)]
    width = MAX_WIDTH if len(lines) > 1 else measure(text) + X_BORDER
    height = LINE_SPACE * len(lines) + Y_BORDER
    return "\n".join(lines), (width, height)


def _frame(size: tuple[int, int], text: str, background: int, foreground: int) -> Image.Image:
    image = Image.new("P", size, background)
    image.putpalette(_PALETTE)
    draw = ImageDraw.Draw(image)
    font = _font()
    x = X_BORDER // 2
    for i, line in enumerate(text.split("\n")):
        baseline = (i + 1) * LINE_SPACE
        if isinstance(font, ImageFont.FreeTypeFont):
            draw.text((x, baseline), line, fill=foreground, font=font, anchor="ls")
        else:
            draw.text((x, baseline - LINE_SPACE + 4), line, fill=foreground, font=font)
    return image


def make_gif(text: str) -> bytes:
    """Encode a GIF showing a placeholder first and then ``text``."""
    wrapped, size = format_text_size(text, DEFAULT_TEXT, _measure)
    frames = [
        _frame(size, DEFAULT_TEXT, _WHITE, _BLACK),
        _frame(size, wrapped, _BLACK, _WHITE),
    ]
    buffer = io.BytesIO()
    frames[0].save(
        buffer,
        format="GIF",
        save_all=True,
        append_images=frames[1:],
        loop=1,
        duration=[VIEW_DELAY_MS, HOLD_DELAY_MS],
    )
    return buffer.getvalue()