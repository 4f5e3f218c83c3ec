"""
Rendering helpers for decoded sprite canvases.

These sit outside the codec: they take the 2D list of pixel values that
the decoder returns and turn it into a Pillow image or a block of text.
"""

from typing import List, Sequence

from PIL import Image

from .config import GRAY_PALETTE, PIXEL_GLYPHS, WHITE


def _check_rows(canvas: Sequence[Sequence[int]]) -> int:
    if not canvas:
        raise ValueError("Canvas has no rows")
    width = len(canvas[0])
    for y, row in enumerate(canvas):
        if len(row) != width:
            raise ValueError(f"Canvas row {y} has {len(row)} pixels, expected {width}")
    return width


def to_image(canvas: Sequence[Sequence[int]], scale: int = 1, transparent_white: bool = False) -> Image.Image:
    """
    Convert a canvas into a Pillow image.

    Args:
        canvas: Rows of pixel values (0-3)
        scale: Integer upscaling factor (nearest neighbour)
        transparent_white: Return an RGBA image with white pixels transparent

    Returns:
        A palette ("P") image, or an "RGBA" image when transparent_white is set
    """
    if scale < 1:
        raise ValueError(f"Scale must be at least 1, got {scale}")

    width = _check_rows(canvas)
    height = len(canvas)

    values = [value for row in canvas for value in row]

    if transparent_white:
        img = Image.new("RGBA", (width, height))
        img.putdata([
            GRAY_PALETTE[value] + ((0,) if value == WHITE else (255,))
            for value in values
        ])
    else:
        img = Image.new("P", (width, height))
        palette: List[int] = []
        for value in sorted(GRAY_PALETTE):
            palette.extend(GRAY_PALETTE[value])
        img.putpalette(palette)
        img.putdata(values)

    if scale > 1:
        img = img.resize((width * scale, height * scale), Image.NEAREST)

    return img


def to_glyphs(canvas: Sequence[Sequence[int]]) -> str:
    """Render a canvas as lines of glyphs, one glyph per pixel."""
    _check_rows(canvas)
    return "\n".join("".join(PIXEL_GLYPHS[value] for value in row) for row in canvas)
