"""
Tile layout utilities for decoded sprites.

This module maps the decoder's tile-ordered pixel stream onto pixel rows
and places the sprite's width x height block of tiles inside the fixed
7x7 tile (56x56 pixel) battle canvas.

Pixel streams are ordered tile by tile, tiles in row-major order across the
sprite, and pixels in row-major order inside each 8x8 tile.
"""

import collections.abc
import enum
import logging
from typing import Callable, List, Mapping, Sequence, Tuple, Union

from .config import (
    CANVAS_SIZE,
    PIXELS_PER_TILE,
    TILE_SIZE,
    WHITE,
    get_battle_offset,
    get_centered_offset,
)
from .errors import InvalidDimensions, InvalidPlacement, PlaneLengthMismatch
from .utils.validation import validate_dimensions, validate_or_raise, validate_placement

logger = logging.getLogger(__name__)

Offset = Tuple[int, int]


class Placement(enum.Enum):
    """Built-in rules for placing a sprite smaller than 7x7 in the canvas"""

    TOP_LEFT = "top-left"
    CENTERED = "centered"
    BATTLE = "battle"  # bottom edge, horizontally centered

    def offset(self, tile_width: int, tile_height: int) -> Offset:
        if self is Placement.CENTERED:
            return get_centered_offset(tile_width, tile_height)
        if self is Placement.BATTLE:
            return get_battle_offset(tile_width, tile_height)
        return 0, 0


PlacementRule = Union[
    None,
    Placement,
    Mapping[Tuple[int, int], Offset],
    Callable[[int, int], Offset],
]


def resolve_offset(placement: PlacementRule, tile_width: int, tile_height: int) -> Offset:
    """
    Turn a placement rule into a (column, row) tile offset.

    Args:
        placement: None (top-left), a Placement, a mapping keyed by
            (tile_width, tile_height), or a callable taking
            (tile_width, tile_height)
        tile_width: Sprite width in tiles
        tile_height: Sprite height in tiles

    Returns:
        The (column, row) offset of the sprite's top-left tile

    Raises:
        InvalidPlacement: If the rule has no entry for the size or the
            offset does not fit the canvas
    """
    if placement is None:
        offset = (0, 0)
    elif isinstance(placement, Placement):
        offset = placement.offset(tile_width, tile_height)
    elif isinstance(placement, collections.abc.Mapping):
        try:
            offset = placement[(tile_width, tile_height)]
        except KeyError:
            raise InvalidPlacement(
                f"Placement table has no entry for a {tile_width}x{tile_height} sprite"
            ) from None
    elif callable(placement):
        offset = placement(tile_width, tile_height)
    else:
        raise TypeError(f"Unsupported placement rule: {placement!r}")

    validate_or_raise(
        validate_placement(offset, tile_width, tile_height), "placement", InvalidPlacement
    )
    return tuple(offset)


def check_pixel_count(pixels: Sequence[int], tile_width: int, tile_height: int) -> None:
    validate_or_raise(validate_dimensions(tile_width, tile_height), "dimensions", InvalidDimensions)

    expected = tile_width * tile_height * PIXELS_PER_TILE
    if len(pixels) != expected:
        raise PlaneLengthMismatch(
            f"Expected {expected} pixels for a {tile_width}x{tile_height} sprite, "
            f"got {len(pixels)}"
        )


def split_tiles(pixels: Sequence[int]) -> List[List[List[int]]]:
    """
    Split a tile-ordered pixel stream into 8x8 tiles.

    Returns:
        A list of tiles, each a 2D list (8x8) of pixel values
    """
    if len(pixels) % PIXELS_PER_TILE:
        raise PlaneLengthMismatch(
            f"{len(pixels)} pixels is not a whole number of {TILE_SIZE}x{TILE_SIZE} tiles"
        )

    tiles = []
    for start in range(0, len(pixels), PIXELS_PER_TILE):
        tile = pixels[start:start + PIXELS_PER_TILE]
        tiles.append([list(tile[y * TILE_SIZE:(y + 1) * TILE_SIZE]) for y in range(TILE_SIZE)])
    return tiles


def tiles_to_rows(pixels: Sequence[int], tile_width: int, tile_height: int) -> List[List[int]]:
    """
    Rearrange a tile-ordered pixel stream into pixel rows.

    Returns:
        tile_height * 8 rows, each tile_width * 8 pixels wide
    """
    check_pixel_count(pixels, tile_width, tile_height)

    row_width = tile_width * TILE_SIZE
    rows = [[WHITE] * row_width for _ in range(tile_height * TILE_SIZE)]
    for index, tile in enumerate(split_tiles(pixels)):
        tile_row, tile_col = divmod(index, tile_width)
        left = tile_col * TILE_SIZE
        for y, line in enumerate(tile):
            rows[tile_row * TILE_SIZE + y][left:left + TILE_SIZE] = line
    return rows


def rows_to_tiles(rows: Sequence[Sequence[int]], tile_width: int, tile_height: int) -> List[int]:
    """Inverse of tiles_to_rows: flatten pixel rows back into tile order."""
    pixels = []
    for tile_row in range(tile_height):
        for tile_col in range(tile_width):
            for y in range(TILE_SIZE):
                row = rows[tile_row * TILE_SIZE + y]
                start = tile_col * TILE_SIZE
                pixels.extend(row[start:start + TILE_SIZE])
    return pixels


def blank_canvas() -> List[List[int]]:
    return [[WHITE] * CANVAS_SIZE for _ in range(CANVAS_SIZE)]


def assemble(
    pixels: Sequence[int],
    tile_width: int,
    tile_height: int,
    placement: PlacementRule = None,
) -> List[List[int]]:
    """
    Place a decoded sprite inside the 56x56 canvas.

    Args:
        pixels: tile_width * tile_height * 64 pixel values in tile order
        tile_width: Sprite width in tiles (1-7)
        tile_height: Sprite height in tiles (1-7)
        placement: Placement rule (see resolve_offset); top-left by default

    Returns:
        56 rows of 56 pixel values; tiles outside the sprite are white

    Raises:
        InvalidDimensions: If a dimension is outside 1..7
        PlaneLengthMismatch: If the pixel count does not match the dimensions
        InvalidPlacement: If the placement pushes the sprite off the canvas
    """
    rows = tiles_to_rows(pixels, tile_width, tile_height)
    column, row = resolve_offset(placement, tile_width, tile_height)
    logger.debug(f"Placing {tile_width}x{tile_height} sprite at tile ({column}, {row})")

    canvas = blank_canvas()
    left = column * TILE_SIZE
    top = row * TILE_SIZE
    for y, sprite_row in enumerate(rows):
        canvas[top + y][left:left + len(sprite_row)] = sprite_row
    return canvas
