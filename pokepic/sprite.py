"""
Battle sprite decoder.

Reads one compressed sprite from a bit cursor:

    dimensions       8 bits   high nibble = height, low nibble = width (tiles)
    plane order      1 bit    0: primary plane is the low bit, 1: the high bit
    primary start    1 bit    0: first packet is a run, 1: a literal
    primary plane    ...      packets for width * height * 64 bits
    encoding mode    2 bits   01, 10 or 11
    secondary start  1 bit
    secondary plane  ...

There is no terminator; plane lengths follow from the dimensions.
"""

import logging
from dataclasses import dataclass
from typing import List, Union

from .bitplanes import EncodingMode, PlaneOrder, apply_mode, combine, split_order
from .bitstream import BitCursor
from .config import PAIRS_PER_TILE
from .errors import InvalidDimensions
from .packets import decode_plane, pairs_to_bits
from .tiles import PlacementRule, assemble
from .utils.validation import validate_dimensions, validate_or_raise

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SpriteHeader:
    tile_width: int
    tile_height: int
    primary_is_first: bool
    encoding_mode: EncodingMode

    @property
    def plane_order(self) -> PlaneOrder:
        """Order of (primary, secondary) when combining planes."""
        return PlaneOrder.A_IS_HIGH if self.primary_is_first else PlaneOrder.A_IS_LOW

    @property
    def pair_count(self) -> int:
        return self.tile_width * self.tile_height * PAIRS_PER_TILE


@dataclass(frozen=True)
class DecodedSprite:
    header: SpriteHeader
    pixels: List[int]  # width x height tiles, tile order
    canvas: List[List[int]]  # 56 rows of 56 pixels
    bits_consumed: int


def read_dimensions(cursor: BitCursor):
    """
    Read the dimension byte.

    Returns:
        A (tile_width, tile_height) tuple

    Raises:
        InvalidDimensions: If either nibble is outside 1..7
    """
    value = cursor.read_byte()
    tile_height, tile_width = value >> 4, value & 0x0F
    validate_or_raise(
        validate_dimensions(tile_width, tile_height),
        f"dimension byte 0x{value:02X}",
        InvalidDimensions,
    )
    return tile_width, tile_height


class SpriteDecoder:
    """
    Decode compressed battle sprites into 56x56 canvases.

    The decoder keeps only its settings, so one instance can decode any
    number of sprites, from any thread.
    """

    def __init__(self, placement: PlacementRule = None, apply_mode_filters: bool = False):
        """
        Args:
            placement: Where to put sprites smaller than 7x7 (see
                pokepic.tiles.resolve_offset); top-left by default
            apply_mode_filters: Run the encoding mode's delta/XOR filters
                on the planes before combining them
        """
        self.placement = placement
        self.apply_mode_filters = apply_mode_filters

    def decode(self, cursor: BitCursor) -> DecodedSprite:
        """
        Decode one sprite starting at the cursor's position.

        Raises:
            DecodeError: On any malformed input; nothing partial is returned
        """
        start = cursor.position

        tile_width, tile_height = read_dimensions(cursor)
        primary_is_first = bool(cursor.read_bit())
        pair_count = tile_width * tile_height * PAIRS_PER_TILE

        primary_starts_with_run = cursor.read_bit() == 0
        primary = pairs_to_bits(decode_plane(cursor, pair_count, primary_starts_with_run))

        mode = EncodingMode.from_bits(cursor.read_bits(2))

        secondary_starts_with_run = cursor.read_bit() == 0
        secondary = pairs_to_bits(decode_plane(cursor, pair_count, secondary_starts_with_run))

        header = SpriteHeader(tile_width, tile_height, primary_is_first, mode)
        logger.debug(
            f"Sprite header: {tile_width}x{tile_height} tiles, "
            f"primary_is_first={primary_is_first}, mode={mode.value:02b}"
        )

        if self.apply_mode_filters:
            low, high = split_order(primary, secondary, header.plane_order)
            low, high = apply_mode(low, high, mode, tile_width, tile_height)
            pixels = combine(low, high, PlaneOrder.A_IS_LOW)
        else:
            pixels = combine(primary, secondary, header.plane_order)

        canvas = assemble(pixels, tile_width, tile_height, self.placement)
        bits_consumed = cursor.position - start
        logger.debug(f"Decoded sprite from {bits_consumed} bits")
        return DecodedSprite(header, pixels, canvas, bits_consumed)


def decode_sprite(
    source: Union[BitCursor, bytes, bytearray],
    offset: int = 0,
    placement: PlacementRule = None,
    apply_mode_filters: bool = False,
) -> List[List[int]]:
    """
    Decode one sprite and return its 56x56 canvas.

    Args:
        source: A BitCursor, or bytes holding the sprite at offset
        offset: Byte offset of the sprite when source is bytes
        placement: Placement rule for sprites smaller than 7x7
        apply_mode_filters: Run the encoding mode's delta/XOR filters

    Returns:
        56 rows of 56 pixel values (0-3)
    """
    if isinstance(source, BitCursor):
        cursor = source
    else:
        cursor = BitCursor(bytes(source), offset)

    decoder = SpriteDecoder(placement=placement, apply_mode_filters=apply_mode_filters)
    return decoder.decode(cursor).canvas
