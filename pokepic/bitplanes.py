"""
Bitplane combination and encoding-mode filters.

Each pixel is a 2-bit color index built from one bit of each bitplane:
the low plane gives bit 0 and the high plane gives bit 1.

    low  high  value
     0    0      0   white
     1    0      1   light gray
     0    1      2   dark gray
     1    1      3   black
"""

import enum
import logging
from typing import List, Sequence, Tuple

from .errors import InvalidEncodingMode, PlaneLengthMismatch
from .tiles import rows_to_tiles, tiles_to_rows

logger = logging.getLogger(__name__)


class PlaneOrder(enum.Enum):
    A_IS_LOW = 0
    A_IS_HIGH = 1


class EncodingMode(enum.IntEnum):
    """The 2-bit encoding mode stored between the two planes"""

    MODE_1 = 0b01
    MODE_2 = 0b10
    MODE_3 = 0b11

    @classmethod
    def from_bits(cls, value: int) -> "EncodingMode":
        try:
            return cls(value)
        except ValueError:
            raise InvalidEncodingMode(
                f"Encoding mode must be one of 01, 10, 11; got {value:02b}"
            ) from None


def split_order(plane_a: Sequence[int], plane_b: Sequence[int], order: PlaneOrder):
    """Return (low, high) for two planes given their order."""
    if order is PlaneOrder.A_IS_LOW:
        return plane_a, plane_b
    return plane_b, plane_a


def combine(plane_a: Sequence[int], plane_b: Sequence[int], order: PlaneOrder) -> List[int]:
    """
    Merge two bitplanes into 2-bit pixel values.

    Args:
        plane_a: Bits (0/1) of the first plane
        plane_b: Bits (0/1) of the second plane
        order: Which of the two planes supplies the low bit

    Returns:
        One pixel value (0-3) per bit position

    Raises:
        PlaneLengthMismatch: If the planes differ in length
    """
    if len(plane_a) != len(plane_b):
        raise PlaneLengthMismatch(
            f"Bitplanes differ in length: {len(plane_a)} != {len(plane_b)}"
        )

    low, high = split_order(plane_a, plane_b, order)
    return [(h << 1) | l for l, h in zip(low, high)]


def delta_decode(plane: Sequence[int], tile_width: int, tile_height: int) -> List[int]:
    """
    Undo the row-wise delta filter on one plane.

    Each pixel row of the sprite starts at 0; a 1 bit flips the running
    value and every position takes the running value.
    """
    rows = tiles_to_rows(plane, tile_width, tile_height)
    decoded = []
    for row in rows:
        current = 0
        out = []
        for bit in row:
            current ^= bit
            out.append(current)
        decoded.append(out)
    return rows_to_tiles(decoded, tile_width, tile_height)


def xor_planes(plane: Sequence[int], other: Sequence[int]) -> List[int]:
    if len(plane) != len(other):
        raise PlaneLengthMismatch(f"Bitplanes differ in length: {len(plane)} != {len(other)}")
    return [a ^ b for a, b in zip(plane, other)]


def apply_mode(
    low: Sequence[int],
    high: Sequence[int],
    mode: EncodingMode,
    tile_width: int,
    tile_height: int,
) -> Tuple[List[int], List[int]]:
    """
    Apply the encoding mode's filters to a pair of decoded planes.

    - MODE_1: delta-decode both planes
    - MODE_2: delta-decode the high plane, then low ^= high
    - MODE_3: delta-decode both planes, then low ^= high

    Returns:
        The filtered (low, high) planes
    """
    logger.debug(f"Applying encoding mode {mode.value:02b} to a {tile_width}x{tile_height} sprite")

    high = delta_decode(high, tile_width, tile_height)
    if mode is EncodingMode.MODE_2:
        return xor_planes(low, high), high

    low = delta_decode(low, tile_width, tile_height)
    if mode is EncodingMode.MODE_3:
        low = xor_planes(low, high)
    return low, high
