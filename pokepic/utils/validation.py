"""
Validation utilities for sprite headers and placements.

Each validator returns a list of error messages (empty when validation
passes) so callers can report every problem at once before raising.
"""

import logging
from typing import List, Tuple

from ..config import CANVAS_TILES, MAX_TILES, MIN_TILES

# Configure logging
logger = logging.getLogger(__name__)


def validate_dimensions(tile_width: int, tile_height: int) -> List[str]:
    """
    Validate sprite dimensions in tiles.

    Args:
        tile_width: Sprite width in tiles (required, 1-7)
        tile_height: Sprite height in tiles (required, 1-7)

    Returns:
        List of error messages (empty if validation passes)
    """
    errors = []

    for label, value in (("width", tile_width), ("height", tile_height)):
        if not isinstance(value, int) or isinstance(value, bool):
            errors.append(f"Sprite {label} is not an integer: {value!r}")
        elif value < MIN_TILES or value > MAX_TILES:
            errors.append(
                f"Sprite has invalid {label}: {value} "
                f"(expected {MIN_TILES}-{MAX_TILES} tiles)"
            )

    return errors


def validate_placement(
    offset: Tuple[int, int], tile_width: int, tile_height: int
) -> List[str]:
    """
    Validate that a placement offset keeps the sprite inside the canvas.

    Args:
        offset: (column, row) tile offset of the sprite's top-left tile
        tile_width: Sprite width in tiles
        tile_height: Sprite height in tiles

    Returns:
        List of error messages (empty if validation passes)
    """
    try:
        column, row = offset
    except (TypeError, ValueError):
        return [f"Placement offset is not a (column, row) pair: {offset!r}"]

    errors = []

    if column < 0 or row < 0:
        errors.append(f"Placement offset is negative: ({column}, {row})")
    if column + tile_width > CANVAS_TILES:
        errors.append(
            f"Sprite overflows the canvas horizontally: "
            f"column {column} + width {tile_width} > {CANVAS_TILES}"
        )
    if row + tile_height > CANVAS_TILES:
        errors.append(
            f"Sprite overflows the canvas vertically: "
            f"row {row} + height {tile_height} > {CANVAS_TILES}"
        )

    return errors


def log_validation_errors(errors: List[str], data_type: str) -> None:
    """
    Log validation errors.

    Args:
        errors: List of error messages
        data_type: Type of data being validated (for logging context)
    """
    if errors:
        logger.debug(f"Validation errors for {data_type}:")
        for error in errors:
            logger.debug(f"  - {error}")


def validate_or_raise(errors: List[str], data_type: str, error_cls) -> None:
    """
    Log any validation errors and raise error_cls with all of them joined.

    Args:
        errors: List of error messages from a validator
        data_type: Type of data validated (for logging)
        error_cls: Exception class to raise when errors is non-empty
    """
    if errors:
        log_validation_errors(errors, data_type)
        raise error_cls("; ".join(errors))
