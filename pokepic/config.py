"""
Configuration for the pokepic sprite decoder.

This module contains constants and configuration values shared by the codec,
the tile assembler and the rendering helpers.
"""

# Tile geometry
TILE_SIZE = 8  # Tiles are 8x8 pixels
PIXELS_PER_TILE = TILE_SIZE * TILE_SIZE
PAIRS_PER_TILE = PIXELS_PER_TILE // 2  # Each bitplane stores one bit per pixel
MIN_TILES = 1
MAX_TILES = 7  # Largest sprite is 7x7 tiles

# The battle canvas is always 7x7 tiles (56x56 pixels)
CANVAS_TILES = 7
CANVAS_SIZE = CANVAS_TILES * TILE_SIZE

# Pixel values (low bit | high bit << 1)
WHITE = 0
LIGHT_GRAY = 1
DARK_GRAY = 2
BLACK = 3

# RGB colors used when rendering pixel values
GRAY_PALETTE = {
    WHITE: (255, 255, 255),
    LIGHT_GRAY: (170, 170, 170),
    DARK_GRAY: (85, 85, 85),
    BLACK: (0, 0, 0),
}

# Text glyphs used when rendering pixel values as text
PIXEL_GLYPHS = {
    WHITE: "□",
    LIGHT_GRAY: "▨",
    DARK_GRAY: "▩",
    BLACK: "■",
}


def get_battle_offset(tile_width, tile_height):
    """
    Get the tile offset the game uses to place a sprite in the battle canvas.

    Sprites sit on the bottom edge of the canvas and are centered
    horizontally, rounding towards the right.

    Args:
        tile_width: Sprite width in tiles
        tile_height: Sprite height in tiles

    Returns:
        A (column, row) tuple of tile offsets
    """
    return (CANVAS_TILES + 1 - tile_width) // 2, CANVAS_TILES - tile_height


def get_centered_offset(tile_width, tile_height):
    """
    Get the tile offset that centers a sprite on both axes, rounding down.

    Args:
        tile_width: Sprite width in tiles
        tile_height: Sprite height in tiles

    Returns:
        A (column, row) tuple of tile offsets
    """
    return (CANVAS_TILES - tile_width) // 2, (CANVAS_TILES - tile_height) // 2
