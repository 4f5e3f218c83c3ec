#!/usr/bin/env python3
"""
Battle Sprite Export

This script decodes one compressed battle sprite from a ROM image and
saves it as a PNG (or prints it as text).

The sprite's byte offset must be known; looking sprites up by dex number
is left to the caller.

Usage:
    pokepic-export pokered.gbc --offset 0x34000 --output bulbasaur.png
    pokepic-export pokered.gbc --offset 0x34000 --placement battle --text
"""

import argparse
import logging
import sys

from .bitstream import BitCursor
from .errors import DecodeError
from .render import to_glyphs, to_image
from .sprite import SpriteDecoder
from .tiles import Placement
from .utils.logger import DEFAULT_LOG_DIR, log_export_end, log_export_start, setup_logger


def build_parser():
    parser = argparse.ArgumentParser(
        description="Decode a compressed battle sprite from a ROM image"
    )
    parser.add_argument("rom", help="Path to the ROM image")
    parser.add_argument(
        "--offset",
        type=lambda value: int(value, 0),
        default=0,
        help="Byte offset of the sprite (decimal or 0x-prefixed hex)",
    )
    parser.add_argument("--output", "-o", default="sprite.png", help="PNG file to write")
    parser.add_argument(
        "--placement",
        choices=[p.value for p in Placement],
        default=Placement.TOP_LEFT.value,
        help="Where to place sprites smaller than 7x7 tiles",
    )
    parser.add_argument(
        "--mode-filters",
        action="store_true",
        help="Apply the encoding mode's delta/XOR filters",
    )
    parser.add_argument("--scale", type=int, default=1, help="Upscaling factor for the PNG")
    parser.add_argument(
        "--transparent", action="store_true", help="Make white pixels transparent"
    )
    parser.add_argument("--text", action="store_true", help="Print glyphs instead of writing a PNG")
    parser.add_argument("--log-level", default="INFO", help="Console log level")
    parser.add_argument("--log-dir", default=DEFAULT_LOG_DIR, help="Directory for pokepic.log")
    return parser


def export_sprite(args, logger):
    """
    Decode the sprite named by args and write it out.

    Returns:
        True on success, False if the ROM could not be read or decoded
    """
    try:
        with open(args.rom, "rb") as f:
            rom = f.read()
    except OSError as e:
        logger.error(f"Could not read ROM {args.rom}: {e}")
        return False

    decoder = SpriteDecoder(
        placement=Placement(args.placement),
        apply_mode_filters=args.mode_filters,
    )
    try:
        sprite = decoder.decode(BitCursor(rom, args.offset))
    except (DecodeError, ValueError) as e:
        logger.error(f"Failed to decode sprite at offset 0x{args.offset:X}: {e}")
        return False

    header = sprite.header
    logger.info(
        f"Decoded {header.tile_width}x{header.tile_height} tile sprite "
        f"(mode {header.encoding_mode.value:02b}, {sprite.bits_consumed} bits)"
    )

    if args.text:
        print(to_glyphs(sprite.canvas))
        return True

    try:
        img = to_image(sprite.canvas, scale=args.scale, transparent_white=args.transparent)
        img.save(args.output)
    except (OSError, ValueError) as e:
        logger.error(f"Could not write {args.output}: {e}")
        return False

    logger.info(f"Saved sprite to {args.output}")
    return True


def main(argv=None):
    args = build_parser().parse_args(argv)
    level = getattr(logging, args.log_level.upper(), logging.INFO)
    logger = setup_logger("pokepic", level, log_dir=args.log_dir)

    log_export_start(logger, args.rom, args.offset, args.placement)
    success = export_sprite(args, logger)
    output = None if args.text else args.output
    log_export_end(logger, args.rom, args.offset, success, output)
    return 0 if success else 1


if __name__ == "__main__":
    sys.exit(main())
