"""
Shared logging configuration for pokepic.

This module provides a consistent logging setup for the command-line
exporter, with both file and console output. Library modules only call
logging.getLogger(__name__) and leave handler setup to this module.
"""

import logging
import os
from datetime import datetime

DEFAULT_LOG_DIR = "logs"
LOG_FILE_NAME = "pokepic.log"


def setup_logger(name, log_level=logging.INFO, log_dir=DEFAULT_LOG_DIR):
    """
    Set up a logger with file and console handlers.

    Args:
        name: The name of the logger (typically "pokepic" or __name__)
        log_level: The console logging level (default: logging.INFO)
        log_dir: Directory that receives pokepic.log (default: ./logs)

    Returns:
        logging.Logger: Configured logger instance
    """
    logger = logging.getLogger(name)
    logger.setLevel(logging.DEBUG)

    # Avoid adding handlers multiple times if logger already exists
    if logger.handlers:
        return logger

    os.makedirs(log_dir, exist_ok=True)

    detailed_formatter = logging.Formatter(
        '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )
    console_formatter = logging.Formatter(
        '%(levelname)s - %(message)s'
    )

    # File handler - keeps everything down to DEBUG
    log_file = os.path.join(log_dir, LOG_FILE_NAME)
    file_handler = logging.FileHandler(log_file, mode='a', encoding='utf-8')
    file_handler.setLevel(logging.DEBUG)
    file_handler.setFormatter(detailed_formatter)

    console_handler = logging.StreamHandler()
    console_handler.setLevel(log_level)
    console_handler.setFormatter(console_formatter)

    logger.addHandler(file_handler)
    logger.addHandler(console_handler)

    return logger


def _timestamp():
    return datetime.now().strftime('%Y-%m-%d %H:%M:%S')


def log_export_start(logger, rom_path, offset, placement=None):
    """
    Log the start of a sprite export.

    Args:
        logger: Logger instance
        rom_path: ROM image the sprite is read from
        offset: Byte offset of the sprite inside the ROM
        placement: Placement name, if the canvas uses one
    """
    logger.info("=" * 80)
    logger.info(f"Exporting sprite at 0x{offset:X} from {rom_path}")
    if placement:
        logger.info(f"Placement: {placement}")
    logger.info(f"Timestamp: {_timestamp()}")
    logger.info("=" * 80)


def log_export_end(logger, rom_path, offset, success=True, output=None):
    """
    Log the end of a sprite export.

    Args:
        logger: Logger instance
        rom_path: ROM image the sprite was read from
        offset: Byte offset of the sprite inside the ROM
        success: Whether the sprite was decoded and written
        output: Where the sprite went (a file path, or None for the console)
    """
    logger.info("=" * 80)
    if success:
        logger.info(f"Sprite 0x{offset:X} of {rom_path} exported to {output or 'stdout'}")
    else:
        logger.info(f"Sprite 0x{offset:X} of {rom_path} FAILED")
    logger.info(f"Timestamp: {_timestamp()}")
    logger.info("=" * 80)
