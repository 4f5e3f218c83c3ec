"""
Utilities package for pokepic: logging setup and validators.
"""

from .logger import setup_logger, log_export_start, log_export_end
from .validation import validate_dimensions, validate_placement

__all__ = [
    'setup_logger',
    'log_export_start',
    'log_export_end',
    'validate_dimensions',
    'validate_placement',
]
