"""
pokepic: decoder for compressed Game Boy monster battle sprites.
"""

from .bitstream import BitCursor
from .bitplanes import EncodingMode, PlaneOrder, combine
from .errors import (
    CursorExhausted,
    DecodeError,
    InvalidDimensions,
    InvalidEncodingMode,
    InvalidPlacement,
    MalformedVarint,
    PlaneLengthMismatch,
)
from .packets import decode_plane
from .sprite import DecodedSprite, SpriteDecoder, SpriteHeader, decode_sprite
from .tiles import Placement, assemble

__version__ = "0.1.0"

__all__ = [
    'BitCursor',
    'CursorExhausted',
    'DecodeError',
    'DecodedSprite',
    'EncodingMode',
    'InvalidDimensions',
    'InvalidEncodingMode',
    'InvalidPlacement',
    'MalformedVarint',
    'Placement',
    'PlaneLengthMismatch',
    'PlaneOrder',
    'SpriteDecoder',
    'SpriteHeader',
    'assemble',
    'combine',
    'decode_plane',
    'decode_sprite',
]
