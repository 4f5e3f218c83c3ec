"""
Exceptions raised while decoding a compressed sprite.

Every error is fatal to the decode in progress: the codec is a pure
transform, so retrying the same input raises the same error again.
"""


class DecodeError(Exception):
    """Base class for all sprite decoding errors"""

    pass


class CursorExhausted(DecodeError):
    """A read went past the end of the available bits"""

    pass


class MalformedVarint(CursorExhausted):
    """The bits ran out inside a run-length prefix or residual"""

    pass


class PlaneLengthMismatch(DecodeError):
    """Two bitplanes, or a pixel block and its dimensions, disagree in length"""

    pass


class InvalidDimensions(DecodeError):
    """Tile width or height is outside 1..7"""

    pass


class InvalidEncodingMode(DecodeError):
    """The 2-bit encoding mode field holds 00"""

    pass


class InvalidPlacement(DecodeError):
    """A placement offset pushes the sprite outside the canvas"""

    pass
