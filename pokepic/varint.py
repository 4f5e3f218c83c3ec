"""
Run-length codeword used by run packets.

A run length n >= 1 is stored as two k-bit fields, where k is one less than
the bit length of n + 1:

    L = 2**k - 2     k bits, (k - 1) ones followed by a zero
    V = n + 1 - 2**k k bits, n + 1 with its leading 1 removed

The decoder reads ones up to and including the first zero (that is L, and
its length gives k), then k more bits (V), and returns L + V + 1.

    n = 45  ->  n + 1 = 101110  ->  L = 11110, V = 01110  ->  1111001110
"""

from .bitstream import BitCursor
from .errors import CursorExhausted, MalformedVarint


def encode(n: int) -> str:
    """
    Encode a run length as a bitstring.

    Args:
        n: Run length, at least 1

    Returns:
        A string of '0'/'1' characters, 2k long
    """
    if n < 1:
        raise ValueError(f"Run length must be at least 1, got {n}")

    x = n + 1
    k = x.bit_length() - 1
    v = x - (1 << k)
    l = (1 << k) - 2
    return format(l, f"0{k}b") + format(v, f"0{k}b")


def encoded_length(n: int) -> int:
    """Number of bits encode(n) produces."""
    if n < 1:
        raise ValueError(f"Run length must be at least 1, got {n}")
    return 2 * ((n + 1).bit_length() - 1)


def decode(cursor: BitCursor) -> int:
    """
    Decode one run length, consuming exactly its 2k bits.

    Raises:
        MalformedVarint: If the input ends inside the prefix or residual
    """
    start = cursor.position
    k = 1
    try:
        while cursor.read_bit():
            k += 1
        residual = cursor.read_bits(k)
    except CursorExhausted as e:
        raise MalformedVarint(f"Run length codeword at bit {start} is truncated: {e}") from e

    prefix = (1 << k) - 2
    return prefix + residual + 1
