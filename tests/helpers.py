"""
Bitstring builders for synthetic sprite fixtures
"""

from pokepic.varint import encode

ONE_TILE_HEADER = "0001_0001"  # height 1, width 1


def bits_to_bytes(bits):
    """Pack a '0'/'1' string into bytes, zero-padding the last byte"""
    bits = bits.replace("_", "").replace(" ", "")
    bits += "0" * (-len(bits) % 8)
    return bytes(int(bits[i:i + 8], 2) for i in range(0, len(bits), 8))


def sprite_bits(header, order, primary, mode, secondary):
    """
    Lay out a sprite stream as a bitstring.

    primary and secondary include their initial packet-type bit.
    """
    return "".join([header, order, primary, mode, secondary]).replace("_", "")


def run_plane(n):
    """A plane that is one run packet of n zero pairs"""
    return "0" + encode(n)
