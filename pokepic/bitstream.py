"""
Sequential bit cursor over compressed sprite bytes.

Bits are read MSB-first within each byte: the first bit read from a byte is
bit 7. The cursor only moves forward and never rewinds during a decode.
"""

from typing import Optional

from .errors import CursorExhausted


class BitCursor:
    """Forward-only bit reader starting at an arbitrary byte offset."""

    def __init__(self, data: bytes, offset: int = 0, bit_length: Optional[int] = None) -> None:
        """
        Initialize a bit cursor.

        Args:
            data: Bytes to read from (e.g. a whole ROM image)
            offset: Byte offset of the first bit to read
            bit_length: Number of readable bits from offset (defaults to the
                rest of data)
        """
        if offset < 0 or offset > len(data):
            raise ValueError(f"Offset {offset} is outside data of length {len(data)}")

        available = (len(data) - offset) * 8
        if bit_length is None:
            bit_length = available
        elif bit_length < 0 or bit_length > available:
            raise ValueError(f"Bit length {bit_length} exceeds {available} available bits")

        self._data = data
        self._start = offset * 8
        self._total_bits = bit_length
        self.position = 0

    @classmethod
    def from_bitstring(cls, bits: str) -> "BitCursor":
        """
        Build a cursor over a string of '0'/'1' characters.

        Underscores and spaces are ignored so fixtures can be grouped.
        """
        bits = bits.replace("_", "").replace(" ", "")
        if any(ch not in "01" for ch in bits):
            raise ValueError(f"Not a bitstring: {bits!r}")

        padded = bits + "0" * (-len(bits) % 8)
        data = bytes(int(padded[i:i + 8], 2) for i in range(0, len(padded), 8))
        return cls(data, bit_length=len(bits))

    @property
    def remaining(self) -> int:
        """Number of bits remaining to read."""
        return self._total_bits - self.position

    def read_bit(self) -> int:
        """
        Read and consume a single bit.

        Raises:
            CursorExhausted: If no more bits are available
        """
        if self.position >= self._total_bits:
            raise CursorExhausted(f"Read past end of input at bit {self.position}")

        absolute = self._start + self.position
        self.position += 1
        return (self._data[absolute >> 3] >> (7 - (absolute & 7))) & 1

    def read_bits(self, num_bits: int) -> int:
        """
        Read and consume num_bits bits as an unsigned integer (MSB-first).

        Raises:
            CursorExhausted: If fewer than num_bits bits are available
        """
        if num_bits > self.remaining:
            raise CursorExhausted(
                f"Not enough bits at bit {self.position}: need {num_bits}, have {self.remaining}"
            )

        if num_bits <= 0:
            return 0

        absolute = self._start + self.position
        first = absolute >> 3
        last = (absolute + num_bits + 7) >> 3
        chunk = int.from_bytes(self._data[first:last], "big")
        self.position += num_bits
        # Drop the bits after the field, then the bits before it
        chunk >>= (last << 3) - absolute - num_bits
        return chunk & ((1 << num_bits) - 1)

    def read_pair(self) -> int:
        """Read one 2-bit pair; the first bit read is the high bit."""
        return self.read_bits(2)

    def read_byte(self) -> int:
        return self.read_bits(8)

    def __repr__(self) -> str:
        return f"BitCursor(position={self.position}, remaining={self.remaining})"
