"""
Packet stream decoding for one compressed bitplane.

A bitplane is stored as 2-bit pairs split into packets that strictly
alternate between two kinds, so only the first packet's kind is stored:

- run packets: a run-length codeword n, expanding to n "00" pairs
- literal packets: raw non-zero pairs, ended by the first "00" pair read

The "00" that ends a literal packet is consumed and is not plane data. The
next run packet's codeword begins at the bit right after it.
"""

import enum
import logging
from dataclasses import dataclass
from typing import Iterator, List, Optional, Tuple

from . import varint
from .bitstream import BitCursor

logger = logging.getLogger(__name__)

ZERO_PAIR = 0b00


class PacketKind(enum.Enum):
    RUN = "run"
    LITERAL = "literal"


class PacketState(enum.Enum):
    """What the stream expects to read next."""

    AWAITING_RUN = PacketKind.RUN
    AWAITING_LITERAL = PacketKind.LITERAL


@dataclass(frozen=True)
class Packet:
    kind: PacketKind
    pairs: Tuple[int, ...]

    def __len__(self) -> int:
        return len(self.pairs)


def initial_state(starts_with_run: bool) -> PacketState:
    return PacketState.AWAITING_RUN if starts_with_run else PacketState.AWAITING_LITERAL


def next_state(state: PacketState) -> PacketState:
    """Packets alternate, so every packet flips the state."""
    if state is PacketState.AWAITING_RUN:
        return PacketState.AWAITING_LITERAL
    return PacketState.AWAITING_RUN


def read_run_packet(cursor: BitCursor, limit: Optional[int] = None) -> Packet:
    """
    Read one run codeword and expand it into "00" pairs.

    The codeword is always consumed whole. When limit is given, at most
    limit pairs are kept, since the rest would overshoot the plane.
    """
    n = varint.decode(cursor)
    if limit is not None and n > limit:
        logger.debug(
            f"Run of {n} pairs ({varint.encoded_length(n)} bits) truncated to {limit}"
        )
        n = limit
    return Packet(PacketKind.RUN, (ZERO_PAIR,) * n)


def read_literal_packet(cursor: BitCursor, limit: Optional[int] = None) -> Packet:
    """
    Read pairs until a "00" pair, which is consumed but not kept.

    A literal packet may be empty when its first pair is "00". When limit
    is given, reading also stops once limit pairs are held: the plane is
    full and no terminator follows in the stream.
    """
    pairs = []
    while limit is None or len(pairs) < limit:
        pair = cursor.read_pair()
        if pair == ZERO_PAIR:
            break
        pairs.append(pair)
    return Packet(PacketKind.LITERAL, tuple(pairs))


def read_packet(cursor: BitCursor, state: PacketState, limit: Optional[int] = None) -> Packet:
    if state is PacketState.AWAITING_RUN:
        return read_run_packet(cursor, limit)
    return read_literal_packet(cursor, limit)


def iter_packets(
    cursor: BitCursor, starts_with_run: bool, limit: Optional[int] = None
) -> Iterator[Packet]:
    """
    Yield packets in stream order.

    With limit, stop once limit pairs have been yielded; the packet that
    reaches it is cut to fit. Without limit the packets never end and each
    run holds every pair its codeword names, so leave limit out only for
    input known to be short.
    """
    state = initial_state(starts_with_run)
    produced = 0
    while limit is None or produced < limit:
        remaining = None if limit is None else limit - produced
        packet = read_packet(cursor, state, remaining)
        produced += len(packet)
        yield packet
        state = next_state(state)


def decode_plane(cursor: BitCursor, total_pairs: int, starts_with_run: bool) -> List[int]:
    """
    Decode one bitplane's pairs.

    Args:
        cursor: Cursor positioned at the plane's first packet
        total_pairs: Number of pairs the plane holds
        starts_with_run: Whether the first packet is a run packet

    Returns:
        Exactly total_pairs pair values (0-3); the last packet is
        truncated if it overshoots

    Raises:
        CursorExhausted: If the input ends before the plane is complete
    """
    if total_pairs < 0:
        raise ValueError(f"Pair count must not be negative, got {total_pairs}")

    pairs: List[int] = []
    start = cursor.position
    packet_count = 0
    for packet in iter_packets(cursor, starts_with_run, limit=total_pairs):
        pairs.extend(packet.pairs)
        packet_count += 1

    logger.debug(
        f"Decoded {total_pairs} pairs from {packet_count} packets "
        f"({cursor.position - start} bits)"
    )
    return pairs


def pairs_to_bits(pairs: List[int]) -> List[int]:
    """Flatten pairs into plane bits in stream order."""
    bits = []
    for pair in pairs:
        bits.append((pair >> 1) & 1)
        bits.append(pair & 1)
    return bits
