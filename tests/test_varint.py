"""
Tests for the run-length codeword
"""

import time

import pytest

from pokepic.bitstream import BitCursor
from pokepic.errors import CursorExhausted, MalformedVarint
from pokepic.varint import decode, encode, encoded_length


class TestEncode:
    """Known encodings"""

    @pytest.mark.parametrize(
        "n, expected",
        [
            (1, "00"),
            (2, "01"),
            (3, "1000"),
            (45, "1111001110"),
            (63282, "111111111111110" "111011100110011"),
        ],
    )
    def test_known_vectors(self, n, expected):
        assert encode(n) == expected

    def test_known_vectors_as_integers(self):
        assert int(encode(45), 2) == 0b1111001110
        assert int(encode(63282), 2) == 0b111111111111110_111011100110011

    def test_prefix_is_unary_length(self):
        bits = encode(1000)
        k = len(bits) // 2
        assert bits[:k] == "1" * (k - 1) + "0"

    @pytest.mark.parametrize("n", [1, 2, 3, 6, 7, 64, 255, 3136, 100000])
    def test_encoded_length(self, n):
        assert encoded_length(n) == len(encode(n))

    @pytest.mark.parametrize("n", [0, -1])
    def test_rejects_non_positive(self, n):
        with pytest.raises(ValueError):
            encode(n)
        with pytest.raises(ValueError):
            encoded_length(n)


class TestDecode:
    """Decoding from a bit cursor"""

    def test_round_trip(self):
        for n in range(1, 100001):
            cursor = BitCursor.from_bitstring(encode(n))
            assert decode(cursor) == n
            assert cursor.remaining == 0

    def test_single_bit_prefix(self):
        cursor = BitCursor.from_bitstring("00")
        assert decode(cursor) == 1
        assert cursor.position == 2

    def test_ignores_trailing_bits(self):
        cursor = BitCursor.from_bitstring("1111001110_111111")
        assert decode(cursor) == 45
        assert cursor.position == 10
        assert cursor.remaining == 6

    def test_consecutive_codewords(self):
        cursor = BitCursor.from_bitstring(encode(3) + encode(7) + encode(1))
        assert [decode(cursor), decode(cursor), decode(cursor)] == [3, 7, 1]
        assert cursor.remaining == 0

    def test_truncated_residual(self):
        cursor = BitCursor.from_bitstring("11110011")
        with pytest.raises(MalformedVarint):
            decode(cursor)

    def test_unterminated_prefix(self):
        cursor = BitCursor.from_bitstring("111")
        with pytest.raises(MalformedVarint):
            decode(cursor)

    def test_malformed_is_cursor_exhaustion(self):
        with pytest.raises(CursorExhausted):
            decode(BitCursor.from_bitstring(""))


class TestLongCodewords:
    """Codewords far longer than any real sprite needs"""

    def test_decodes_very_large_run(self):
        n = 2 ** 4000 + 12345
        cursor = BitCursor.from_bitstring(encode(n))
        assert decode(cursor) == n
        assert cursor.remaining == 0

    def test_all_ones_input_fails_in_linear_time(self):
        # 512 Ki one bits never terminate the prefix
        cursor = BitCursor(b"\xFF" * 65536)
        start = time.perf_counter()
        with pytest.raises(MalformedVarint):
            decode(cursor)
        assert time.perf_counter() - start < 2.0

    def test_long_residual_is_read_exactly(self):
        k = 3000
        cursor = BitCursor.from_bitstring("1" * (k - 1) + "0" + "1" * k + "01")
        assert decode(cursor) == (1 << k) - 2 + (1 << k) - 1 + 1
        assert cursor.remaining == 2
