"""
Unsigned LEB128 varint encoding and decoding.

WHAT ARE VARINTS?
-----------------
A varint (variable-length integer) encodes integers using fewer bytes for
smaller values. Posting lists and neighbor lists are dominated by small gaps
between consecutive IDs, so most values cost a single byte.


HOW LEB128 ENCODING WORKS
-------------------------
LEB128 (Little-Endian Base 128) splits an integer into 7-bit groups,
encoding each group in one byte. The MSB (bit 7) signals continuation:

- MSB = 1: More bytes follow
- MSB = 0: This is the final byte

Byte structure::

    [C|D D D D D D D]
     ^-- Continuation bit (1 = more bytes, 0 = last byte)
       ^-----------^-- 7 bits of data

Size ranges::

    Value 0-127:       1 byte   [0xxxxxxx]
    Value 128-16383:   2 bytes  [1xxxxxxx] [0xxxxxxx]
    Value 16384+:      3+ bytes [1xxxxxxx] [1xxxxxxx] [0xxxxxxx] ...


ENCODING EXAMPLE: VALUE 300
---------------------------
    300 = 0b100101100

    Group 0 (bits 0-6):  0101100 = 44  -> 1|0101100 = 0xAC
    Group 1 (bits 7-13): 0000010 = 2   -> 0|0000010 = 0x02

Result: [0xAC, 0x02]


MALFORMED INPUT
---------------
A correctly produced varint for a 64-bit value terminates within 10 bytes.
The decoder refuses to continue once the shift passes 56 bits while the
continuation bit is still set, so hostile input cannot drive an unbounded
accumulation.

Maximum value: 2^64 - 1 (10 bytes)


References:
    LEB128 specification:
        https://en.wikipedia.org/wiki/LEB128
    Protocol Buffers encoding:
        https://protobuf.dev/programming-guides/encoding/#varints
"""

from __future__ import annotations

from .types.exceptions import DecompressionFailedError
from .types.uint import UINT64_MAX

VARINT_CONTINUATION_BIT: int = 0x80
"""High bit set in varint bytes to indicate more bytes follow."""

VARINT_DATA_MASK: int = 0x7F
"""Mask to extract the 7 data bits from a varint byte."""

MAX_VARINT_SHIFT: int = 56
"""Largest shift at which a continuing varint is still accepted."""


def encode_varint(value: int) -> bytes:
    """
    Encode an unsigned 64-bit integer as LEB128 varint.

    Args:
        value: Integer in [0, 2^64).

    Returns:
        Varint-encoded bytes, between 1 and 10 bytes long.

    Raises:
        ValueError: If value is negative or does not fit in 64 bits.
    """
    if value < 0:
        raise ValueError("Varint must be non-negative")
    if value >= UINT64_MAX:
        raise ValueError(f"Varint must fit in 64 bits, got {value}")

    result = bytearray()

    # Process 7 bits at a time until the value fits in 7 bits.
    #
    # Values >= 128 need another byte:
    #   - Extract low 7 bits (value & 0x7F)
    #   - Set continuation bit (| 0x80)
    #   - Shift right by 7 to process next group
    while value >= VARINT_CONTINUATION_BIT:
        result.append((value & VARINT_DATA_MASK) | VARINT_CONTINUATION_BIT)
        value >>= 7

    # Final byte: MSB = 0 signals "end of varint".
    result.append(value)

    return bytes(result)


def decode_varint(data: bytes, offset: int = 0) -> tuple[int, int]:
    """
    Decode a varint from bytes at the given offset.

    Args:
        data: Input bytes containing the varint.
        offset: Starting position in data. Defaults to 0.

    Returns:
        Tuple of (decoded_value, bytes_consumed).

    Raises:
        DecompressionFailedError: If the input ends before the final byte,
            or the varint keeps continuing past a 56-bit shift.
    """
    result = 0
    shift = 0
    pos = offset

    while True:
        # A varint must end with a byte where MSB = 0.
        #
        # Running out of data first means the input is truncated.
        if pos >= len(data):
            raise DecompressionFailedError("Unexpected end of compressed data")

        # Guard against malformed input that never terminates.
        #
        # The tenth byte of a 64-bit varint starts at shift 63, which is
        # past the bound, so only nine continuation groups are accepted.
        if shift > MAX_VARINT_SHIFT:
            raise DecompressionFailedError("Varint encoding too large")

        byte = data[pos]
        pos += 1

        # Byte 0 contributes bits 0-6, byte 1 bits 7-13, and so on.
        result |= (byte & VARINT_DATA_MASK) << shift

        if not (byte & VARINT_CONTINUATION_BIT):
            break

        shift += 7

    return result, pos - offset
