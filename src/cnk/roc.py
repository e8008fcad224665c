"""
Random Order Coding (ROC) compressor for sets of IDs.

WHY SETS ARE CHEAPER THAN SEQUENCES
-----------------------------------
A set of `n` elements from a universe of `N` has `C(N, n)` possible values.
A sequence of the same elements has `N! / (N - n)!` possible values.
The difference, `log2(n!)` ~= `n * log2(n)` bits, is the cost of an order
that carries no information.

Full ROC recovers those bits with bits-back coding over an ANS state.
This compressor implements the practical baseline: delta encoding of the
sorted IDs with LEB128 varints.


WIRE FORMAT
-----------
::

    empty set     := <zero bytes>
    non-empty set := varint(count) varint(first_id) varint(delta_1) ... varint(delta_{count-1})

There is no magic number, version byte, or embedded universe size.
Callers store the universe size and the method alongside the payload.


Example:
-------
IDs [1, 5, 10, 20] in a universe of 1000:

    count  = 4           -> 0x04
    first  = 1           -> 0x01
    deltas = 4, 5, 10    -> 0x04 0x05 0x0A

Result: 04 01 04 05 0A (5 bytes instead of 16 as raw uint32)


References:
    Severo et al. (2022). "Compressing multisets with large alphabets"
    Severo et al. (2025). "Lossless Compression of Vector IDs for ANN Search"
"""

from __future__ import annotations

from typing import Sequence

from pydantic import field_validator

from . import estimate
from .ans import ANS_AVAILABLE
from ._validation import validate_ids, validate_universe_size
from .config import ANS_PRECISION
from .types.base import StrictBaseModel
from .types.exceptions import DecompressionFailedError
from .types.uint import Uint32, is_power_of_two
from .varint import decode_varint, encode_varint


class RocCompressor(StrictBaseModel):
    """
    Random Order Coding compressor for sets.

    Compresses sets of IDs with delta encoding and varints. Consecutive or
    clustered IDs (HNSW neighbor lists, IVF clusters) cost about one byte
    per ID.
    """

    ans_precision: Uint32 = ANS_PRECISION
    """
    ANS quantization precision, a power of two.

    Held for the bits-back backend. The delta+varint path never reads it.
    """

    @field_validator("ans_precision")
    @classmethod
    def check_power_of_two(cls, value: int) -> int:
        """Reject precisions that are not powers of two."""
        if not is_power_of_two(value):
            raise ValueError(f"ANS precision must be a power of two, got {value}")
        return value

    @property
    def bits_back_enabled(self) -> bool:
        """
        Whether sets go through bits-back coding on the ANS backend.

        Stays False while `ANS_AVAILABLE` is False: every set then uses the
        delta+varint path below, and `ans_precision` is only carried along.
        """
        return ANS_AVAILABLE

    @classmethod
    def with_precision(cls, precision: int) -> RocCompressor:
        """Create a compressor with a custom ANS precision."""
        return cls(ans_precision=precision)

    def compress_set(self, ids: Sequence[int], universe_size: int) -> bytes:
        """
        Compress a strictly increasing sequence of IDs.

        Args:
            ids: Sorted, unique IDs, each below the universe size.
            universe_size: Exclusive upper bound on the IDs.

        Returns:
            The delta+varint payload. Empty for an empty set.

        Raises:
            InvalidInputError: If the IDs are unsorted, duplicated, or out of range.
        """
        # Validation runs before any byte is produced: all or nothing.
        validate_ids(ids, universe_size)

        if not ids:
            return b""

        encoded = bytearray(encode_varint(len(ids)))
        encoded.extend(encode_varint(ids[0]))

        # Strict ordering guarantees every delta is at least 1.
        for previous, current in zip(ids, ids[1:]):
            encoded.extend(encode_varint(current - previous))

        return bytes(encoded)

    def decompress_set(self, data: bytes, universe_size: int) -> list[int]:
        """
        Decompress a delta+varint payload.

        Args:
            data: Bytes produced by `compress_set`.
            universe_size: The universe size used at compression time.

        Returns:
            The original strictly increasing IDs.

        Raises:
            InvalidInputError: If the universe size is not a uint32.
            DecompressionFailedError: If the payload is truncated, malformed,
                references IDs outside the universe, or has trailing bytes.
        """
        validate_universe_size(universe_size)

        if not data:
            return []

        # Step 1: Read the declared element count.
        #
        # The empty set is the empty payload, so a count of zero never
        # appears in valid data.
        num_ids, offset = decode_varint(data, 0)
        if num_ids == 0:
            raise DecompressionFailedError("Zero element count in non-empty payload")

        # Step 2: Read the first ID, stored as-is.
        first_id, consumed = decode_varint(data, offset)
        offset += consumed

        if first_id >= universe_size:
            raise DecompressionFailedError(f"ID {first_id} exceeds universe size {universe_size}")
        ids = [first_id]

        # Step 3: Rebuild the remaining IDs from their gaps.
        #
        # Checking the bound on every ID catches a universe-size mismatch
        # as soon as it happens, without decoding the rest.
        previous = first_id
        for _ in range(1, num_ids):
            delta, consumed = decode_varint(data, offset)
            offset += consumed

            if delta == 0:
                raise DecompressionFailedError(
                    f"Zero delta after ID {previous} breaks strict ordering"
                )

            next_id = previous + delta
            if next_id >= universe_size:
                raise DecompressionFailedError(
                    f"ID {next_id} exceeds universe size {universe_size}"
                )
            ids.append(next_id)
            previous = next_id

        # Step 4: Every byte must belong to the declared elements.
        if offset < len(data):
            raise DecompressionFailedError(
                f"Extra data after decompression: {len(data) - offset} bytes"
            )

        return ids

    def estimate_size(self, num_ids: int, universe_size: int) -> int:
        """Estimate the payload size in bytes. See `cnk.estimate.estimate_size`."""
        return estimate.estimate_size(num_ids, universe_size)

    def bits_per_id(self, num_ids: int, universe_size: int) -> float:
        """Theoretical bits per ID. See `cnk.estimate.bits_per_id`."""
        return estimate.bits_per_id(num_ids, universe_size)
