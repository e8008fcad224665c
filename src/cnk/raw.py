"""
Uncompressed storage for ID sets.

Each ID is written as a fixed 4-byte little-endian uint32, back to back,
with no header. The element count is the payload length divided by four.

This is the reference point every other method is measured against.
"""

from __future__ import annotations

from typing import Sequence

from ._validation import validate_ids, validate_universe_size
from .types.base import StrictBaseModel
from .types.exceptions import DecompressionFailedError

RAW_ID_BYTES: int = 4
"""Bytes used per ID in raw storage (uint32)."""


class RawCompressor(StrictBaseModel):
    """Stores ID sets as raw little-endian uint32 values."""

    def compress_set(self, ids: Sequence[int], universe_size: int) -> bytes:
        """
        Serialize IDs as consecutive uint32 values.

        Raises:
            InvalidInputError: If the IDs are unsorted, duplicated, or out of range.
        """
        validate_ids(ids, universe_size)
        return b"".join(id_.to_bytes(RAW_ID_BYTES, "little") for id_ in ids)

    def decompress_set(self, data: bytes, universe_size: int) -> list[int]:
        """
        Read consecutive uint32 values back into a list.

        Raises:
            InvalidInputError: If the universe size is not a uint32.
            DecompressionFailedError: If the length is not a multiple of four,
                or the decoded IDs are out of range or not strictly increasing.
        """
        validate_universe_size(universe_size)

        if len(data) % RAW_ID_BYTES:
            raise DecompressionFailedError(
                f"Raw payload length {len(data)} is not a multiple of {RAW_ID_BYTES}"
            )

        ids: list[int] = []
        for pos in range(0, len(data), RAW_ID_BYTES):
            id_ = int.from_bytes(data[pos : pos + RAW_ID_BYTES], "little")

            if id_ >= universe_size:
                raise DecompressionFailedError(
                    f"ID {id_} exceeds universe size {universe_size}"
                )
            if ids and id_ <= ids[-1]:
                raise DecompressionFailedError(
                    f"IDs must be sorted and unique, found {id_} <= {ids[-1]}"
                )
            ids.append(id_)

        return ids

    def estimate_size(self, num_ids: int, universe_size: int) -> int:
        """Exact payload size: four bytes per ID."""
        if num_ids == 0 or num_ids > universe_size:
            return 0
        return num_ids * RAW_ID_BYTES

    def bits_per_id(self, num_ids: int, universe_size: int) -> float:
        """Always 32 bits per ID for a non-degenerate set."""
        if num_ids == 0 or num_ids > universe_size:
            return 0.0
        return float(RAW_ID_BYTES * 8)
