"""
Capability interface shared by every ID set compressor.

Each compression method is one concrete class satisfying this protocol.
Callers depend only on the protocol, so a new method plugs in without
touching existing call sites.
"""

from __future__ import annotations

from typing import Protocol, Sequence, runtime_checkable


@runtime_checkable
class IdSetCompressor(Protocol):
    """
    Compressor for sets of IDs drawn from a bounded universe.

    Implementations are immutable values. Every method is a pure function of
    its arguments and the compressor's configuration.
    """

    def compress_set(self, ids: Sequence[int], universe_size: int) -> bytes:
        """
        Compress a strictly increasing ID sequence.

        Raises:
            InvalidInputError: If the IDs are not a valid set in the universe.
        """
        ...

    def decompress_set(self, data: bytes, universe_size: int) -> list[int]:
        """
        Reconstruct the ID sequence from compressed bytes.

        The universe size must equal the one used at compression time.

        Raises:
            DecompressionFailedError: If the bytes are not a valid encoding.
        """
        ...

    def estimate_size(self, num_ids: int, universe_size: int) -> int:
        """Estimate the compressed size in bytes without encoding anything."""
        ...

    def bits_per_id(self, num_ids: int, universe_size: int) -> float:
        """Estimate the bits spent per ID without encoding anything."""
        ...
