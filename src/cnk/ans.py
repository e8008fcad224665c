"""
Asymmetric Numeral Systems (ANS) entropy coding.

ANS (Duda, 2009) is the entropy coder behind bits-back coding: it lets a
set compressor "borrow" the bits that would encode an arbitrary element
order and give them back, reaching about log2(C(N, n)) bits per set.


IMPLEMENTATION STATUS
---------------------
Only the coder state and its serialization exist. The state transitions
are not implemented, and `ANS_AVAILABLE` is False. Compressors must check
the flag before routing anything through this module.

The reference transitions would be::

    encode: state = (state // freq) * total + (state % freq) + cum_freq
    decode: slot  = state % total
            state = freq * (state // total) + slot - cum_freq
"""

from __future__ import annotations

from typing import Final

from .types.exceptions import DecompressionFailedError
from .types.uint import is_power_of_two, is_uint32

ANS_AVAILABLE: Final[bool] = False
"""Capability flag: True once the state transitions are implemented."""

STATE_BYTES: Final[int] = 8
"""Serialized size of the 64-bit coder state."""


def _check_precision(precision: int) -> None:
    """Reject precisions that are not uint32 powers of two."""
    if not (is_uint32(precision) and is_power_of_two(precision)):
        raise ValueError(f"ANS precision must be a uint32 power of two, got {precision!r}")


class AnsEncoder:
    """ANS encoder state."""

    def __init__(self, precision: int) -> None:
        """
        Start from the lower bound of the normalized interval.

        Raises:
            ValueError: If the precision is not a uint32 power of two.
        """
        _check_precision(precision)

        self.state = precision
        self.precision = precision

    def encode(self, cum_freq: int, freq: int, total: int) -> None:
        """
        Push one symbol with the given cumulative frequency onto the state.

        Raises:
            NotImplementedError: Always, until the backend is available.
        """
        raise NotImplementedError("ANS state transitions are not implemented")

    def finish(self) -> bytes:
        """Return the final state as 8 little-endian bytes."""
        return self.state.to_bytes(STATE_BYTES, "little")


class AnsDecoder:
    """ANS decoder state, restored from a finished encoder's bytes."""

    def __init__(self, data: bytes, precision: int) -> None:
        """
        Restore the coder state.

        Raises:
            ValueError: If the precision is not a uint32 power of two.
            DecompressionFailedError: If fewer than 8 bytes are supplied.
        """
        _check_precision(precision)

        if len(data) < STATE_BYTES:
            raise DecompressionFailedError("ANS data too short")

        self.state = int.from_bytes(data[:STATE_BYTES], "little")
        self.precision = precision

    def decode(self, total: int) -> tuple[int, int, int]:
        """
        Pop one symbol, returning (symbol, cum_freq, freq).

        Raises:
            NotImplementedError: Always, until the backend is available.
        """
        raise NotImplementedError("ANS state transitions are not implemented")
