"""Unsigned Integer Type Specification."""

from pydantic import Field
from typing_extensions import Annotated

UINT32_MAX = 2**32
"""The exclusive upper bound for an unsigned 32-bit integer (2**32)."""

UINT64_MAX = 2**64
"""The exclusive upper bound for an unsigned 64-bit integer (2**64)."""

Uint32 = Annotated[int, Field(ge=0, lt=UINT32_MAX)]
"""A type alias to represent a uint32 (IDs and universe sizes)."""

Uint64 = Annotated[int, Field(ge=0, lt=UINT64_MAX)]
"""A type alias to represent a uint64 (varint magnitudes)."""


def is_uint32(value: object) -> bool:
    """
    Check whether a value is a plain integer in the uint32 range.

    Booleans are rejected even though they subclass `int`.
    """
    return isinstance(value, int) and not isinstance(value, bool) and 0 <= value < UINT32_MAX


def is_power_of_two(value: int) -> bool:
    """Check whether a positive integer is an exact power of two."""
    return value > 0 and value & (value - 1) == 0
