"""Reusable type definitions for the ID set codecs."""

from .base import StrictBaseModel
from .exceptions import (
    CompressionError,
    DecompressionFailedError,
    InvalidInputError,
    UnsupportedMethodError,
)
from .uint import UINT32_MAX, UINT64_MAX, Uint32, Uint64, is_power_of_two, is_uint32

__all__ = [
    # Core types
    "Uint32",
    "Uint64",
    "UINT32_MAX",
    "UINT64_MAX",
    "is_uint32",
    "is_power_of_two",
    "StrictBaseModel",
    # Exceptions
    "CompressionError",
    "InvalidInputError",
    "DecompressionFailedError",
    "UnsupportedMethodError",
]
