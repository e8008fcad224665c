"""
Global configuration for the ID set codecs.

This module contains environment-driven settings that apply across all compressors.
"""

import os

from .types.uint import is_power_of_two

DEFAULT_ANS_PRECISION: int = 1 << 12
"""Default ANS quantization precision (4096), a balance of table size and accuracy."""

_raw_precision = os.environ.get("CNK_ANS_PRECISION", str(DEFAULT_ANS_PRECISION))

try:
    ANS_PRECISION: int = int(_raw_precision)
    """The ANS precision used when a compressor is built without an explicit value."""
except ValueError as e:
    raise ValueError(
        f"Invalid CNK_ANS_PRECISION environment variable: '{_raw_precision}'. "
        f"Expected an integer power of two."
    ) from e

if not is_power_of_two(ANS_PRECISION):
    raise ValueError(
        f"Invalid CNK_ANS_PRECISION environment variable: '{_raw_precision}'. "
        f"Expected an integer power of two."
    )
