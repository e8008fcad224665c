"""
Analytic size model for ID sets.

INFORMATION-THEORETIC BOUND
---------------------------
A set of `n` IDs drawn from a universe of `N` values is one of `C(N, n)`
possible subsets. Any lossless code therefore needs at least

    log2(C(N, n)) bits

on average. A sorted sequence spends an extra `log2(n!)` bits encoding an
order that carries no information.


STIRLING APPROXIMATION
----------------------
For `n << N`:

    log2(C(N, n)) ~= n * log2(N / n)

This is the closed form the planning estimators use. It needs no payload
and runs in constant time.

These functions never look at compressed data.
"""

from __future__ import annotations

import math

VARINT_OVERHEAD_NUMERATOR: int = 3
VARINT_OVERHEAD_DENOMINATOR: int = 2
"""Per-ID varint overhead of 1.5 bytes, expressed as an integer ratio."""


def theoretical_bits(num_ids: int, universe_size: int) -> float:
    """
    Approximate the bits needed to store a set, `n * log2(N / n)`.

    Returns 0.0 in the degenerate regime:
      - `num_ids == 0`
      - `num_ids > universe_size`
      - `universe_size / num_ids <= 1`
    """
    if num_ids == 0:
        return 0.0

    n = float(num_ids)
    universe = float(universe_size)

    if n > universe:
        return 0.0

    ratio = universe / n
    if ratio <= 1.0:
        return 0.0

    return n * math.log2(ratio)


def log2_binomial(universe_size: int, num_ids: int) -> float:
    """
    Exact `log2(C(universe_size, num_ids))` through the log-gamma function.

    Useful to measure how far the Stirling estimate, or an actual payload,
    sits from the true lower bound.

    Args:
        universe_size: Number of values in the universe, `N`.
        num_ids: Number of elements in the set, `n`.

    Returns:
        The base-2 logarithm of the binomial coefficient. 0.0 when there is
        exactly one possible set (`n == 0` or `n == N`) or none (`n > N`).
    """
    if num_ids < 0 or universe_size < 0:
        raise ValueError("Set size and universe size must be non-negative")

    if num_ids == 0 or num_ids >= universe_size:
        return 0.0

    ln_binomial = (
        math.lgamma(universe_size + 1)
        - math.lgamma(num_ids + 1)
        - math.lgamma(universe_size - num_ids + 1)
    )
    return ln_binomial / math.log(2)


def estimate_size(num_ids: int, universe_size: int) -> int:
    """
    Estimate the compressed size in bytes of a delta+varint payload.

    The theoretical bound in bytes plus a fixed 1.5 bytes/ID of varint
    overhead. A planning heuristic, not a guarantee on actual output size.
    """
    if num_ids == 0 or num_ids > universe_size:
        return 0

    bits = theoretical_bits(num_ids, universe_size)
    varint_overhead = (num_ids * VARINT_OVERHEAD_NUMERATOR) // VARINT_OVERHEAD_DENOMINATOR
    return int(bits / 8.0) + varint_overhead


def bits_per_id(num_ids: int, universe_size: int) -> float:
    """Theoretical bits per ID for a set of the given cardinality."""
    if num_ids == 0:
        return 0.0
    return theoretical_bits(num_ids, universe_size) / num_ids
