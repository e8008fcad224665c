"""Internal validation utilities shared by the set compressors."""

from __future__ import annotations

from typing import Sequence

from .types.exceptions import InvalidInputError
from .types.uint import is_uint32


def validate_universe_size(universe_size: int) -> None:
    """
    Check that the universe size is a uint32.

    Raises:
        InvalidInputError: If the universe size is not an integer in [0, 2^32).
    """
    if not is_uint32(universe_size):
        raise InvalidInputError(f"Universe size must be a uint32, got {universe_size!r}")


def validate_ids(ids: Sequence[int], universe_size: int) -> None:
    """
    Check that IDs form a valid set inside the universe.

    A valid set is strictly increasing, which covers both ordering and
    uniqueness in a single pass, and every element is below the universe size.

    Args:
        ids: Candidate ID sequence.
        universe_size: Exclusive upper bound on the IDs.

    Raises:
        InvalidInputError: On the first violation found.
    """
    validate_universe_size(universe_size)

    for i, id_ in enumerate(ids):
        if not is_uint32(id_):
            raise InvalidInputError(f"IDs must be uint32 values, got {id_!r}")

        if i > 0 and id_ <= ids[i - 1]:
            raise InvalidInputError(
                f"IDs must be sorted and unique, found {id_} <= {ids[i - 1]}"
            )

    # Sorted, so the last element is the maximum.
    if ids and ids[-1] >= universe_size:
        raise InvalidInputError(f"ID {ids[-1]} exceeds universe size {universe_size}")
