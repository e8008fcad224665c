"""Hypothesis strategies shared by the codec tests."""

from __future__ import annotations

from hypothesis import strategies as st


@st.composite
def id_sets(
    draw: st.DrawFn,
    max_size: int = 100,
    max_universe: int = 10_000,
    min_size: int = 0,
) -> tuple[list[int], int]:
    """Draw a sorted, unique ID set together with a universe that contains it."""
    universe = draw(st.integers(min_value=max(1, min_size), max_value=max_universe))
    ids = draw(
        st.lists(
            st.integers(min_value=0, max_value=universe - 1),
            min_size=min_size,
            max_size=min(max_size, universe),
            unique=True,
        )
    )
    return sorted(ids), universe


__all__ = ["id_sets"]
