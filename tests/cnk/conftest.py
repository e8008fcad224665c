"""
Shared pytest fixtures for the codec tests.

Fixtures are picked up automatically via pytest discovery.
"""

from __future__ import annotations

import pytest

from cnk import RawCompressor, RocCompressor


@pytest.fixture
def roc() -> RocCompressor:
    """ROC compressor with the default precision."""
    return RocCompressor()


@pytest.fixture
def raw() -> RawCompressor:
    """Raw uint32 storage."""
    return RawCompressor()
