"""
Compression method selection.

Callers persist an `IdCompressionMethod` next to each payload and use it
to pick the matching compressor on the way back. The codecs never read
the selector themselves.
"""

from __future__ import annotations

import logging
from enum import Enum

from .config import ANS_PRECISION
from .raw import RawCompressor
from .roc import RocCompressor
from .traits import IdSetCompressor
from .types.exceptions import UnsupportedMethodError

logger = logging.getLogger(__name__)


class IdCompressionMethod(Enum):
    """Closed set of ID set compression methods."""

    NONE = "none"
    """No compression (raw uint32 storage). The default."""

    ELIAS_FANO = "elias_fano"
    """Elias-Fano encoding for sorted sequences. Reserved."""

    ROC = "roc"
    """
    Random Order Coding.

    Currently the delta+varint baseline, not full bits-back coding.
    """

    WAVELET_TREE = "wavelet_tree"
    """Wavelet tree with full random access. Reserved."""

    @property
    def is_implemented(self) -> bool:
        """Whether a compressor exists for this method."""
        return self in (IdCompressionMethod.NONE, IdCompressionMethod.ROC)


def get_compressor(
    method: IdCompressionMethod = IdCompressionMethod.NONE,
    *,
    ans_precision: int = ANS_PRECISION,
) -> IdSetCompressor:
    """
    Build the compressor for a method.

    Args:
        method: The method to use. Defaults to raw storage.
        ans_precision: ANS precision for methods that carry one.

    Returns:
        A fresh, immutable compressor.

    Raises:
        UnsupportedMethodError: If the method is reserved.
    """
    logger.debug("Selecting ID set compressor for method %s", method.name)

    if method is IdCompressionMethod.NONE:
        return RawCompressor()
    if method is IdCompressionMethod.ROC:
        compressor = RocCompressor(ans_precision=ans_precision)
        logger.debug(
            "ROC bits-back coding %s", "enabled" if compressor.bits_back_enabled else "disabled"
        )
        return compressor

    raise UnsupportedMethodError(method.name)
