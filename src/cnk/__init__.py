"""ID set compression primitives.

`cnk` compresses sorted, unique ID sets where order does not matter. These
show up throughout information retrieval:

- IVF posting lists (which vectors belong to which cluster)
- HNSW neighbor lists (which nodes are connected)
- Inverted indexes (which documents contain which terms)

Usage::

    from cnk import RocCompressor

    compressor = RocCompressor()
    compressed = compressor.compress_set([1, 5, 10, 20, 50], 1000)
    ids = compressor.decompress_set(compressed, 1000)

The universe size is not stored in the payload. Keep it, and the method
used, next to the compressed bytes.
"""

from __future__ import annotations

from .ans import ANS_AVAILABLE
from .estimate import log2_binomial, theoretical_bits
from .method import IdCompressionMethod, get_compressor
from .raw import RawCompressor
from .roc import RocCompressor
from .traits import IdSetCompressor
from .types.exceptions import (
    CompressionError,
    DecompressionFailedError,
    InvalidInputError,
    UnsupportedMethodError,
)
from .varint import decode_varint, encode_varint

__all__ = [
    # Compressors
    "IdSetCompressor",
    "RocCompressor",
    "RawCompressor",
    # Method selection
    "IdCompressionMethod",
    "get_compressor",
    # Capabilities
    "ANS_AVAILABLE",
    # Primitives
    "encode_varint",
    "decode_varint",
    "theoretical_bits",
    "log2_binomial",
    # Exceptions
    "CompressionError",
    "InvalidInputError",
    "DecompressionFailedError",
    "UnsupportedMethodError",
]
