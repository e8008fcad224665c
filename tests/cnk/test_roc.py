"""Tests for the delta+varint ROC compressor."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from cnk import IdSetCompressor, RocCompressor
from cnk.config import ANS_PRECISION, DEFAULT_ANS_PRECISION
from cnk.types.exceptions import DecompressionFailedError, InvalidInputError


class TestConstruction:
    """Tests for the immutable compressor configuration."""

    def test_default_precision(self, roc: RocCompressor) -> None:
        """The default precision comes from the global configuration."""
        assert roc.ans_precision == ANS_PRECISION
        assert DEFAULT_ANS_PRECISION == 4096

    def test_with_precision(self) -> None:
        """A custom power-of-two precision is kept."""
        assert RocCompressor.with_precision(1024).ans_precision == 1024

    @pytest.mark.parametrize("precision", [0, 3, 1000, 4097])
    def test_non_power_of_two_rejected(self, precision: int) -> None:
        """Precisions that are not powers of two are rejected."""
        with pytest.raises(ValidationError):
            RocCompressor(ans_precision=precision)

    @pytest.mark.parametrize("precision", [-4096, 2**32])
    def test_out_of_range_precision_rejected(self, precision: int) -> None:
        """Precisions outside uint32 are rejected."""
        with pytest.raises(ValidationError):
            RocCompressor(ans_precision=precision)

    def test_strict_types(self) -> None:
        """Loosely typed values are not coerced."""
        with pytest.raises(ValidationError):
            RocCompressor(ans_precision="4096")  # type: ignore[arg-type]

    def test_unknown_field_rejected(self) -> None:
        """Extra fields are forbidden."""
        with pytest.raises(ValidationError):
            RocCompressor(method="roc")  # type: ignore[call-arg]

    def test_frozen(self, roc: RocCompressor) -> None:
        """Compressors cannot be mutated after construction."""
        with pytest.raises(ValidationError):
            roc.ans_precision = 1024  # type: ignore[misc]

    def test_value_semantics(self) -> None:
        """Equal configurations are equal and hash alike."""
        assert RocCompressor() == RocCompressor()
        assert hash(RocCompressor()) == hash(RocCompressor())
        assert RocCompressor.with_precision(256) != RocCompressor.with_precision(512)

    def test_satisfies_protocol(self, roc: RocCompressor) -> None:
        """The compressor implements the capability interface."""
        assert isinstance(roc, IdSetCompressor)


class TestCompressSet:
    """Tests for compression and input validation."""

    def test_wire_format(self, roc: RocCompressor) -> None:
        """Count, first ID, then each gap, as varints."""
        assert roc.compress_set([1, 5, 10, 20], 1000) == b"\x04\x01\x04\x05\x0a"

    def test_multi_byte_gap(self, roc: RocCompressor) -> None:
        """Gaps of 128 or more spill into continuation bytes."""
        assert roc.compress_set([0, 300], 1000) == b"\x02\x00\xac\x02"

    def test_empty_set(self, roc: RocCompressor) -> None:
        """The empty set compresses to no bytes at all."""
        assert roc.compress_set([], 1000) == b""

    def test_empty_set_any_universe(self, roc: RocCompressor) -> None:
        """The empty set is valid even in an empty universe."""
        assert roc.compress_set([], 0) == b""

    def test_single_id(self, roc: RocCompressor) -> None:
        """A single ID is a count and the ID itself."""
        assert roc.compress_set([42], 1000) == b"\x01\x2a"

    def test_accepts_tuples(self, roc: RocCompressor) -> None:
        """Any sequence of integers is accepted."""
        assert roc.compress_set((1, 5, 10, 20), 1000) == roc.compress_set([1, 5, 10, 20], 1000)

    def test_unsorted_ids(self, roc: RocCompressor) -> None:
        """Out-of-order IDs are rejected."""
        with pytest.raises(InvalidInputError, match="sorted and unique"):
            roc.compress_set([5, 1, 10], 1000)

    def test_duplicate_ids(self, roc: RocCompressor) -> None:
        """Duplicate IDs are rejected."""
        with pytest.raises(InvalidInputError, match="found 5 <= 5"):
            roc.compress_set([1, 5, 5, 10], 1000)

    def test_id_equal_to_universe(self, roc: RocCompressor) -> None:
        """The universe bound is exclusive."""
        with pytest.raises(InvalidInputError, match="exceeds universe size 1000"):
            roc.compress_set([1000], 1000)

    def test_largest_valid_id(self, roc: RocCompressor) -> None:
        """The ID just below the bound is accepted."""
        assert roc.decompress_set(roc.compress_set([999], 1000), 1000) == [999]

    @pytest.mark.parametrize("bad_id", [-1, 2**32, True, 1.5])
    def test_non_uint32_id(self, roc: RocCompressor, bad_id: object) -> None:
        """IDs must be plain uint32 integers."""
        with pytest.raises(InvalidInputError, match="uint32"):
            roc.compress_set([bad_id], 1000)  # type: ignore[list-item]

    @pytest.mark.parametrize("universe_size", [-1, 2**32])
    def test_invalid_universe(self, roc: RocCompressor, universe_size: int) -> None:
        """The universe size must be a uint32."""
        with pytest.raises(InvalidInputError, match="Universe size"):
            roc.compress_set([1], universe_size)

    def test_deterministic(self, roc: RocCompressor) -> None:
        """Identical arguments give identical bytes."""
        ids = [3, 17, 256, 4000, 9999]
        assert roc.compress_set(ids, 10_000) == roc.compress_set(ids, 10_000)

    def test_precision_does_not_affect_output(self) -> None:
        """The reserved precision is not used by the delta+varint path."""
        ids = [3, 17, 256, 4000, 9999]
        assert RocCompressor.with_precision(16).compress_set(ids, 10_000) == (
            RocCompressor.with_precision(1 << 20).compress_set(ids, 10_000)
        )


class TestDecompressSet:
    """Tests for decompression and malformed payloads."""

    def test_roundtrip(self, roc: RocCompressor) -> None:
        """A small set survives a compress/decompress cycle."""
        ids = [1, 5, 10, 20, 50, 100]
        assert roc.decompress_set(roc.compress_set(ids, 1000), 1000) == ids

    def test_empty_payload(self, roc: RocCompressor) -> None:
        """No bytes decode to the empty set."""
        assert roc.decompress_set(b"", 1000) == []

    def test_trailing_garbage(self, roc: RocCompressor) -> None:
        """Bytes after the declared elements are rejected."""
        data = roc.compress_set([1, 5, 10], 1000) + b"\x00"
        with pytest.raises(DecompressionFailedError, match="Extra data"):
            roc.decompress_set(data, 1000)

    def test_truncated_payload(self, roc: RocCompressor) -> None:
        """A payload cut inside a varint is rejected."""
        data = roc.compress_set([1, 500], 1000)
        with pytest.raises(DecompressionFailedError, match="Unexpected end"):
            roc.decompress_set(data[:-1], 1000)

    def test_count_exceeds_data(self, roc: RocCompressor) -> None:
        """A declared count larger than the payload is rejected."""
        with pytest.raises(DecompressionFailedError, match="Unexpected end"):
            roc.decompress_set(b"\x05\x01\x01", 1000)

    def test_zero_count(self, roc: RocCompressor) -> None:
        """A zero count is never produced and is rejected."""
        with pytest.raises(DecompressionFailedError, match="Zero element count"):
            roc.decompress_set(b"\x00", 1000)

    def test_zero_delta(self, roc: RocCompressor) -> None:
        """A zero gap would repeat an ID and is rejected."""
        with pytest.raises(DecompressionFailedError, match="Zero delta"):
            roc.decompress_set(b"\x02\x05\x00", 1000)

    def test_first_id_outside_smaller_universe(self, roc: RocCompressor) -> None:
        """A universe smaller than at compression time is detected on the first ID."""
        data = roc.compress_set([500], 1000)
        with pytest.raises(DecompressionFailedError, match="ID 500 exceeds universe size 100"):
            roc.decompress_set(data, 100)

    def test_later_id_outside_smaller_universe(self, roc: RocCompressor) -> None:
        """A universe mismatch is detected on any reconstructed ID."""
        data = roc.compress_set([1, 500], 1000)
        with pytest.raises(DecompressionFailedError, match="ID 500 exceeds universe size 100"):
            roc.decompress_set(data, 100)

    def test_oversized_varint(self, roc: RocCompressor) -> None:
        """A runaway varint is rejected."""
        with pytest.raises(DecompressionFailedError, match="too large"):
            roc.decompress_set(b"\xff" * 12, 1000)

    def test_invalid_universe(self, roc: RocCompressor) -> None:
        """An out-of-range universe is a caller error, not corruption."""
        with pytest.raises(InvalidInputError, match="Universe size"):
            roc.decompress_set(b"\x01\x01", 2**32)


class TestCompactness:
    """Tests for compressed sizes of typical layouts."""

    def test_consecutive_ids(self, roc: RocCompressor) -> None:
        """Consecutive IDs cost one byte each after the header."""
        ids = list(range(100))
        compressed = roc.compress_set(ids, 1000)

        assert roc.decompress_set(compressed, 1000) == ids
        assert len(compressed) < len(ids) * 4
        # count (1) + first ID (1) + 99 single-byte gaps
        assert len(compressed) == 101

    def test_density_improves_ratio(self, roc: RocCompressor) -> None:
        """Gaps of 1000 need two bytes, gaps of 1 need one."""
        universe = 100_000
        dense = list(range(1000))
        very_sparse = [i * 1000 for i in range(100)]

        dense_bytes_per_id = len(roc.compress_set(dense, universe)) / len(dense)
        sparse_bytes_per_id = len(roc.compress_set(very_sparse, universe)) / len(very_sparse)

        assert sparse_bytes_per_id > dense_bytes_per_id

    def test_large_ids(self, roc: RocCompressor) -> None:
        """IDs near the top of the uint32 range roundtrip."""
        universe = 2**32 - 1
        ids = [universe - 100 + i * 10 for i in range(10)]
        assert roc.decompress_set(roc.compress_set(ids, universe), universe) == ids

    def test_large_gap(self, roc: RocCompressor) -> None:
        """A gap spanning most of the uint32 range roundtrips."""
        universe = 2**32 - 1
        ids = [0, universe - 1]
        compressed = roc.compress_set(ids, universe)
        assert compressed == b"\x02\x00\xfe\xff\xff\xff\x0f"
        assert roc.decompress_set(compressed, universe) == ids


class TestEstimators:
    """Tests for the analytic estimators exposed on the compressor."""

    def test_degenerate_inputs(self, roc: RocCompressor) -> None:
        """Empty sets and sets larger than the universe estimate to zero."""
        assert roc.estimate_size(0, 1000) == 0
        assert roc.estimate_size(2000, 1000) == 0
        assert roc.bits_per_id(0, 1000) == 0.0
        assert roc.bits_per_id(2000, 1000) == 0.0

    @pytest.mark.parametrize("num_ids", [10, 100, 1000])
    @pytest.mark.parametrize("universe_size", [10_000, 100_000, 1_000_000])
    def test_estimate_is_reasonable(
        self, roc: RocCompressor, num_ids: int, universe_size: int
    ) -> None:
        """Estimates are positive and within twice the raw size."""
        estimate = roc.estimate_size(num_ids, universe_size)
        assert 0 < estimate <= num_ids * 4 * 2

    def test_denser_sets_cost_less_per_id(self, roc: RocCompressor) -> None:
        """At equal cardinality, a smaller universe never costs more."""
        universes = [1_000, 10_000, 100_000, 1_000_000]
        bits = [roc.bits_per_id(100, u) for u in universes]
        sizes = [roc.estimate_size(100, u) for u in universes]

        assert bits == sorted(bits)
        assert sizes == sorted(sizes)
