"""Unit tests for chunking and batch planning."""

from __future__ import annotations

import pytest

from socialgraph.lookup.runtime.chunking import BatchPlanner, BatchPolicy, chunk


class TestChunk:
    """Test the chunk primitive."""

    @pytest.mark.parametrize(
        ("size", "max_size", "expected_sizes"),
        [
            (250, 100, [100, 100, 50]),
            (200, 100, [100, 100]),
            (1, 100, [1]),
            (7, 3, [3, 3, 1]),
            (5, 1, [1, 1, 1, 1, 1]),
        ],
    )
    def test_sizes_and_concatenation(self, size, max_size, expected_sizes):
        """Test every batch is full except possibly the last, and order is kept."""
        keys = list(range(1, size + 1))
        batches = list(chunk(keys, max_size))

        assert [len(b) for b in batches] == expected_sizes
        assert [k for b in batches for k in b] == keys

    def test_empty_input_yields_no_batches(self):
        """Test empty input produces zero batches, not one empty batch."""
        assert list(chunk([], 100)) == []

    @pytest.mark.parametrize("max_size", [0, -1])
    def test_non_positive_size_fails_fast(self, max_size):
        """Test invalid size raises at call time, before iteration."""
        with pytest.raises(ValueError, match="max_size must be positive"):
            chunk([1, 2, 3], max_size)

    def test_enumerates_input_once(self):
        """Test a one-shot generator is fully and correctly consumed."""
        pulled: list[int] = []

        def source():
            for i in range(10):
                pulled.append(i)
                yield i

        batches = list(chunk(source(), 4))

        assert batches == [(0, 1, 2, 3), (4, 5, 6, 7), (8, 9)]
        assert pulled == list(range(10))

    def test_is_lazy(self):
        """Test batches are produced on demand."""
        pulled: list[int] = []

        def source():
            for i in range(10):
                pulled.append(i)
                yield i

        it = chunk(source(), 4)
        assert pulled == []
        assert next(it) == (0, 1, 2, 3)
        assert pulled == [0, 1, 2, 3]

    def test_preserves_duplicates(self):
        """Test duplicate keys are neither dropped nor merged."""
        assert list(chunk([5, 5, 5], 2)) == [(5, 5), (5,)]


class TestBatchPlanner:
    """Test BatchPlanner functionality."""

    def test_plan_indexes_batches(self):
        """Test plans carry keys and zero-based batch indices."""
        planner = BatchPlanner(BatchPolicy(max_batch_size=100))
        plans = planner.plan(range(1, 251))

        assert [p.batch_index for p in plans] == [0, 1, 2]
        assert [len(p) for p in plans] == [100, 100, 50]
        assert plans[1].keys[0] == 101
        assert plans[2].keys[-1] == 250

    def test_plan_empty(self):
        """Test no keys gives no plans."""
        assert BatchPlanner().plan([]) == []

    def test_default_policy_uses_100(self):
        """Test the default batch size matches the remote per-call limit."""
        plans = BatchPlanner().plan(range(101))
        assert [len(p) for p in plans] == [100, 1]


class TestBatchPolicy:
    """Test BatchPolicy validation."""

    @pytest.mark.parametrize("size", [0, -5])
    def test_rejects_non_positive_batch_size(self, size):
        with pytest.raises(ValueError, match="max_batch_size"):
            BatchPolicy(max_batch_size=size)

    def test_rejects_non_positive_concurrency(self):
        with pytest.raises(ValueError, match="max_concurrency"):
            BatchPolicy(max_concurrency=0)

    def test_defaults(self):
        policy = BatchPolicy()
        assert policy.max_batch_size == 100
        assert policy.max_concurrency is None
