"""Unit tests for IN-list batching"""

from src.adapter.repositories.batching import IN_CLAUSE_BATCH_SIZE, batched


class TestBatched:

    def test_splits_into_bounded_batches(self):
        ids = [f"act_{i}" for i in range(IN_CLAUSE_BATCH_SIZE * 2 + 1)]

        batches = list(batched(ids))

        assert [len(b) for b in batches] == [IN_CLAUSE_BATCH_SIZE, IN_CLAUSE_BATCH_SIZE, 1]
        assert [i for b in batches for i in b] == ids

    def test_empty_input_yields_nothing(self):
        assert list(batched([])) == []
