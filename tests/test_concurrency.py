"""
Concurrency tests for levkit.

All working state lives on the call stack, so metrics can be called from
many threads at once without coordination.

Tests cover:
- Concurrent pairwise calls agree with sequential results
- Parallel batch operations
"""

import concurrent.futures

import levkit as lk
from levkit import batch

PAIRS = [
    ("kitten", "sitting"),
    ("john wick", "john wicker"),
    ("wick", "john wicker"),
    ("", "abc"),
    ("日本語", "日本"),
    ("saturday", "sunday"),
] * 20


class TestRaceConditionPrevention:
    """Test that concurrent calls return the same results as sequential ones."""

    def test_many_concurrent_distance_calls(self):
        expected = [lk.distance(a, b) for a, b in PAIRS]

        with concurrent.futures.ThreadPoolExecutor(max_workers=8) as executor:
            results = list(executor.map(lambda pair: lk.distance(*pair), PAIRS))

        assert results == expected

    def test_many_concurrent_partial_calls(self):
        expected = [lk.normalized_partial_similarity(a, b) for a, b in PAIRS]

        with concurrent.futures.ThreadPoolExecutor(max_workers=8) as executor:
            results = list(
                executor.map(lambda pair: lk.normalized_partial_similarity(*pair), PAIRS)
            )

        assert results == expected


class TestParallelBatchOperations:
    """Test batch operations issued from several threads."""

    def test_batch_pairwise_parallel(self):
        left = [a for a, _ in PAIRS]
        right = [b for _, b in PAIRS]
        expected = batch.pairwise(left, right, metric="partial_distance")

        def worker(_):
            return batch.pairwise(left, right, metric="partial_distance")

        with concurrent.futures.ThreadPoolExecutor(max_workers=4) as executor:
            results = list(executor.map(worker, range(4)))

        assert all(r == expected for r in results)

    def test_best_matches_parallel(self):
        choices = ["john wick", "john wicker", "jane doe", "wicked"]
        queries = ["wick", "jon", "jane", "doe"]

        def worker(query):
            return [m.text for m in batch.best_matches(choices, query, partial=True, limit=1)]

        expected = [worker(q) for q in queries]
        with concurrent.futures.ThreadPoolExecutor(max_workers=4) as executor:
            results = list(executor.map(worker, queries))

        assert results == expected
