"""Tests for batch operations."""

import dataclasses
import logging

import pytest

import levkit as lk
from levkit import batch


class TestScore:
    """Tests for batch.score."""

    def test_order_and_ids(self):
        results = batch.score(["hello", "hallo", "world"], "helo")
        assert [r.text for r in results] == ["hello", "hallo", "world"]
        assert [r.id for r in results] == [0, 1, 2]
        assert results[0].score == 0.8

    def test_distance_metric(self):
        results = batch.score(["kitten", "sitting"], "kitten", metric="distance")
        assert [r.score for r in results] == [0, 3]

    def test_enum_metric(self):
        results = batch.score(["john wicker"], "wick", metric=lk.Metric.PARTIAL_DISTANCE)
        assert results[0].score == 0

    def test_empty_list(self):
        assert batch.score([], "hello") == []

    def test_empty_query(self):
        results = batch.score(["abc", ""], "", metric="distance")
        assert [r.score for r in results] == [3, 0]

    def test_unknown_metric(self):
        with pytest.raises(lk.MetricError):
            batch.score(["a"], "b", metric="cosine")


class TestBestMatches:
    """Tests for batch.best_matches."""

    def test_ranking(self):
        matches = batch.best_matches(["banana", "hallo", "hello"], "hello")
        assert matches[0].text == "hello"
        assert matches[0].score == 1.0
        assert matches[1].text == "hallo"

    def test_ties_keep_input_order(self):
        matches = batch.best_matches(["apple", "apply", "banana"], "appel", limit=2)
        assert [(m.text, m.score) for m in matches] == [("apple", 0.6), ("apply", 0.6)]

    def test_partial(self):
        titles = ["Jane Doe", "John Wick: Chapter 2", "Wicked"]
        matches = batch.best_matches(titles, "Wick", partial=True, limit=5, min_similarity=1.0)
        assert [m.text for m in matches] == ["John Wick: Chapter 2", "Wicked"]
        assert [m.id for m in matches] == [1, 2]

    def test_limit(self):
        matches = batch.best_matches(["a", "b", "c", "d"], "a", limit=2)
        assert len(matches) == 2

    def test_limit_zero(self):
        assert batch.best_matches(["hello"], "hello", limit=0) == []

    def test_min_similarity_one(self):
        matches = batch.best_matches(["hello", "hallo"], "hello", min_similarity=1.0)
        assert [m.text for m in matches] == ["hello"]

    def test_empty_list(self):
        assert batch.best_matches([], "hello") == []


class TestPairwise:
    """Tests for batch.pairwise."""

    def test_distances(self):
        assert batch.pairwise(["kitten", "rust"], ["sitting", "rust"], metric="distance") == [3, 0]

    def test_default_metric(self):
        scores = batch.pairwise(["hello", "abc"], ["hallo", "xyz"])
        assert scores == [0.8, 0.0]

    def test_every_metric(self):
        for metric in lk.Metric:
            expected = getattr(lk, metric.value)("john wick", "john wicker")
            assert batch.pairwise(["john wick"], ["john wicker"], metric=metric) == [expected]

    def test_empty_lists(self):
        assert batch.pairwise([], []) == []

    def test_unicode(self):
        assert batch.pairwise(["日本語"], ["日本"], metric="distance") == [1]

    def test_length_mismatch(self):
        with pytest.raises(lk.ValidationError):
            batch.pairwise(["a"], [])


class TestMatrix:
    """Tests for batch.matrix."""

    def test_shape_and_values(self):
        result = batch.matrix(["abc", "xyz"], ["abd", "xyz"], metric="distance")
        assert result == [[1, 3], [3, 0]]

    def test_empty_choices(self):
        assert batch.matrix(["a", "b"], []) == [[], []]

    def test_empty_queries(self):
        assert batch.matrix([], ["a"]) == []


class TestMatchResult:
    def test_frozen(self):
        result = batch.score(["a"], "a")[0]
        with pytest.raises(dataclasses.FrozenInstanceError):
            result.score = 0.0  # type: ignore[misc]

    def test_exported(self):
        assert lk.MatchResult is batch.MatchResult


class TestLogging:
    def test_debug_record(self, caplog):
        with caplog.at_level(logging.DEBUG, logger="levkit.batch"):
            batch.pairwise(["a", "b"], ["a", "c"], metric="distance")
        assert "pairwise distance over 2 pairs" in caplog.text

    def test_null_handler_installed(self):
        handlers = logging.getLogger("levkit").handlers
        assert any(isinstance(h, logging.NullHandler) for h in handlers)
