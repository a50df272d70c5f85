"""Unit tests for merge_series_by_time."""
from __future__ import annotations

import pytest

from series_export.application.export import Series, merge_series_by_time
from series_export.application.export.merge import sorted_index_of, time_axis
from series_export.kernel.errors import ExportValidationError


def _series(alias, *points):
    return {"alias": alias, "datapoints": [list(p) for p in points]}


class TestTimeAxis:
    def test_union_sorted_and_deduplicated(self):
        series = [
            Series("a", ((1, 30), (2, 10))),
            Series("b", ((3, 20), (4, 10))),
        ]
        assert time_axis(series) == [10, 20, 30]

    def test_numeric_not_lexicographic(self):
        series = [Series("a", ((1, 9), (2, 10), (3, 100)))]
        assert time_axis(series) == [9, 10, 100]


class TestSortedIndexOf:
    def test_found(self):
        assert sorted_index_of([1, 2, 2, 3], 2) == 1

    def test_missing(self):
        assert sorted_index_of([1, 3], 2) == -1
        assert sorted_index_of([], 2) == -1
        assert sorted_index_of([1, 3], 4) == -1


class TestMergeSeriesByTime:
    def test_disjoint_timestamps(self):
        merged = merge_series_by_time(
            [_series("a", (1.0, 1), (3.0, 3)), _series("b", (2.0, 2), (4.0, 4))]
        )
        assert [p[1] for p in merged[0]] == [1, 2, 3, 4]
        assert [p[1] for p in merged[1]] == [1, 2, 3, 4]
        assert merged[0] == [(1.0, 1), (None, 2), (3.0, 3), (None, 4)]
        assert merged[1] == [(None, 1), (2.0, 2), (None, 3), (4.0, 4)]
        assert sum(p[0] is None for p in merged[0]) == 2
        assert sum(p[0] is None for p in merged[1]) == 2

    def test_identical_timestamps_need_no_fill(self):
        merged = merge_series_by_time([_series("a", (1, 5)), _series("b", (2, 5))])
        assert merged == [[(1, 5)], [(2, 5)]]

    def test_unsorted_series_is_sorted_before_lookup(self):
        merged = merge_series_by_time([_series("a", (3, 300), (1, 100), (2, 200))])
        assert merged == [[(1, 100), (2, 200), (3, 300)]]

    def test_duplicate_timestamps_use_first_match(self):
        merged = merge_series_by_time([_series("a", (1, 100), (2, 100)), _series("b", (9, 200))])
        assert merged[0] == [(1, 100), (None, 200)]

    def test_series_without_points(self):
        merged = merge_series_by_time([_series("a", (1, 100)), _series("b")])
        assert merged[1] == [(None, 100)]

    def test_null_values_are_kept(self):
        merged = merge_series_by_time([_series("a", (None, 100))])
        assert merged == [[(None, 100)]]

    def test_inputs_not_mutated(self):
        raw = [_series("a", (3, 3), (1, 1))]
        merge_series_by_time(raw)
        assert raw[0]["datapoints"] == [[3, 3], [1, 1]]

    def test_empty_list_rejected(self):
        with pytest.raises(ExportValidationError, match="at least one series"):
            merge_series_by_time([])
