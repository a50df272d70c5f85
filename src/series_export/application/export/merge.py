"""Application export – align several series on one time axis."""
from __future__ import annotations

from bisect import bisect_left
from typing import Any, Iterable, Mapping, Sequence

from series_export.application.export.models import POINT_TIME_INDEX, Datapoint, Series
from series_export.application.export.validation import validate_series_list

__all__ = ["merge_series_by_time", "sorted_index_of", "time_axis"]


def time_axis(series_list: Sequence[Series]) -> list[Any]:
    """Sorted, deduplicated union of every timestamp in *series_list*."""
    timestamps = sorted(
        point[POINT_TIME_INDEX] for series in series_list for point in series.datapoints
    )
    axis: list[Any] = []
    for timestamp in timestamps:
        if not axis or axis[-1] != timestamp:
            axis.append(timestamp)
    return axis


def sorted_index_of(values: Sequence[Any], target: Any) -> int:
    """Index of the first *target* in sorted *values*, or ``-1``."""
    index = bisect_left(values, target)
    if index < len(values) and values[index] == target:
        return index
    return -1


def merge_series_by_time(
    series_list: Iterable[Series | Mapping[str, Any]],
) -> list[list[Datapoint]]:
    """Re-index every series against the shared time axis.

    Axis positions a series has no datapoint for are filled with
    ``(None, timestamp)``. All returned lists have the axis length.

    Raises:
        ExportValidationError: *series_list* is empty or malformed.
    """
    series = validate_series_list(series_list, require_non_empty=True).unwrap()
    axis = time_axis(series)

    merged: list[list[Datapoint]] = []
    for item in series:
        points = sorted(item.datapoints, key=lambda point: point[POINT_TIME_INDEX])
        point_times = [point[POINT_TIME_INDEX] for point in points]
        extended: list[Datapoint] = []
        for timestamp in axis:
            index = sorted_index_of(point_times, timestamp)
            extended.append(points[index] if index != -1 else (None, timestamp))
        merged.append(extended)
    return merged
