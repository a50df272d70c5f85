"""Application export – series and table to CSV text converters."""
from __future__ import annotations

from typing import Any, Iterable, Mapping

from series_export.application.export.cells import format_row, format_special_header
from series_export.application.export.merge import merge_series_by_time
from series_export.application.export.models import (
    POINT_TIME_INDEX,
    POINT_VALUE_INDEX,
    ExportOptions,
    Series,
    TableData,
)
from series_export.application.export.timefmt import format_datetime, format_timestamp
from series_export.application.export.validation import validate_series_list, validate_table
from series_export.config.defaults import DEFAULT_EXPORTER_NAME
from series_export.kernel.time import Clock, SystemClock

__all__ = [
    "ALIAS_SEGMENTS",
    "ALIAS_SEPARATOR",
    "DEFAULT_EXPORTER_NAME",
    "LONG_FORMAT_HEADER",
    "convert_series_list_to_csv",
    "convert_series_list_to_csv_columns",
    "convert_table_data_to_csv",
    "split_alias",
]

EXPORTER_LABEL = "导出人"
EXPORT_TIME_LABEL = "导出时间"
EXPORT_CONTENT_LABEL = "导出内容"

# room, point name, location, attribute, unit, time, value, min, max, average
LONG_FORMAT_HEADER = ("房间", "点名", "位置", "点位属性", "单位", "时间", "值", "最小值", "最大值", "平均值")
TIME_HEADER = "Time"

ALIAS_SEPARATOR = "---"
ALIAS_SEGMENTS = 5

SeriesInput = Iterable[Series | Mapping[str, Any]]
OptionsInput = ExportOptions | Mapping[str, Any] | None


def split_alias(alias: str) -> list[str]:
    """First five ``---`` segments of *alias*, padded with empty strings."""
    segments = alias.split(ALIAS_SEPARATOR)[:ALIAS_SEGMENTS]
    return segments + [""] * (ALIAS_SEGMENTS - len(segments))


def convert_series_list_to_csv(
    series_list: SeriesInput,
    options: OptionsInput = None,
    *,
    clock: Clock | None = None,
    exporter_name: str = DEFAULT_EXPORTER_NAME,
) -> str:
    """Long format: one row per datapoint of every series.

    A metadata block (exporter, export time, content label, blank line)
    precedes the ten-column header. The first row of each series also
    carries the series' min, max and average; later rows stop after the
    value column.
    """
    opts = ExportOptions.coerce(options)
    series = validate_series_list(series_list, require_stats=True).unwrap()
    now = (clock or SystemClock()).now()

    text = format_special_header(opts.excel)
    text += format_row([EXPORTER_LABEL, exporter_name])
    text += format_row([EXPORT_TIME_LABEL, format_datetime(now, opts.date_time_format, opts.timezone)])
    text += format_row([EXPORT_CONTENT_LABEL])
    text += format_row([])
    text += format_row(LONG_FORMAT_HEADER)

    last_series = len(series) - 1
    for series_index, item in enumerate(series):
        name_segments = split_alias(item.alias)
        last_point = len(item.datapoints) - 1
        for point_index, point in enumerate(item.datapoints):
            row: list[Any] = [
                *name_segments,
                format_timestamp(point[POINT_TIME_INDEX], opts.date_time_format, opts.timezone),
                point[POINT_VALUE_INDEX],
            ]
            if point_index == 0:
                row += [item.stats.min, item.stats.max, f"{item.stats.avg:.2f}"]
            text += format_row(row, point_index < last_point or series_index < last_series)
    return text


def convert_series_list_to_csv_columns(series_list: SeriesInput, options: OptionsInput = None) -> str:
    """Columnar format: a ``Time`` column plus one column per series alias.

    Raises:
        ExportValidationError: *series_list* is empty or malformed.
    """
    opts = ExportOptions.coerce(options)
    series = validate_series_list(series_list, require_non_empty=True).unwrap()

    text = format_special_header(opts.excel)
    text += format_row([TIME_HEADER, *(item.alias for item in series)])

    columns = merge_series_by_time(series)
    axis_length = len(columns[0])
    for index in range(axis_length):
        timestamp = format_timestamp(
            columns[0][index][POINT_TIME_INDEX], opts.date_time_format, opts.timezone
        )
        values = [column[index][POINT_VALUE_INDEX] for column in columns]
        text += format_row([timestamp, *values], index < axis_length - 1)
    return text


def convert_table_data_to_csv(table: TableData | Mapping[str, Any], excel: bool = False) -> str:
    """Header from column titles (``text`` as fallback), then rows unchanged."""
    data = validate_table(table).unwrap()

    text = format_special_header(excel)
    text += format_row([column.label for column in data.columns])
    last_row = len(data.rows) - 1
    for index, row in enumerate(data.rows):
        text += format_row(row, index < last_row)
    return text
