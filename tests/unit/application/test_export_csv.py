"""Unit tests for the series and table CSV converters."""
from __future__ import annotations

from datetime import UTC, datetime

import pytest

from series_export.application.export import (
    ExportOptions,
    Series,
    SeriesStats,
    TableColumn,
    TableData,
    convert_series_list_to_csv,
    convert_series_list_to_csv_columns,
    convert_table_data_to_csv,
    format_timestamp,
    split_alias,
)
from series_export.kernel.errors import ExportValidationError
from series_export.kernel.time import FrozenClock
from series_export.testing.fakes import FakeClock

T0 = 1577836800000  # 2020-01-01T00:00:00Z
UTC_OPTS = {"dateTimeFormat": "YYYY-MM-DD HH:mm:ss", "timezone": "utc"}

METADATA = (
    '"导出人","admin"\r\n'
    '"导出时间","2026-01-01 12:00:00"\r\n'
    '"导出内容"\r\n'
    "\r\n"
    '"房间","点名","位置","点位属性","单位","时间","值","最小值","最大值","平均值"\r\n'
)


def _room_series():
    return {
        "alias": "RoomA---Temp---Loc1---C---Unit",
        "datapoints": [[21.5, T0], [22, T0 + 60_000]],
        "stats": {"min": 21.5, "max": 22, "avg": 21.75},
    }


# ---------------------------------------------------------------------------
# helpers
# ---------------------------------------------------------------------------
class TestSplitAlias:
    def test_five_segments(self):
        assert split_alias("a---b---c---d---e") == ["a", "b", "c", "d", "e"]

    def test_padded(self):
        assert split_alias("a---b") == ["a", "b", "", "", ""]

    def test_truncated(self):
        assert split_alias("1---2---3---4---5---6---7") == ["1", "2", "3", "4", "5"]

    def test_no_separator(self):
        assert split_alias("cpu") == ["cpu", "", "", "", ""]


class TestFormatTimestamp:
    def test_utc(self):
        assert format_timestamp(T0, "YYYY-MM-DDTHH:mm:ssZZ", "utc") == "2020-01-01T00:00:00+00:00"

    def test_utc_is_case_insensitive(self):
        assert format_timestamp(T0, "HH:mm", "UTC") == "00:00"

    def test_named_zone(self):
        assert format_timestamp(T0, "YYYY-MM-DD HH:mm ZZ", "Asia/Shanghai") == "2020-01-01 08:00 +08:00"

    def test_unknown_zone_rejected(self):
        with pytest.raises(ExportValidationError):
            format_timestamp(T0, "HH:mm", "Mars/Olympus")

    def test_local_zone_matches_machine_zone(self):
        expected = datetime.fromtimestamp(T0 / 1000).strftime("%Y-%m-%d %H:%M")
        assert format_timestamp(T0, "YYYY-MM-DD HH:mm", "") == expected
        assert format_timestamp(T0, "YYYY-MM-DD HH:mm", "browser") == expected


# ---------------------------------------------------------------------------
# long format
# ---------------------------------------------------------------------------
class TestConvertSeriesListToCsv:
    def test_full_document(self):
        text = convert_series_list_to_csv([_room_series()], UTC_OPTS, clock=FakeClock())
        assert text == METADATA + (
            '"RoomA","Temp","Loc1","C","Unit","2020-01-01 00:00:00",21.5,21.5,22,"21.75"\r\n'
            '"RoomA","Temp","Loc1","C","Unit","2020-01-01 00:01:00",22'
        )

    def test_row_shapes(self):
        text = convert_series_list_to_csv([_room_series()], UTC_OPTS, clock=FakeClock())
        lines = text.split("\r\n")
        header, first, second = lines[4], lines[5], lines[6]
        assert len(header.split(",")) == 10
        assert len(first.split(",")) == 10
        assert len(second.split(",")) == 7
        assert len(lines) == 7

    def test_average_rounded_to_two_places(self):
        series = _room_series()
        series["stats"]["avg"] = 21.756
        text = convert_series_list_to_csv([series], UTC_OPTS, clock=FakeClock())
        assert ',"21.76"\r\n' in text

    def test_short_alias_padded_with_empty_cells(self):
        series = {"alias": "RoomB---Hum", "datapoints": [[40, T0]], "stats": {"min": 40, "max": 40, "avg": 40}}
        text = convert_series_list_to_csv([series], UTC_OPTS, clock=FakeClock())
        assert text.endswith('"RoomB","Hum",,,,"2020-01-01 00:00:00",40,40,40,"40.00"')

    def test_multiple_series_only_last_row_unterminated(self):
        second = {"alias": "RoomB", "datapoints": [[1, T0]], "stats": {"min": 1, "max": 1, "avg": 1}}
        text = convert_series_list_to_csv([_room_series(), second], UTC_OPTS, clock=FakeClock())
        body = text[len(METADATA):]
        assert body.count("\r\n") == 2
        assert body.endswith('"RoomB",,,,,"2020-01-01 00:00:00",1,1,1,"1.00"')

    def test_trailing_empty_series_keeps_previous_terminator(self):
        empty = {"alias": "none", "datapoints": [], "stats": {}}
        text = convert_series_list_to_csv([_room_series(), empty], UTC_OPTS, clock=FakeClock())
        assert text.endswith("22\r\n")

    def test_null_value_and_stats(self):
        series = {"alias": "x", "datapoints": [[None, T0]], "stats": {"min": None, "max": None, "avg": 0}}
        text = convert_series_list_to_csv([series], UTC_OPTS, clock=FakeClock())
        assert text.endswith(',null,null,null,"0.00"')

    def test_empty_list_emits_metadata_only(self):
        text = convert_series_list_to_csv([], UTC_OPTS, clock=FakeClock())
        assert text == METADATA

    def test_exporter_name_parameter(self):
        text = convert_series_list_to_csv([], UTC_OPTS, clock=FakeClock(), exporter_name="ops")
        assert text.startswith('"导出人","ops"\r\n')

    def test_accepts_model_instances(self):
        series = Series(
            alias="RoomA---Temp---Loc1---C---Unit",
            datapoints=((21.5, T0), (22, T0 + 60_000)),
            stats=SeriesStats(min=21.5, max=22, avg=21.75),
        )
        opts = ExportOptions(date_time_format="YYYY-MM-DD HH:mm:ss", timezone="utc")
        assert convert_series_list_to_csv([series], opts, clock=FakeClock()) == convert_series_list_to_csv(
            [_room_series()], UTC_OPTS, clock=FakeClock()
        )

    def test_idempotent_with_fixed_clock(self):
        clock = FrozenClock(datetime(2024, 3, 1, tzinfo=UTC))
        first = convert_series_list_to_csv([_room_series()], UTC_OPTS, clock=clock)
        second = convert_series_list_to_csv([_room_series()], UTC_OPTS, clock=clock)
        assert first == second

    def test_missing_average_rejected(self):
        series = _room_series()
        del series["stats"]["avg"]
        with pytest.raises(ExportValidationError) as info:
            convert_series_list_to_csv([series], UTC_OPTS, clock=FakeClock())
        assert info.value.errors[0]["field"] == "series_list[0].stats.avg"

    def test_missing_alias_rejected(self):
        with pytest.raises(ExportValidationError, match="alias"):
            convert_series_list_to_csv([{"datapoints": []}], UTC_OPTS, clock=FakeClock())


# ---------------------------------------------------------------------------
# columnar format
# ---------------------------------------------------------------------------
class TestConvertSeriesListToCsvColumns:
    def _series(self):
        return [
            {"alias": "a", "datapoints": [[1, 1000], [3, 3000]]},
            {"alias": "b", "datapoints": [[2, 2000], [4, 4000]]},
        ]

    def test_full_document(self):
        text = convert_series_list_to_csv_columns(self._series(), {"dateTimeFormat": "HH:mm:ss", "timezone": "utc"})
        assert text == (
            '"Time","a","b"\r\n'
            '"00:00:01",1,null\r\n'
            '"00:00:02",null,2\r\n'
            '"00:00:03",3,null\r\n'
            '"00:00:04",null,4'
        )

    def test_default_format_in_utc(self):
        text = convert_series_list_to_csv_columns(
            [{"alias": "a", "datapoints": [[1, T0]]}], {"timezone": "utc"}
        )
        assert text == '"Time","a"\r\n"2020-01-01T00:00:00+00:00",1'

    def test_snake_case_options(self):
        text = convert_series_list_to_csv_columns(
            [{"alias": "a", "datapoints": [[1, T0]]}], {"date_time_format": "YYYY", "timezone": "utc"}
        )
        assert text.endswith('"2020",1')

    def test_alias_is_escaped_in_header(self):
        text = convert_series_list_to_csv_columns(
            [{"alias": "=cmd", "datapoints": [[1, T0]]}], UTC_OPTS
        )
        assert text.startswith('"Time","\'=cmd"\r\n')

    def test_header_only_when_series_have_no_points(self):
        text = convert_series_list_to_csv_columns([{"alias": "a", "datapoints": []}], UTC_OPTS)
        assert text == '"Time","a"\r\n'

    def test_empty_list_rejected(self):
        with pytest.raises(ExportValidationError):
            convert_series_list_to_csv_columns([], UTC_OPTS)

    def test_bad_timestamp_rejected(self):
        with pytest.raises(ExportValidationError, match="timestamp"):
            convert_series_list_to_csv_columns([{"alias": "a", "datapoints": [[1, "noon"]]}], UTC_OPTS)


# ---------------------------------------------------------------------------
# table
# ---------------------------------------------------------------------------
class TestConvertTableDataToCsv:
    def test_title_and_text_fallback(self):
        table = {"columns": [{"title": "A"}, {"text": "B"}], "rows": [[1, "x"]]}
        text = convert_table_data_to_csv(table)
        assert text == '"A","B"\r\n1,"x"'
        assert text.split("\r\n") == ['"A","B"', '1,"x"']

    def test_title_preferred_over_text(self):
        table = TableData(columns=(TableColumn(title="T", text="ignored"),), rows=((1,),))
        assert convert_table_data_to_csv(table) == '"T"\r\n1'

    def test_rows_terminated_except_last(self):
        table = {"columns": [{"text": "n"}], "rows": [[1], [2], [3]]}
        assert convert_table_data_to_csv(table) == '"n"\r\n1\r\n2\r\n3'

    def test_no_rows(self):
        assert convert_table_data_to_csv({"columns": [{"text": "n"}], "rows": []}) == '"n"\r\n'

    def test_heterogeneous_values(self):
        table = {"columns": [{"text": "a"}, {"text": "b"}, {"text": "c"}, {"text": "d"}], "rows": [[True, None, "", "-1"]]}
        assert convert_table_data_to_csv(table, excel=True).endswith("true,null,,\"'-1\"")

    def test_mismatched_row_rejected(self):
        table = {"columns": [{"text": "a"}, {"text": "b"}], "rows": [[1]]}
        with pytest.raises(ExportValidationError) as info:
            convert_table_data_to_csv(table)
        assert info.value.errors[0]["field"] == "table.rows[0]"

    def test_unlabelled_column_rejected(self):
        with pytest.raises(ExportValidationError, match="title or text"):
            convert_table_data_to_csv({"columns": [{}], "rows": []})
