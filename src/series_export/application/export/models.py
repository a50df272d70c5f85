"""Application export – series, table and option value objects."""
from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Any, Mapping

from series_export.config.defaults import DEFAULT_DATETIME_FORMAT

__all__ = [
    "DEFAULT_DATETIME_FORMAT",
    "Datapoint",
    "ExportOptions",
    "POINT_TIME_INDEX",
    "POINT_VALUE_INDEX",
    "Series",
    "SeriesStats",
    "TableColumn",
    "TableData",
]

POINT_VALUE_INDEX = 0
POINT_TIME_INDEX = 1

# (value, epoch milliseconds)
Datapoint = tuple[Any, Any]


@dataclass(frozen=True)
class SeriesStats:
    """Summary statistics reported on the first long-format row of a series."""

    min: float | None = None
    max: float | None = None
    avg: float | None = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "SeriesStats":
        return cls(min=data.get("min"), max=data.get("max"), avg=data.get("avg"))


@dataclass(frozen=True)
class Series:
    """A named sequence of ``(value, timestamp)`` datapoints.

    ``alias`` carries up to five ``---`` separated segments: room, point
    name, location, attribute and unit.
    """

    alias: str
    datapoints: tuple[Datapoint, ...] = ()
    stats: SeriesStats = field(default_factory=SeriesStats)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Series":
        """Build from ``{"alias", "datapoints": [[value, ts], ...], "stats"}``."""
        stats = data.get("stats") or {}
        return cls(
            alias=data["alias"],
            datapoints=tuple(tuple(point) for point in data.get("datapoints") or ()),
            stats=stats if isinstance(stats, SeriesStats) else SeriesStats.from_dict(stats),
        )


@dataclass(frozen=True)
class TableColumn:
    title: str | None = None
    text: str | None = None

    @property
    def label(self) -> str | None:
        return self.title or self.text

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "TableColumn":
        return cls(title=data.get("title"), text=data.get("text"))


@dataclass(frozen=True)
class TableData:
    """Rows already aligned to ``columns``."""

    columns: tuple[TableColumn, ...] = ()
    rows: tuple[tuple[Any, ...], ...] = ()

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "TableData":
        return cls(
            columns=tuple(
                col if isinstance(col, TableColumn) else TableColumn.from_dict(col)
                for col in data.get("columns") or ()
            ),
            rows=tuple(tuple(row) for row in data.get("rows") or ()),
        )


_OPTION_KEYS = {
    "dateTimeFormat": "date_time_format",
    "date_time_format": "date_time_format",
    "excel": "excel",
    "timezone": "timezone",
}


@dataclass(frozen=True)
class ExportOptions:
    """Formatting options shared by the series converters.

    ``timezone`` is ``"utc"``, an IANA zone name, or empty / ``"browser"`` /
    ``"local"`` for the machine's local zone. ``excel`` is reserved for an
    Excel compatibility header and currently changes nothing.
    """

    date_time_format: str = DEFAULT_DATETIME_FORMAT
    excel: bool = False
    timezone: str = ""

    @classmethod
    def coerce(
        cls,
        options: "ExportOptions | Mapping[str, Any] | None",
        defaults: "ExportOptions | None" = None,
    ) -> "ExportOptions":
        """Overlay a partial mapping (camelCase or snake_case keys) on *defaults*.

        ``None`` values in the mapping keep the default.
        """
        base = defaults or cls()
        if options is None:
            return base
        if isinstance(options, ExportOptions):
            return options
        changes = {
            _OPTION_KEYS[key]: value
            for key, value in options.items()
            if key in _OPTION_KEYS and value is not None
        }
        return replace(base, **changes)


def as_series(item: "Series | Mapping[str, Any]") -> Series:
    return item if isinstance(item, Series) else Series.from_dict(item)


def as_table(table: "TableData | Mapping[str, Any]") -> TableData:
    return table if isinstance(table, TableData) else TableData.from_dict(table)
