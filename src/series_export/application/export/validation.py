"""Application export – input precondition checks.

Every check returns a :data:`Result` so callers can choose between raising
(``.unwrap()``) and inspecting the collected failures.
"""
from __future__ import annotations

from decimal import Decimal
from numbers import Real
from typing import Any, Iterable, Mapping, Sequence

from series_export.application.export.models import (
    POINT_TIME_INDEX,
    POINT_VALUE_INDEX,
    Series,
    TableData,
    as_series,
    as_table,
)
from series_export.kernel.errors import ExportValidationError
from series_export.kernel.types import Err, Ok, Result

__all__ = ["is_number", "validate_series_list", "validate_table"]


def is_number(value: Any) -> bool:
    return isinstance(value, (Real, Decimal)) and not isinstance(value, bool)


def _error(field: str, message: str) -> dict[str, str]:
    return {"field": field, "message": f"{field}: {message}"}


def _check_series(series: Series, where: str, require_stats: bool) -> list[dict[str, str]]:
    errors: list[dict[str, str]] = []
    if not isinstance(series.alias, str):
        errors.append(_error(f"{where}.alias", "must be a string"))

    for index, point in enumerate(series.datapoints):
        field = f"{where}.datapoints[{index}]"
        if not isinstance(point, Sequence) or isinstance(point, (str, bytes)) or len(point) != 2:
            errors.append(_error(field, "must be a [value, timestamp] pair"))
            continue
        if not is_number(point[POINT_TIME_INDEX]):
            errors.append(_error(field, "timestamp must be numeric"))
        value = point[POINT_VALUE_INDEX]
        if value is not None and not is_number(value):
            errors.append(_error(field, "value must be numeric or null"))

    if require_stats and series.datapoints:
        stats = series.stats
        if not is_number(stats.avg):
            errors.append(_error(f"{where}.stats.avg", "must be numeric"))
        for name in ("min", "max"):
            value = getattr(stats, name)
            if value is not None and not is_number(value):
                errors.append(_error(f"{where}.stats.{name}", "must be numeric or null"))
    return errors


def validate_series_list(
    series_list: Iterable[Series | Mapping[str, Any]] | None,
    *,
    require_stats: bool = False,
    require_non_empty: bool = False,
) -> Result[tuple[Series, ...], ExportValidationError]:
    """Coerce *series_list* into :class:`Series` and check every datapoint.

    ``require_stats`` demands a numeric ``avg`` on each non-empty series, as
    the long format prints it. ``require_non_empty`` rejects an empty list,
    which the columnar format cannot build a time axis from.
    """
    if series_list is None or isinstance(series_list, (str, bytes, Mapping)):
        return Err(ExportValidationError.from_errors([_error("series_list", "must be a list of series")]))

    errors: list[dict[str, str]] = []
    coerced: list[Series] = []
    for index, item in enumerate(series_list):
        where = f"series_list[{index}]"
        try:
            series = as_series(item)
        except KeyError as exc:
            errors.append(_error(where, f"missing {exc.args[0]!r}"))
            continue
        except (TypeError, ValueError, AttributeError):
            errors.append(_error(where, "is not a series"))
            continue
        errors.extend(_check_series(series, where, require_stats))
        coerced.append(series)

    if require_non_empty and not coerced and not errors:
        errors.append(_error("series_list", "at least one series is required"))
    if errors:
        return Err(ExportValidationError.from_errors(errors))
    return Ok(tuple(coerced))


def validate_table(table: TableData | Mapping[str, Any] | None) -> Result[TableData, ExportValidationError]:
    """Check that every row has exactly one cell per column."""
    if table is None:
        return Err(ExportValidationError.from_errors([_error("table", "is required")]))
    try:
        data = as_table(table)
    except (TypeError, ValueError, AttributeError):
        return Err(ExportValidationError.from_errors([_error("table", "is not a table")]))

    errors: list[dict[str, str]] = []
    for index, column in enumerate(data.columns):
        if column.label is None:
            errors.append(_error(f"table.columns[{index}]", "needs a title or text"))

    width = len(data.columns)
    for index, row in enumerate(data.rows):
        if len(row) != width:
            errors.append(_error(f"table.rows[{index}]", f"has {len(row)} cells, expected {width}"))

    if errors:
        return Err(ExportValidationError.from_errors(errors))
    return Ok(data)
