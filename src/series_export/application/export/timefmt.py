"""Application export – timestamp formatting with ``arrow`` patterns."""
from __future__ import annotations

from datetime import datetime

import arrow
from arrow.parser import ParserError

from series_export.kernel.errors import ExportValidationError

__all__ = ["LOCAL_TIMEZONES", "UTC_TIMEZONE", "format_datetime", "format_timestamp"]

UTC_TIMEZONE = "utc"
LOCAL_TIMEZONES = frozenset({"", "browser", "local"})


def _to_zone(moment: arrow.Arrow, timezone: str | None) -> arrow.Arrow:
    zone = (timezone or "").strip()
    if zone.lower() == UTC_TIMEZONE:
        return moment.to("UTC")
    if zone.lower() in LOCAL_TIMEZONES:
        return moment.to("local")
    try:
        return moment.to(zone)
    except (ParserError, ValueError) as exc:
        raise ExportValidationError(
            f"Unknown timezone {zone!r}",
            errors=[{"field": "timezone", "message": f"unknown timezone {zone!r}"}],
            cause=exc,
        ) from exc


def format_timestamp(timestamp_ms: float, pattern: str, timezone: str | None = "") -> str:
    """Format epoch milliseconds in *timezone* using an arrow token pattern."""
    moment = arrow.Arrow.fromtimestamp(float(timestamp_ms) / 1000, tzinfo="UTC")
    return _to_zone(moment, timezone).format(pattern)


def format_datetime(value: datetime, pattern: str, timezone: str | None = "") -> str:
    return _to_zone(arrow.get(value), timezone).format(pattern)
