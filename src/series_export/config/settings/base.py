"""Config settings – Settings base class and ExportSettings."""
from __future__ import annotations

import dataclasses
from typing import TYPE_CHECKING

from series_export.config.defaults import (
    DEFAULT_DATETIME_FORMAT,
    DEFAULT_EXPORTER_NAME,
    EXPORT_FILENAME,
)
from series_export.config.validation import InvalidSettingValueError

if TYPE_CHECKING:
    from series_export.application.export.models import ExportOptions


@dataclasses.dataclass
class Settings:
    """Base class for 12-factor settings."""

    _prefix: dataclasses.ClassVar[str] = ""

    def __post_init__(self) -> None:
        self._validate()

    def _validate(self) -> None:
        """Override to add cross-field validation."""


_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclasses.dataclass
class ExportSettings(Settings):
    """Defaults applied by :class:`~series_export.application.export.ExportService`.

    Read from ``SERIES_EXPORT_*`` environment variables, e.g.
    ``SERIES_EXPORT_TIMEZONE=utc``.
    """

    _prefix: dataclasses.ClassVar[str] = "SERIES_EXPORT"

    date_time_format: str = DEFAULT_DATETIME_FORMAT
    timezone: str = ""
    excel: bool = False
    exporter_name: str = DEFAULT_EXPORTER_NAME
    filename: str = EXPORT_FILENAME
    output_dir: str = "."
    log_level: str = "INFO"

    def _validate(self) -> None:
        if not self.filename.strip():
            raise InvalidSettingValueError("filename", self.filename, "must not be empty")
        if not self.filename.lower().endswith(".csv"):
            raise InvalidSettingValueError("filename", self.filename, "must end with .csv")
        if not self.date_time_format:
            raise InvalidSettingValueError(
                "date_time_format", self.date_time_format, "must not be empty"
            )
        if self.log_level.upper() not in _LOG_LEVELS:
            raise InvalidSettingValueError(
                "log_level", self.log_level, f"expected one of {', '.join(_LOG_LEVELS)}"
            )

    def options(self) -> "ExportOptions":
        """Return the :class:`ExportOptions` these settings describe."""
        from series_export.application.export.models import ExportOptions

        return ExportOptions(
            date_time_format=self.date_time_format,
            excel=self.excel,
            timezone=self.timezone,
        )


__all__ = ["ExportSettings", "Settings"]
