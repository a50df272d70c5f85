"""Application export – convert-and-save entry points and ExportService."""
from __future__ import annotations

from typing import Any, Callable, Mapping

from series_export.application.export.csv_export import (
    OptionsInput,
    SeriesInput,
    convert_series_list_to_csv,
    convert_series_list_to_csv_columns,
    convert_table_data_to_csv,
)
from series_export.application.export.download import (
    EXPORT_FILENAME,
    FileSaver,
    LocalFileSaver,
    save_blob,
)
from series_export.application.export.models import ExportOptions, TableData
from series_export.config.settings import ExportSettings
from series_export.kernel.errors import ExportValidationError
from series_export.kernel.time import Clock, SystemClock
from series_export.kernel.types import Err, Ok, Result
from series_export.observability.logging import JsonLoggerFactory, get_logger

__all__ = [
    "ExportService",
    "export_series_list_to_csv",
    "export_series_list_to_csv_columns",
    "export_table_data_to_csv",
]

_log = get_logger(__name__)


def export_series_list_to_csv(
    series_list: SeriesInput,
    options: OptionsInput = None,
    *,
    saver: FileSaver | None = None,
    clock: Clock | None = None,
) -> str:
    text = convert_series_list_to_csv(series_list, options, clock=clock)
    return save_blob(text, EXPORT_FILENAME, saver or LocalFileSaver())


def export_series_list_to_csv_columns(
    series_list: SeriesInput,
    options: OptionsInput = None,
    *,
    saver: FileSaver | None = None,
) -> str:
    text = convert_series_list_to_csv_columns(series_list, options)
    return save_blob(text, EXPORT_FILENAME, saver or LocalFileSaver())


def export_table_data_to_csv(
    table: TableData | Mapping[str, Any],
    excel: bool = False,
    *,
    saver: FileSaver | None = None,
) -> str:
    text = convert_table_data_to_csv(table, excel)
    return save_blob(text, EXPORT_FILENAME, saver or LocalFileSaver())


class ExportService:
    """Runs conversions with configured defaults and saves the result.

    Options passed per call are overlaid on ``settings.options()``; the
    saver defaults to a :class:`LocalFileSaver` rooted at
    ``settings.output_dir``.
    """

    def __init__(
        self,
        settings: ExportSettings | None = None,
        *,
        saver: FileSaver | None = None,
        clock: Clock | None = None,
    ) -> None:
        self._settings = settings or ExportSettings()
        self._saver = saver or LocalFileSaver(self._settings.output_dir)
        self._clock = clock or SystemClock()

    @property
    def settings(self) -> ExportSettings:
        return self._settings

    def configure_logging(self, *, stream: Any = None) -> None:
        """Install JSON logging at ``settings.log_level``."""
        JsonLoggerFactory.configure(self._settings.log_level, stream=stream)

    def _options(self, options: OptionsInput) -> ExportOptions:
        return ExportOptions.coerce(options, defaults=self._settings.options())

    def series_list_to_csv(self, series_list: SeriesInput, options: OptionsInput = None) -> str:
        return convert_series_list_to_csv(
            series_list,
            self._options(options),
            clock=self._clock,
            exporter_name=self._settings.exporter_name,
        )

    def series_list_to_csv_columns(self, series_list: SeriesInput, options: OptionsInput = None) -> str:
        return convert_series_list_to_csv_columns(series_list, self._options(options))

    def table_data_to_csv(self, table: TableData | Mapping[str, Any], excel: bool | None = None) -> str:
        return convert_table_data_to_csv(table, self._settings.excel if excel is None else excel)

    def export_series_list(self, series_list: SeriesInput, options: OptionsInput = None) -> str:
        """Save the long-format CSV; return the saver's location."""
        return self._save("series", lambda: self.series_list_to_csv(series_list, options))

    def export_series_list_columns(self, series_list: SeriesInput, options: OptionsInput = None) -> str:
        """Save the columnar CSV; return the saver's location."""
        return self._save("series_columns", lambda: self.series_list_to_csv_columns(series_list, options))

    def export_table(self, table: TableData | Mapping[str, Any], excel: bool | None = None) -> str:
        """Save the table CSV; return the saver's location."""
        return self._save("table", lambda: self.table_data_to_csv(table, excel))

    def try_export_series_list(
        self, series_list: SeriesInput, options: OptionsInput = None
    ) -> Result[str, ExportValidationError]:
        return self._attempt(lambda: self.export_series_list(series_list, options))

    def try_export_series_list_columns(
        self, series_list: SeriesInput, options: OptionsInput = None
    ) -> Result[str, ExportValidationError]:
        return self._attempt(lambda: self.export_series_list_columns(series_list, options))

    def try_export_table(
        self, table: TableData | Mapping[str, Any], excel: bool | None = None
    ) -> Result[str, ExportValidationError]:
        return self._attempt(lambda: self.export_table(table, excel))

    def _save(self, kind: str, render: Callable[[], str]) -> str:
        filename = self._settings.filename
        try:
            text = render()
        except ExportValidationError as exc:
            _log.warning("export.rejected", kind=kind, code=exc.code, errors=exc.errors)
            raise
        location = save_blob(text, filename, self._saver)
        _log.info(
            "export.completed",
            kind=kind,
            filename=filename,
            size_bytes=len(text.encode("utf-8")),
            location=location,
        )
        return location

    @staticmethod
    def _attempt(action: Callable[[], str]) -> Result[str, ExportValidationError]:
        try:
            return Ok(action())
        except ExportValidationError as exc:
            return Err(exc)
