"""Application export – CSV export of time series and tables."""
from series_export.application.export.cells import (
    csv_escaped,
    format_cell,
    format_row,
    format_special_header,
    html_decoded,
    markup_unescaped,
)
from series_export.application.export.csv_export import (
    convert_series_list_to_csv,
    convert_series_list_to_csv_columns,
    convert_table_data_to_csv,
    split_alias,
)
from series_export.application.export.download import (
    CSV_MEDIA_TYPE,
    EXPORT_FILENAME,
    CsvBlob,
    FileSaver,
    InMemoryFileSaver,
    LocalFileSaver,
    save_blob,
)
from series_export.application.export.export_service import (
    ExportService,
    export_series_list_to_csv,
    export_series_list_to_csv_columns,
    export_table_data_to_csv,
)
from series_export.application.export.merge import merge_series_by_time
from series_export.application.export.models import (
    DEFAULT_DATETIME_FORMAT,
    ExportOptions,
    Series,
    SeriesStats,
    TableColumn,
    TableData,
)
from series_export.application.export.timefmt import format_timestamp
from series_export.application.export.validation import validate_series_list, validate_table

__all__ = [
    "CSV_MEDIA_TYPE",
    "CsvBlob",
    "DEFAULT_DATETIME_FORMAT",
    "EXPORT_FILENAME",
    "ExportOptions",
    "ExportService",
    "FileSaver",
    "InMemoryFileSaver",
    "LocalFileSaver",
    "Series",
    "SeriesStats",
    "TableColumn",
    "TableData",
    "convert_series_list_to_csv",
    "convert_series_list_to_csv_columns",
    "convert_table_data_to_csv",
    "csv_escaped",
    "export_series_list_to_csv",
    "export_series_list_to_csv_columns",
    "export_table_data_to_csv",
    "format_cell",
    "format_row",
    "format_special_header",
    "format_timestamp",
    "html_decoded",
    "markup_unescaped",
    "merge_series_by_time",
    "save_blob",
    "split_alias",
    "validate_series_list",
    "validate_table",
]
