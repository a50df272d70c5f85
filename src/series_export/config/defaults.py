"""Config – default values shared by ExportSettings and the converters."""

DEFAULT_DATETIME_FORMAT = "YYYY-MM-DDTHH:mm:ssZZ"
DEFAULT_EXPORTER_NAME = "admin"
EXPORT_FILENAME = "grafana_data_export.csv"

__all__ = ["DEFAULT_DATETIME_FORMAT", "DEFAULT_EXPORTER_NAME", "EXPORT_FILENAME"]
