"""
series_export – CSV export of time series and tables.

Import path convention::

    from series_export.application.export import convert_series_list_to_csv
    from series_export.application.export import ExportService
    from series_export.kernel.errors import ValidationError
"""

__version__ = "0.1.0"
__all__ = ["__version__"]
