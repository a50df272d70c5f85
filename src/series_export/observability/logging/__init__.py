"""Observability – structlog configuration and logger lookup."""
from series_export.observability.logging.factory import JsonLoggerFactory
from series_export.observability.logging.processors import add_export_context, get_logger

__all__ = ["JsonLoggerFactory", "add_export_context", "get_logger"]
