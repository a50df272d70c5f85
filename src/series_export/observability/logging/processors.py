"""Observability – structlog processors and get_logger helper."""
from __future__ import annotations

from typing import Any

import structlog

import series_export


def add_export_context(
    logger: Any,        # noqa: ARG001
    method_name: str,   # noqa: ARG001
    event_dict: dict[str, Any],
) -> dict[str, Any]:
    """structlog processor tagging every event with the library version."""
    event_dict.setdefault("series_export_version", series_export.__version__)
    return event_dict


def get_logger(name: str | None = None, **initial_values: Any) -> Any:
    """Return a structlog logger, optionally bound to *initial_values*.

    Parameters
    ----------
    name:
        Logger name, usually the caller's ``__name__``.
    **initial_values:
        Key-value pairs bound on the returned logger.
    """
    logger = structlog.get_logger(name)
    if initial_values:
        logger = logger.bind(**initial_values)
    return logger


__all__ = ["add_export_context", "get_logger"]
