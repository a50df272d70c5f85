"""Application-layer errors."""

from __future__ import annotations

from series_export.kernel.errors.base import BaseError


class ApplicationError(BaseError):
    """Misuse of the library outside of a single export's input."""

    default_code = "application_error"


__all__ = ["ApplicationError"]
