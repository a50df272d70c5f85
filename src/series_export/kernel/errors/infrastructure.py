"""Infrastructure errors – failures while persisting an export."""

from __future__ import annotations

from typing import Any

from series_export.kernel.errors.base import BaseError


class InfrastructureError(BaseError):
    """I/O failure that is not caused by the export input."""

    default_code = "infrastructure_error"


class FileSaveError(InfrastructureError):
    """A file saver could not persist the CSV blob."""

    default_code = "file_save_error"

    def __init__(
        self,
        filename: str,
        message: str | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(message or f"Could not save '{filename}'", **kwargs)
        self.filename = filename


__all__ = ["FileSaveError", "InfrastructureError"]
