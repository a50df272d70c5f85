"""Domain errors – rejected export input."""

from __future__ import annotations

from typing import Any

from series_export.kernel.errors.base import BaseError


class DomainError(BaseError):
    """Input data breaks a rule of the export domain."""

    default_code = "domain_error"


class ValidationError(DomainError):
    """Input data does not meet validation rules.

    ``errors`` holds one ``{"field": ..., "message": ...}`` item per failure.
    """

    default_code = "validation_error"

    def __init__(
        self,
        message: str,
        *,
        errors: list[dict[str, Any]] | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(message, **kwargs)
        self.errors: list[dict[str, Any]] = list(errors or [])

    def to_dict(self) -> dict[str, Any]:
        payload = super().to_dict()
        payload["errors"] = self.errors
        return payload


class ExportValidationError(ValidationError):
    """Series or table data cannot be turned into well-formed CSV."""

    default_code = "export_validation_error"

    @classmethod
    def from_errors(cls, errors: list[dict[str, Any]]) -> "ExportValidationError":
        first = errors[0]["message"] if errors else "invalid export input"
        extra = f" (+{len(errors) - 1} more)" if len(errors) > 1 else ""
        return cls(f"{first}{extra}", errors=errors)


__all__ = [
    "DomainError",
    "ExportValidationError",
    "ValidationError",
]
