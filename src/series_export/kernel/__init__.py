"""Kernel – framework-agnostic building blocks."""

from series_export.kernel.errors import (
    ApplicationError,
    BaseError,
    DomainError,
    InfrastructureError,
    ValidationError,
)

__all__ = [
    "ApplicationError",
    "BaseError",
    "DomainError",
    "InfrastructureError",
    "ValidationError",
]
