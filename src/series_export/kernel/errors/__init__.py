"""Kernel error hierarchy – public re-export surface.

Hierarchy::

    BaseError
    ├── DomainError              (domain.py)
    │   └── ValidationError
    │       └── ExportValidationError
    ├── ApplicationError         (application.py)
    │   └── ConfigError          (series_export.config.validation)
    └── InfrastructureError      (infrastructure.py)
        └── FileSaveError
"""

from series_export.kernel.errors.application import ApplicationError
from series_export.kernel.errors.base import BaseError
from series_export.kernel.errors.domain import (
    DomainError,
    ExportValidationError,
    ValidationError,
)
from series_export.kernel.errors.infrastructure import FileSaveError, InfrastructureError

__all__ = [
    "ApplicationError",
    "BaseError",
    "DomainError",
    "ExportValidationError",
    "FileSaveError",
    "InfrastructureError",
    "ValidationError",
]
