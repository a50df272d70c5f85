"""Kernel types – Result monad."""
from series_export.kernel.types.result import Err, Ok, Result

__all__ = ["Err", "Ok", "Result"]
