"""Kernel time – Clock port + implementations."""
from series_export.kernel.time.clock import Clock, FrozenClock, SystemClock

__all__ = ["Clock", "FrozenClock", "SystemClock"]
