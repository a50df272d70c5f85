"""Testing fakes."""
from series_export.application.export.download import InMemoryFileSaver
from series_export.testing.fakes.clock import FakeClock

__all__ = ["FakeClock", "InMemoryFileSaver"]
