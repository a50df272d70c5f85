"""Testing helpers for code built on series_export."""
