"""Application – use-case level export helpers."""
