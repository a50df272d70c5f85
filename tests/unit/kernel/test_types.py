"""Unit tests for the Result monad."""

from __future__ import annotations

import pytest

from series_export.kernel.errors import ExportValidationError
from series_export.kernel.types import Err, Ok


class TestResultMonad:
    def test_ok_unwrap(self) -> None:
        assert Ok(42).unwrap() == 42

    def test_ok_is_ok(self) -> None:
        r = Ok("v")
        assert r.is_ok() is True
        assert r.is_err() is False

    def test_ok_map(self) -> None:
        assert Ok(2).map(lambda x: x * 3).unwrap() == 6

    def test_ok_equality(self) -> None:
        assert Ok((1, 2)) == Ok((1, 2))
        assert Ok(1) != Ok(2)

    def test_err_unwrap_raises_carried_error(self) -> None:
        err = ExportValidationError("nope")
        with pytest.raises(ExportValidationError) as info:
            Err(err).unwrap()
        assert info.value is err

    def test_err_unwrap_or(self) -> None:
        assert Err(ValueError("x")).unwrap_or("fallback") == "fallback"

    def test_err_map_is_noop(self) -> None:
        r = Err(ValueError("x"))
        assert r.map(lambda v: v) is r
        assert r.is_err() is True

    def test_repr(self) -> None:
        assert repr(Ok(1)) == "Ok(1)"
        assert repr(Err(ValueError("x"))).startswith("Err(ValueError(")
