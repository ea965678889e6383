"""Tests for relver.core.result module."""

import pytest

from relver.core.result import Err, Ok, Result, is_err, is_ok


class TestOk:
    def test_unwrap(self) -> None:
        assert Ok(42).unwrap() == 42
        assert Ok(42).unwrap_or(0) == 42

    def test_flags(self) -> None:
        assert Ok(1).is_ok() is True
        assert Ok(1).is_err() is False

    def test_map(self) -> None:
        assert Ok(21).map(lambda x: x * 2) == Ok(42)
        assert Ok(21).map_err(lambda e: f"error: {e}") == Ok(21)

    def test_flat_map(self) -> None:
        result: Result[int, str] = Ok(21)
        assert result.flat_map(lambda x: Ok(x * 2)) == Ok(42)
        assert result.flat_map(lambda x: Err("nope")) == Err("nope")


class TestErr:
    def test_unwrap_raises(self) -> None:
        with pytest.raises(ValueError, match="called unwrap on Err"):
            Err("bad").unwrap()

    def test_unwrap_or(self) -> None:
        assert Err("bad").unwrap_or(7) == 7

    def test_map(self) -> None:
        assert Err("bad").map(lambda x: x) == Err("bad")
        assert Err("bad").map_err(str.upper) == Err("BAD")

    def test_map_err(self) -> None:
        assert Err(404).map_err(str) == Err("404")
        assert Err(1).unwrap_or("fallback") == "fallback"

    def test_flat_map_short_circuits(self) -> None:
        called: list[int] = []
        result: Result[int, str] = Err("bad")
        assert result.flat_map(lambda x: Ok(called.append(x))) == Err("bad")
        assert called == []


def test_type_guards() -> None:
    assert is_ok(Ok(1)) and not is_err(Ok(1))
    assert is_err(Err(1)) and not is_ok(Err(1))


def test_pattern_matching() -> None:
    match Ok("1.0.0"):
        case Ok(value):
            assert value == "1.0.0"
        case Err(_):
            pytest.fail("expected Ok")
