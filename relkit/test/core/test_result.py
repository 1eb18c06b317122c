"""Tests for relkit.core.result module."""

import pytest

from relkit.core.result import Err, Ok, Result


def test_ok_unwrap() -> None:
    assert Ok("1.5.0").unwrap() == "1.5.0"
    assert repr(Ok("1.5.0")) == "Ok('1.5.0')"


def test_err_unwrap_raises() -> None:
    with pytest.raises(ValueError, match="called unwrap on Err"):
        Err("boom").unwrap()


def test_map_err() -> None:
    ok: Result[int, str] = Ok(1)

    assert ok.map_err(str.upper) is ok
    assert Err("boom").map_err(str.upper) == Err("BOOM")


def test_pattern_matching() -> None:
    def describe(result: Result[str, str]) -> str:
        match result:
            case Ok(value):
                return f"ok:{value}"
            case Err(error):
                return f"err:{error}"

    assert describe(Ok("a")) == "ok:a"
    assert describe(Err("b")) == "err:b"
