"""Tests for DelimiterSpec construction and conveniences."""
from __future__ import annotations

import dataclasses
import threading

import pytest

from textparser.core.delimiters import DelimiterSpec
from textparser.core.exceptions import ConfigError, UnboundVariableError


def test_accessors() -> None:
    spec = DelimiterSpec("*(", ")*")
    assert spec.start == "*("
    assert spec.end == ")*"


@pytest.mark.parametrize(
    ("start", "end", "field"),
    [
        ("", ")*", "start"),
        ("*(", "", "end"),
        (None, ")*", "start"),
        ("*(", None, "end"),
        (1, ")*", "start"),
    ],
)
def test_invalid_markers_raise_config_error(start, end, field: str) -> None:
    with pytest.raises(ConfigError) as exc_info:
        DelimiterSpec(start, end)
    assert exc_info.value.context["field"] == field
    assert isinstance(exc_info.value, ValueError)


def test_spec_is_immutable_and_hashable() -> None:
    spec = DelimiterSpec("*(", ")*")
    with pytest.raises(dataclasses.FrozenInstanceError):
        spec.start = "<("  # type: ignore[misc]
    assert spec == DelimiterSpec("*(", ")*")
    assert len({spec, DelimiterSpec("*(", ")*")}) == 1


def test_repr_shows_markers() -> None:
    assert repr(DelimiterSpec("*(", ")*")) == "DelimiterSpec(start='*(', end=')*')"


def test_parse_delegates_to_scanner() -> None:
    spec = DelimiterSpec("<(", ")>")
    assert spec.parse("<(a)> <(b)>", {"a": "1", "b": "2"}) == "1 2"


def test_parse_propagates_errors() -> None:
    with pytest.raises(UnboundVariableError):
        DelimiterSpec("*(", ")*").parse("*(a)*", {})


def test_parse_async_delegates_to_runner() -> None:
    done = threading.Event()
    results: list[str] = []

    def on_done(result: str) -> None:
        results.append(result)
        done.set()

    future = DelimiterSpec("*(", ")*").parse_async(
        "Hi *(name)*", {"name": "Ann"}, on_done=on_done, on_error=lambda exc: None
    )
    assert future.result(timeout=5) == "Hi Ann"
    assert done.wait(timeout=5)
    assert results == ["Hi Ann"]
