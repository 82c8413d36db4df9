"""Tests for array decorator."""

from typing import Any

import reactivex.operators as ops
from reactivex.testing.marbles import marbles_testing

from stream_decorators import array

type Lookup = dict[str | float, Any]


def test_array_emits_each_element_in_order() -> None:
    """Emits every element as a separate value, then completes."""
    with marbles_testing() as (start, _cold, _hot, exp):
        lookup: Lookup = {"a": 1, "b": 22}

        expected = exp("(a,b,|)", lookup)  # type: ignore[call-arg]

        result = start(array(lambda a, b: [a, b])(1, 22))
        assert result == expected


def test_array_folds_back_into_list() -> None:
    """Folding the stream reproduces the returned list."""
    results: list[list[int]] = []

    array(lambda a, b: [a, b])(1, 22).pipe(
        ops.reduce(lambda acc, x: [*acc, x], []),
    ).subscribe(on_next=results.append)

    assert results == [[1, 22]]


def test_array_empty_completes_without_values() -> None:
    """An empty sequence completes immediately."""
    results: list[object] = []
    completed: list[bool] = []

    array(lambda: [])().subscribe(
        on_next=results.append,
        on_completed=lambda: completed.append(True),
    )

    assert results == []
    assert completed == [True]


def test_array_raise_becomes_stream_error() -> None:
    errors: list[Exception] = []

    def fail() -> list[int]:
        raise RuntimeError("no items")

    array(fail)().subscribe(on_error=errors.append)

    assert len(errors) == 1
    assert isinstance(errors[0], RuntimeError)
