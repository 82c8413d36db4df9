"""Tests for poll generator."""

import itertools
from unittest.mock import Mock

import reactivex.operators as ops
from reactivex.testing import ReactiveTest, TestScheduler

from stream_decorators import TimerConfig, poll

on_next = ReactiveTest.on_next
on_completed = ReactiveTest.on_completed
on_error = ReactiveTest.on_error


def test_poll_emits_fresh_result_every_tick() -> None:
    """fn runs on every tick, starting one period after subscription."""
    scheduler = TestScheduler()
    counter = itertools.count(1)
    test = poll(10, lambda: next(counter), TimerConfig(scheduler=scheduler))

    results = scheduler.start(lambda: test(), disposed=235)

    assert results.messages == [on_next(210, 1), on_next(220, 2), on_next(230, 3)]


def test_poll_take_two() -> None:
    """Taking two polls of a constant fn gives two equal values."""
    scheduler = TestScheduler()
    test = poll(1, lambda: "foo", TimerConfig(scheduler=scheduler))

    results = scheduler.start(
        lambda: test().pipe(
            ops.take(2),
            ops.reduce(lambda acc, x: [*acc, x], []),
        )
    )

    assert results.messages == [on_next(202, ["foo", "foo"]), on_completed(202)]


def test_poll_forwards_arguments_and_is_lazy() -> None:
    scheduler = TestScheduler()
    spy = Mock(return_value="foo")

    stream = poll(10, spy, TimerConfig(scheduler=scheduler))("a", key="b")
    spy.assert_not_called()

    subscription = stream.subscribe()
    scheduler.advance_by(25)
    subscription.dispose()
    scheduler.advance_by(100)

    assert spy.call_count == 2
    spy.assert_called_with("a", key="b")


def test_poll_tick_error_ends_stream() -> None:
    """A raise on a tick ends the stream and stops polling."""
    scheduler = TestScheduler()
    boom = RuntimeError("boom")
    spy = Mock(side_effect=[1, boom, 3])

    test = poll(10, spy, TimerConfig(scheduler=scheduler))
    results = scheduler.start(lambda: test())

    assert results.messages == [on_next(210, 1), on_error(220, boom)]
    assert spy.call_count == 2
