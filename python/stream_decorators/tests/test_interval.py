"""Tests for interval generator."""

from unittest.mock import Mock

from reactivex.testing import ReactiveTest, TestScheduler

from stream_decorators import TimerConfig, interval

on_next = ReactiveTest.on_next
on_error = ReactiveTest.on_error


def test_interval_emits_at_subscribe_then_every_period() -> None:
    """Emits the value on subscription, then once per period."""
    scheduler = TestScheduler()
    test = interval(10, lambda a: a, TimerConfig(scheduler=scheduler))

    results = scheduler.start(lambda: test("a"), disposed=235)

    assert results.messages == [
        on_next(200, "a"),
        on_next(210, "a"),
        on_next(220, "a"),
        on_next(230, "a"),
    ]


def test_interval_calls_fn_once() -> None:
    scheduler = TestScheduler()
    spy = Mock(return_value="a")
    test = interval(10, spy, TimerConfig(scheduler=scheduler))

    scheduler.start(lambda: test(), disposed=500)

    spy.assert_called_once()


def test_interval_unsubscribe_from_handler_stops_emissions() -> None:
    """Unsubscribing after k values guarantees no k+1th value."""
    scheduler = TestScheduler()
    results: list[str] = []

    stream = interval(1, lambda a: a, TimerConfig(scheduler=scheduler))("a")

    def on_value(value: str) -> None:
        results.append(value)
        if len(results) > 5:
            subscription.dispose()

    subscription = stream.subscribe(on_next=on_value)
    scheduler.advance_to(100)

    assert results == ["a"] * 6


def test_interval_uses_subscriber_scheduler() -> None:
    """Without a configured scheduler, the one given to subscribe() drives timers."""
    scheduler = TestScheduler()
    results: list[int] = []

    interval(5, lambda: 1)().subscribe(on_next=results.append, scheduler=scheduler)
    scheduler.advance_by(12)

    assert results == [1, 1, 1]


def test_interval_raise_emits_error_without_timer() -> None:
    """A raising fn ends the stream with the error and schedules nothing."""
    boom = ValueError("boom")
    timers = Mock()
    errors: list[Exception] = []

    def fail() -> str:
        raise boom

    interval(10, fail, TimerConfig(scheduler=timers))().subscribe(on_error=errors.append)

    assert errors == [boom]
    timers.schedule_periodic.assert_not_called()
