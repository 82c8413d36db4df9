"""Emit a computed value once after a delay."""

from collections.abc import Callable
from functools import partial

from reactivex import Observable
from reactivex.abc import DisposableBase, ObserverBase, SchedulerBase
from reactivex.typing import RelativeTime

from stream_decorators.config import TimerConfig
from stream_decorators.utils import Decorated, create_gated, invoke_with, resolve_scheduler


def _delayed[T](period: RelativeTime, cfg: TimerConfig, value: T) -> Observable[T]:
    def subscribe(
        observer: ObserverBase[T], scheduler: SchedulerBase | None = None
    ) -> DisposableBase:
        def emit(_sched: SchedulerBase, _state: None = None) -> None:
            observer.on_next(value)
            observer.on_completed()

        return resolve_scheduler(cfg, scheduler).schedule_relative(period, emit)

    return create_gated(subscribe)


def later[**P, T](
    period: RelativeTime,
    fn: Callable[P, T],
    maybe_cfg: TimerConfig | None = None,
) -> Decorated[P, T]:
    """Call fn once and emit its result a single time, period after subscription.

    A sequence result is emitted as one value, not expanded.
    """
    cfg = maybe_cfg or TimerConfig()
    return invoke_with(fn, partial(_delayed, period, cfg))
