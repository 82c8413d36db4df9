"""Emit a computed value at subscription and then on every period."""

from collections.abc import Callable
from functools import partial

from reactivex import Observable
from reactivex.abc import DisposableBase, ObserverBase, SchedulerBase
from reactivex.typing import RelativeTime

from stream_decorators.config import TimerConfig
from stream_decorators.utils import Decorated, create_gated, invoke_with, resolve_scheduler


def _every[T](period: RelativeTime, cfg: TimerConfig, value: T) -> Observable[T]:
    def subscribe(
        observer: ObserverBase[T], scheduler: SchedulerBase | None = None
    ) -> DisposableBase:
        _scheduler = resolve_scheduler(cfg, scheduler)
        observer.on_next(value)

        def tick(state: None) -> None:
            observer.on_next(value)
            return state

        return _scheduler.schedule_periodic(period, tick)

    return create_gated(subscribe)


def interval[**P, T](
    period: RelativeTime,
    fn: Callable[P, T],
    maybe_cfg: TimerConfig | None = None,
) -> Decorated[P, T]:
    """Call fn once, then emit its value immediately and again every period, forever."""
    cfg = maybe_cfg or TimerConfig()
    return invoke_with(fn, partial(_every, period, cfg))
