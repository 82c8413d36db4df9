"""Cycle through a computed sequence, one element per period."""

import itertools
from collections.abc import Callable, Sequence
from functools import partial

import reactivex
from reactivex import Observable
from reactivex.abc import DisposableBase, ObserverBase, SchedulerBase
from reactivex.typing import RelativeTime

from stream_decorators.config import TimerConfig
from stream_decorators.utils import Decorated, create_gated, invoke_with, resolve_scheduler


def _cycle[T](period: RelativeTime, cfg: TimerConfig, values: Sequence[T]) -> Observable[T]:
    items = list(values)
    if not items:
        return reactivex.empty()

    def subscribe(
        observer: ObserverBase[T], scheduler: SchedulerBase | None = None
    ) -> DisposableBase:
        _scheduler = resolve_scheduler(cfg, scheduler)
        cycle = itertools.cycle(items)
        observer.on_next(next(cycle))

        def tick(state: None) -> None:
            observer.on_next(next(cycle))
            return state

        return _scheduler.schedule_periodic(period, tick)

    return create_gated(subscribe)


def repeatedly[**P, T](
    period: RelativeTime,
    fn: Callable[P, Sequence[T]],
    maybe_cfg: TimerConfig | None = None,
) -> Decorated[P, T]:
    """Call fn once for a sequence and emit its elements cyclically, one per period.

    The first element is emitted at subscription; after the last element the cycle
    starts over. Never completes; an empty sequence completes immediately.
    """
    cfg = maybe_cfg or TimerConfig()
    return invoke_with(fn, partial(_cycle, period, cfg))
