"""Emit a computed sequence one element per period, then complete."""

from collections import deque
from collections.abc import Callable, Sequence
from functools import partial

import reactivex
from reactivex import Observable
from reactivex.abc import DisposableBase, ObserverBase, SchedulerBase
from reactivex.disposable import MultipleAssignmentDisposable
from reactivex.typing import RelativeTime

from stream_decorators.config import TimerConfig
from stream_decorators.utils import Decorated, create_gated, invoke_with, resolve_scheduler


def _one_by_one[T](period: RelativeTime, cfg: TimerConfig, values: Sequence[T]) -> Observable[T]:
    items = list(values)
    if not items:
        return reactivex.empty()

    def subscribe(
        observer: ObserverBase[T], scheduler: SchedulerBase | None = None
    ) -> DisposableBase:
        _scheduler = resolve_scheduler(cfg, scheduler)
        # per-subscription copy, so resubscribing starts from the first element
        pending = deque(items)
        timer = MultipleAssignmentDisposable()

        def step(sched: SchedulerBase, _state: None = None) -> None:
            observer.on_next(pending.popleft())
            if pending:
                timer.disposable = sched.schedule_relative(period, step)
            else:
                observer.on_completed()

        step(_scheduler)
        return timer

    return create_gated(subscribe)


def sequentially[**P, T](
    period: RelativeTime,
    fn: Callable[P, Sequence[T]],
    maybe_cfg: TimerConfig | None = None,
) -> Decorated[P, T]:
    """Call fn once for a sequence and emit element i after i periods, then complete.

    Timing starts at subscription, not at the call.
    """
    cfg = maybe_cfg or TimerConfig()
    return invoke_with(fn, partial(_one_by_one, period, cfg))
