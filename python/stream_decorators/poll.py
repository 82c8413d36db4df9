"""Call a function on every period and emit what it returns."""

import logging
from collections.abc import Callable
from functools import wraps

from reactivex import Observable
from reactivex.abc import DisposableBase, ObserverBase, SchedulerBase
from reactivex.typing import RelativeTime

from stream_decorators.config import TimerConfig
from stream_decorators.utils import Decorated, create_gated, resolve_scheduler

logger = logging.getLogger(__name__)


def poll[**P, T](
    period: RelativeTime,
    fn: Callable[P, T],
    maybe_cfg: TimerConfig | None = None,
) -> Decorated[P, T]:
    """Re-run fn on every tick and emit each fresh result.

    The first tick is one period after subscription. Never completes; use take() or
    dispose to stop polling. A raise on a tick ends the stream with that error.
    """
    cfg = maybe_cfg or TimerConfig()

    @wraps(fn)
    def decorated(*args: P.args, **kwargs: P.kwargs) -> Observable[T]:
        def subscribe(
            observer: ObserverBase[T], scheduler: SchedulerBase | None = None
        ) -> DisposableBase:
            def tick(state: None) -> None:
                try:
                    result = fn(*args, **kwargs)
                except Exception as e:
                    logger.debug("poll tick failed: %r", e)
                    observer.on_error(e)
                    return state
                observer.on_next(result)
                return state

            return resolve_scheduler(cfg, scheduler).schedule_periodic(period, tick)

        return create_gated(subscribe)

    return decorated
