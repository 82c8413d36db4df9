"""Shared glue for building decorated functions on top of RxPy observables."""

import logging
import threading
from collections.abc import Callable
from functools import wraps
from typing import Any

import reactivex
from reactivex import Observable, Observer
from reactivex.abc import DisposableBase, ObserverBase, SchedulerBase
from reactivex.disposable import Disposable
from reactivex.scheduler import TimeoutScheduler

from stream_decorators.config import TimerConfig

type Decorated[**P, T] = Callable[P, Observable[T]]
type Subscribe[T] = Callable[[ObserverBase[T], SchedulerBase | None], DisposableBase]

logger = logging.getLogger(__name__)


def invoke_with[**P, R, T](
    fn: Callable[P, R],
    build: Callable[[R], Observable[T]],
) -> Decorated[P, T]:
    """Decorate fn so each call runs it once, eagerly, and builds a stream from its result.

    A synchronous raise, from fn or from building on a result of the wrong shape,
    becomes a stream error instead of reaching the caller.
    """

    @wraps(fn)
    def decorated(*args: P.args, **kwargs: P.kwargs) -> Observable[T]:
        try:
            return build(fn(*args, **kwargs))
        except Exception as e:
            logger.debug("%s raised during invocation: %r", _name(fn), e)
            return reactivex.throw(e)

    return decorated


def create_gated[T](subscribe: Subscribe[T]) -> Observable[T]:
    """Like reactivex.create, but nothing reaches the observer once disposal starts.

    Emissions and disposal share a re-entrant lock, so a timer or listener already in
    flight on another thread either finishes before dispose() returns or is dropped.
    """

    def _subscribe(
        observer: ObserverBase[T], scheduler: SchedulerBase | None = None
    ) -> DisposableBase:
        lock = threading.RLock()
        stopped = False

        def gate(emit: Callable[..., None]) -> Callable[..., None]:
            def _emit(*args: Any) -> None:
                with lock:
                    if not stopped:
                        emit(*args)

            return _emit

        gated: Observer[T] = Observer(
            gate(observer.on_next),
            gate(observer.on_error),
            gate(observer.on_completed),
        )
        inner = subscribe(gated, scheduler)

        def dispose() -> None:
            nonlocal stopped
            with lock:
                stopped = True
            inner.dispose()

        return Disposable(dispose)

    return reactivex.create(_subscribe)


def resolve_scheduler(cfg: TimerConfig, scheduler: SchedulerBase | None) -> SchedulerBase:
    """Pick the configured scheduler, then the subscriber's, then reactivex's timeout default."""
    return cfg.scheduler or scheduler or TimeoutScheduler.singleton()


def _name(fn: Callable[..., Any]) -> str:
    return getattr(fn, "__qualname__", repr(fn))
