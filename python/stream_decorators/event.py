"""Decorator for functions that return an event emitter."""

import logging
from collections.abc import Callable
from functools import partial
from typing import Any

from reactivex import Observable
from reactivex.abc import DisposableBase, ObserverBase, SchedulerBase
from reactivex.disposable import Disposable

from stream_decorators.shapes import EventEmitter
from stream_decorators.utils import Decorated, create_gated, invoke_with

logger = logging.getLogger(__name__)


def from_emitter[T](
    emitter: EventEmitter,
    event_name: str,
    transform: Callable[[Any], T] | None = None,
) -> Observable[T]:
    """Emit the payload of every event_name occurrence on emitter.

    Only the first listener argument is used as the payload (None when the event
    carries none), passed through transform if given. The stream never completes on
    its own; disposing removes the listener. A raising transform ends the stream with
    that error.
    """

    def subscribe(
        observer: ObserverBase[T], _scheduler: SchedulerBase | None = None
    ) -> DisposableBase:
        def listener(*args: Any) -> None:
            payload = args[0] if args else None
            if transform is None:
                observer.on_next(payload)
                return
            try:
                mapped = transform(payload)
            except Exception as e:
                observer.on_error(e)
                return
            observer.on_next(mapped)

        emitter.on(event_name, listener)
        logger.debug("listening for %r on %r", event_name, emitter)

        def dispose() -> None:
            emitter.remove_listener(event_name, listener)
            logger.debug("stopped listening for %r on %r", event_name, emitter)

        return Disposable(dispose)

    return create_gated(subscribe)


def event[**P, T](
    fn: Callable[P, EventEmitter],
    event_name: str,
    transform: Callable[[Any], T] | None = None,
) -> Decorated[P, T]:
    """Call fn immediately for an emitter and stream every event_name it emits.

    Example:
        >>> data = event(lambda: socket, "data", bytes.decode)
        >>> sub = data().subscribe(on_next=print)
        >>> sub.dispose()  # removes the listener
    """
    return invoke_with(fn, partial(from_emitter, event_name=event_name, transform=transform))
