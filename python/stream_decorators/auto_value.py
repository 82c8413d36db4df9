"""Decorator that picks an adapter from the shape of what the wrapped function returns."""

from collections.abc import Callable
from functools import partial
from typing import Any

import reactivex
from reactivex import Observable

from stream_decorators.array import from_sequence
from stream_decorators.event import from_emitter
from stream_decorators.promise import from_promise
from stream_decorators.shapes import Shape, classify
from stream_decorators.utils import Decorated, invoke_with


def auto_value[**P](
    fn: Callable[P, Any],
    event: str | None = None,
    transform: Callable[[Any], Any] | None = None,
) -> Decorated[P, Any]:
    """Call fn once and stream its result according to the shape it has.

    Dispatch order, first match wins:

    1. promise-like (thenable, future or awaitable): as ``promise``
    2. sequence (not text): as ``array``
    3. event emitter, only when ``event`` is given: as ``event``
    4. anything else: as ``value``

    fn is never called again whichever branch is taken.
    """
    builders: dict[Shape, Callable[[Any], Observable[Any]]] = {
        Shape.PROMISE: from_promise,
        Shape.SEQUENCE: from_sequence,
        Shape.EMITTER: partial(from_emitter, event_name=event, transform=transform),
        Shape.VALUE: reactivex.return_value,
    }

    def build(result: Any) -> Observable[Any]:
        return builders[classify(result, event)](result)

    return invoke_with(fn, build)
