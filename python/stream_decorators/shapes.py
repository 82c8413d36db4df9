"""Runtime shape classification for values returned by wrapped functions."""

import asyncio
import concurrent.futures
import inspect
from collections.abc import Callable, Sequence
from enum import Enum, auto
from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class Thenable(Protocol):
    def then(
        self, on_fulfilled: Callable[[Any], Any], on_rejected: Callable[[Any], Any]
    ) -> Any: ...


@runtime_checkable
class EventEmitter(Protocol):
    def on(self, event: str, listener: Callable[..., Any]) -> Any: ...

    def remove_listener(self, event: str, listener: Callable[..., Any]) -> Any: ...


class Shape(Enum):
    """Recognized result shapes, in dispatch priority order."""

    PROMISE = auto()
    SEQUENCE = auto()
    EMITTER = auto()
    VALUE = auto()


def is_promise_like(result: object) -> bool:
    return (
        isinstance(result, Thenable)
        or isinstance(result, (asyncio.Future, concurrent.futures.Future))
        or inspect.isawaitable(result)
    )


def is_sequence_like(result: object) -> bool:
    return isinstance(result, Sequence) and not isinstance(result, (str, bytes, bytearray))


def classify(result: object, event: str | None = None) -> Shape:
    """Classify an already-produced result; the first matching shape wins.

    Overlapping shapes (a list subclass exposing then(), say) resolve by priority:
    promise, sequence, emitter (only when an event name is given), plain value.
    """
    if is_promise_like(result):
        return Shape.PROMISE
    if is_sequence_like(result):
        return Shape.SEQUENCE
    if event is not None and isinstance(result, EventEmitter):
        return Shape.EMITTER
    return Shape.VALUE
