"""Decorators that turn functions of any calling convention into RxPy observables."""

from stream_decorators.array import array
from stream_decorators.auto_value import auto_value
from stream_decorators.callback import callback
from stream_decorators.config import TimerConfig
from stream_decorators.event import event
from stream_decorators.exceptions import CallbackError, PromiseRejectedError, StreamDecoratorError
from stream_decorators.from_awaitable import from_awaitable
from stream_decorators.interval import interval
from stream_decorators.later import later
from stream_decorators.node_callback import node_callback
from stream_decorators.poll import poll
from stream_decorators.promise import promise
from stream_decorators.repeatedly import repeatedly
from stream_decorators.sequentially import sequentially
from stream_decorators.value import value

__all__ = [
    "CallbackError",
    "PromiseRejectedError",
    "StreamDecoratorError",
    "TimerConfig",
    "array",
    "auto_value",
    "callback",
    "event",
    "from_awaitable",
    "interval",
    "later",
    "node_callback",
    "poll",
    "promise",
    "repeatedly",
    "sequentially",
    "value",
]
