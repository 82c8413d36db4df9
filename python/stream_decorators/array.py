"""Decorator for functions that return a sequence of values."""

from collections.abc import Callable, Sequence

import reactivex
from reactivex import Observable

from stream_decorators.utils import Decorated, invoke_with


def from_sequence[T](items: Sequence[T]) -> Observable[T]:
    """Emit each element in order, then complete. An empty sequence just completes."""
    return reactivex.from_iterable(items)


def array[**P, T](fn: Callable[P, Sequence[T]]) -> Decorated[P, T]:
    """Emit every element of the sequence fn returns as a separate value."""
    return invoke_with(fn, from_sequence)
