"""Decorator for functions that return a plain value synchronously."""

from collections.abc import Callable

import reactivex

from stream_decorators.utils import Decorated, invoke_with


def value[**P, T](fn: Callable[P, T]) -> Decorated[P, T]:
    """Emit fn's return value once, then complete. A raise becomes the stream error."""
    return invoke_with(fn, reactivex.return_value)
