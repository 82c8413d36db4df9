"""Decorator for functions that report their result through a trailing callback."""

from collections.abc import Callable
from functools import wraps
from typing import Any

from reactivex import Observable
from reactivex.subject import AsyncSubject

from stream_decorators.utils import Decorated


def callback[T](fn: Callable[..., object]) -> Decorated[..., T]:
    """Turn fn(*args, done) into a function of *args returning an Observable.

    The first call to done(value) emits value and completes. There is no error
    channel: whatever done receives is a value. The callback may fire before anyone
    subscribes; the outcome is kept for late subscribers.

    Example:
        >>> read = callback(lambda path, done: done(f"contents of {path}"))
        >>> read("a.txt").subscribe(on_next=print)
        contents of a.txt
    """

    @wraps(fn)
    def decorated(*args: Any, **kwargs: Any) -> Observable[T]:
        subject: AsyncSubject[T] = AsyncSubject()

        def done(result: T) -> None:
            subject.on_next(result)
            subject.on_completed()

        try:
            fn(*args, done, **kwargs)
        except Exception as e:
            subject.on_error(e)
        return subject

    return decorated
