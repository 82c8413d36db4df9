"""Decorator for functions that report through an error-first callback."""

from collections.abc import Callable
from functools import wraps
from typing import Any

from reactivex import Observable
from reactivex.subject import AsyncSubject

from stream_decorators.exceptions import CallbackError, as_exception
from stream_decorators.utils import Decorated


def node_callback[T](fn: Callable[..., object]) -> Decorated[..., T]:
    """Turn fn(*args, done) where done(error, value) into a function returning an Observable.

    A non-None error ends the stream with that error (wrapped in CallbackError when it
    is not an exception); otherwise value is emitted and the stream completes. Only the
    first call to done counts.
    """

    @wraps(fn)
    def decorated(*args: Any, **kwargs: Any) -> Observable[T]:
        subject: AsyncSubject[T] = AsyncSubject()

        def done(error: Any = None, result: T | None = None) -> None:
            if error is not None:
                subject.on_error(as_exception(error, CallbackError))
                return
            subject.on_next(result)  # type: ignore[arg-type]
            subject.on_completed()

        try:
            fn(*args, done, **kwargs)
        except Exception as e:
            subject.on_error(e)
        return subject

    return decorated
