"""Decorator for functions that return a promise-like result."""

import asyncio
import concurrent.futures
from collections.abc import Awaitable, Callable
from typing import Any

from reactivex import Observable
from reactivex.subject import AsyncSubject

from stream_decorators.exceptions import PromiseRejectedError, as_exception
from stream_decorators.from_awaitable import from_awaitable, from_settled_future
from stream_decorators.shapes import Thenable
from stream_decorators.utils import Decorated, invoke_with

type PromiseLike[T] = Thenable | asyncio.Future[T] | concurrent.futures.Future[T] | Awaitable[T]


def from_promise[T](promise: PromiseLike[T]) -> Observable[T]:
    """Emit the settled value of promise and complete, or end with its rejection.

    Thenables get their handlers registered right away. Futures settle the stream from a
    done callback and are never cancelled by a subscriber. Any other awaitable is
    scheduled on the running loop when first subscribed.
    """
    if isinstance(promise, Thenable):
        subject: AsyncSubject[T] = AsyncSubject()

        def fulfilled(result: T) -> None:
            subject.on_next(result)
            subject.on_completed()

        def rejected(reason: Any) -> None:
            subject.on_error(as_exception(reason, PromiseRejectedError))

        try:
            promise.then(fulfilled, rejected)
        except Exception as e:
            subject.on_error(e)
        return subject

    if isinstance(promise, (asyncio.Future, concurrent.futures.Future)):
        return from_settled_future(promise)

    return from_awaitable(promise)


def promise[**P, T](fn: Callable[P, PromiseLike[T]]) -> Decorated[P, T]:
    """Call fn immediately and mirror the promise it returns as an Observable.

    A synchronous raise is treated as an immediate rejection.
    """
    return invoke_with(fn, from_promise)
