"""Awaitable-to-Observable bridge for RxPy (asyncio thread only)."""

import asyncio
import concurrent.futures
from asyncio import AbstractEventLoop
from collections.abc import Awaitable

import reactivex
from reactivex import Observable
from reactivex.abc import SchedulerBase
from reactivex.subject import AsyncSubject

type AnyFuture[T] = asyncio.Future[T] | concurrent.futures.Future[T]


def from_settled_future[T](future: AnyFuture[T]) -> Observable[T]:
    """Mirror the outcome of a future without ever cancelling it.

    The future belongs to the caller and may be shared by several subscribers, so
    disposing a subscription only detaches that subscriber.
    """
    subject: AsyncSubject[T] = AsyncSubject()

    def done(settled: AnyFuture[T]) -> None:
        try:
            result = settled.result()
        except (Exception, asyncio.CancelledError) as e:
            subject.on_error(e)  # type: ignore[arg-type]
            return
        subject.on_next(result)
        subject.on_completed()

    future.add_done_callback(done)  # type: ignore[arg-type]
    return subject


def from_awaitable[T](
    awaitable: Awaitable[T],
    maybe_loop: AbstractEventLoop | None = None,
) -> Observable[T]:
    """Convert an already-created awaitable into a single-emission Observable.

    The awaitable is scheduled once, on the first subscription, and later subscribers
    share its outcome. Must be subscribed from the asyncio thread unless maybe_loop is
    given. Disposing a subscription leaves the shared task running.

    Example:
        >>> async def fetch(url: str) -> dict:
        ...     return {"data": "..."}
        >>> obs = from_awaitable(fetch("https://example.com"))
        >>> obs.subscribe(on_next=print)
    """
    shared: Observable[T] | None = None

    def factory(_scheduler: SchedulerBase | None) -> Observable[T]:
        nonlocal shared
        if shared is None:
            loop = maybe_loop or asyncio.get_running_loop()
            shared = from_settled_future(asyncio.ensure_future(awaitable, loop=loop))
        return shared

    return reactivex.defer(factory)
