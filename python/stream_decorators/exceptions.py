"""Exceptions raised through decorated streams."""

from typing import Any


class StreamDecoratorError(Exception):
    """Base exception for errors produced by the adapters themselves."""

    def __init__(self, reason: Any) -> None:
        super().__init__(reason)
        self.reason = reason


class CallbackError(StreamDecoratorError):
    """A node-style callback reported an error that is not an exception."""


class PromiseRejectedError(StreamDecoratorError):
    """A thenable was rejected with a reason that is not an exception."""


def as_exception(reason: Any, wrapper: type[StreamDecoratorError]) -> Exception:
    """Return reason itself if it is an exception, otherwise wrap it."""
    if isinstance(reason, Exception):
        return reason
    return wrapper(reason)
