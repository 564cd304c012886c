"""Synchronous change notification for engine state"""
from typing import Any, Callable, List

Handler = Callable[..., Any]


class Signal:
    """Ordered list of callbacks fired in the command that caused the change."""
    def __init__(self):
        self._handlers: List[Handler] = []

    def subscribe(self, handler: Handler) -> Handler:
        self._handlers.append(handler)
        return handler

    def unsubscribe(self, handler: Handler):
        self._handlers.remove(handler)

    def emit(self, *args):
        for h in list(self._handlers):
            h(*args)


class Observable(Signal):
    """A value plus a Signal that fires with the new value when it changes.

    Subscribers read `value`; only the owning engine object calls `set`.
    """
    def __init__(self, value=None):
        super().__init__()
        self._value = value

    @property
    def value(self):
        return self._value

    def set(self, value):
        if value == self._value:
            return
        self._value = value
        self.emit(value)
