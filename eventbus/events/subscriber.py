"""
Handler contract for the event bus.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING, Protocol, Union, runtime_checkable

if TYPE_CHECKING:
    from eventbus.events.event import Event


@runtime_checkable
class Subscriber(Protocol):
    """
    Object invoked when an event it is subscribed to is posted.

    ``call`` returns normally on success and raises on failure. It may
    update the subscriber's own state but must not keep the event.
    """

    def call(self, event: Event) -> None: ...


# Subscribers with state, or plain functions taking the event
Handler = Union[Subscriber, Callable[["Event"], None]]


def is_handler(obj: object) -> bool:
    """Whether ``obj`` can be registered with the bus.

    Classes are rejected: subscribe an instance, not the subscriber type.
    """
    if isinstance(obj, type):
        return False
    return callable(getattr(obj, "call", None)) or callable(obj)


def invoke(handler: Handler, event: Event) -> None:
    """Call ``handler`` with ``event``."""
    call = getattr(handler, "call", None)
    if callable(call):
        call(event)
    else:
        handler(event)


def handler_name(handler: Handler) -> str:
    """Readable name for log lines and error messages."""
    name = getattr(handler, "__qualname__", None)
    if name is None:
        name = type(handler).__qualname__
    return name
