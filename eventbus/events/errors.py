"""
Exception types raised by the event bus.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


class EventBusError(Exception):
    """Base class for event bus errors."""


class ContractError(EventBusError):
    """Programmer error: the bus or an event was used against its contract.

    Dispatch never wraps or collects these; they reach the caller as-is.
    """


class PayloadTypeError(ContractError, TypeError):
    """Raised when an event payload is read back under the wrong type."""

    def __init__(self, event_name: str, expected: type, actual: type):
        self.event_name = event_name
        self.expected = expected
        self.actual = actual
        super().__init__(
            f"Payload of event '{event_name}' is {actual.__qualname__}, "
            f"not {expected.__qualname__}"
        )


class HandlerError(EventBusError):
    """Raised by ``post`` when a handler fails."""

    def __init__(self, event_name: str, handler: Any, message: str | None = None):
        self.event_name = event_name
        self.handler = handler
        self.message = message or f"Error when posting event: {event_name}"
        super().__init__(self.message)


class SubscriptionError(ContractError, TypeError):
    """Raised when an object cannot be registered as a handler."""

    def __init__(self, event_name: str, message: str):
        self.event_name = event_name
        super().__init__(message)


@dataclass(frozen=True)
class HandlerFailure:
    """A handler failure recorded by ``EventBus.post_collect``."""

    event_name: str
    handler: Any
    error: Exception

    def __str__(self) -> str:
        return f"{self.event_name}: {type(self.error).__name__}: {self.error}"
