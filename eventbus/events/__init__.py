"""
Event module.

Provides the in-process pub/sub event bus, its event type and handler contract.
"""

from eventbus.events.bus import EventBus, Subscription
from eventbus.events.errors import (
    ContractError,
    EventBusError,
    HandlerError,
    HandlerFailure,
    PayloadTypeError,
    SubscriptionError,
)
from eventbus.events.event import Event
from eventbus.events.subscriber import Handler, Subscriber

__all__ = [
    "ContractError",
    "Event",
    "EventBus",
    "EventBusError",
    "Handler",
    "HandlerError",
    "HandlerFailure",
    "PayloadTypeError",
    "Subscriber",
    "Subscription",
    "SubscriptionError",
]
