"""
Event bus for in-process, synchronous pub/sub.

Provides:
- Handler registry keyed by event name, in registration order
- Fail-fast dispatch (``post``) and collect-and-continue dispatch (``post_collect``)
- Removal by handler type (``unsubscribe``) or by subscription token (``cancel``)

The bus is not thread-safe; share it between threads only under an
external lock.
"""

from __future__ import annotations

import uuid
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from typing import Any

from eventbus.events.errors import (
    ContractError,
    HandlerError,
    HandlerFailure,
    SubscriptionError,
)
from eventbus.events.event import Event
from eventbus.events.subscriber import Handler, handler_name, invoke, is_handler
from eventbus.logging_config import get_logger

logger = get_logger(__name__)


def _key(name: Any) -> str:
    return name if isinstance(name, str) else str(name)


# =============================================================================
# Subscription
# =============================================================================


@dataclass(eq=False)
class Subscription:
    """Token for one registration, returned by ``EventBus.subscribe``."""

    name: str
    handler: Handler
    id: str = field(default_factory=lambda: str(uuid.uuid4()))


# =============================================================================
# Event Bus
# =============================================================================


class EventBus:
    """
    Registry of handlers by event name with synchronous dispatch.

    The same handler may be registered several times under one name and
    is then called once per registration.
    """

    def __init__(self) -> None:
        self._subscriptions: dict[str, list[Subscription]] = {}

    @classmethod
    def from_mapping(cls, initial: Mapping[Any, Iterable[Handler]]) -> EventBus:
        """
        Create a bus seeded with ``initial``.

        Args:
            initial: Event name to handler sequence

        Returns:
            A bus owning copies of the given sequences
        """
        bus = cls()
        for name, handlers in initial.items():
            key = _key(name)
            bus._subscriptions[key] = [bus._make_subscription(key, h) for h in handlers]
        return bus

    # -------------------------------------------------------------------------
    # Subscription
    # -------------------------------------------------------------------------

    def _make_subscription(self, name: str, handler: Handler) -> Subscription:
        if not is_handler(handler):
            raise SubscriptionError(
                name,
                f"Cannot subscribe {type(handler).__qualname__} to event '{name}': "
                "expected an object with call(event) or a callable",
            )
        return Subscription(name=name, handler=handler)

    def subscribe(self, name: Any, handler: Handler) -> Subscription:
        """
        Add ``handler`` to the end of the handler list for ``name``.

        Args:
            name: Event name (converted with ``str``)
            handler: Subscriber or callable taking the event

        Returns:
            Subscription token usable with ``cancel``

        Raises:
            SubscriptionError: If ``handler`` is neither a subscriber nor callable
        """
        key = _key(name)
        subscription = self._make_subscription(key, handler)
        self._subscriptions.setdefault(key, []).append(subscription)

        logger.debug(
            "event_subscribed",
            name=key,
            handler=handler_name(handler),
            subscription=subscription.id,
        )
        return subscription

    def unsubscribe(self, name: Any, handler: Handler) -> None:
        """
        Remove the first handler for ``name`` of the same type as ``handler``.

        Handlers are matched by type, not equality, so two handlers of one
        class cannot be told apart here; use ``cancel`` for that. Unknown
        names and types are ignored.
        """
        key = _key(name)
        subscriptions = self._subscriptions.get(key)
        if not subscriptions:
            return

        tag = type(handler)
        for index, subscription in enumerate(subscriptions):
            if type(subscription.handler) is tag:
                del subscriptions[index]
                logger.debug(
                    "event_unsubscribed",
                    name=key,
                    handler=handler_name(subscription.handler),
                )
                return

    def cancel(self, subscription: Subscription) -> bool:
        """
        Remove exactly the registration ``subscription`` refers to.

        Returns:
            True if it was registered, False if it was already removed
        """
        subscriptions = self._subscriptions.get(subscription.name, [])
        for index, current in enumerate(subscriptions):
            if current is subscription:
                del subscriptions[index]
                logger.debug(
                    "event_unsubscribed",
                    name=subscription.name,
                    subscription=subscription.id,
                )
                return True
        return False

    def subscribe_all(self, name: Any, handlers: Iterable[Handler]) -> list[Subscription]:
        """
        Subscribe every handler in ``handlers`` to ``name``, in order.

        Stops at the first handler that cannot be subscribed; the ones
        before it stay subscribed.
        """
        key = _key(name)
        tokens = []
        for handler in handlers:
            try:
                tokens.append(self.subscribe(key, handler))
            except SubscriptionError as e:
                raise SubscriptionError(key, f"Error when subscribing to event: {key}") from e
        return tokens

    def unsubscribe_all(self, name: Any, handlers: Iterable[Handler]) -> None:
        """Call ``unsubscribe(name, handler)`` for each handler, in order."""
        key = _key(name)
        for handler in handlers:
            self.unsubscribe(key, handler)

    # -------------------------------------------------------------------------
    # Dispatch
    # -------------------------------------------------------------------------

    def post(self, event: Event) -> None:
        """
        Deliver ``event`` to every handler registered for its name.

        Handlers run in registration order. The first handler that raises
        stops delivery; the handlers after it are not called.

        Raises:
            HandlerError: A handler raised; the original exception is the cause
            ContractError: A handler broke the bus contract (e.g. read the
                payload as the wrong type); raised unchanged
        """
        subscriptions = self._subscriptions.get(event.name)
        if not subscriptions:
            logger.debug("event_unhandled", name=event.name)
            return

        logger.debug("event_dispatching", name=event.name, handlers=len(subscriptions))

        # Registry changes made by handlers apply from the next post
        for subscription in list(subscriptions):
            try:
                invoke(subscription.handler, event)
            except ContractError:
                logger.exception(
                    "event_contract_error",
                    name=event.name,
                    handler=handler_name(subscription.handler),
                )
                raise
            except Exception as e:
                logger.exception(
                    "event_handler_error",
                    name=event.name,
                    handler=handler_name(subscription.handler),
                )
                raise HandlerError(event.name, subscription.handler) from e

        logger.debug("event_dispatched", name=event.name)

    def post_collect(self, event: Event) -> list[HandlerFailure]:
        """
        Deliver ``event`` to every handler, continuing past failures.

        Returns:
            One entry per handler that raised, in call order

        Raises:
            ContractError: A handler broke the bus contract; raised unchanged
        """
        failures: list[HandlerFailure] = []
        for subscription in list(self._subscriptions.get(event.name, [])):
            try:
                invoke(subscription.handler, event)
            except ContractError:
                logger.exception(
                    "event_contract_error",
                    name=event.name,
                    handler=handler_name(subscription.handler),
                )
                raise
            except Exception as e:
                logger.exception(
                    "event_handler_error",
                    name=event.name,
                    handler=handler_name(subscription.handler),
                )
                failures.append(HandlerFailure(event.name, subscription.handler, e))

        if failures:
            logger.warning("event_dispatch_failures", name=event.name, failures=len(failures))
        return failures

    # -------------------------------------------------------------------------
    # Introspection
    # -------------------------------------------------------------------------

    def subscribers(self, name: Any) -> tuple[Handler, ...]:
        """Handlers registered for ``name``, in call order."""
        return tuple(s.handler for s in self._subscriptions.get(_key(name), []))

    def names(self) -> list[str]:
        """Event names that have a handler list (possibly empty)."""
        return list(self._subscriptions)

    def __contains__(self, name: object) -> bool:
        return bool(self._subscriptions.get(_key(name)))

    def __len__(self) -> int:
        return sum(len(subs) for subs in self._subscriptions.values())

    def get_stats(self) -> dict[str, Any]:
        """Get event bus statistics."""
        return {
            "names": len(self._subscriptions),
            "total_subscriptions": len(self),
        }
