"""
Host event subscription.

Handlers are registered per event kind, optionally scoped to one buffer,
and removed through the handle returned by subscribe().
"""

import itertools
from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum
from typing import Any

from fontpoint.utils.logging import logger


class EventKind(Enum):
    """Notifications delivered by the host."""

    ACTION_COMPLETED = "action-completed"
    BUFFER_MODIFIED = "buffer-modified"


@dataclass(frozen=True)
class Event:
    """A delivered notification."""

    kind: EventKind
    buffer: Any = None


Handler = Callable[[Event], None]


@dataclass(frozen=True, eq=False)
class Subscription:
    """Handle returned by EventBus.subscribe()."""

    id: int
    kind: EventKind
    handler: Handler
    buffer: Any = None


class EventBus:
    """Synchronous publish/subscribe registry."""

    def __init__(self) -> None:
        self._ids = itertools.count(1)
        self._subscriptions: dict[int, Subscription] = {}

    def subscribe(
        self, kind: EventKind, handler: Handler, *, buffer: Any = None
    ) -> Subscription:
        """
        Register a handler.

        Args:
            kind: Event kind to listen for
            handler: Called with the Event
            buffer: Only deliver events for this buffer when given

        Returns:
            Subscription handle for unsubscribe()
        """
        subscription = Subscription(next(self._ids), kind, handler, buffer)
        self._subscriptions[subscription.id] = subscription
        logger.debug(f"Subscribed #{subscription.id} to {kind.value}")
        return subscription

    def unsubscribe(self, subscription: Subscription | None) -> None:
        """Remove a subscription. Unknown handles are ignored."""
        if subscription is None:
            return
        if self._subscriptions.pop(subscription.id, None) is not None:
            logger.debug(f"Unsubscribed #{subscription.id}")

    def is_subscribed(self, subscription: Subscription | None) -> bool:
        return subscription is not None and subscription.id in self._subscriptions

    def publish(self, kind: EventKind, buffer: Any = None) -> int:
        """
        Deliver an event to matching handlers in subscription order.

        Handlers may unsubscribe themselves or others while the event is
        being delivered; removed handlers are not called.

        Returns:
            Number of handlers called
        """
        event = Event(kind, buffer)
        called = 0
        for subscription in list(self._subscriptions.values()):
            if subscription.kind is not kind:
                continue
            if subscription.buffer is not None and subscription.buffer is not buffer:
                continue
            if subscription.id not in self._subscriptions:
                continue
            subscription.handler(event)
            called += 1
        return called

    def __len__(self) -> int:
        return len(self._subscriptions)
