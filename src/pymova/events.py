"""Multicast notification channel.

Observers register a callback and get a :class:`Subscription` back.
Publishing walks a snapshot of the registered callbacks, so observers may
subscribe or unsubscribe while a notification is being delivered.
"""

from __future__ import annotations

import itertools
import logging
from collections.abc import Callable
from typing import Any, Generic, TypeVar

_logger = logging.getLogger(__name__)

T = TypeVar("T")


class Subscription:
    """Handle for one registered observer."""

    def __init__(self, channel: EventChannel[Any], subscription_id: int) -> None:
        self._channel: EventChannel[Any] | None = channel
        self._id = subscription_id

    @property
    def active(self) -> bool:
        return self._channel is not None

    def unsubscribe(self) -> None:
        """Remove the observer.  Calling this again is a no-op."""
        channel, self._channel = self._channel, None
        if channel is not None:
            channel._remove(self._id)


class EventChannel(Generic[T]):
    """Subscription-id to callback mapping with a notify-all operation."""

    def __init__(self, name: str = "") -> None:
        self._name = name
        self._ids = itertools.count(1)
        self._observers: dict[int, Callable[[T], None]] = {}

    def __len__(self) -> int:
        return len(self._observers)

    def subscribe(self, callback: Callable[[T], None]) -> Subscription:
        subscription_id = next(self._ids)
        self._observers[subscription_id] = callback
        return Subscription(self, subscription_id)

    def _remove(self, subscription_id: int) -> None:
        self._observers.pop(subscription_id, None)

    def publish(self, value: T) -> None:
        """Deliver *value* to every observer registered at call time.

        An observer removed by an earlier callback in the same round is
        skipped.  A failing observer is logged and does not stop delivery.
        """
        for subscription_id, callback in list(self._observers.items()):
            if subscription_id not in self._observers:
                continue
            try:
                callback(value)
            except Exception:
                _logger.warning(
                    "Observer %d on %s channel failed",
                    subscription_id,
                    self._name or "unnamed",
                    exc_info=True,
                )
