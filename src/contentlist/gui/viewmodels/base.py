"""Event-bus plumbing shared by the content list view models.

The bus is optional: without one, subscriptions and publications are no-ops
and the view model talks to its view through ``Signal`` objects only.
"""

from __future__ import annotations

from typing import Callable, Optional, Type

from contentlist.events.bus import EventBus, Subscription


class BaseViewModel:
    """Owns the bus subscriptions of a view model and releases them on dispose."""

    def __init__(self, event_bus: Optional[EventBus] = None) -> None:
        self._event_bus = event_bus
        self._subscriptions: list[Subscription] = []

    @property
    def event_bus(self) -> Optional[EventBus]:
        return self._event_bus

    def subscribe_event(
        self,
        event_type: Type,
        handler: Callable,
        *,
        collection_id: Optional[str] = None,
    ) -> Optional[Subscription]:
        """Subscribe to *event_type* on the attached bus and track the handle."""
        if self._event_bus is None:
            return None
        sub = self._event_bus.subscribe(event_type, handler, collection_id=collection_id)
        self._subscriptions.append(sub)
        return sub

    def publish(self, event) -> None:
        if self._event_bus is not None:
            self._event_bus.publish(event)

    def dispose(self) -> None:
        while self._subscriptions:
            sub = self._subscriptions.pop()
            if self._event_bus is not None:
                self._event_bus.unsubscribe(sub)
            else:
                sub.cancel()
