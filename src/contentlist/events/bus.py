"""Synchronous publish/subscribe hub shared by collection controllers.

Handlers are keyed by the exact event class and run on the publisher's
thread, in subscription order.  A subscription may be scoped to one
collection: it then only sees events whose ``collection_id`` matches, plus
broadcast events that leave ``collection_id`` empty.
"""

import logging
import uuid
from collections import defaultdict
from dataclasses import dataclass, field
from datetime import datetime
from typing import Callable, Dict, List, Optional, Type


@dataclass(kw_only=True)
class Event:
    """Base class for mutable bus events (errors, diagnostics)."""
    timestamp: datetime = field(default_factory=datetime.now)
    event_id: str = field(default_factory=lambda: str(uuid.uuid4()))


@dataclass
class Subscription:
    """Handle returned by subscribe(); can be used to unsubscribe."""
    id: str = field(default_factory=lambda: str(uuid.uuid4()))
    event_type: Type = Event
    handler: Callable = field(default=lambda e: None)
    collection_id: Optional[str] = None
    active: bool = True

    def cancel(self):
        self.active = False

    def accepts(self, event) -> bool:
        if not self.active:
            return False
        if self.collection_id is None:
            return True
        target = getattr(event, "collection_id", "")
        return not target or target == self.collection_id


class EventBus:
    def __init__(self, logger: logging.Logger = None):
        self._logger = logger or logging.getLogger(__name__)
        self._subscriptions: Dict[Type, List[Subscription]] = defaultdict(list)

    def subscribe(self, event_type: Type, handler: Callable, *, collection_id: Optional[str] = None) -> Subscription:
        sub = Subscription(event_type=event_type, handler=handler, collection_id=collection_id)
        self._subscriptions[event_type].append(sub)
        return sub

    def unsubscribe(self, subscription: Subscription):
        subscription.cancel()
        subs = self._subscriptions.get(subscription.event_type)
        if subs and subscription in subs:
            subs.remove(subscription)

    def publish(self, event) -> int:
        """Deliver *event* and return how many handlers completed without raising."""
        event_type = type(event)
        delivered = 0
        # Iterate a snapshot: handlers may subscribe or unsubscribe while running.
        for sub in tuple(self._subscriptions.get(event_type, ())):
            if not sub.accepts(event):
                continue
            try:
                sub.handler(event)
            except Exception as exc:
                self._logger.error("%s handler %r failed: %s", event_type.__name__, sub.handler, exc)
                continue
            delivered += 1
        return delivered

    def subscriber_count(self, event_type: Type) -> int:
        return sum(1 for sub in self._subscriptions.get(event_type, ()) if sub.active)
