from .bus import Event, EventBus, Subscription
from .collection_events import (
    ActionInvokedEvent,
    CollectionEvent,
    FilterChangedEvent,
    FiltersClearedEvent,
    ItemActivatedEvent,
    ItemsReorderedEvent,
    ItemsReplacedEvent,
    SearchChangedEvent,
    SelectionChangedEvent,
    SortChangedEvent,
    ViewModeChangedEvent,
)

__all__ = [
    "ActionInvokedEvent",
    "CollectionEvent",
    "Event",
    "EventBus",
    "FilterChangedEvent",
    "FiltersClearedEvent",
    "ItemActivatedEvent",
    "ItemsReorderedEvent",
    "ItemsReplacedEvent",
    "SearchChangedEvent",
    "SelectionChangedEvent",
    "SortChangedEvent",
    "Subscription",
    "ViewModeChangedEvent",
]
