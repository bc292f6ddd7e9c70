"""Events published by a content list controller on an optional ``EventBus``.

Each user-facing notification of the controller has a frozen counterpart
here so that coordinators living outside the view can observe a collection
without holding a reference to the controller's signals.
"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Optional
from uuid import uuid4


@dataclass(frozen=True)
class CollectionEvent:
    event_id: str = field(default_factory=lambda: str(uuid4()))
    timestamp: datetime = field(default_factory=datetime.now)
    collection_id: str = ""


@dataclass(frozen=True)
class SelectionChangedEvent(CollectionEvent):
    selected_ids: frozenset = frozenset()


@dataclass(frozen=True)
class SearchChangedEvent(CollectionEvent):
    term: str = ""


@dataclass(frozen=True)
class FilterChangedEvent(CollectionEvent):
    filter_id: str = ""
    value: Any = None


@dataclass(frozen=True)
class FiltersClearedEvent(CollectionEvent):
    cleared_ids: tuple[str, ...] = ()


@dataclass(frozen=True)
class SortChangedEvent(CollectionEvent):
    key: Optional[str] = None
    direction: str = "asc"


@dataclass(frozen=True)
class ViewModeChangedEvent(CollectionEvent):
    mode: str = "list"


@dataclass(frozen=True)
class ItemsReorderedEvent(CollectionEvent):
    order: tuple[str, ...] = ()
    from_index: int = -1
    to_index: int = -1


@dataclass(frozen=True)
class ItemActivatedEvent(CollectionEvent):
    item_id: str = ""
    item: Any = None


@dataclass(frozen=True)
class ActionInvokedEvent(CollectionEvent):
    action_id: str = ""
    item_id: str = ""


@dataclass(frozen=True)
class ItemsReplacedEvent(CollectionEvent):
    """Inbound: an upstream loader delivers a fresh item list."""

    items: tuple = ()
