from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from datetime import date, datetime, time
from typing import Any, Callable, Dict, Iterable, Mapping, Optional, Tuple


class ViewMode(str, Enum):
    """Rendering hint reported to the view; has no effect on query logic."""

    LIST = "list"
    GRID = "grid"
    TABLE = "table"


class SortDirection(str, Enum):
    ASC = "asc"
    DESC = "desc"

    @property
    def reversed(self) -> SortDirection:
        return SortDirection.DESC if self is SortDirection.ASC else SortDirection.ASC


class ItemState(str, Enum):
    """Visual state of a row, in precedence order."""

    SELECTED = "selected"
    DISABLED = "disabled"
    DRAGGING = "dragging"
    DEFAULT = "default"


@dataclass(frozen=True)
class MetaEntry:
    label: str
    value: Any


def _unique_tags(tags: Iterable[str]) -> Tuple[str, ...]:
    seen: list[str] = []
    for tag in tags:
        if tag not in seen:
            seen.append(tag)
    return tuple(seen)


@dataclass(frozen=True)
class Item:
    id: str
    title: str = ""
    subtitle: Optional[str] = None
    description: Optional[str] = None
    tags: Tuple[str, ...] = ()
    meta: Tuple[MetaEntry, ...] = ()
    disabled: bool = False
    badge: Optional[str] = None
    image: Optional[str] = None
    href: Optional[str] = None
    # Open-ended field bag for sortable / filterable values (dates, scores...).
    data: Dict[str, Any] = field(default_factory=dict, compare=False, hash=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "tags", _unique_tags(self.tags or ()))
        meta = tuple(
            entry if isinstance(entry, MetaEntry) else MetaEntry(**entry)
            for entry in (self.meta or ())
        )
        object.__setattr__(self, "meta", meta)

    @classmethod
    def from_mapping(cls, payload: Mapping[str, Any]) -> Item:
        """Build an item from a loose record, moving unknown keys into ``data``."""

        known = {name for name in cls.__dataclass_fields__ if name != "data"}
        kwargs = {key: value for key, value in payload.items() if key in known}
        extra = dict(payload.get("data") or {})
        extra.update({key: value for key, value in payload.items() if key not in known and key != "data"})
        return cls(data=extra, **kwargs)


_MISSING = object()


def field_value(item: Any, name: str, default: Any = None) -> Any:
    """Return the field *name* of *item*.

    Attributes win over the ``data`` bag; plain mappings are supported so
    callers can hand raw records to the engines.
    """

    if isinstance(item, Mapping):
        if name in item:
            return item[name]
        bag = item.get("data")
        if isinstance(bag, Mapping):
            return bag.get(name, default)
        return default
    value = getattr(item, name, _MISSING)
    if value is not _MISSING:
        return value
    bag = getattr(item, "data", None)
    if isinstance(bag, Mapping):
        return bag.get(name, default)
    return default


def item_id(item: Any) -> str:
    return field_value(item, "id")


def is_disabled(item: Any) -> bool:
    return bool(field_value(item, "disabled", False))


@dataclass(frozen=True)
class ItemAction:
    """Per-item command offered next to each row (edit, delete, open...)."""

    id: str
    label: str
    variant: str = "default"
    disabled: bool = False
    handler: Optional[Callable[[Any], None]] = field(default=None, compare=False)

    @property
    def is_destructive(self) -> bool:
        return self.variant == "destructive"


def timestamp_of(value: Any, *, end_of_day: bool = False) -> Optional[float]:
    """Seconds since the epoch for a ``date`` or ``datetime``, else ``None``.

    Dates and datetimes share one scale so they can be compared with each
    other; a bare date stands for midnight, or for the last instant of that
    day when *end_of_day* is set.
    """
    if isinstance(value, datetime):
        return value.timestamp()
    if isinstance(value, date):
        return datetime.combine(value, time.max if end_of_day else time.min).timestamp()
    return None
