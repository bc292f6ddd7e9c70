from __future__ import annotations

from dataclasses import dataclass, field, replace
from types import MappingProxyType
from typing import Any, Mapping, Optional

from .core import SortDirection


@dataclass(frozen=True)
class QueryState:
    """Search, filter and sort inputs for ``derive_view``.

    Immutable; the ``with_*`` helpers return updated copies so a controller can
    compare the previous and next state cheaply.
    """

    search_term: str = ""
    active_filters: Mapping[str, Any] = field(default_factory=lambda: MappingProxyType({}))
    sort_key: Optional[str] = None
    sort_direction: SortDirection = SortDirection.ASC

    def __post_init__(self) -> None:
        if not isinstance(self.active_filters, MappingProxyType):
            object.__setattr__(self, "active_filters", MappingProxyType(dict(self.active_filters)))
        if not isinstance(self.sort_direction, SortDirection):
            object.__setattr__(self, "sort_direction", SortDirection(self.sort_direction))

    @property
    def normalized_term(self) -> str:
        return self.search_term.strip().casefold()

    @property
    def is_default(self) -> bool:
        """True when nothing narrows or reorders the input list."""
        return not self.normalized_term and not self.active_filters and self.sort_key is None

    def with_search(self, term: str) -> QueryState:
        return replace(self, search_term=term)

    def with_filter(self, filter_id: str, value: Any) -> QueryState:
        filters = dict(self.active_filters)
        if value is None:
            filters.pop(filter_id, None)
        else:
            filters[filter_id] = value
        return replace(self, active_filters=MappingProxyType(filters))

    def without_filters(self) -> QueryState:
        return replace(self, active_filters=MappingProxyType({}))

    def with_sort(self, key: Optional[str], direction: SortDirection = SortDirection.ASC) -> QueryState:
        return replace(self, sort_key=key, sort_direction=SortDirection(direction))


@dataclass(frozen=True)
class DragState:
    dragged_id: Optional[str] = None
    drop_target_id: Optional[str] = None

    @property
    def is_dragging(self) -> bool:
        return self.dragged_id is not None


IDLE = DragState()


@dataclass(frozen=True)
class SortPreset:
    id: str
    label: str
    key: str
    direction: SortDirection = SortDirection.ASC

    def __post_init__(self) -> None:
        object.__setattr__(self, "direction", SortDirection(self.direction))
