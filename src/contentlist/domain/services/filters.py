"""Faceted filter definitions for in-memory item filtering.

A :class:`FilterDefinition` describes one facet of the toolbar or filter
panel.  Built-in kinds derive their predicate from a field name; ``custom``
filters carry a caller-supplied predicate.  Values are owned by the query
state and interpreted here.
"""
from __future__ import annotations

import dataclasses
from dataclasses import dataclass
from datetime import date, datetime
from enum import Enum
from typing import Any, Callable, Dict, Iterable, List, Mapping, Optional, Tuple

from contentlist.domain.models.core import field_value, timestamp_of
from contentlist.errors import FilterDefinitionError

Predicate = Callable[[Any, Any], bool]


class FilterKind(str, Enum):
    CHECKBOX = "checkbox"
    RADIO = "radio"
    SELECT = "select"
    RANGE = "range"
    DATE = "date"
    SEARCH = "search"
    FLAG = "flag"
    CUSTOM = "custom"


@dataclass(frozen=True)
class FilterOption:
    id: str
    label: str
    value: Any
    count: Optional[int] = None
    disabled: bool = False


@dataclass(frozen=True)
class ActiveFilter:
    """One removable chip in the "Active Filters" strip."""

    filter_id: str
    label: str
    value: Any
    option_id: Optional[str] = None


_RANGE_BOUNDS = (("min", "max"), ("start", "end"))


def is_active_value(value: Any) -> bool:
    """Return True if *value* narrows the list.

    ``None``, ``False``, blank strings, empty collections and ranges (either
    ``min``/``max`` or ``start``/``end``) with neither bound set are all
    treated as "no active value".
    """
    if value is None or value is False:
        return False
    if isinstance(value, str):
        return bool(value.strip())
    if isinstance(value, Mapping):
        for bounds in _RANGE_BOUNDS:
            if any(bound in value for bound in bounds):
                return any(value.get(bound) not in (None, "") for bound in bounds)
        return bool(value)
    if isinstance(value, (list, tuple, set, frozenset)):
        return bool(value)
    return True


def _is_collection(value: Any) -> bool:
    return isinstance(value, (list, tuple, set, frozenset))


def _comparable(value: Any, *, end: bool = False) -> Any:
    stamp = timestamp_of(value, end_of_day=end)
    return value if stamp is None else stamp


def _date_bound(value: Any, *, end: bool = False) -> Optional[float]:
    """Read a date picker bound (or an item value) as a timestamp.

    Accepts ``date``, ``datetime`` and ISO-8601 strings; a bare date used as
    an *end* bound covers that whole day.  Unreadable values give ``None``.
    """
    if isinstance(value, str):
        text = value.strip()
        if not text:
            return None
        try:
            value = datetime.fromisoformat(text) if len(text) > 10 else date.fromisoformat(text)
        except ValueError:
            return None
    return timestamp_of(value, end_of_day=end)


@dataclass(frozen=True)
class FilterDefinition:
    id: str
    label: str = ""
    kind: FilterKind = FilterKind.CHECKBOX
    field: Optional[str] = None
    options: Tuple[FilterOption, ...] = ()
    multiple: bool = False
    placeholder: Optional[str] = None
    # ``field`` above shadows dataclasses.field inside this class body.
    predicate: Optional[Predicate] = dataclasses.field(default=None, compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "kind", FilterKind(self.kind))
        object.__setattr__(
            self,
            "options",
            tuple(opt if isinstance(opt, FilterOption) else FilterOption(**opt) for opt in self.options),
        )
        if self.kind is FilterKind.CUSTOM and self.predicate is None:
            raise FilterDefinitionError(f"custom filter {self.id!r} needs a predicate")
        if self.kind is not FilterKind.CUSTOM and self.predicate is None and not self.field:
            raise FilterDefinitionError(f"filter {self.id!r} needs a field or a predicate")

    def matches(self, item: Any, value: Any) -> bool:
        """Check whether *item* satisfies this filter for *value*.

        Args:
            item: Record to test.
            value: Active value taken from the query state.

        Returns:
            True if the item passes (inactive values always pass).
        """
        if not is_active_value(value):
            return True
        if self.predicate is not None:
            return bool(self.predicate(item, value))

        actual = field_value(item, self.field)
        if self.kind is FilterKind.FLAG or (self.kind is FilterKind.CHECKBOX and value is True):
            return bool(actual)
        if self.kind is FilterKind.RANGE:
            return self._in_range(actual, value)
        if self.kind is FilterKind.DATE:
            return self._in_date_range(actual, value)
        if self.kind is FilterKind.SEARCH:
            if actual is None:
                return False
            needle = str(value).strip().casefold()
            if _is_collection(actual):
                return any(needle in str(part).casefold() for part in actual)
            return needle in str(actual).casefold()

        wanted = list(value) if _is_collection(value) else [value]
        if _is_collection(actual):
            return any(part in wanted for part in actual)
        return actual in wanted

    @staticmethod
    def _in_range(actual: Any, bounds: Any) -> bool:
        if actual is None:
            return False
        if not isinstance(bounds, Mapping):
            return _comparable(actual) == _comparable(bounds)
        low = bounds.get("min")
        high = bounds.get("max")
        value = _comparable(actual)
        try:
            if low not in (None, "") and value < _comparable(low):
                return False
            if high not in (None, "") and value > _comparable(high, end=True):
                return False
        except TypeError:
            return False
        return True

    @staticmethod
    def _in_date_range(actual: Any, bounds: Any) -> bool:
        stamp = _date_bound(actual)
        if stamp is None:
            return False
        if not isinstance(bounds, Mapping):
            day = _date_bound(bounds)
            return day is not None and day <= stamp <= _date_bound(bounds, end=True)
        start = _date_bound(bounds.get("start"))
        end = _date_bound(bounds.get("end"), end=True)
        if start is not None and stamp < start:
            return False
        if end is not None and stamp > end:
            return False
        return True

    def option_for(self, value: Any) -> Optional[FilterOption]:
        for option in self.options:
            if option.value == value:
                return option
        return None

    def chips(self, value: Any) -> List[ActiveFilter]:
        if not is_active_value(value):
            return []
        if _is_collection(value):
            chips = []
            for entry in value:
                option = self.option_for(entry)
                chips.append(ActiveFilter(
                    filter_id=self.id,
                    label=option.label if option else str(entry),
                    value=entry,
                    option_id=option.id if option else None,
                ))
            return chips
        option = self.option_for(value)
        if option is not None:
            return [ActiveFilter(self.id, option.label, value, option.id)]
        if self.kind is FilterKind.DATE and isinstance(value, Mapping):
            start, end = value.get("start") or "", value.get("end") or ""
            return [ActiveFilter(self.id, f"{self.label or self.id}: {start} - {end}", value)]
        if isinstance(value, Mapping):
            low, high = value.get("min"), value.get("max")
            text = f"{low if low not in (None, '') else ''}-{high if high not in (None, '') else ''}"
            return [ActiveFilter(self.id, f"{self.label or self.id}: {text}", value)]
        if value is True:
            return [ActiveFilter(self.id, self.label or self.id, value)]
        return [ActiveFilter(self.id, f"{self.label or self.id}: {value}", value)]


class FilterCatalog:
    """Ordered registry of the filters a collection declares."""

    def __init__(self, definitions: Iterable[FilterDefinition] = ()) -> None:
        self._definitions: Dict[str, FilterDefinition] = {}
        for definition in definitions:
            if definition.id in self._definitions:
                raise FilterDefinitionError(f"duplicate filter id {definition.id!r}")
            self._definitions[definition.id] = definition

    def __contains__(self, filter_id: object) -> bool:
        return filter_id in self._definitions

    def __iter__(self):
        return iter(self._definitions.values())

    def __len__(self) -> int:
        return len(self._definitions)

    def get(self, filter_id: str) -> Optional[FilterDefinition]:
        return self._definitions.get(filter_id)

    def active(self, values: Mapping[str, Any]) -> List[Tuple[FilterDefinition, Any]]:
        """Return the declared filters that currently narrow the list.

        Unknown ids and inactive values are skipped.
        """
        pairs = []
        for filter_id, value in values.items():
            definition = self._definitions.get(filter_id)
            if definition is None or not is_active_value(value):
                continue
            pairs.append((definition, value))
        return pairs

    def chips(self, values: Mapping[str, Any]) -> List[ActiveFilter]:
        chips: List[ActiveFilter] = []
        for definition, value in self.active(values):
            chips.extend(definition.chips(value))
        return chips
