"""Derive the visible, ordered subset of a collection.

``derive_view`` applies the free-text search, then the active filters, then
the sort.  Sorting last means it only ever sees the reduced set, and ties are
broken by the filtered order rather than the full list order.
"""

from __future__ import annotations

import logging
from functools import cmp_to_key
from numbers import Real
from typing import Any, Callable, Iterable, List, Optional, Sequence, Tuple, TypeVar

from contentlist.config import DEFAULT_SEARCHABLE_FIELDS
from contentlist.domain.models.core import field_value, item_id, timestamp_of
from contentlist.domain.models.query import QueryState
from contentlist.domain.services.filters import FilterCatalog

T = TypeVar("T")

_logger = logging.getLogger(__name__)

# Called with (exception, item, filter_id) when a predicate raises.
PredicateErrorHook = Callable[[Exception, Any, str], None]


def _text_parts(value: Any) -> Iterable[str]:
    if value is None:
        return ()
    if isinstance(value, str):
        return (value,)
    if isinstance(value, (list, tuple, set, frozenset)):
        return tuple(str(part) for part in value if part is not None)
    return (str(value),)


def matches_search(item: Any, needle: str, fields: Sequence[str]) -> bool:
    """Case-insensitive substring match of *needle* against *fields*.

    *needle* must already be casefolded; an empty needle matches everything.
    """
    if not needle:
        return True
    for name in fields:
        for text in _text_parts(field_value(item, name)):
            if needle in text.casefold():
                return True
    return False


def _sort_key(value: Any) -> Optional[Tuple[int, Any]]:
    """Map a field value to a (rank, comparable) pair, or None if missing."""
    if value is None:
        return None
    stamp = timestamp_of(value)
    if stamp is not None:
        return (0, stamp)
    if isinstance(value, Real):
        return (0, value)
    return (1, str(value))


def sort_items(items: Sequence[T], key: str, descending: bool = False) -> List[T]:
    """Stable-sort *items* by the field *key*.

    Strings compare in code-point order, numbers and dates numerically.  For
    ``descending`` the comparator is reversed, never the result, so equal keys
    keep their input order.  Items without the field go last either way.
    """
    keyed = [(_sort_key(field_value(item, key)), item) for item in items]
    sign = -1 if descending else 1

    def compare(left, right) -> int:
        a, b = left[0], right[0]
        if a is None or b is None:
            return (a is None) - (b is None)
        if a[0] != b[0]:
            return a[0] - b[0]
        if a[1] < b[1]:
            return -sign
        if a[1] > b[1]:
            return sign
        return 0

    return [item for _, item in sorted(keyed, key=cmp_to_key(compare))]


def resolve_sort_key(
    items: Sequence[Any],
    key: Optional[str],
    sortable_fields: Optional[Sequence[str]] = None,
) -> Optional[str]:
    """Return *key* if it can be applied to *items*, otherwise ``None``."""
    if not key:
        return None
    if sortable_fields and key not in sortable_fields:
        _logger.debug("Sort key %r is not declared sortable; keeping input order", key)
        return None
    if not any(field_value(item, key) is not None for item in items):
        _logger.debug("Sort key %r matches no item field; keeping input order", key)
        return None
    return key


def derive_view(
    items: Sequence[T],
    query: QueryState,
    *,
    searchable_fields: Sequence[str] = DEFAULT_SEARCHABLE_FIELDS,
    filters: Optional[FilterCatalog] = None,
    sortable_fields: Optional[Sequence[str]] = None,
    on_predicate_error: Optional[PredicateErrorHook] = None,
) -> List[T]:
    """Return the visible items for *query* in display order.

    Pure: the same arguments always produce the same list and neither the
    items nor the query are modified.
    """
    needle = query.normalized_term
    visible = [item for item in items if matches_search(item, needle, searchable_fields)]

    if filters is not None and query.active_filters:
        active = filters.active(query.active_filters)
        if active:
            kept = []
            for item in visible:
                if all(_safe_match(definition, item, value, on_predicate_error) for definition, value in active):
                    kept.append(item)
            visible = kept

    key = resolve_sort_key(visible, query.sort_key, sortable_fields)
    if key is not None:
        visible = sort_items(visible, key, descending=query.sort_direction.value == "desc")
    return visible


def _safe_match(definition, item, value, hook: Optional[PredicateErrorHook]) -> bool:
    try:
        return definition.matches(item, value)
    except Exception as exc:
        if hook is not None:
            hook(exc, item, definition.id)
        else:
            _logger.warning(
                "Filter %r failed for item %r: %s", definition.id, item_id(item), exc
            )
        return False
