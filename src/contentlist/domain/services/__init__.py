from .filters import ActiveFilter, FilterCatalog, FilterDefinition, FilterKind, FilterOption, is_active_value
from .query_engine import derive_view, matches_search, resolve_sort_key, sort_items
from .reorder import ReorderEngine, ReorderResult, move_item, move_to_index
from .selection import SelectionModel

__all__ = [
    "ActiveFilter",
    "FilterCatalog",
    "FilterDefinition",
    "FilterKind",
    "FilterOption",
    "ReorderEngine",
    "ReorderResult",
    "SelectionModel",
    "derive_view",
    "is_active_value",
    "matches_search",
    "move_item",
    "move_to_index",
    "resolve_sort_key",
    "sort_items",
]
