from .core import (
    Item,
    ItemAction,
    ItemState,
    MetaEntry,
    SortDirection,
    ViewMode,
    field_value,
    is_disabled,
    item_id,
    timestamp_of,
)
from .query import IDLE, DragState, QueryState, SortPreset

__all__ = [
    "DragState",
    "IDLE",
    "Item",
    "ItemAction",
    "ItemState",
    "MetaEntry",
    "QueryState",
    "SortDirection",
    "SortPreset",
    "ViewMode",
    "field_value",
    "is_disabled",
    "item_id",
    "timestamp_of",
]
