"""Default configuration values for contentlist."""

from __future__ import annotations

from typing import Final

# Fields matched by the free-text search box when the caller does not declare
# its own list.
DEFAULT_SEARCHABLE_FIELDS: Final[tuple[str, ...]] = ("title", "description")

# Item rows show this many tags; the remainder is summarised as "+N".
DEFAULT_MAX_VISIBLE_TAGS: Final[int] = 3

# Toolbar counter shown once at least one item is selected.
DEFAULT_SELECTION_LABEL: Final[str] = "{selected} of {total} selected"

# Shown in place of the rows when nothing survives search and filters.
DEFAULT_EMPTY_MESSAGE: Final[str] = "Try adjusting your search or filter criteria"

# Field used by the "Date (Newest)" / "Date (Oldest)" presets.
DEFAULT_DATE_FIELD: Final[str] = "date"

VIEW_MODES: Final[tuple[str, ...]] = ("list", "grid", "table")

DEFAULT_SORT_PRESETS: Final[list[dict[str, str]]] = [
    {"id": "title-asc", "label": "Title (A-Z)", "key": "title", "direction": "asc"},
    {"id": "title-desc", "label": "Title (Z-A)", "key": "title", "direction": "desc"},
    {"id": "date-desc", "label": "Date (Newest)", "key": DEFAULT_DATE_FIELD, "direction": "desc"},
    {"id": "date-asc", "label": "Date (Oldest)", "key": DEFAULT_DATE_FIELD, "direction": "asc"},
]
