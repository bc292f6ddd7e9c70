"""Per-row and toolbar view state derived from a controller snapshot."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional, Tuple

from contentlist.domain.models.core import ItemState, ViewMode, field_value, is_disabled, item_id
from contentlist.domain.models.query import DragState


@dataclass(frozen=True)
class ItemRow:
    item: Any
    index: int
    item_id: str
    selected: bool
    disabled: bool
    dragging: bool
    drop_target: bool
    draggable: bool
    selectable: bool
    clickable: bool
    state: ItemState
    visible_tags: Tuple[str, ...]
    hidden_tag_count: int


def item_state(selected: bool, disabled: bool, dragging: bool) -> ItemState:
    # Selection wins over disabled, which wins over dragging.
    if selected:
        return ItemState.SELECTED
    if disabled:
        return ItemState.DISABLED
    if dragging:
        return ItemState.DRAGGING
    return ItemState.DEFAULT


def split_tags(tags: Any, limit: int) -> Tuple[Tuple[str, ...], int]:
    """Return the tags to show and how many were left out."""
    values = tuple(tags or ())
    if limit < 0 or len(values) <= limit:
        return values, 0
    return values[:limit], len(values) - limit


def build_row(
    item: Any,
    index: int,
    *,
    selected: bool,
    drag: DragState,
    can_reorder: bool,
    selectable: bool,
    clickable: bool,
    max_visible_tags: int,
) -> ItemRow:
    key = item_id(item)
    disabled = is_disabled(item)
    dragging = drag.dragged_id == key
    tags, hidden = split_tags(field_value(item, "tags"), max_visible_tags)
    return ItemRow(
        item=item,
        index=index,
        item_id=key,
        selected=selected,
        disabled=disabled,
        dragging=dragging,
        drop_target=drag.drop_target_id == key,
        draggable=can_reorder and not disabled,
        selectable=selectable and not disabled,
        clickable=(clickable or bool(field_value(item, "href"))) and not disabled,
        state=item_state(selected, disabled, dragging),
        visible_tags=tags,
        hidden_tag_count=hidden,
    )


@dataclass(frozen=True)
class ToolbarState:
    visible: bool
    selectable: bool
    searchable: bool
    filterable: bool
    sortable: bool
    view_mode_switching: bool
    all_selected: bool
    some_selected: bool
    selected_count: int
    total_count: int
    selection_label: Optional[str]
    search_term: str
    sort_key: Optional[str]
    sort_direction: str
    view_mode: ViewMode
    active_filter_count: int
    empty_message: Optional[str] = None


def selection_label(template: str, selected: int, total: int) -> Optional[str]:
    """Return the "N of M selected" counter, or ``None`` while nothing is selected."""
    if selected <= 0:
        return None
    return template.format(selected=selected, total=total)
