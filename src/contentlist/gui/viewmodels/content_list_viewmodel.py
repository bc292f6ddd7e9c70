"""ContentListController — headless state behind a list/grid collection view.

The controller owns the item list, the selection, the query (search, filters,
sort), the drag gesture and the view mode.  It recomputes the visible rows
after every change and emits one notification per mutating command.  Invalid
commands (unknown or disabled ids, disabled features, unknown filters) are
logged at DEBUG and ignored: items can change between the view rendering a
handle and the user acting on it.
"""

from __future__ import annotations

import logging
from typing import Any, FrozenSet, Iterable, List, Optional, Sequence, Tuple

from contentlist.domain.models.core import SortDirection, ViewMode, is_disabled, item_id
from contentlist.domain.models.query import IDLE, DragState, QueryState
from contentlist.domain.services.filters import ActiveFilter, is_active_value
from contentlist.domain.services.query_engine import derive_view
from contentlist.domain.services.reorder import ReorderEngine, ReorderResult
from contentlist.domain.services.selection import SelectionModel
from contentlist.errors.handler import ErrorHandler, ErrorSeverity
from contentlist.events.bus import EventBus
from contentlist.events.collection_events import (
    ActionInvokedEvent,
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
from contentlist.gui.viewmodels.base import BaseViewModel
from contentlist.gui.viewmodels.presentation import (
    ItemRow,
    ToolbarState,
    build_row,
    selection_label,
)
from contentlist.gui.viewmodels.signal import ObservableProperty, Signal
from contentlist.settings.controller_config import ControllerConfig


class ContentListController(BaseViewModel):
    """Selection, query and reorder state for one collection view."""

    def __init__(
        self,
        config: Optional[ControllerConfig] = None,
        items: Iterable[Any] = (),
        *,
        event_bus: Optional[EventBus] = None,
        error_handler: Optional[ErrorHandler] = None,
        collection_id: str = "",
    ) -> None:
        super().__init__(event_bus)
        self._config = config or ControllerConfig.from_mapping()
        self._collection_id = collection_id
        self._logger = logging.getLogger(__name__)
        self._error_handler = error_handler or ErrorHandler(self._logger, event_bus)

        self._items: Tuple[Any, ...] = ()
        self._index: dict[str, Any] = {}
        self._visible: Tuple[Any, ...] = ()
        self._selection = SelectionModel()
        self._reorder: ReorderEngine[Any] = ReorderEngine()

        # Observable properties
        self.query = ObservableProperty(QueryState())
        self.view_mode = ObservableProperty(self._config.default_view_mode)
        self.loading = ObservableProperty(False)
        self.drag_state = ObservableProperty(IDLE)

        # Signals
        self.selection_changed = Signal("selection_changed")
        self.search_changed = Signal("search_changed")
        self.filter_changed = Signal("filter_changed")
        self.filters_cleared = Signal("filters_cleared")
        self.sort_changed = Signal("sort_changed")
        self.view_mode_changed = Signal("view_mode_changed")
        self.items_reordered = Signal("items_reordered")  # emits (order, from_index, to_index)
        self.item_activated = Signal("item_activated")
        self.action_invoked = Signal("action_invoked")  # emits (action_id, item)
        self.visible_changed = Signal("visible_changed")
        self.drag_state_changed = Signal("drag_state_changed")

        self.subscribe_event(ItemsReplacedEvent, self._on_items_replaced, collection_id=collection_id or None)

        self.set_items(items)

    # ------------------------------------------------------------------
    # Read-only state
    # ------------------------------------------------------------------
    @property
    def config(self) -> ControllerConfig:
        return self._config

    @property
    def items(self) -> Tuple[Any, ...]:
        return self._items

    @property
    def visible_items(self) -> Tuple[Any, ...]:
        return self._visible

    @property
    def selected_ids(self) -> FrozenSet[str]:
        return self._selection.selected

    @property
    def selected_count(self) -> int:
        return len(self._selection)

    @property
    def total_count(self) -> int:
        return len(self._items)

    @property
    def visible_count(self) -> int:
        return len(self._visible)

    @property
    def is_all_selected(self) -> bool:
        return self._selection.is_all_selected

    @property
    def is_some_selected(self) -> bool:
        return self._selection.is_some_selected

    @property
    def is_empty(self) -> bool:
        return not self._visible

    @property
    def empty_message(self) -> Optional[str]:
        """Placeholder text for an empty view; ``None`` while rows or loading show."""
        if self._visible or self.loading.value:
            return None
        return self._config.empty_message

    @property
    def can_reorder(self) -> bool:
        """Drag handles are offered only while nothing narrows or sorts the list."""
        return self._config.features.reorderable and self.query.value.is_default

    @property
    def search_term(self) -> str:
        return self.query.value.search_term

    @property
    def sort_key(self) -> Optional[str]:
        return self.query.value.sort_key

    @property
    def sort_direction(self) -> SortDirection:
        return self.query.value.sort_direction

    @property
    def active_filter_count(self) -> int:
        return len(self.active_filter_chips())

    def active_filter_chips(self) -> List[ActiveFilter]:
        return self._config.filters.chips(self.query.value.active_filters)

    def item(self, key: str) -> Optional[Any]:
        return self._index.get(key)

    def is_selected(self, key: str) -> bool:
        return key in self._selection

    # ------------------------------------------------------------------
    # Items
    # ------------------------------------------------------------------
    def set_items(self, items: Iterable[Any]) -> None:
        """Replace the item list wholesale and prune stale selection/drag ids."""
        unique: list[Any] = []
        index: dict[str, Any] = {}
        for entry in items:
            key = item_id(entry)
            if key in index:
                self._logger.warning("Duplicate item id %r; keeping the first occurrence", key)
                continue
            index[key] = entry
            unique.append(entry)
        self._items = tuple(unique)
        self._index = index

        pruned = self._selection.set_items(self._items)
        self._reorder.set_items(self._items)
        self._recompute()
        self._sync_drag_state()
        if pruned:
            self._emit_selection()

    def set_loading(self, loading: bool) -> None:
        self.loading.value = bool(loading)

    # ------------------------------------------------------------------
    # Selection
    # ------------------------------------------------------------------
    def select_one(self, key: str, selected: bool = True) -> bool:
        if not self._selection_enabled():
            return False
        return self._apply_selection(self._selection.select_one(key, selected))

    def toggle(self, key: str) -> bool:
        if not self._selection_enabled():
            return False
        return self._apply_selection(self._selection.toggle(key))

    def select_all(self) -> bool:
        if not self._selection_enabled():
            return False
        return self._apply_selection(self._selection.select_all())

    def select_none(self) -> bool:
        if not self._selection_enabled():
            return False
        return self._apply_selection(self._selection.select_none())

    def toggle_select_all(self) -> bool:
        if not self._selection_enabled():
            return False
        return self._apply_selection(self._selection.toggle_select_all())

    def set_selection(self, keys: Iterable[str]) -> None:
        """Adopt a caller-owned selection without echoing a notification."""
        self._selection.replace(keys)

    # ------------------------------------------------------------------
    # Search / filters / sort
    # ------------------------------------------------------------------
    def set_search(self, term: str) -> bool:
        if not self._config.features.searchable:
            self._logger.debug("Search is disabled; ignoring %r", term)
            return False
        term = term or ""
        if term == self.query.value.search_term:
            return False
        self._update_query(self.query.value.with_search(term))
        self.search_changed.emit(term)
        self.publish(SearchChangedEvent(collection_id=self._collection_id, term=term))
        return True

    def clear_search(self) -> bool:
        return self.set_search("")

    def set_filter(self, filter_id: str, value: Any) -> bool:
        if not self._config.features.filterable:
            self._logger.debug("Filtering is disabled; ignoring %r", filter_id)
            return False
        if filter_id not in self._config.filters:
            self._logger.debug("Unknown filter %r", filter_id)
            return False
        stored = value if is_active_value(value) else None
        if self.query.value.active_filters.get(filter_id) == stored:
            return False
        self._update_query(self.query.value.with_filter(filter_id, stored))
        self.filter_changed.emit(filter_id, stored)
        self.publish(FilterChangedEvent(collection_id=self._collection_id, filter_id=filter_id, value=stored))
        return True

    def remove_filter_value(self, filter_id: str, value: Any) -> bool:
        """Drop one chip: remove *value* from a multi-value filter, or clear it."""
        current = self.query.value.active_filters.get(filter_id)
        if current is None:
            return False
        if isinstance(current, (list, tuple, set, frozenset)):
            if value not in current:
                return False
            remaining = [entry for entry in current if entry != value]
            return self.set_filter(filter_id, remaining or None)
        return self.set_filter(filter_id, None)

    def clear_filters(self) -> bool:
        active = tuple(self.query.value.active_filters)
        if not active:
            return False
        self._update_query(self.query.value.without_filters())
        self.filters_cleared.emit(active)
        self.publish(FiltersClearedEvent(collection_id=self._collection_id, cleared_ids=active))
        return True

    def set_sort(self, key: Optional[str], direction: Any = SortDirection.ASC) -> bool:
        if not self._config.features.sortable:
            self._logger.debug("Sorting is disabled; ignoring %r", key)
            return False
        try:
            direction = SortDirection(direction)
        except ValueError:
            self._logger.debug("Unknown sort direction %r", direction)
            return False
        if key is not None and not self._config.accepts_sort_key(key):
            self._logger.debug("Sort key %r is not sortable", key)
            return False
        if key is None:
            direction = SortDirection.ASC
        query = self.query.value
        if query.sort_key == key and query.sort_direction is direction:
            return False
        self._update_query(query.with_sort(key, direction))
        self.sort_changed.emit(key, direction.value)
        self.publish(SortChangedEvent(collection_id=self._collection_id, key=key, direction=direction.value))
        return True

    def toggle_sort_direction(self) -> bool:
        key = self.query.value.sort_key
        if key is None:
            return False
        return self.set_sort(key, self.query.value.sort_direction.reversed)

    def apply_sort_preset(self, preset_id: str) -> bool:
        preset = self._config.sort_preset(preset_id)
        if preset is None:
            self._logger.debug("Unknown sort preset %r", preset_id)
            return False
        return self.set_sort(preset.key, preset.direction)

    def clear_sort(self) -> bool:
        return self.set_sort(None)

    # ------------------------------------------------------------------
    # View mode
    # ------------------------------------------------------------------
    def set_view_mode(self, mode: Any) -> bool:
        if not self._config.features.view_mode_switching:
            return False
        try:
            mode = ViewMode(mode)
        except ValueError:
            self._logger.debug("Unknown view mode %r", mode)
            return False
        if mode not in self._config.view_modes or mode is self.view_mode.value:
            return False
        self.view_mode.value = mode
        self.view_mode_changed.emit(mode)
        self.publish(ViewModeChangedEvent(collection_id=self._collection_id, mode=mode.value))
        return True

    # ------------------------------------------------------------------
    # Drag-and-drop reordering
    # ------------------------------------------------------------------
    def drag_start(self, key: str) -> bool:
        changed = self._reorder.drag_start(key)
        self._sync_drag_state()
        return changed

    def drag_over(self, key: str) -> bool:
        changed = self._reorder.drag_over(key)
        self._sync_drag_state()
        return changed

    def drop(self, key: str) -> Optional[ReorderResult]:
        result = self._reorder.drop(key)
        self._sync_drag_state()
        if result is not None:
            self._commit_reorder(result)
        return result

    def drag_end(self) -> bool:
        changed = self._reorder.drag_end()
        self._sync_drag_state()
        return changed

    def move_up(self, key: str) -> Optional[ReorderResult]:
        return self._move_by(key, -1)

    def move_down(self, key: str) -> Optional[ReorderResult]:
        return self._move_by(key, 1)

    # ------------------------------------------------------------------
    # Activation and actions
    # ------------------------------------------------------------------
    def activate(self, key: str) -> bool:
        entry = self._index.get(key)
        if entry is None or is_disabled(entry):
            self._logger.debug("Ignoring activation of %r", key)
            return False
        self.item_activated.emit(entry)
        self.publish(ItemActivatedEvent(collection_id=self._collection_id, item_id=key, item=entry))
        return True

    def invoke_action(self, action_id: str, key: str) -> bool:
        action = self._config.action(action_id)
        entry = self._index.get(key)
        if action is None or action.disabled or entry is None:
            self._logger.debug("Ignoring action %r on %r", action_id, key)
            return False
        if action.handler is not None:
            try:
                action.handler(entry)
            except Exception as exc:
                self._error_handler.handle(
                    exc, ErrorSeverity.ERROR, {"action_id": action_id, "item_id": key}
                )
                return False
        self.action_invoked.emit(action_id, entry)
        self.publish(ActionInvokedEvent(collection_id=self._collection_id, action_id=action_id, item_id=key))
        return True

    # ------------------------------------------------------------------
    # Presentation
    # ------------------------------------------------------------------
    def rows(self) -> List[ItemRow]:
        drag = self.drag_state.value
        can_reorder = self.can_reorder
        selectable = self._config.features.selectable
        clickable = self.item_activated.handler_count > 0
        return [
            build_row(
                entry,
                position,
                selected=item_id(entry) in self._selection,
                drag=drag,
                can_reorder=can_reorder,
                selectable=selectable,
                clickable=clickable,
                max_visible_tags=self._config.max_visible_tags,
            )
            for position, entry in enumerate(self._visible)
        ]

    def toolbar(self) -> ToolbarState:
        features = self._config.features
        query = self.query.value
        return ToolbarState(
            visible=features.has_toolbar,
            selectable=features.selectable,
            searchable=features.searchable,
            filterable=features.filterable and len(self._config.filters) > 0,
            sortable=features.sortable,
            view_mode_switching=features.view_mode_switching,
            all_selected=self.is_all_selected,
            some_selected=self.is_some_selected,
            selected_count=self.selected_count,
            total_count=self.total_count,
            selection_label=selection_label(
                self._config.selection_label, self.selected_count, self.total_count
            ),
            search_term=query.search_term,
            sort_key=query.sort_key,
            sort_direction=query.sort_direction.value,
            view_mode=self.view_mode.value,
            active_filter_count=self.active_filter_count,
            empty_message=self.empty_message,
        )

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------
    def _selection_enabled(self) -> bool:
        if not self._config.features.selectable:
            self._logger.debug("Selection is disabled")
            return False
        return True

    def _apply_selection(self, changed: bool) -> bool:
        if changed:
            self._emit_selection()
        return changed

    def _emit_selection(self) -> None:
        selected = self._selection.selected
        self.selection_changed.emit(selected)
        self.publish(SelectionChangedEvent(collection_id=self._collection_id, selected_ids=selected))

    def _update_query(self, query: QueryState) -> None:
        self.query.value = query
        self._recompute()
        self._sync_drag_state()

    def _recompute(self) -> None:
        visible = tuple(
            derive_view(
                self._items,
                self.query.value,
                searchable_fields=self._config.searchable_fields,
                filters=self._config.filters,
                sortable_fields=self._config.sortable_fields or None,
                on_predicate_error=self._on_predicate_error,
            )
        )
        self._selection.set_visible(visible)
        self._reorder.set_enabled(self.can_reorder)
        if _same_entries(visible, self._visible):
            return
        self._visible = visible
        self.visible_changed.emit(visible)

    def _sync_drag_state(self) -> None:
        state: DragState = self._reorder.state
        if state != self.drag_state.value:
            self.drag_state.value = state
            self.drag_state_changed.emit(state)

    def _move_by(self, key: str, offset: int) -> Optional[ReorderResult]:
        if self._reorder.state.is_dragging:
            return None
        result = self._reorder.move_by(key, offset)
        if result is not None:
            self._commit_reorder(result)
        return result

    def _commit_reorder(self, result: ReorderResult) -> None:
        self._items = result.items
        self._selection.set_items(self._items)
        self._recompute()
        order = result.order
        self.items_reordered.emit(order, result.from_index, result.to_index)
        self.publish(ItemsReorderedEvent(
            collection_id=self._collection_id,
            order=order,
            from_index=result.from_index,
            to_index=result.to_index,
        ))

    def _on_predicate_error(self, exc: Exception, entry: Any, filter_id: str) -> None:
        self._error_handler.handle(
            exc, ErrorSeverity.WARNING, {"filter_id": filter_id, "item_id": item_id(entry)}
        )

    def _on_items_replaced(self, event: ItemsReplacedEvent) -> None:
        self.set_items(event.items)


def _same_entries(left: Sequence[Any], right: Sequence[Any]) -> bool:
    return len(left) == len(right) and all(a is b for a, b in zip(left, right))
