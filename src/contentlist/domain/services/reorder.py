"""Manual reordering: drag gesture state machine plus the list splice."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Generic, List, Optional, Sequence, Tuple, TypeVar

from contentlist.domain.models.core import is_disabled, item_id
from contentlist.domain.models.query import IDLE, DragState

T = TypeVar("T")


@dataclass(frozen=True)
class ReorderResult(Generic[T]):
    items: Tuple[T, ...]
    from_index: int
    to_index: int

    @property
    def order(self) -> Tuple[str, ...]:
        return tuple(item_id(item) for item in self.items)


def _index_of(items: Sequence[Any], key: str) -> int:
    for index, item in enumerate(items):
        if item_id(item) == key:
            return index
    return -1


def move_to_index(items: Sequence[T], index: int, dest: int) -> Optional[ReorderResult[T]]:
    """Pop the entry at *index* and insert it at *dest* of the shortened list."""
    if not (0 <= index < len(items)) or not (0 <= dest < len(items)):
        return None
    shuffled: List[T] = list(items)
    moved = shuffled.pop(index)
    shuffled.insert(dest, moved)
    return ReorderResult(tuple(shuffled), index, dest)


def move_item(items: Sequence[T], source_id: str, target_id: str) -> Optional[ReorderResult[T]]:
    """Move *source_id* to the slot *target_id* occupies once the source is removed.

    ``[1, 2, 3]`` with 1 dropped on 3 gives ``[2, 1, 3]``: after removing 1
    the target sits at index 1, which is where 1 is reinserted.  Returns
    ``None`` when either id is missing or both are the same.
    """
    if source_id == target_id:
        return None
    source = _index_of(items, source_id)
    if source < 0 or _index_of(items, target_id) < 0:
        return None
    remaining = [item for i, item in enumerate(items) if i != source]
    dest = _index_of(remaining, target_id)
    remaining.insert(dest, items[source])
    return ReorderResult(tuple(remaining), source, dest)


class ReorderEngine(Generic[T]):
    """Track one drag gesture over the full item list.

    States are ``Idle`` (no dragged id) and ``Dragging``.  Every transition
    method returns whether the observable :class:`DragState` changed; only
    :meth:`drop` produces a :class:`ReorderResult`.
    """

    def __init__(self) -> None:
        self._items: Tuple[T, ...] = ()
        self._state: DragState = IDLE
        self._enabled = False
        self._logger = logging.getLogger(__name__)

    @property
    def state(self) -> DragState:
        return self._state

    @property
    def enabled(self) -> bool:
        return self._enabled

    def set_enabled(self, enabled: bool) -> bool:
        """Allow or forbid dragging; forbidding cancels a gesture in flight."""
        self._enabled = bool(enabled)
        if not self._enabled and self._state.is_dragging:
            self._logger.debug("Reordering disabled mid-drag; cancelling %r", self._state.dragged_id)
            return self._reset()
        return False

    def set_items(self, items: Sequence[T]) -> bool:
        self._items = tuple(items)
        state = self._state
        if not state.is_dragging:
            return False
        if _index_of(self._items, state.dragged_id) < 0:
            self._logger.debug("Dragged item %r vanished; returning to idle", state.dragged_id)
            return self._reset()
        if state.drop_target_id is not None and _index_of(self._items, state.drop_target_id) < 0:
            self._state = DragState(state.dragged_id, None)
            return True
        return False

    def can_drag(self, key: str) -> bool:
        if not self._enabled:
            return False
        index = _index_of(self._items, key)
        return index >= 0 and not is_disabled(self._items[index])

    # ------------------------------------------------------------------
    # Gesture events
    # ------------------------------------------------------------------
    def drag_start(self, key: str) -> bool:
        if not self.can_drag(key):
            self._logger.debug("Rejecting drag of %r", key)
            return False
        if self._state.dragged_id == key and self._state.drop_target_id is None:
            return False
        self._state = DragState(dragged_id=key)
        return True

    def drag_over(self, key: str) -> bool:
        if not self._state.is_dragging or _index_of(self._items, key) < 0:
            return False
        if self._state.drop_target_id == key:
            return False
        self._state = DragState(self._state.dragged_id, key)
        return True

    def drop(self, key: str) -> Optional[ReorderResult[T]]:
        state = self._state
        self._reset()
        if not state.is_dragging:
            return None
        result = move_item(self._items, state.dragged_id, key)
        if result is not None:
            self._items = result.items
        return result

    def drag_end(self) -> bool:
        return self._reset()

    # ------------------------------------------------------------------
    # Keyboard fallback
    # ------------------------------------------------------------------
    def move_by(self, key: str, offset: int) -> Optional[ReorderResult[T]]:
        if not self.can_drag(key):
            return None
        index = _index_of(self._items, key)
        result = move_to_index(self._items, index, index + offset)
        if result is not None:
            self._items = result.items
        return result

    def _reset(self) -> bool:
        if self._state == IDLE:
            return False
        self._state = IDLE
        return True
