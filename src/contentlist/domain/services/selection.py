"""Multi-selection state keyed by stable item id."""

from __future__ import annotations

import logging
from typing import Any, FrozenSet, Iterable, Sequence

from contentlist.domain.models.core import is_disabled, item_id


class SelectionModel:
    """Track which item ids are selected.

    Selection is keyed by id rather than position, so it survives filtering
    and reordering.  The model is told about the current item universe and
    the visible subset; every mutator returns ``True`` only when the selected
    set actually changed, and the owning controller turns that into a single
    notification.
    """

    def __init__(self) -> None:
        self._selected: set[str] = set()
        self._known: dict[str, bool] = {}
        self._visible: tuple[str, ...] = ()
        self._logger = logging.getLogger(__name__)

    # ------------------------------------------------------------------
    # Universe
    # ------------------------------------------------------------------
    def set_items(self, items: Iterable[Any]) -> bool:
        """Record the current item list and prune ids that disappeared."""

        self._known = {item_id(item): is_disabled(item) for item in items}
        stale = {key for key in self._selected if key not in self._known}
        if stale:
            self._logger.debug("Pruning %d stale selected id(s)", len(stale))
            self._selected -= stale
            return True
        return False

    def set_visible(self, items: Sequence[Any]) -> None:
        self._visible = tuple(item_id(item) for item in items)

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------
    @property
    def selected(self) -> FrozenSet[str]:
        return frozenset(self._selected)

    def __contains__(self, key: object) -> bool:
        return key in self._selected

    def __len__(self) -> int:
        return len(self._selected)

    def selectable_visible_ids(self) -> tuple[str, ...]:
        return tuple(key for key in self._visible if not self._known.get(key, True))

    @property
    def is_all_selected(self) -> bool:
        selectable = self.selectable_visible_ids()
        return bool(selectable) and all(key in self._selected for key in selectable)

    @property
    def is_some_selected(self) -> bool:
        return bool(self._selected) and not self.is_all_selected

    def can_select(self, key: str) -> bool:
        return key in self._known and not self._known[key]

    # ------------------------------------------------------------------
    # Mutators
    # ------------------------------------------------------------------
    def select_one(self, key: str, selected: bool = True) -> bool:
        if not self.can_select(key):
            self._logger.debug("Ignoring selection of unknown or disabled item %r", key)
            return False
        if selected:
            if key in self._selected:
                return False
            self._selected.add(key)
            return True
        if key not in self._selected:
            return False
        self._selected.discard(key)
        return True

    def toggle(self, key: str) -> bool:
        return self.select_one(key, key not in self._selected)

    def select_all(self) -> bool:
        return self._assign(self.selectable_visible_ids())

    def select_none(self) -> bool:
        return self._assign(())

    def toggle_select_all(self) -> bool:
        """Clear a complete selection, otherwise complete a partial one."""
        if self.is_all_selected:
            return self.select_none()
        return self.select_all()

    def replace(self, keys: Iterable[str]) -> bool:
        """Adopt a caller-owned selection, dropping ids that are not known."""
        return self._assign(key for key in keys if key in self._known)

    def _assign(self, keys: Iterable[str]) -> bool:
        updated = set(keys)
        if updated == self._selected:
            return False
        self._selected = updated
        return True
