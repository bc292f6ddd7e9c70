"""Qt list model exposing a controller's visible rows to widgets or QML."""

from __future__ import annotations

from typing import Any, Dict, List, Optional

from PySide6.QtCore import QAbstractListModel, QModelIndex, QObject, Qt

from contentlist.domain.models.core import field_value

from ...viewmodels.content_list_viewmodel import ContentListController
from ...viewmodels.presentation import ItemRow
from .roles import Roles, role_names

_STATE_ROLES = [
    Roles.IS_SELECTED,
    Roles.IS_DRAGGING,
    Roles.IS_DROP_TARGET,
    Roles.ITEM_STATE,
    Roles.IS_DRAGGABLE,
]


class ContentListModel(QAbstractListModel):
    """Read-only adapter over :class:`ContentListController`.

    Structural changes (search, filters, sort, reorder, new items) reset the
    model; selection, drag and query changes refresh the state roles.
    """

    def __init__(self, controller: ContentListController, parent: Optional[QObject] = None) -> None:
        super().__init__(parent)
        self._controller = controller
        self._rows: List[ItemRow] = controller.rows()

        controller.visible_changed.connect(self._on_visible_changed)
        controller.selection_changed.connect(self._on_state_changed)
        controller.drag_state_changed.connect(self._on_state_changed)
        # A query change can flip drag handles without changing the rows.
        controller.query.changed.connect(self._on_state_changed)

    def controller(self) -> ContentListController:
        return self._controller

    def rowCount(self, parent: QModelIndex | None = None) -> int:  # type: ignore[override]
        if parent is not None and parent.isValid():
            return 0
        return len(self._rows)

    def data(self, index: QModelIndex, role: int = Qt.DisplayRole):  # type: ignore[override]
        if not index.isValid() or not (0 <= index.row() < len(self._rows)):
            return None
        row = self._rows[index.row()]
        if role in (Qt.DisplayRole, Roles.TITLE):
            return field_value(row.item, "title")
        return self._role_value(row, role)

    def roleNames(self) -> Dict[int, bytes]:  # type: ignore[override]
        return role_names(super().roleNames())

    def flags(self, index: QModelIndex) -> Qt.ItemFlags:  # type: ignore[override]
        if not index.isValid() or not (0 <= index.row() < len(self._rows)):
            return Qt.NoItemFlags
        row = self._rows[index.row()]
        if row.disabled:
            return Qt.NoItemFlags
        flags = Qt.ItemIsEnabled
        if row.selectable:
            flags |= Qt.ItemIsSelectable
        if row.draggable:
            flags |= Qt.ItemIsDragEnabled | Qt.ItemIsDropEnabled
        return flags

    def row_for_id(self, key: str) -> int:
        for position, row in enumerate(self._rows):
            if row.item_id == key:
                return position
        return -1

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------
    @staticmethod
    def _role_value(row: ItemRow, role: int) -> Any:
        if role == Roles.ITEM_ID:
            return row.item_id
        if role == Roles.SUBTITLE:
            return field_value(row.item, "subtitle")
        if role == Roles.DESCRIPTION:
            return field_value(row.item, "description")
        if role == Roles.TAGS:
            return list(row.visible_tags)
        if role == Roles.HIDDEN_TAG_COUNT:
            return row.hidden_tag_count
        if role == Roles.IS_SELECTED:
            return row.selected
        if role == Roles.IS_DISABLED:
            return row.disabled
        if role == Roles.IS_DRAGGING:
            return row.dragging
        if role == Roles.IS_DROP_TARGET:
            return row.drop_target
        if role == Roles.ITEM_STATE:
            return row.state.value
        if role == Roles.IS_DRAGGABLE:
            return row.draggable
        if role == Roles.ITEM:
            return row.item
        return None

    def _on_visible_changed(self, _visible) -> None:
        self.beginResetModel()
        self._rows = self._controller.rows()
        self.endResetModel()

    def _on_state_changed(self, *_args) -> None:
        self._rows = self._controller.rows()
        if not self._rows:
            return
        self.dataChanged.emit(
            self.index(0, 0),
            self.index(len(self._rows) - 1, 0),
            [int(role) for role in _STATE_ROLES],
        )
