"""Role definitions exposed by the content list model."""

from __future__ import annotations

from enum import IntEnum
from typing import Dict

from PySide6.QtCore import Qt


class Roles(IntEnum):
    """Custom roles exposed to QML or widgets."""

    ITEM_ID = Qt.UserRole + 1
    TITLE = Qt.UserRole + 2
    SUBTITLE = Qt.UserRole + 3
    DESCRIPTION = Qt.UserRole + 4
    TAGS = Qt.UserRole + 5
    HIDDEN_TAG_COUNT = Qt.UserRole + 6
    IS_SELECTED = Qt.UserRole + 7
    IS_DISABLED = Qt.UserRole + 8
    IS_DRAGGING = Qt.UserRole + 9
    IS_DROP_TARGET = Qt.UserRole + 10
    ITEM_STATE = Qt.UserRole + 11
    IS_DRAGGABLE = Qt.UserRole + 12
    ITEM = Qt.UserRole + 13


def role_names(base: Dict[int, bytes] | None = None) -> Dict[int, bytes]:
    """Return a mapping of Qt role numbers to byte names."""

    mapping: Dict[int, bytes] = {} if base is None else dict(base)
    mapping.update(
        {
            Roles.ITEM_ID: b"itemId",
            Roles.TITLE: b"title",
            Roles.SUBTITLE: b"subtitle",
            Roles.DESCRIPTION: b"description",
            Roles.TAGS: b"tags",
            Roles.HIDDEN_TAG_COUNT: b"hiddenTagCount",
            Roles.IS_SELECTED: b"isSelected",
            Roles.IS_DISABLED: b"isDisabled",
            Roles.IS_DRAGGING: b"isDragging",
            Roles.IS_DROP_TARGET: b"isDropTarget",
            Roles.ITEM_STATE: b"itemState",
            Roles.IS_DRAGGABLE: b"isDraggable",
            Roles.ITEM: b"item",
        }
    )
    return mapping
