"""Unit tests for :mod:`contentlist.gui.ui.models.content_list_model`."""

from __future__ import annotations

import pytest

pytest.importorskip(
    "PySide6",
    reason="PySide6 is required for model tests",
    exc_type=ImportError,
)

from PySide6.QtCore import Qt

from contentlist.gui.ui.models import ContentListModel, Roles


@pytest.fixture()
def model(qapp, controller) -> ContentListModel:
    return ContentListModel(controller)


def _value(model: ContentListModel, row: int, role: int):
    return model.data(model.index(row, 0), role)


def test_rows_follow_visible_items(model, controller):
    assert model.rowCount() == 4
    assert _value(model, 0, Qt.DisplayRole) == "Breathing Basics"
    assert _value(model, 2, Roles.TAGS) == ["wellness", "habits", "evening"]
    assert _value(model, 2, Roles.HIDDEN_TAG_COUNT) == 1

    resets = []
    model.modelReset.connect(lambda: resets.append(True))
    controller.set_search("focus")

    assert resets == [True]
    assert model.rowCount() == 1
    assert _value(model, 0, Roles.ITEM_ID) == "l2"


def test_selection_refreshes_state_roles(model, controller):
    changes = []
    model.dataChanged.connect(lambda top, bottom, roles: changes.append(list(roles)))

    controller.select_one("l1")

    assert changes and int(Roles.IS_SELECTED) in changes[0]
    assert _value(model, 0, Roles.IS_SELECTED) is True
    assert _value(model, 0, Roles.ITEM_STATE) == "selected"


def test_reorder_resets_rows(model, controller):
    controller.drag_start("l1")
    assert _value(model, 0, Roles.IS_DRAGGING) is True
    controller.drag_over("l3")
    assert _value(model, 2, Roles.IS_DROP_TARGET) is True

    controller.drop("l3")

    assert [_value(model, row, Roles.ITEM_ID) for row in range(4)] == ["l2", "l1", "l3", "l4"]
    assert model.row_for_id("l1") == 1
    assert model.row_for_id("ghost") == -1


def test_disabled_rows_have_no_flags(model):
    assert model.flags(model.index(3, 0)) == Qt.NoItemFlags
    flags = model.flags(model.index(0, 0))
    assert flags & Qt.ItemIsSelectable
    assert flags & Qt.ItemIsDragEnabled


def test_role_names_are_exposed(model):
    names = model.roleNames()
    assert names[Roles.ITEM_ID] == b"itemId"
    assert names[Roles.HIDDEN_TAG_COUNT] == b"hiddenTagCount"


def test_query_change_without_row_change_drops_drag_handles(model, controller):
    assert _value(model, 0, Roles.IS_DRAGGABLE) is True
    changes = []
    model.dataChanged.connect(lambda top, bottom, roles: changes.append(list(roles)))

    controller.set_filter("duration", {"min": 0})

    assert model.rowCount() == 4
    assert controller.can_reorder is False
    assert changes and int(Roles.IS_DRAGGABLE) in changes[-1]
    assert _value(model, 0, Roles.IS_DRAGGABLE) is False
    assert not model.flags(model.index(0, 0)) & Qt.ItemIsDragEnabled
