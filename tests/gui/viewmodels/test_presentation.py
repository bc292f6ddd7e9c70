import pytest

from contentlist.domain.models import IDLE, DragState, Item, ItemState
from contentlist.gui.viewmodels.presentation import build_row, item_state, selection_label, split_tags


@pytest.mark.parametrize(
    "selected, disabled, dragging, expected",
    [
        (True, True, True, ItemState.SELECTED),
        (False, True, True, ItemState.DISABLED),
        (False, False, True, ItemState.DRAGGING),
        (False, False, False, ItemState.DEFAULT),
    ],
)
def test_item_state_precedence(selected, disabled, dragging, expected):
    assert item_state(selected, disabled, dragging) is expected


def test_split_tags():
    assert split_tags(["a", "b"], 3) == (("a", "b"), 0)
    assert split_tags(["a", "b", "c", "d", "e"], 3) == (("a", "b", "c"), 2)
    assert split_tags(None, 3) == ((), 0)


def test_selection_label():
    assert selection_label("{selected} of {total} selected", 0, 5) is None
    assert selection_label("{selected} of {total} selected", 2, 5) == "2 of 5 selected"


def _row(item, **overrides):
    options = dict(
        selected=False,
        drag=IDLE,
        can_reorder=True,
        selectable=True,
        clickable=False,
        max_visible_tags=3,
    )
    options.update(overrides)
    return build_row(item, 0, **options)


def test_link_makes_row_clickable():
    assert _row(Item(id="a", href="/lessons/a")).clickable
    assert not _row(Item(id="b")).clickable


def test_disabled_row_loses_interactions():
    row = _row(Item(id="a", href="/x", disabled=True), clickable=True)
    assert not (row.clickable or row.draggable or row.selectable)
    assert row.state is ItemState.DISABLED


def test_drag_flags():
    row = _row(Item(id="a"), drag=DragState("b", "a"))
    assert row.drop_target and not row.dragging
    assert not _row(Item(id="a"), can_reorder=False).draggable
