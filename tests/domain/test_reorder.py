"""Tests for the drag state machine and the reorder splice."""

import itertools

import pytest

from contentlist.domain.models import IDLE, DragState, Item
from contentlist.domain.services import ReorderEngine, move_item, move_to_index


def _items(*keys):
    return [Item(id=key, title=key.upper()) for key in keys]


def _ids(items):
    return [item.id for item in items]


class TestMoveItem:
    def test_forward_drop_lands_on_post_removal_index(self):
        result = move_item(_items("1", "2", "3"), "1", "3")
        assert _ids(result.items) == ["2", "1", "3"]
        assert (result.from_index, result.to_index) == (0, 1)

    def test_backward_drop(self):
        result = move_item(_items("1", "2", "3"), "3", "1")
        assert _ids(result.items) == ["3", "1", "2"]
        assert (result.from_index, result.to_index) == (2, 0)

    def test_same_id_is_not_a_move(self):
        assert move_item(_items("1", "2"), "2", "2") is None

    def test_unknown_ids(self):
        assert move_item(_items("1", "2"), "1", "9") is None
        assert move_item(_items("1", "2"), "9", "1") is None

    @pytest.mark.parametrize("size", [2, 3, 5])
    def test_every_pair_keeps_count_and_members(self, size):
        keys = [str(n) for n in range(size)]
        for source, target in itertools.permutations(keys, 2):
            original = _items(*keys)
            result = move_item(original, source, target)
            new_ids = _ids(result.items)
            assert sorted(new_ids) == sorted(keys)
            assert len(set(new_ids)) == size

            remaining = [key for key in keys if key != source]
            expected = list(remaining)
            expected.insert(remaining.index(target), source)
            assert new_ids == expected

    def test_move_to_index_bounds(self):
        items = _items("a", "b")
        assert move_to_index(items, 0, 2) is None
        assert _ids(move_to_index(items, 1, 0).items) == ["b", "a"]


class TestReorderEngine:
    @pytest.fixture
    def engine(self):
        engine = ReorderEngine()
        engine.set_items(_items("1", "2", "3") + [Item(id="x", disabled=True)])
        engine.set_enabled(True)
        return engine

    def test_full_gesture(self, engine):
        assert engine.drag_start("1")
        assert engine.state == DragState("1", None)
        assert engine.drag_over("3")
        assert engine.state == DragState("1", "3")
        result = engine.drop("3")
        assert _ids(result.items) == ["2", "1", "3", "x"]
        assert engine.state == IDLE

    def test_repeated_drag_over_is_a_state_no_op(self, engine):
        engine.drag_start("1")
        assert engine.drag_over("2") is True
        assert engine.drag_over("2") is False

    def test_drop_on_self_resets_without_reorder(self, engine):
        engine.drag_start("2")
        assert engine.drop("2") is None
        assert engine.state == IDLE

    def test_drag_end_without_drop_resets(self, engine):
        engine.drag_start("2")
        engine.drag_over("3")
        assert engine.drag_end() is True
        assert engine.state == IDLE
        assert engine.drag_end() is False

    def test_disabled_and_unknown_items_cannot_be_dragged(self, engine):
        assert engine.drag_start("x") is False
        assert engine.drag_start("nope") is False
        assert engine.state == IDLE

    def test_drag_over_requires_active_drag(self, engine):
        assert engine.drag_over("2") is False
        assert engine.drop("2") is None

    def test_disabling_cancels_drag(self, engine):
        engine.drag_start("1")
        assert engine.set_enabled(False) is True
        assert engine.state == IDLE
        assert engine.drag_start("1") is False

    def test_vanished_dragged_item_resets(self, engine):
        engine.drag_start("2")
        engine.drag_over("3")
        assert engine.set_items(_items("1", "3")) is True
        assert engine.state == IDLE

    def test_vanished_drop_target_is_cleared(self, engine):
        engine.drag_start("1")
        engine.drag_over("3")
        engine.set_items(_items("1", "2"))
        assert engine.state == DragState("1", None)

    def test_new_drag_start_replaces_gesture(self, engine):
        engine.drag_start("1")
        engine.drag_over("2")
        assert engine.drag_start("3") is True
        assert engine.state == DragState("3", None)

    def test_keyboard_moves(self, engine):
        assert _ids(engine.move_by("2", -1).items) == ["2", "1", "3", "x"]
        assert engine.move_by("2", -1) is None
        assert _ids(engine.move_by("1", 1).items) == ["2", "3", "1", "x"]
