"""Tests for the undo/redo history."""
import random

import pytest

from compass_playground.geometry import Point
from compass_playground.history import History, HistoryState
from compass_playground.settings import HistorySettings


@pytest.fixture
def history():
    return History()


@pytest.fixture
def make_state(line_factory, arc_factory):
    def _make(tag):
        return HistoryState(
            lines=[line_factory(0, 0, tag, 0)],
            arcs=[arc_factory(0, 0, 0, tag)],
        )
    return _make


class TestInitialState:

    def test_empty(self, history):
        assert history.get_history_index() == -1
        assert history.get_history_length() == 0
        assert not history.can_undo()
        assert not history.can_redo()
        assert history.get_current_state() is None

    def test_undo_on_empty_returns_none(self, history):
        assert history.undo() is None
        assert history.get_history_index() == -1

    def test_redo_on_empty_returns_none(self, history):
        assert history.redo() is None
        assert history.get_history_index() == -1


class TestPush:

    def test_push_moves_cursor(self, history, make_state):
        history.push_history(make_state(1))
        history.push_history(make_state(2))
        assert history.get_history_index() == 1
        assert history.get_history_length() == 2
        assert history.can_undo()
        assert not history.can_redo()

    def test_push_snapshots_instead_of_aliasing(self, history, line_factory):
        line = line_factory(0, 0, 5, 0)
        state = HistoryState(lines=[line], arcs=[])
        history.push_history(state)
        line.set_second_point(99, 99)
        state.lines.append(line_factory(1, 1, 2, 2))
        current = history.get_current_state()
        assert len(current.lines) == 1
        assert current.lines[0].second_point == Point(5, 0)

    def test_returned_state_cannot_alter_history(self, history, make_state):
        history.push_history(make_state(1))
        history.push_history(make_state(2))
        undone = history.undo()
        undone.lines.clear()
        assert history.redo() == make_state(2)
        assert len(history.undo().lines) == 1

    def test_push_after_undo_discards_redo_branch(self, history, make_state):
        for tag in (1, 2, 3):
            history.push_history(make_state(tag))
        history.undo()
        history.undo()
        history.push_history(make_state(4))
        assert history.get_history_length() == 2
        assert history.get_history_index() == 1
        assert not history.can_redo()
        assert history.undo() == make_state(1)

    def test_push_from_empty_state_discards_everything(self, history, make_state):
        history.push_history(make_state(1))
        history.push_history(make_state(2))
        history.undo()
        history.undo()
        history.push_history(make_state(3))
        assert history.get_history_length() == 1
        assert history.get_current_state() == make_state(3)


class TestUndoRedo:

    def test_single_push_round_trip(self, history, make_state):
        s1 = make_state(1)
        history.push_history(s1)
        assert history.undo() == HistoryState(lines=[], arcs=[])
        assert history.undo() is None
        assert history.redo() == s1

    def test_undo_returns_previous_state(self, history, make_state):
        history.push_history(make_state(1))
        history.push_history(make_state(2))
        assert history.undo() == make_state(1)
        assert history.get_history_index() == 0

    def test_redo_walks_forward(self, history, make_state):
        for tag in (1, 2, 3):
            history.push_history(make_state(tag))
        history.undo()
        history.undo()
        assert history.redo() == make_state(2)
        assert history.redo() == make_state(3)
        assert history.redo() is None
        assert history.get_history_index() == 2

    def test_undo_past_start_yields_empty_state_once(self, history, make_state):
        for tag in range(1, 6):
            history.push_history(make_state(tag))
        results = [history.undo() for _ in range(10)]
        assert results[:4] == [make_state(t) for t in (4, 3, 2, 1)]
        assert results[4] == HistoryState.empty()
        assert results[5:] == [None] * 5
        assert history.get_history_index() == -1
        assert history.can_redo()

    def test_repeated_redo_at_top_is_noop(self, history, make_state):
        history.push_history(make_state(1))
        for _ in range(3):
            assert history.redo() is None
        assert history.get_history_index() == 0

    def test_clear_history(self, history, make_state):
        history.push_history(make_state(1))
        history.clear_history()
        assert history.get_history_index() == -1
        assert history.get_history_length() == 0
        assert history.undo() is None


class TestCursorBounds:

    @pytest.mark.parametrize("seed", range(20))
    def test_cursor_stays_in_bounds(self, make_state, seed):
        rng = random.Random(seed)
        history = History()
        for step in range(200):
            op = rng.choice(("push", "undo", "redo"))
            if op == "push":
                history.push_history(make_state(step))
            elif op == "undo":
                history.undo()
            else:
                history.redo()
            assert -1 <= history.get_history_index() <= history.get_history_length() - 1


class TestMaxStates:

    def test_oldest_dropped(self, make_state):
        history = History(max_states=2)
        for tag in (1, 2, 3):
            history.push_history(make_state(tag))
        assert history.get_history_length() == 2
        assert history.get_history_index() == 1
        assert history.undo() == make_state(2)
        assert history.undo() == HistoryState.empty()

    def test_rejects_zero(self):
        with pytest.raises(ValueError):
            History(max_states=0)

    def test_from_settings(self, make_state):
        history = History.from_settings(HistorySettings(max_states=1))
        history.push_history(make_state(1))
        history.push_history(make_state(2))
        assert history.get_history_length() == 1
        assert history.get_current_state() == make_state(2)
