"""Unit tests for HistoryManager undo/redo."""

import pytest

from taskline.history import HistoryManager
from taskline.models import ActionKind, HistoryAction
from taskline.recovery import EmptyError
from taskline.store import TaskStore


def _add(store, history, task):
    index = store.add(task)
    history.record(HistoryAction(task, ActionKind.ADD, original_position=index))


def _remove(store, history, title):
    task, index = store.remove_by_title(title)
    history.record(HistoryAction(task, ActionKind.REMOVE, original_position=index))
    return task


class TestEmptyHistory:
    """Test undo/redo with nothing recorded."""

    def test_undo_empty(self):
        with pytest.raises(EmptyError, match="Nothing to undo"):
            HistoryManager().undo(TaskStore())

    def test_redo_empty(self):
        with pytest.raises(EmptyError, match="Nothing to redo"):
            HistoryManager().redo(TaskStore())

    def test_flags(self):
        history = HistoryManager()
        assert not history.can_undo
        assert not history.can_redo


class TestUndoRedoAdd:
    """Test reverting and re-applying adds."""

    def test_undo_add_restores_previous_state(self, make_task):
        store, history = TaskStore(), HistoryManager()
        _add(store, history, make_task("A"))
        _add(store, history, make_task("B"))
        c = make_task("C")
        _add(store, history, c)

        action = history.undo(store)
        assert action.task is c
        assert action.kind == ActionKind.ADD
        assert store.titles() == ["A", "B"]

    def test_redo_add_restores_post_state(self, make_task):
        store, history = TaskStore(), HistoryManager()
        _add(store, history, make_task("A"))
        _add(store, history, make_task("B"))

        history.undo(store)
        action = history.redo(store)
        assert action.task.title == "B"
        assert store.titles() == ["A", "B"]

    def test_undo_add_after_rename(self, make_task):
        """The task is found by identity, not by the title it had when added."""
        store, history = TaskStore(), HistoryManager()
        task = make_task("A")
        _add(store, history, task)
        store.modify("A", title="Renamed")

        history.undo(store)
        assert len(store) == 0

    def test_undo_add_ignores_lookalike(self, make_task):
        store, history = TaskStore(), HistoryManager()
        original = make_task("A")
        _add(store, history, original)
        store.discard(original)
        store.add(make_task("A"))

        history.undo(store)
        assert store.titles() == ["A"]


class TestUndoRedoRemove:
    """Test reverting and re-applying removals."""

    def test_undo_remove_restores_position(self, make_task):
        store, history = TaskStore(), HistoryManager()
        for title in ("A", "B", "C"):
            _add(store, history, make_task(title))
        b = _remove(store, history, "B")

        action = history.undo(store)
        assert action.kind == ActionKind.REMOVE
        assert action.original_position == 1
        assert store.index_of(b) == 1
        assert store.titles() == ["A", "B", "C"]

    def test_redo_remove(self, make_task):
        store, history = TaskStore(), HistoryManager()
        for title in ("A", "B", "C"):
            _add(store, history, make_task(title))
        _remove(store, history, "B")

        history.undo(store)
        history.redo(store)
        assert store.titles() == ["A", "C"]

    def test_out_of_bounds_position_appends(self, make_task):
        """A stale position past the end falls back to append."""
        store, history = TaskStore(), HistoryManager()
        a, b = make_task("A"), make_task("B")
        store.add(a)
        store.add(b)
        history.record(HistoryAction(b, ActionKind.REMOVE, original_position=5))
        store.discard(b)

        history.undo(store)
        assert store.titles() == ["A", "B"]

    def test_position_equal_to_length(self, make_task):
        store, history = TaskStore(), HistoryManager()
        for title in ("A", "B"):
            _add(store, history, make_task(title))
        _remove(store, history, "B")

        history.undo(store)
        assert store.titles() == ["A", "B"]

    def test_missing_position_appends(self, make_task):
        store, history = TaskStore(), HistoryManager()
        store.add(make_task("A"))
        task = make_task("B")
        history.record(HistoryAction(task, ActionKind.REMOVE))

        history.undo(store)
        assert store.titles() == ["A", "B"]


class TestUndoRedoModify:
    """Test reverting and re-applying field edits."""

    def test_undo_and_redo_modify(self, make_task):
        store, history = TaskStore(), HistoryManager()
        task = make_task("A", priority=3, category="Work")
        _add(store, history, task)
        changes = store.modify("A", title="B", priority=1, category="Home")
        history.record(HistoryAction(task, ActionKind.MODIFY, changes=changes))

        history.undo(store)
        assert (task.title, task.priority, task.category) == ("A", 3, "Work")

        history.redo(store)
        assert (task.title, task.priority, task.category) == ("B", 1, "Home")


class TestBranching:
    """Test that recording discards the redo branch."""

    def test_record_after_undo_clears_redo(self, make_task):
        store, history = TaskStore(), HistoryManager()
        _add(store, history, make_task("A"))
        history.undo(store)
        assert history.can_redo

        _add(store, history, make_task("B"))
        assert not history.can_redo
        with pytest.raises(EmptyError):
            history.redo(store)

    def test_stacks_most_recent_first(self, make_task):
        store, history = TaskStore(), HistoryManager()
        _add(store, history, make_task("A"))
        _add(store, history, make_task("B"))
        history.undo(store)

        assert [a.task.title for a in history.done] == ["A"]
        assert [a.task.title for a in history.undone] == ["B"]

    def test_chained_undo_redo(self, make_task):
        store, history = TaskStore(), HistoryManager()
        for title in ("A", "B", "C"):
            _add(store, history, make_task(title))
        _remove(store, history, "A")

        for _ in range(4):
            history.undo(store)
        assert store.titles() == []

        for _ in range(4):
            history.redo(store)
        assert store.titles() == ["B", "C"]

    def test_clear(self, make_task):
        store, history = TaskStore(), HistoryManager()
        _add(store, history, make_task("A"))
        history.undo(store)
        history.clear()
        assert not history.can_undo
        assert not history.can_redo
