"""
HistoryManager - linear undo/redo over add, remove and modify actions.

Two stacks: `done` holds active actions, `undone` holds reverted ones.
Recording a new action discards the whole reverted branch.
"""

from typing import List

from .models import ActionKind, HistoryAction
from .recovery import EmptyError
from .store import TaskStore
from .logs import get_logger

log = get_logger("history")


class HistoryManager:
    """Undo/redo engine over a TaskStore."""

    def __init__(self):
        self._done: List[HistoryAction] = []
        self._undone: List[HistoryAction] = []

    @property
    def done(self) -> List[HistoryAction]:
        """Active actions, most recent first."""
        return list(reversed(self._done))

    @property
    def undone(self) -> List[HistoryAction]:
        """Reverted actions, most recent first."""
        return list(reversed(self._undone))

    @property
    def can_undo(self) -> bool:
        return bool(self._done)

    @property
    def can_redo(self) -> bool:
        return bool(self._undone)

    def record(self, action: HistoryAction) -> None:
        self._done.append(action)
        if self._undone:
            log.debug(f"Discarding {len(self._undone)} undone action(s)")
        self._undone.clear()

    def clear(self) -> None:
        self._done.clear()
        self._undone.clear()

    def undo(self, store: TaskStore) -> HistoryAction:
        """
        Revert the most recent active action.

        Args:
            store: Store the action was applied to

        Returns:
            The reverted action

        Raises:
            EmptyError: if there is nothing to undo
        """
        if not self._done:
            raise EmptyError("Nothing to undo.")

        action = self._done.pop()
        self._undone.append(action)

        if action.kind == ActionKind.ADD:
            store.discard(action.task)
        elif action.kind == ActionKind.REMOVE:
            position = action.original_position
            if position is not None and 0 <= position <= len(store):
                store.insert(position, action.task)
            else:
                store.append(action.task)
        elif action.kind == ActionKind.MODIFY:
            self._assign(action, use_new=False)

        log.info(f"Undone: {action.describe()}")
        return action

    def redo(self, store: TaskStore) -> HistoryAction:
        """
        Re-apply the most recently reverted action.

        Raises:
            EmptyError: if there is nothing to redo
        """
        if not self._undone:
            raise EmptyError("Nothing to redo.")

        action = self._undone.pop()
        self._done.append(action)

        if action.kind == ActionKind.ADD:
            store.append(action.task)
        elif action.kind == ActionKind.REMOVE:
            store.discard(action.task)
        elif action.kind == ActionKind.MODIFY:
            self._assign(action, use_new=True)

        log.info(f"Redone: {action.describe()}")
        return action

    @staticmethod
    def _assign(action: HistoryAction, use_new: bool) -> None:
        for name, (old, new) in (action.changes or {}).items():
            setattr(action.task, name, new if use_new else old)
