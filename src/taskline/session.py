"""
TaskSession - the one context object the shell works against.

Owns a store, its history, the category index and the urgent queue, and
keeps them in step for every user-level operation.
"""

from typing import Any, Callable, Iterator, List

from .categories import CategoryTree
from .history import HistoryManager
from .models import ActionKind, HistoryAction, Task
from .store import TaskStore
from .urgent import UrgentQueue
from .logs import get_logger

log = get_logger("session")


class TaskSession:
    """Main context object providing access to all task state."""

    def __init__(self, root_label: str = "Root"):
        self.store = TaskStore()
        self.history = HistoryManager()
        self.categories = CategoryTree.with_root(root_label)
        self.urgent = UrgentQueue()

    def add_task(self, task: Task) -> int:
        index = self.store.add(task)
        self.history.record(HistoryAction(task, ActionKind.ADD, original_position=index))
        self.categories.index(task)
        log.info(f"Added task '{task.title}' at position {index}")
        return index

    def remove_task(self, title: str) -> Task:
        task, index = self.store.remove_by_title(title)
        self.history.record(HistoryAction(task, ActionKind.REMOVE, original_position=index))
        log.info(f"Removed task '{title}' from position {index}")
        return task

    def modify_task(self, current_title: str, **fields: Any) -> Task:
        """Edit a task in place; only real changes are recorded."""
        task = self.store.find_by_title(current_title)
        changes = self.store.modify(current_title, **fields)
        if changes:
            self.history.record(HistoryAction(task, ActionKind.MODIFY, changes=changes))
            log.info(f"Modified task '{task.title}': {', '.join(changes)}")
        else:
            log.debug(f"Modify of '{current_title}' changed nothing")
        return task

    def undo(self) -> HistoryAction:
        return self.history.undo(self.store)

    def redo(self) -> HistoryAction:
        return self.history.redo(self.store)

    def flag_urgent(self, title: str) -> Task:
        task = self.store.find_by_title(title)
        self.urgent.enqueue(task)
        log.info(f"Queued urgent task '{title}' ({len(self.urgent)} pending)")
        return task

    def process_urgent(self) -> Task:
        task = self.urgent.dequeue()
        log.info(f"Processed urgent task '{task.title}'")
        return task

    def sorted_tasks(self) -> List[Task]:
        return self.store.sorted_by_priority_then_due_date()

    def render_categories(self, formatter: Callable[[Task], str] = str) -> Iterator[str]:
        return self.categories.render(formatter)
