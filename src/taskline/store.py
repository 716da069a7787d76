"""
TaskStore - the authoritative, insertion-ordered collection of live tasks.

Title lookups are case-sensitive exact matches. Positional primitives
(index_of, insert, append, discard) match by object identity so the history
engine keeps working after a task's title has been edited.
"""

from typing import Any, Dict, Iterator, List, Optional, Tuple

from .models import EDITABLE_FIELDS, Task
from .recovery import DuplicateTitleError, TaskNotFoundError
from .logs import get_logger

log = get_logger("store")


class TaskStore:
    """Ordered collection of tasks keyed by title."""

    def __init__(self):
        self._tasks: List[Task] = []

    def __len__(self) -> int:
        return len(self._tasks)

    def __iter__(self) -> Iterator[Task]:
        return iter(list(self._tasks))

    def __contains__(self, task) -> bool:
        return self.index_of(task) is not None

    def titles(self) -> List[str]:
        return [t.title for t in self._tasks]

    # -------------------- title keyed operations --------------------

    def _lookup(self, title: str) -> Optional[Task]:
        return next((t for t in self._tasks if t.title == title), None)

    def add(self, task: Task) -> int:
        """Append a task and return its index."""
        if self._lookup(task.title) is not None:
            log.debug(f"Rejected duplicate title: {task.title!r}")
            raise DuplicateTitleError(f"A task titled '{task.title}' already exists.")

        self._tasks.append(task)
        return len(self._tasks) - 1

    def find_by_title(self, title: str) -> Task:
        task = self._lookup(title)
        if task is None:
            raise TaskNotFoundError(f"Task '{title}' not found.")
        return task

    def remove_by_title(self, title: str) -> Tuple[Task, int]:
        """Remove a task, returning it together with its former index."""
        task = self.find_by_title(title)
        index = self.index_of(task)
        del self._tasks[index]
        return task, index

    def modify(self, current_title: str, **fields: Any) -> Dict[str, Tuple[Any, Any]]:
        """
        Edit a task in place.

        The new values are validated as a whole before any assignment, so a
        rejected edit leaves the task untouched.

        Args:
            current_title: Title the task has before the edit
            **fields: New values keyed by field name

        Returns:
            Mapping of each changed field to its (old, new) values
        """
        unknown = set(fields) - set(EDITABLE_FIELDS)
        if unknown:
            raise ValueError(f"Unknown task fields: {', '.join(sorted(unknown))}")

        task = self.find_by_title(current_title)

        new_title = fields.get('title')
        if new_title is not None and new_title != task.title:
            other = self._lookup(new_title)
            if other is not None and other is not task:
                raise DuplicateTitleError(f"A task titled '{new_title}' already exists.")

        # Raises pydantic.ValidationError (a ValueError) on bad values.
        candidate = Task.model_validate({**task.model_dump(), **fields})

        changes = {}
        for name in fields:
            old, new = getattr(task, name), getattr(candidate, name)
            if old != new:
                changes[name] = (old, new)

        for name, (_, new) in changes.items():
            setattr(task, name, new)
        return changes

    def sorted_by_priority_then_due_date(self) -> List[Task]:
        """Stable sort ascending by priority, then due date; store order is untouched."""
        return sorted(self._tasks, key=lambda t: (t.priority, t.due_date))

    # -------------------- identity keyed primitives --------------------

    def index_of(self, task: Task) -> Optional[int]:
        return next((i for i, t in enumerate(self._tasks) if t is task), None)

    def insert(self, index: int, task: Task) -> None:
        self._tasks.insert(index, task)

    def append(self, task: Task) -> None:
        self._tasks.append(task)

    def discard(self, task: Task) -> bool:
        """Remove this exact task object if present."""
        index = self.index_of(task)
        if index is None:
            return False
        del self._tasks[index]
        return True
