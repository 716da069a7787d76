from collections import deque
from typing import Deque, Iterator

from .models import Task
from .recovery import EmptyError


class UrgentQueue:
    """FIFO of tasks awaiting urgent processing. The same task may be queued twice."""

    def __init__(self):
        self._queue: Deque[Task] = deque()

    def __len__(self) -> int:
        return len(self._queue)

    def __iter__(self) -> Iterator[Task]:
        return iter(list(self._queue))

    def enqueue(self, task: Task) -> None:
        self._queue.append(task)

    def dequeue(self) -> Task:
        if not self._queue:
            raise EmptyError("No urgent tasks to process.")
        return self._queue.popleft()
