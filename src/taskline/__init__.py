"""
Taskline - an interactive command-line task manager.

Tasks live in an ordered store with linear undo/redo, are indexed in a
category tree for display, and can be queued for urgent processing:
Session → Store / History / Category Tree / Urgent Queue
"""

from .version import VERSION
from .models import ActionKind, HistoryAction, Task
from .recovery import (
    TasklineError,
    RecoverableError,
    FatalError,
    DuplicateTitleError,
    TaskNotFoundError,
    EmptyError,
    ConfigError,
)
from .store import TaskStore
from .history import HistoryManager
from .categories import CategoryTree
from .urgent import UrgentQueue
from .session import TaskSession

__version__ = VERSION

__all__ = [
    "VERSION",
    "ActionKind",
    "HistoryAction",
    "Task",
    "TasklineError",
    "RecoverableError",
    "FatalError",
    "DuplicateTitleError",
    "TaskNotFoundError",
    "EmptyError",
    "ConfigError",
    "TaskStore",
    "HistoryManager",
    "CategoryTree",
    "UrgentQueue",
    "TaskSession",
]
