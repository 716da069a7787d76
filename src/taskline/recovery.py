class TasklineError(Exception):
    """Base exception for all Taskline errors."""
    pass

class RecoverableError(TasklineError):
    """An error the shell reports before returning to the menu."""
    pass

class FatalError(TasklineError):
    """An error that requires application termination."""
    pass

class DuplicateTitleError(RecoverableError):
    """A task with the same title already exists."""
    pass

class TaskNotFoundError(RecoverableError):
    """No task carries the requested title."""
    pass

class EmptyError(RecoverableError):
    """Nothing left to undo, redo or dequeue."""
    pass

class ConfigError(FatalError):
    """Configuration file is unreadable or invalid."""
    pass
