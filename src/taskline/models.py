from pydantic import BaseModel, ConfigDict, Field
from dataclasses import dataclass
from datetime import date
from enum import Enum
from typing import Any, Dict, Optional, Tuple

EDITABLE_FIELDS = ('title', 'description', 'priority', 'due_date', 'category', 'subcategory')

class ActionKind(Enum):
    ADD = "add"
    REMOVE = "remove"
    MODIFY = "modify"

class Task(BaseModel):
    """A unit of work. Instances are shared by reference, never copied."""

    model_config = ConfigDict(validate_assignment=True)

    title: str = Field(min_length=1, description="Unique, case-sensitive task key")
    description: str = Field(default="", description="Free text description")
    priority: int = Field(ge=1, le=5, description="1 (highest) to 5 (lowest)")
    due_date: date = Field(description="Day the task is due")
    category: str = Field(default="", description="Top level grouping")
    subcategory: str = Field(default="", description="Grouping inside the category")

    # Two tasks are the same task only if they are the same object.
    def __eq__(self, other):
        return self is other

    def __hash__(self):
        return id(self)

    def describe(self, date_format: str = "%Y-%m-%d") -> str:
        return (f"Title: {self.title}, Description: {self.description}, "
                f"Priority: {self.priority}, Due: {self.due_date.strftime(date_format)}, "
                f"Category: {self.category}/{self.subcategory}")

    def __str__(self) -> str:
        return self.describe()

@dataclass(frozen=True)
class HistoryAction:
    """A recorded add, remove or modify of one task."""

    task: Task
    kind: ActionKind
    original_position: Optional[int] = None
    # field name -> (old value, new value); MODIFY only
    changes: Optional[Dict[str, Tuple[Any, Any]]] = None

    def describe(self) -> str:
        return f"{self.kind.value} - {self.task.title}"
