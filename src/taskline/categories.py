from pydantic import BaseModel, Field
from typing import Callable, Iterator, List, Optional, Tuple

from .models import Task

INDENT = "  "

class CategoryTree(BaseModel):
    """
    Append-only index of tasks by category, then subcategory.

    Tasks are filed under the category/subcategory they carried when indexed;
    later edits and removals never move or prune anything.
    """

    root: 'CategoryTree.Node' = Field(
        default_factory=lambda: CategoryTree.Node(name="Root"),
        description="Sentinel node whose children are the categories"
    )

    @classmethod
    def with_root(cls, label: str) -> 'CategoryTree':
        return cls(root=cls.Node(name=label))

    def index(self, task: Task) -> 'CategoryTree.Node':
        """File a task under its category/subcategory, creating nodes as needed."""
        category = self.root.find_or_add_child(task.category)
        subcategory = category.find_or_add_child(task.subcategory)
        subcategory.tasks.append(task)
        return subcategory

    def find(self, category: str, subcategory: Optional[str] = None) -> Optional['CategoryTree.Node']:
        """Find a category node, or one of its subcategory nodes."""
        node = self.root.find_child(category)
        if node is None or subcategory is None:
            return node
        return node.find_child(subcategory)

    def walk(self, formatter: Callable[[Task], str] = str) -> Iterator[Tuple[int, str]]:
        """Yield (depth, text) pairs in depth-first pre-order."""
        return self.root.walk(formatter=formatter)

    def render(self, formatter: Callable[[Task], str] = str) -> Iterator[str]:
        """Yield display lines, indented two spaces per level."""
        for depth, text in self.walk(formatter):
            yield INDENT * depth + text

    class Node(BaseModel):
        name: str = Field(description="Category or subcategory name; unique among siblings")
        tasks: List[Task] = Field(default_factory=list, description="Tasks filed directly under this node")
        children: List['CategoryTree.Node'] = Field(default_factory=list, description="Child nodes in insertion order")

        def find_child(self, name: str) -> Optional['CategoryTree.Node']:
            """Find a child by name."""
            return next((c for c in self.children if c.name == name), None)

        def find_or_add_child(self, name: str) -> 'CategoryTree.Node':
            child = self.find_child(name)
            if child is None:
                child = CategoryTree.Node(name=name)
                self.children.append(child)
            return child

        def walk(self, depth: int = 0, formatter: Callable[[Task], str] = str) -> Iterator[Tuple[int, str]]:
            yield depth, self.name
            for task in self.tasks:
                yield depth + 1, formatter(task)
            for child in self.children:
                yield from child.walk(depth + 1, formatter)

CategoryTree.model_rebuild()
CategoryTree.Node.model_rebuild()
