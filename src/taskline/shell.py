"""
Interactive menu shell for Taskline.

All input goes through click.prompt and all output through click.echo, so the
whole loop can be driven by click.testing.CliRunner.
"""

import click
from datetime import date, datetime
from typing import Callable, Optional

from .config import Settings
from .models import Task
from .recovery import RecoverableError
from .session import TaskSession
from .logs import get_logger

log = get_logger("shell")

MENU = (
    "Add task",
    "Remove task",
    "Modify task",
    "Show tasks sorted by priority",
    "Undo last action",
    "Redo last action",
    "Flag urgent task",
    "Process urgent task",
    "Show tasks by category",
    "Exit",
)
EXIT_CHOICE = len(MENU)


class Shell:
    """Menu-driven front end over a TaskSession."""

    def __init__(self, session: TaskSession, settings: Settings = None,
                 today: Callable[[], date] = date.today):
        self.session = session
        self.settings = settings or Settings()
        self.today = today
        self.handlers = {
            1: self.add_task,
            2: self.remove_task,
            3: self.modify_task,
            4: self.show_sorted,
            5: self.undo,
            6: self.redo,
            7: self.flag_urgent,
            8: self.process_urgent,
            9: self.show_categories,
        }

    def run(self) -> None:
        """Main loop; ends on the exit option or end of input."""
        while True:
            click.echo("")
            click.echo("Task Manager:")
            for number, label in enumerate(MENU, start=1):
                click.echo(f"{number}. {label}")

            try:
                raw = click.prompt("Select an option", default="", show_default=False)
            except click.Abort:
                break

            choice = int(raw) if raw.strip().isdigit() else None
            if choice == EXIT_CHOICE:
                break
            handler = self.handlers.get(choice)
            if handler is None:
                click.echo("Invalid option.")
                continue

            try:
                handler()
            except RecoverableError as e:
                log.debug(f"Menu option {choice} failed: {e}")
                click.echo(str(e))
            except ValueError as e:
                # Includes pydantic.ValidationError; the session must survive it.
                log.warning(f"Menu option {choice} rejected input: {e}")
                click.echo(f"Error: {e}")
            except click.Abort:
                break

        click.echo("Goodbye.")

    # -------------------- helpers --------------------

    def _format(self, task: Task) -> str:
        return task.describe(self.settings.date_format)

    def _parse_due(self, text: str) -> Optional[date]:
        """Parse a due date; None if it does not parse or is in the past."""
        try:
            due = datetime.strptime(text.strip(), self.settings.date_format).date()
        except ValueError:
            return None
        if due < self.today():
            return None
        return due

    def _prompt_optional(self, text: str) -> str:
        return click.prompt(text, default="", show_default=False).strip()

    # -------------------- menu options --------------------

    def add_task(self) -> None:
        title = click.prompt("Title").strip()
        if not title:
            click.echo("Title must not be blank.")
            return
        if title in self.session.store.titles():
            click.echo("A task with this title already exists.")
            return

        description = click.prompt("Description", default="", show_default=False)
        priority = click.prompt("Priority (1-5)", type=click.IntRange(1, 5))

        due = None
        while due is None:
            due = self._parse_due(click.prompt(f"Due date ({self.settings.date_format})"))
            if due is None:
                click.echo("Invalid or past date. Try again.")

        category = click.prompt("Category", default="", show_default=False)
        subcategory = click.prompt("Subcategory", default="", show_default=False)

        task = Task(
            title=title,
            description=description,
            priority=priority,
            due_date=due,
            category=category,
            subcategory=subcategory,
        )
        self.session.add_task(task)
        click.echo("Task added.")

    def remove_task(self) -> None:
        title = click.prompt("Title of the task to remove")
        self.session.remove_task(title)
        click.echo("Task removed.")

    def modify_task(self) -> None:
        title = click.prompt("Title of the task to modify")
        self.session.store.find_by_title(title)

        click.echo("Leave a field blank to keep its current value.")
        fields = {}

        new_title = self._prompt_optional("New title")
        if new_title:
            fields['title'] = new_title

        new_description = self._prompt_optional("New description")
        if new_description:
            fields['description'] = new_description

        new_priority = self._prompt_optional("New priority (1-5)")
        if new_priority.isdigit() and 1 <= int(new_priority) <= 5:
            fields['priority'] = int(new_priority)

        new_due = self._prompt_optional(f"New due date ({self.settings.date_format})")
        if new_due:
            due = self._parse_due(new_due)
            if due is not None:
                fields['due_date'] = due

        new_category = self._prompt_optional("New category")
        if new_category:
            fields['category'] = new_category

        new_subcategory = self._prompt_optional("New subcategory")
        if new_subcategory:
            fields['subcategory'] = new_subcategory

        self.session.modify_task(title, **fields)
        click.echo("Task modified.")

    def show_sorted(self) -> None:
        tasks = self.session.sorted_tasks()
        if not tasks:
            click.echo("No tasks to show.")
            return
        for task in tasks:
            click.echo(self._format(task))

    def undo(self) -> None:
        action = self.session.undo()
        click.echo(f"Undone: {action.describe()}")

    def redo(self) -> None:
        action = self.session.redo()
        click.echo(f"Redone: {action.describe()}")

    def flag_urgent(self) -> None:
        title = click.prompt("Title of the urgent task")
        self.session.flag_urgent(title)
        click.echo("Task added to the urgent queue.")

    def process_urgent(self) -> None:
        task = self.session.process_urgent()
        click.echo(f"Urgent task processed: {self._format(task)}")

    def show_categories(self) -> None:
        for line in self.session.render_categories(self._format):
            click.echo(line)
