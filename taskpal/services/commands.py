from typing import Callable
from taskpal.domain.task import parse_date
from taskpal.domain.errors import TaskValidationError
from taskpal.services.task_list import TaskList


### COMMENTS
# ==========================================================
# Command layer (services/commands.py): one function per user action.
# ==========================================================
# - Takes raw, already split arguments and the TaskList.
# - Checks run in a fixed order: description first, then date / index / keyword.
# - A failed check raises before the TaskList is touched, so state stays as it was.
# - On success returns the TaskList message unchanged.


def _require_description(description: str, kind: str) -> str:
    if not description or not description.strip():
        raise TaskValidationError("description", f"The description of {kind} cannot be empty.")
    if "\n" in description or "\r" in description:
        raise TaskValidationError("description", "The description must fit on a single line.")
    return description.strip()


def _require_index(index: int, tasks: TaskList) -> None:
    if index < 0:
        raise TaskValidationError("index", "Task index cannot be negative.")
    count = tasks.length()
    if index >= count:
        noun = "task" if count == 1 else "tasks"
        raise TaskValidationError("index", f"You only have {count} {noun}.")


def todo(description: str, tasks: TaskList) -> str:
    """
        Adds a todo.

        :raises TaskValidationError: When the description is blank.
    """
    return tasks.add_todo(_require_description(description, "a todo"))


def deadline(description: str, by: str, tasks: TaskList) -> str:
    """
        Adds a deadline due on `by` (`YYYY-MM-DD`).

        :raises TaskValidationError: When the description is blank.
        :raises DateFormatError: When `by` is missing or not a valid date.
    """
    text = _require_description(description, "a deadline")
    return tasks.add_deadline(text, parse_date(by))


def event(description: str, at: str, tasks: TaskList) -> str:
    """
        Adds an event taking place on `at` (`YYYY-MM-DD`).

        :raises TaskValidationError: When the description is blank.
        :raises DateFormatError: When `at` is missing or not a valid date.
    """
    text = _require_description(description, "an event")
    return tasks.add_event(text, parse_date(at))


def list_tasks(tasks: TaskList) -> str:
    return tasks.list()


def delete(index: int, tasks: TaskList) -> str:
    """
        Deletes the task at a 0-based `index`.

        :raises TaskValidationError: When `index` is negative or not below the task count.
    """
    _require_index(index, tasks)
    return tasks.delete(index)


def done(index: int, tasks: TaskList) -> str:
    """
        Marks the task at a 0-based `index` as done.

        :raises TaskValidationError: When `index` is negative or not below the task count.
    """
    _require_index(index, tasks)
    return tasks.mark_done(index)


def find(keyword: str, tasks: TaskList) -> str:
    """
        Lists tasks whose description contains `keyword`.

        :raises TaskValidationError: When the keyword is empty.
    """
    if not keyword:
        raise TaskValidationError("keyword", "No keyword provided.")
    return tasks.find(keyword)


COMMANDS: dict[str, Callable[..., str]] = {
    "todo": todo,
    "deadline": deadline,
    "event": event,
    "list": list_tasks,
    "delete": delete,
    "done": done,
    "find": find,
}

# actions after which the task list has to be written back
MUTATING = frozenset({"todo", "deadline", "event", "delete", "done"})
