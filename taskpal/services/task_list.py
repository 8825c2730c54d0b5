from datetime import date
from typing import Iterable, Iterator
from taskpal.domain.task import Task, Todo, Deadline, Event
from taskpal.domain.errors import TaskNotFoundError


### COMMENTS
# ==========================================================
# Task-list manager (services/task_list.py).
# ==========================================================
# - Owns the ordered list of tasks: insertion order = display order = file order.
# - Positions are 0-based and recomputed on every call; deleting shifts later tasks down.
# - Every public operation returns the message the user sees.
# - No input validation here (command layer) and no I/O (storage adapters).


def _count(n: int) -> str:
    return f"{n} task" if n == 1 else f"{n} tasks"


class TaskList:
    """
    Ordered, in-memory collection of tasks.

    :param tasks: Optional tasks to start with (e.g. the result of `storage.load()`).
    """
    def __init__(self, tasks: Iterable[Task] | None = None) -> None:
        self._tasks: list[Task] = list(tasks or [])

    def __len__(self) -> int:
        return len(self._tasks)

    def __iter__(self) -> Iterator[Task]:
        return iter(tuple(self._tasks))

    def length(self) -> int:
        return len(self._tasks)

    def get_task(self, index: int) -> Task:
        """
            Returns the task at a 0-based position.

            :raises TaskNotFoundError: When `index` is negative or past the end.
        """
        self._check_index(index)
        return self._tasks[index]

    def add_todo(self, description: str) -> str:
        return self._add(Todo(description))

    def add_deadline(self, description: str, by: date) -> str:
        return self._add(Deadline(description, by))

    def add_event(self, description: str, at: date) -> str:
        return self._add(Event(description, at))

    def list(self) -> str:
        """
            Renders every task as a numbered line, 1-based, in list order.

            An empty list gives an explicit message instead of an empty string.
        """
        if not self._tasks:
            return "There are no tasks in your list."
        return "\n".join(f"{i}. {t}" for i, t in enumerate(self._tasks, start=1))

    def delete(self, index: int) -> str:
        """
            Removes the task at a 0-based position.

            :param index: Position of the task to remove.
            :raises TaskNotFoundError: When `index` is out of range.
            :return: Message naming the removed task and the remaining count.
        """
        self._check_index(index)
        removed = self._tasks.pop(index)
        return (
            "Noted. I've removed this task:\n"
            f"  {removed}\n"
            f"Now you have {_count(len(self._tasks))} in the list."
        )

    def mark_done(self, index: int) -> str:
        """
            Marks the task at a 0-based position as done.

            Marking a task that is already done is not an error.

            :raises TaskNotFoundError: When `index` is out of range.
        """
        task = self.get_task(index)
        task.mark_as_done()
        return f"Nice! I've marked this task as done:\n  {task}"

    def find(self, keyword: str) -> str:
        """
            Lists the tasks whose description contains `keyword` (case-sensitive),
            keeping their order and their 1-based numbers from `list()`.
        """
        lines = [
            f"{i}. {t}"
            for i, t in enumerate(self._tasks, start=1)
            if keyword in t.description
        ]
        if not lines:
            return f'No tasks match "{keyword}".'
        return "\n".join(lines)

    def _add(self, task: Task) -> str:
        self._tasks.append(task)
        return (
            "Got it. I've added this task:\n"
            f"  {task}\n"
            f"Now you have {_count(len(self._tasks))} in the list."
        )

    def _check_index(self, index: int) -> None:
        if index < 0 or index >= len(self._tasks):
            raise TaskNotFoundError(index, len(self._tasks))
