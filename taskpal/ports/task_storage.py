from typing import Protocol, Iterable
from taskpal.domain.task import Task


### COMMENTS
# ==========================================================
# Task storage contract (ports/task_storage.py).
# ==========================================================
# - Independent of the technology (flat file, memory, SQLite).
# - The whole list is loaded once at start and written back in full after every change.
# - Adapters map technical failures to StorageError and bad records to TaskDecodeError.
# - No business rules here; validation belongs to the command layer.


class TaskStorage(Protocol):
    """Interface for reading and writing the complete, ordered task list.

    Adapters must:
    - return tasks in the order they were saved,
    - replace the previous contents on every `save` (no appending),
    - make `save` all-or-nothing where the technology allows it.
    """

    def load(self) -> list[Task]:
        """Returns every stored task, in saved order.

        Returns:
            list[Task]: The tasks; empty when nothing has been saved yet.

        Domain errors:
            TaskDecodeError: A stored record cannot be decoded.
            StorageError: The backing store cannot be read.
        """

    def save(self, tasks: Iterable[Task]) -> None:
        """Replaces the stored list with `tasks`.

        Domain errors:
            StorageError: The backing store cannot be written.
        """
