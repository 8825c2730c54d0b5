from taskpal.domain.task import Task
from taskpal.adapters.text.codec import encode_task, decode_record
from typing import Iterable

### COMMENTS
# ==========================================================
# In-memory storage (adapters/memory/task_storage.py).
# ==========================================================
# - For tests and throwaway sessions (`--memory`); nothing survives the process.
# - Keeps encoded records rather than Task objects, so a loaded list never shares
#   instances with the list that was saved, just like a real file.
# - `saves` counts writes so tests can check that every change was persisted.



class InMemoryTaskStorage:
    """
        Storage holding records in a Python list.
        :param initial: Optional tasks to seed the store with.
    """
    def __init__(self, initial: Iterable[Task] | None = None) -> None:
        self.records: list[str] = [encode_task(t) for t in (initial or [])]
        self.saves = 0

    def load(self) -> list[Task]:
        return [decode_record(r) for r in self.records]

    def save(self, tasks: Iterable[Task]) -> None:
        self.records = [encode_task(t) for t in tasks]
        self.saves += 1
