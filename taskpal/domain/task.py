from abc import ABC, abstractmethod
from dataclasses import FrozenInstanceError, dataclass, field
from datetime import date
from typing import ClassVar
import re
from taskpal.domain.enums import TaskType
from taskpal.domain.errors import DateFormatError

RECORD_DELIMITER = "/next"

_ISO_DATE = re.compile(r"\d{4}-\d{2}-\d{2}")
_MONTHS = ("Jan", "Feb", "Mar", "Apr", "May", "Jun",
           "Jul", "Aug", "Sep", "Oct", "Nov", "Dec")


def parse_date(text: str) -> date:
    """Parses `YYYY-MM-DD` text (surrounding whitespace ignored) into a date.

    :raises DateFormatError: when the text has another shape or is not a real day.
    """
    raw = (text or "").strip()
    if not _ISO_DATE.fullmatch(raw):
        raise DateFormatError(raw)
    try:
        return date.fromisoformat(raw)
    except ValueError:
        raise DateFormatError(raw)


def format_date(day: date) -> str:
    """Formats a date as `MMM dd yyyy`, e.g. `Jan 05 2024`, independent of locale."""
    return f"{_MONTHS[day.month - 1]} {day.day:02d} {day.year:04d}"


@dataclass
class Task(ABC):
    """
    A single trackable item.
    Only `is_done` changes after construction, and only forward via `mark_as_done()`;
    the description and the date are read-only once set.
    A non-empty description is checked by the command layer, not here.
    """
    TYPE: ClassVar[TaskType]
    READ_ONLY: ClassVar[frozenset[str]] = frozenset({"description"})

    description: str
    is_done: bool = field(default=False, kw_only=True)

    def __setattr__(self, name, value):
        if name in self.READ_ONLY and name in self.__dict__:
            raise FrozenInstanceError(f"cannot assign to field '{name}'")
        super().__setattr__(name, value)

    def mark_as_done(self) -> None:
        self.is_done = True

    @property
    def status_icon(self) -> str:
        return "X" if self.is_done else " "

    @abstractmethod
    def _date_fields(self) -> list[str]:
        """Record fields after the description: `[]` or `[YYYY-MM-DD]`."""

    @abstractmethod
    def _date_label(self) -> str:
        """Display suffix after the description, e.g. ` (by: Jan 05 2024)`."""

    def to_record(self) -> str:
        """Encodes the task as one line of the backing file (no newline)."""
        fields = [self.TYPE.value, "true" if self.is_done else "false", self.description]
        return RECORD_DELIMITER.join(fields + self._date_fields())

    def __str__(self) -> str:
        return f"[{self.TYPE.value}][{self.status_icon}] {self.description}{self._date_label()}"


@dataclass
class Todo(Task):
    """A task without a date."""
    TYPE: ClassVar[TaskType] = TaskType.TODO

    def _date_fields(self) -> list[str]:
        return []

    def _date_label(self) -> str:
        return ""


@dataclass
class Deadline(Task):
    """A task that has to be done by a given day."""
    TYPE: ClassVar[TaskType] = TaskType.DEADLINE
    READ_ONLY: ClassVar[frozenset[str]] = frozenset({"description", "by"})

    by: date

    def _date_fields(self) -> list[str]:
        return [self.by.isoformat()]

    def _date_label(self) -> str:
        return f" (by: {format_date(self.by)})"


@dataclass
class Event(Task):
    """A task that happens on a given day."""
    TYPE: ClassVar[TaskType] = TaskType.EVENT
    READ_ONLY: ClassVar[frozenset[str]] = frozenset({"description", "at"})

    at: date

    def _date_fields(self) -> list[str]:
        return [self.at.isoformat()]

    def _date_label(self) -> str:
        return f" (at: {format_date(self.at)})"


def make_task(kind: TaskType, description: str, when: date | None = None, is_done: bool = False) -> Task:
    """Builds the variant named by `kind`. Dated variants require `when`."""
    match kind:
        case TaskType.TODO:
            return Todo(description, is_done=is_done)
        case TaskType.DEADLINE:
            if when is None:
                raise ValueError("a deadline needs a date")
            return Deadline(description, when, is_done=is_done)
        case TaskType.EVENT:
            if when is None:
                raise ValueError("an event needs a date")
            return Event(description, when, is_done=is_done)
        case _:
            raise ValueError(f"unknown task type: {kind!r}")
