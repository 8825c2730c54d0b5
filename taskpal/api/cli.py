from taskpal.domain.errors import (
    DateFormatError, DomainError, StorageError, TaskDecodeError, TaskValidationError,
)
from taskpal.services.task_service import TaskService
from taskpal.ports.task_storage import TaskStorage
from taskpal.adapters.memory.task_storage import InMemoryTaskStorage
from taskpal.adapters.text.task_storage import TextTaskStorage
from taskpal.adapters.sql.task_storage import SqlTaskStorage
from taskpal.config import load_settings
from taskpal.logging_setup import setup_logging
from typer import Argument, Exit, Option, Typer
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from pathlib import Path
from typing import Optional
import logging


### COMMENTS
# ==========================================================
# CLI (Typer + Rich): the input and display layer.
# ==========================================================
# Role:
# - Joins words into descriptions and turns the 1-based number the user types
#   into the 0-based index the core expects.
# - Shows the returned message in a panel; it never formats task content itself.
# - Catches DomainError and prints a friendly message, exit code 1.
#
# Rules:
# - No business logic; everything goes through TaskService.
# - Dependencies (storage + service) are built once in the callback.


app = Typer(help="taskpal: a small personal task tracker")
console = Console()

service: TaskService | None = None  # set in the callback


def build_storage(file: Optional[Path], db: Optional[Path], memory: bool) -> TaskStorage:
    """Picks the storage adapter.
    - --memory -> InMemory (nothing is kept)
    - --db     -> SQLite
    - otherwise the flat text file
    """
    if memory:
        return InMemoryTaskStorage()
    if db:
        return SqlTaskStorage(db)
    return TextTaskStorage(file)


def show_error(e: DomainError) -> None:
    match e:
        case TaskValidationError():
            title = "Invalid input"
        case DateFormatError():
            title = "Invalid date"
        case TaskDecodeError():
            title = "Corrupted task file"
        case StorageError():
            title = "Storage error"
        case _:
            title = "Error"
    console.print(Panel.fit(f"❌ {escape(str(e))}", title=title, border_style="red"))


def run(action: str, *args) -> None:
    """Runs one action on the service and prints the result."""
    try:
        message = service.execute(action, *args)
    except DomainError as e:
        show_error(e)
        raise Exit(code=1)
    console.print(Panel.fit(escape(message), border_style="green"))


def _join(words: Optional[list[str]]) -> str:
    return " ".join(words or [])


@app.callback()
def main(
    file: Optional[Path] = Option(
        None, "--file", "-f", help="Task file (default: $TASKPAL_FILE or data/tasks.txt)",
    ),
    db: Optional[Path] = Option(
        None, "--db", help="SQLite database instead of the text file (default: $TASKPAL_DB)",
    ),
    memory: bool = Option(False, "--memory", help="Keep tasks in memory only"),
    verbose: bool = Option(False, "--verbose", "-v", help="Log debug output to stderr"),
) -> None:
    """Builds the service once per process."""
    global service
    settings = load_settings()
    setup_logging(
        console_level=logging.DEBUG if verbose else settings.log_level,
        log_dir=settings.log_dir,
    )
    try:
        # an explicit --file beats $TASKPAL_DB
        db_file = db or (None if file else settings.db_file)
        storage = build_storage(file or settings.task_file, db_file, memory)
        service = TaskService(storage)
    except DomainError as e:
        show_error(e)
        raise Exit(code=1)


@app.command("todo")
def todo(words: Optional[list[str]] = Argument(None, help="Description")) -> None:
    """Adds a task without a date."""
    run("todo", _join(words))


@app.command("deadline")
def deadline(
    words: Optional[list[str]] = Argument(None, help="Description"),
    by: str = Option("", "--by", "-b", help="Due date, YYYY-MM-DD"),
) -> None:
    """Adds a task that is due by a date."""
    run("deadline", _join(words), by)


@app.command("event")
def event(
    words: Optional[list[str]] = Argument(None, help="Description"),
    at: str = Option("", "--at", "-a", help="Date, YYYY-MM-DD"),
) -> None:
    """Adds a task that happens on a date."""
    run("event", _join(words), at)


@app.command("list")
def list_cmd() -> None:
    """Shows every task, numbered from 1."""
    run("list")


@app.command("delete")
def delete(number: int = Argument(..., help="Task number as shown by 'list'")) -> None:
    """Deletes a task."""
    run("delete", number - 1)


@app.command("done")
def done(number: int = Argument(..., help="Task number as shown by 'list'")) -> None:
    """Marks a task as done."""
    run("done", number - 1)


@app.command("find")
def find(keyword: str = Argument("", help="Text to look for (case-sensitive)")) -> None:
    """Shows tasks whose description contains KEYWORD."""
    run("find", keyword)


if __name__ == "__main__":
    app()
