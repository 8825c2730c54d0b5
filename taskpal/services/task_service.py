from taskpal.ports.task_storage import TaskStorage
from taskpal.services.task_list import TaskList
from taskpal.services import commands
from taskpal.domain.errors import DomainError, UnknownCommandError
import logging

logger = logging.getLogger(__name__)


### COMMENTS
# ==========================================================
# Service layer (services/task_service.py): one session over one storage.
# ==========================================================
# Role:
# - Loads the task list once, when the service is built.
# - Runs each action through the command layer (validation + TaskList).
# - Writes the full list back after every successful change, so disk never
#   lags behind memory across a clean shutdown.
#
# Rules:
# - The service only talks to the `TaskStorage` port, never to an adapter.
# - A rejected action (DomainError) is not saved; the list is unchanged anyway.
# - A failed save (StorageError) propagates; the in-memory change is kept.



class TaskService:
    """
    Task session: the loaded list plus the storage it came from.

    :param storage: Implementation of the TaskStorage port.
    """
    def __init__(self, storage: TaskStorage) -> None:
        self.storage = storage
        self.tasks = TaskList(storage.load())
        logger.info("Loaded %d tasks", len(self.tasks))

    def todo(self, description: str) -> str:
        return self.execute("todo", description)

    def deadline(self, description: str, by: str) -> str:
        return self.execute("deadline", description, by)

    def event(self, description: str, at: str) -> str:
        return self.execute("event", description, at)

    def list(self) -> str:
        return self.execute("list")

    def delete(self, index: int) -> str:
        return self.execute("delete", index)

    def done(self, index: int) -> str:
        return self.execute("done", index)

    def find(self, keyword: str) -> str:
        return self.execute("find", keyword)

    def execute(self, action: str, *args) -> str:
        """
            Runs a named action with its already split arguments.

            - Resolves `action` to a command function (`todo`, `deadline`, `event`,
              `list`, `delete`, `done`, `find`).
            - Calls it with `*args` followed by the task list.
            - Saves the whole list when the action changes it.

            :param action: Action name as resolved by the input layer.
            :param args: Raw arguments; indexes must already be 0-based ints.
            :raises UnknownCommandError: When `action` is not a known action.
            :raises TaskValidationError: When an argument is rejected.
            :raises DateFormatError: When a date argument cannot be parsed.
            :raises StorageError: When the changed list cannot be saved.
            :return: The message to show the user.
        """
        command = commands.COMMANDS.get(action)
        if command is None:
            raise UnknownCommandError(action)
        try:
            message = command(*args, self.tasks)
        except DomainError as e:
            logger.info("Rejected %s: %s", action, e)
            raise
        if action in commands.MUTATING:
            self.storage.save(self.tasks)
        return message
