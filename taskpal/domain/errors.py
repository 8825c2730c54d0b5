

### COMMENTS
# ============================================
# How domain errors are used across the project
# ============================================
# - Storage adapters:
#     * map technical failures (OSError, SQLAlchemyError) to StorageError
#     * report unreadable records as TaskDecodeError
#
# - Command layer:
#     * validates user input and raises TaskValidationError / DateFormatError
#
# - TaskList:
#     * raises TaskNotFoundError for a position outside the list
#
# - UI (CLI):
#     * catches DomainError (or a subclass) and shows a friendly message
#     * anything else is a technical bug and propagates


class DomainError(Exception):
    """Base class for the domain errors.
    Lets the UI tell business failures (bad input, broken data file) apart from
    programming errors. Not raised directly; use a subclass.
    """

class TaskValidationError(DomainError):
    """Raised when user input breaks a rule for a task action.
    Examples:
    - the description is empty,
    - the keyword for a search is empty,
    - the index is negative or past the end of the list.
    Raised by the command layer before the task list is touched.
    Carries a readable `message` and the `field` it is about.
    """
    def __init__(self, field: str, message: str):
        self.field = field
        self.message = message
        super().__init__(self.__str__())
    def __str__(self):
        return self.message

class DateFormatError(DomainError):
    """Raised when date text is not a valid `YYYY-MM-DD` calendar date."""
    def __init__(self, text: str):
        self.text = text
        super().__init__(self.__str__())
    def __str__(self):
        return f"Date must be given as YYYY-MM-DD, got '{self.text}'."


class TaskNotFoundError(DomainError):
    """Raised when no task lives at the requested position.
    Positions are 0-based; the message shows the 1-based number the user sees.
    """
    def __init__(self, index: int, count: int):
        self.index = index
        self.count = count
        super().__init__(self.__str__())
    def __str__(self):
        return f"There is no task number {self.index + 1}; the list has {self.count}."

class TaskDecodeError(DomainError):
    """Raised when a persisted record cannot be turned back into a task.
    Covers a wrong field count, an unknown discriminator and an unreadable date.
    `source` and `lineno` are filled in by the storage that read the record.
    """
    def __init__(self, reason: str, source: str | None = None, lineno: int | None = None):
        self.reason = reason
        self.source = source
        self.lineno = lineno
        super().__init__(self.__str__())
    def __str__(self):
        if self.source is None:
            return f"Corrupted task record: {self.reason}"
        if self.lineno is None:
            return f"{self.source}: corrupted task record: {self.reason}"
        return f"{self.source}:{self.lineno}: corrupted task record: {self.reason}"

class StorageError(DomainError):
    """Raised when the backing store cannot be read or written."""

class UnknownCommandError(DomainError):
    def __init__(self, action: str):
        self.action = action
        super().__init__(self.__str__())
    def __str__(self):
        return f"I don't know what '{self.action}' means."
