from taskpal.domain.task import Task, RECORD_DELIMITER, make_task, parse_date
from taskpal.domain.enums import TaskType
from taskpal.domain.errors import DateFormatError, TaskDecodeError


def encode_task(task: Task) -> str:
    return task.to_record()  # T/nextfalse/nextRead book


def _require_description(description: str) -> str:
    if not description.strip():
        raise TaskDecodeError("empty description")
    return description


def decode_record(line: str) -> Task:
    """Turns one record line back into a task.

    Layout: `<type>/next<isDone>/next<description>[/next<YYYY-MM-DD>]`.
    For dated variants the date is taken after the last delimiter, so a
    description that itself contains the delimiter survives the round trip.

    :raises TaskDecodeError: wrong field count, unknown type, empty description or bad date.
    """
    line = line.rstrip("\r\n")
    parts = line.split(RECORD_DELIMITER, 2)
    if len(parts) < 3:
        raise TaskDecodeError(f"expected at least 3 fields, got {len(parts)}")

    raw_type, raw_done, rest = parts
    try:
        kind = TaskType(raw_type.strip())
    except ValueError:
        raise TaskDecodeError(f"unknown task type '{raw_type.strip()}'")
    is_done = raw_done.strip() == "true"

    if kind is TaskType.TODO:
        return make_task(kind, _require_description(rest), is_done=is_done)

    if RECORD_DELIMITER not in rest:
        raise TaskDecodeError(f"a '{kind.value}' record needs 4 fields")
    description, raw_date = rest.rsplit(RECORD_DELIMITER, 1)
    description = _require_description(description)
    try:
        when = parse_date(raw_date)
    except DateFormatError as e:
        raise TaskDecodeError(str(e))
    return make_task(kind, description, when, is_done=is_done)
