from taskpal.services.task_list import TaskList
from taskpal.domain.task import Todo, Deadline
from taskpal.domain.errors import TaskNotFoundError
from datetime import date
import pytest


def make_list(*descriptions: str) -> TaskList:
    tasks = TaskList()
    for d in descriptions:
        tasks.add_todo(d)
    return tasks


def test_add_todo_appends_and_reports_count():
    # Arrange
    tasks = TaskList()

    # Act
    first = tasks.add_todo("Buy milk")
    second = tasks.add_todo("Walk dog")

    # Assert
    assert tasks.length() == 2
    assert first == "Got it. I've added this task:\n  [T][ ] Buy milk\nNow you have 1 task in the list."
    assert second.endswith("Now you have 2 tasks in the list.")
    assert tasks.get_task(0) == Todo("Buy milk")


def test_add_dated_tasks():
    tasks = TaskList()

    message = tasks.add_deadline("Submit report", date(2024, 12, 1))
    tasks.add_event("Party", date(2024, 6, 30))

    assert "[D][ ] Submit report (by: Dec 01 2024)" in message
    assert str(tasks.get_task(1)) == "[E][ ] Party (at: Jun 30 2024)"


def test_list_empty_is_explicit():
    assert TaskList().list() == "There are no tasks in your list."


def test_list_numbers_from_one():
    tasks = make_list("A", "B")

    assert tasks.list() == "1. [T][ ] A\n2. [T][ ] B"


def test_delete_shifts_later_tasks_down():
    # Arrange
    tasks = make_list("A", "B", "C", "D")
    before = list(tasks)

    # Act
    message = tasks.delete(1)

    # Assert
    assert tasks.length() == 3
    assert list(tasks) == [before[0], before[2], before[3]]
    assert message == "Noted. I've removed this task:\n  [T][ ] B\nNow you have 3 tasks in the list."


@pytest.mark.parametrize("index", [-1, 2, 10])
def test_out_of_range_index_raises_and_keeps_list(index):
    tasks = make_list("A", "B")

    with pytest.raises(TaskNotFoundError):
        tasks.delete(index)
    with pytest.raises(TaskNotFoundError):
        tasks.mark_done(index)

    assert tasks.length() == 2


def test_mark_done_updates_rendering():
    tasks = make_list("A", "B")

    message = tasks.mark_done(1)

    assert message == "Nice! I've marked this task as done:\n  [T][X] B"
    assert tasks.get_task(1).is_done is True
    assert tasks.get_task(0).is_done is False


def test_find_keeps_original_numbers():
    tasks = make_list("Walk dog", "Buy milk", "Milk the cow")

    assert tasks.find("milk") == "2. [T][ ] Buy milk"


def test_find_without_match():
    tasks = make_list("Walk dog")

    assert tasks.find("cat") == 'No tasks match "cat".'


def test_iteration_is_a_snapshot():
    tasks = TaskList([Todo("A"), Deadline("B", date(2024, 1, 1))])

    for _ in tasks:
        tasks.add_todo("C")

    assert tasks.length() == 4
