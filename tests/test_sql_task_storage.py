import pytest
from datetime import date
import sqlalchemy as db
from taskpal.adapters.sql.task_storage import SqlTaskStorage
from taskpal.domain.task import Todo, Deadline, Event
from taskpal.domain.errors import TaskDecodeError


@pytest.fixture
def tmp_storage(tmp_path):
    """Storage on a fresh temporary SQLite file."""
    return SqlTaskStorage(tmp_path / "db" / "tasks.db")


def test_empty_database_loads_empty(tmp_storage):
    assert tmp_storage.load() == []


def test_save_and_load(tmp_storage):
    tasks = [
        Event("Conference", date(2025, 3, 14), is_done=True),
        Todo("Read book"),
        Deadline("Pay rent", date(2024, 1, 5)),
    ]

    tmp_storage.save(tasks)

    assert tmp_storage.load() == tasks


def test_save_replaces_rows(tmp_storage):
    tmp_storage.save([Todo("A"), Todo("B"), Todo("C")])

    tmp_storage.save([Todo("C")])

    assert tmp_storage.load() == [Todo("C")]


def test_data_survives_a_new_storage_object(tmp_path):
    path = tmp_path / "tasks.db"
    SqlTaskStorage(path).save([Todo("persist me", is_done=True)])

    assert SqlTaskStorage(path).load() == [Todo("persist me", is_done=True)]


def test_unknown_kind_in_row_raises(tmp_storage):
    with tmp_storage.engine.begin() as conn:
        conn.execute(db.insert(tmp_storage.tasks).values(
            position=0, kind="Z", is_done=False, description="??", date=None,
        ))

    with pytest.raises(TaskDecodeError):
        tmp_storage.load()


def test_dated_row_without_date_raises(tmp_storage):
    with tmp_storage.engine.begin() as conn:
        conn.execute(db.insert(tmp_storage.tasks).values(
            position=0, kind="D", is_done=False, description="no date", date=None,
        ))

    with pytest.raises(TaskDecodeError):
        tmp_storage.load()


def test_row_with_empty_description_raises(tmp_storage):
    with tmp_storage.engine.begin() as conn:
        conn.execute(db.insert(tmp_storage.tasks).values(
            position=0, kind="T", is_done=False, description="  ", date=None,
        ))

    with pytest.raises(TaskDecodeError):
        tmp_storage.load()
