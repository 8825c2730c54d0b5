from typer.testing import CliRunner
from taskpal.api.cli import app
import pytest

runner = CliRunner()


@pytest.fixture
def task_file(tmp_path):
    return tmp_path / "tasks.txt"


def invoke(task_file, *args):
    return runner.invoke(app, ["--file", str(task_file), *args])


def test_add_list_done_delete(task_file):
    # Arrange / Act
    added = invoke(task_file, "todo", "Read", "book")
    invoke(task_file, "deadline", "Pay", "rent", "--by", "2024-01-05")
    listed = invoke(task_file, "list")

    # Assert
    assert added.exit_code == 0
    assert "[T][ ] Read book" in added.stdout
    assert "1. [T][ ] Read book" in listed.stdout
    assert "2. [D][ ] Pay rent (by: Jan 05 2024)" in listed.stdout
    assert task_file.read_text(encoding="utf-8") == (
        "T/nextfalse/nextRead book\n"
        "D/nextfalse/nextPay rent/next2024-01-05\n"
    )

    # Act
    done = invoke(task_file, "done", "2")
    deleted = invoke(task_file, "delete", "1")
    listed = invoke(task_file, "list")

    # Assert
    assert done.exit_code == 0
    assert deleted.exit_code == 0
    assert "1. [D][X] Pay rent (by: Jan 05 2024)" in listed.stdout


def test_empty_todo_fails(task_file):
    result = invoke(task_file, "todo")

    assert result.exit_code == 1
    assert "cannot be empty" in result.stdout
    assert not task_file.exists()


def test_bad_date_fails(task_file):
    result = invoke(task_file, "event", "Party", "--at", "2024-13-01")

    assert result.exit_code == 1
    assert "YYYY-MM-DD" in result.stdout


def test_number_out_of_range(task_file):
    invoke(task_file, "todo", "A")

    zero = invoke(task_file, "done", "0")
    too_big = invoke(task_file, "delete", "5")

    assert zero.exit_code == 1
    assert "cannot be negative" in zero.stdout
    assert too_big.exit_code == 1
    assert "You only have 1 task." in too_big.stdout


def test_find(task_file):
    invoke(task_file, "todo", "Walk", "dog")
    invoke(task_file, "todo", "Buy", "milk")

    result = invoke(task_file, "find", "milk")

    assert "2. [T][ ] Buy milk" in result.stdout
    assert "Walk dog" not in result.stdout


def test_corrupted_file_is_reported(task_file):
    task_file.write_text("Q/nextfalse/nextoops\n", encoding="utf-8")

    result = invoke(task_file, "list")

    assert result.exit_code == 1
    assert "tasks.txt:1" in result.stdout


def test_empty_list(task_file):
    result = invoke(task_file, "list")

    assert "There are no tasks in your list." in result.stdout


def test_sql_backend(tmp_path):
    db_file = tmp_path / "tasks.db"

    runner.invoke(app, ["--db", str(db_file), "todo", "Stored", "in", "sqlite"])
    result = runner.invoke(app, ["--db", str(db_file), "list"])

    assert "1. [T][ ] Stored in sqlite" in result.stdout


def test_file_that_is_not_utf8_is_reported(task_file):
    task_file.write_bytes(b"T/nextfalse/nextcaf\xe9\n")

    result = invoke(task_file, "list")

    assert result.exit_code == 1
    assert "tasks.txt:1" in result.stdout
    assert "UTF-8" in result.stdout


def test_file_option_beats_db_from_environment(tmp_path, monkeypatch):
    env_db = tmp_path / "env.db"
    monkeypatch.setenv("TASKPAL_DB", str(env_db))
    mine = tmp_path / "mine.txt"

    result = invoke(mine, "todo", "hello")

    assert result.exit_code == 0
    assert mine.read_text(encoding="utf-8") == "T/nextfalse/nexthello\n"
    assert not env_db.exists()


def test_db_from_environment_is_used_without_file_option(tmp_path, monkeypatch):
    env_db = tmp_path / "env.db"
    monkeypatch.setenv("TASKPAL_DB", str(env_db))

    runner.invoke(app, ["todo", "from", "env"])
    result = runner.invoke(app, ["list"])

    assert "1. [T][ ] from env" in result.stdout
    assert env_db.exists()
