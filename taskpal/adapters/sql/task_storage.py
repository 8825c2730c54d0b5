from __future__ import annotations
from typing import Iterable
import logging
import sqlalchemy as db
from sqlalchemy.exc import SQLAlchemyError
from pathlib import Path
from taskpal.ports.task_storage import TaskStorage
from taskpal.domain.task import Task, Deadline, Event, make_task, parse_date
from taskpal.domain.enums import TaskType
from taskpal.domain.errors import DateFormatError, TaskDecodeError, StorageError

logger = logging.getLogger(__name__)


class SqlTaskStorage(TaskStorage):
    def __init__(self, url: str | Path) -> None:
        """
        url: e.g. 'sqlite:///data/tasks.db', or a Path to the file (turned into a URL)
        """
        if isinstance(url, Path):
            try:
                url.parent.mkdir(parents=True, exist_ok=True)
            except OSError as e:
                raise StorageError(str(e))
            db_url = f"sqlite:///{url}"
        else:
            db_url = url

        self.engine = db.create_engine(db_url, future=True)
        self.meta = db.MetaData()

        # position = index in the list, so ORDER BY position restores the order
        self.tasks = db.Table(
            "tasks",
            self.meta,
            db.Column("position", db.Integer, primary_key=True, autoincrement=False),
            db.Column("kind", db.String(1), nullable=False),       # 'T'/'D'/'E'
            db.Column("is_done", db.Boolean, nullable=False),
            db.Column("description", db.String, nullable=False),
            db.Column("date", db.String, nullable=True),           # YYYY-MM-DD, NULL for todos
        )

        try:
            self.meta.create_all(self.engine)
        except SQLAlchemyError as e:
            raise StorageError(str(e))

    def _to_row(self, position: int, task: Task) -> dict:
        when = None
        if isinstance(task, Deadline):
            when = task.by.isoformat()
        elif isinstance(task, Event):
            when = task.at.isoformat()
        return {
            "position": position,
            "kind": task.TYPE.value,
            "is_done": task.is_done,
            "description": task.description,
            "date": when,
        }

    def _from_row(self, row) -> Task:
        try:
            kind = TaskType(row["kind"])
        except ValueError:
            raise TaskDecodeError(f"unknown task type '{row['kind']}'", "tasks", row["position"])
        if not (row["description"] or "").strip():
            raise TaskDecodeError("empty description", "tasks", row["position"])
        when = None
        if kind is not TaskType.TODO:
            try:
                when = parse_date(row["date"] or "")
            except DateFormatError as e:
                raise TaskDecodeError(str(e), "tasks", row["position"])
        return make_task(kind, row["description"], when, is_done=bool(row["is_done"]))

    def load(self) -> list[Task]:
        stmt = db.select(self.tasks).order_by(self.tasks.c.position.asc())
        try:
            with self.engine.connect() as conn:
                rows = conn.execute(stmt).mappings().all()
        except SQLAlchemyError as e:
            raise StorageError(str(e))
        logger.debug("Loaded %d tasks from %s", len(rows), self.engine.url)
        return [self._from_row(r) for r in rows]

    def save(self, tasks: Iterable[Task]) -> None:
        rows = [self._to_row(i, t) for i, t in enumerate(tasks)]
        try:
            # one transaction: either the new list is stored or the old one stays
            with self.engine.begin() as conn:
                conn.execute(db.delete(self.tasks))
                if rows:
                    conn.execute(db.insert(self.tasks), rows)
        except SQLAlchemyError as e:
            raise StorageError(str(e))
        logger.debug("Saved %d tasks to %s", len(rows), self.engine.url)
