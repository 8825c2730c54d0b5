from taskpal.ports.task_storage import TaskStorage
from taskpal.domain.task import Task
from taskpal.domain.errors import TaskDecodeError, StorageError
from taskpal.adapters.text.codec import encode_task, decode_record
from pathlib import Path
from typing import Iterable
import logging
import os

logger = logging.getLogger(__name__)


class TextTaskStorage(TaskStorage):
    def __init__(self, path: Path) -> None:
        """Flat-file storage, one `/next` record per line.
        Creates the parent directory of the file if it does not exist."""
        self.path = Path(path)
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise StorageError(str(e))

    def load(self) -> list[Task]:
        """Reads every record in file order.
        A missing file means no tasks yet. Blank lines are skipped.
        The first bad record aborts the load with its line number."""
        tasks: list[Task] = []
        try:
            # bytes per line, so an undecodable line is reported with its number
            with self.path.open("rb") as f:
                for lineno, raw in enumerate(f, start=1):
                    try:
                        line = raw.decode("utf-8")
                    except UnicodeDecodeError as e:
                        raise TaskDecodeError(f"not UTF-8 ({e.reason})", self.path.name, lineno)
                    if not line.strip():
                        continue
                    try:
                        tasks.append(decode_record(line))
                    except TaskDecodeError as e:
                        raise TaskDecodeError(e.reason, self.path.name, lineno)
        except FileNotFoundError:
            logger.info("No task file at %s, starting empty", self.path)
            return []
        except OSError as e:
            raise StorageError(str(e))
        logger.debug("Loaded %d tasks from %s", len(tasks), self.path)
        return tasks

    def save(self, tasks: Iterable[Task]) -> None:
        """Rewrites the whole file atomically: swap file, fsync, then replace."""
        tmp = self.path.with_suffix(self.path.suffix + ".swap")
        count = 0
        try:
            with tmp.open("w", encoding="utf-8", newline="\n") as f:
                for t in tasks:
                    f.write(encode_task(t))
                    f.write("\n")
                    count += 1
                f.flush()
                os.fsync(f.fileno())
            os.replace(tmp, self.path)
        except OSError as e:
            try:
                if tmp.exists():
                    tmp.unlink()
            except OSError:
                logger.warning("Could not remove swap file %s", tmp)
            raise StorageError(str(e))
        logger.debug("Saved %d tasks to %s", count, self.path)
