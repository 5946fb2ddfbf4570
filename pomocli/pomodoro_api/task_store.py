"""JSON-backed task store.

The whole collection is the unit of persistence: every mutation rewrites the
data file before returning. Loading is lenient (a missing or unreadable file
gives an empty store) while writing is not (OSError propagates).
"""
from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

from pydantic import ValidationError

from ..utils.task_schema import validate_task_records
from .data_models import MINUTES_PER_POMODORO, Task
from .exceptions import CorruptStoreError
from .report import build_report

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]
REPORT_FILE_NAME = "pomodoro_report.txt"


class TaskStore:
    def __init__(self, path: PathLike, report_path: Optional[PathLike] = None):
        self.path = Path(path)
        self.report_path = Path(report_path) if report_path else self.path.with_name(REPORT_FILE_NAME)
        self._tasks: Optional[List[Task]] = None
        # Highest id handed out this session; deleting the last task must not free its id.
        self._high_water: int = 0

    # -------------------- persistence --------------------
    @property
    def loaded(self) -> bool:
        return self._tasks is not None

    def _read_records(self) -> List[Dict[str, Any]]:
        try:
            with open(self.path, "r", encoding="utf-8") as f:
                raw = json.load(f)
            records = validate_task_records(raw)
        except json.JSONDecodeError as e:
            raise CorruptStoreError(self.path, f"invalid JSON ({e})") from e
        except ValidationError as e:
            raise CorruptStoreError(self.path, f"unexpected shape ({e.error_count()} errors)") from e
        except ValueError as e:
            raise CorruptStoreError(self.path, str(e)) from e
        except OSError as e:
            raise CorruptStoreError(self.path, f"cannot read ({e})") from e
        return [record.model_dump() for record in records]

    def load(self) -> List[Task]:
        """Replace in-memory state with the contents of the data file."""
        if not self.path.exists():
            logger.debug("No task file at %s; starting empty", self.path)
            self._tasks = []
        else:
            try:
                self._tasks = [Task.from_dict(r) for r in self._read_records()]
            except CorruptStoreError as e:
                logger.warning("%s; starting with an empty task list", e)
                self._tasks = []
        self._high_water = max(self._high_water, max((t.id for t in self._tasks), default=0))
        logger.debug("Loaded %d tasks from %s", len(self._tasks), self.path)
        return list(self._tasks)

    def save(self) -> None:
        tasks = self._ensure_loaded()
        self.path.parent.mkdir(parents=True, exist_ok=True)
        with open(self.path, "w", encoding="utf-8") as f:
            json.dump([t.to_dict() for t in tasks], f, indent=2, ensure_ascii=False)
            f.write("\n")

    def _ensure_loaded(self) -> List[Task]:
        if self._tasks is None:
            self.load()
        return self._tasks

    # -------------------- id management --------------------
    def _next_id(self, tasks: List[Task]) -> int:
        last = tasks[-1].id if tasks else 0
        return max(self._high_water, last) + 1

    # -------------------- task operations --------------------
    def add(self, name: str) -> int:
        tasks = self._ensure_loaded()
        task = Task(id=self._next_id(tasks), name=name)
        tasks.append(task)
        self._high_water = task.id
        self.save()
        logger.info("Added task %d: %s", task.id, name)
        return task.id

    def delete(self, task_id: int) -> bool:
        """Remove the task with ``task_id``. Returns False when no such task exists."""
        tasks = self._ensure_loaded()
        task = self.find(task_id)
        if task is not None:
            tasks.remove(task)
            logger.info("Deleted task %d", task_id)
        else:
            logger.info("Delete: task %d not found", task_id)
        self.save()
        return task is not None

    def find(self, task_id: int) -> Optional[Task]:
        for task in self._ensure_loaded():
            if task.id == task_id:
                return task
        return None

    def complete(self, task_id: int) -> bool:
        task = self.find(task_id)
        if task is None:
            logger.info("Complete: task %d not found", task_id)
            return False
        task.completed = True
        self.save()
        logger.info("Marked task %d complete", task_id)
        return True

    def record_pomodoro(self, task_id: int) -> Optional[Task]:
        """Count one finished work interval against the task and persist it."""
        task = self.find(task_id)
        if task is None:
            return None
        task.pomodoros += 1
        self.save()
        logger.info("Task %d now has %d pomodoros", task_id, task.pomodoros)
        return task

    def list(self) -> List[Task]:
        return list(self._ensure_loaded())

    # -------------------- reporting --------------------
    def statistics(self) -> Dict[str, int]:
        tasks = self._ensure_loaded()
        completed = sum(1 for t in tasks if t.completed)
        total_pomodoros = sum(t.pomodoros for t in tasks)
        return {
            "total": len(tasks),
            "completed": completed,
            "pending": len(tasks) - completed,
            "total_pomodoros": total_pomodoros,
            "total_minutes": total_pomodoros * MINUTES_PER_POMODORO,
        }

    def export_report(self) -> str:
        """Write the plain-text report to ``report_path`` and return its text."""
        text = build_report(self._ensure_loaded())
        self.report_path.parent.mkdir(parents=True, exist_ok=True)
        with open(self.report_path, "w", encoding="utf-8") as f:
            f.write(text)
        logger.info("Report written to %s", self.report_path)
        return text
