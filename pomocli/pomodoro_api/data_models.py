"""
Data models representing tracked tasks.
"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Dict

MINUTES_PER_POMODORO = 25


def _now() -> str:
    return datetime.now().isoformat(timespec="seconds")


@dataclass
class Task:
    """A single tracked task.

    Fields:
        id: Positive integer, unique within its store.
        name: Free-form label.
        pomodoros: Completed work intervals, bumped by one per interval.
        completed: Set only by an explicit completion.
        created_at: ISO timestamp captured at construction; never rewritten.
    """
    id: int
    name: str
    pomodoros: int = 0
    completed: bool = False
    created_at: str = field(default_factory=_now)

    @property
    def minutes_spent(self) -> int:
        return self.pomodoros * MINUTES_PER_POMODORO

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "pomodoros": self.pomodoros,
            "completed": self.completed,
            "created_at": self.created_at,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Task":
        return cls(
            id=data["id"],
            name=data["name"],
            pomodoros=data.get("pomodoros", 0),
            completed=data.get("completed", False),
            created_at=data["created_at"],
        )
