from __future__ import annotations

from typing import Any, List

from pydantic import BaseModel, ConfigDict, Field, StrictBool, StrictInt, StrictStr, TypeAdapter


class TaskRecord(BaseModel):
    """One entry of the persisted task array."""

    model_config = ConfigDict(extra="ignore")

    id: StrictInt = Field(ge=1)
    name: StrictStr
    pomodoros: StrictInt = Field(ge=0)
    completed: StrictBool
    created_at: StrictStr


_TASK_LIST = TypeAdapter(List[TaskRecord])


def validate_task_records(data: Any) -> List[TaskRecord]:
    """Validate decoded JSON against the task-array shape.

    Raises pydantic.ValidationError on a shape mismatch and ValueError on
    duplicate ids.
    """
    records = _TASK_LIST.validate_python(data)
    seen = set()
    for record in records:
        if record.id in seen:
            raise ValueError(f"duplicate task id {record.id}")
        seen.add(record.id)
    return records
