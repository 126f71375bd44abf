from enum import Enum
from pydantic import BaseModel, computed_field, field_validator
from typing import Optional, List
from datetime import date, datetime

from app.api.todo.label.schemas import LabelOut


class TaskStatus(str, Enum):
    TODO = "todo"
    IN_PROGRESS = "in-progress"
    DONE = "done"


STATUS_LABELS = {
    TaskStatus.TODO: "To Do",
    TaskStatus.IN_PROGRESS: "In Progress",
    TaskStatus.DONE: "Done",
}


def _title_not_blank(value: Optional[str]) -> Optional[str]:
    if value is not None and not value.strip():
        raise ValueError("title must not be blank")
    return value


def _blank_to_none(value):
    if isinstance(value, str) and not value.strip():
        return None
    return value


class TaskCreate(BaseModel):
    title: str
    description: str = ""
    status: TaskStatus = TaskStatus.TODO
    due_date: Optional[date] = None             # 🗓 blank means today
    label_ids: List[int] = []

    model_config = {
        "use_enum_values": True,
        "validate_default": True
    }

    @field_validator("title")
    @classmethod
    def title_not_blank(cls, value):
        return _title_not_blank(value)

    @field_validator("due_date", mode="before")
    @classmethod
    def blank_due_date(cls, value):
        return _blank_to_none(value)

class TaskUpdate(BaseModel):
    title: Optional[str] = None
    description: Optional[str] = None
    status: Optional[TaskStatus] = None
    due_date: Optional[date] = None

    model_config = {
        "use_enum_values": True
    }

    @field_validator("title")
    @classmethod
    def title_not_blank(cls, value):
        return _title_not_blank(value)

    # A blank date leaves the current due date untouched
    @field_validator("due_date", mode="before")
    @classmethod
    def blank_due_date(cls, value):
        return _blank_to_none(value)

class TaskOut(BaseModel):
    id: int
    title: str
    description: str = ""
    status: TaskStatus
    due_date: Optional[date] = None
    created_at: Optional[datetime] = None
    labels: List[LabelOut] = []

    @computed_field
    @property
    def status_label(self) -> str:
        return STATUS_LABELS[TaskStatus(self.status)]
