from typing import List, Optional
from pydantic import BaseModel

from app.api.auth.schemas import UserOut
from app.api.todo.label.schemas import LabelOut
from app.api.todo.task.schemas import TaskOut


class FilterOption(BaseModel):
    key: str
    label: str
    count: int
    active: bool = False


class DashboardOut(BaseModel):
    user: UserOut
    labels: List[LabelOut]
    filters: List[FilterOption]
    active_filter: str
    heading: str
    task_count: str
    tasks: List[TaskOut]
    empty_message: Optional[str] = None
