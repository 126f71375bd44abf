from typing import Literal, Optional

from fastapi import APIRouter, Depends, status
from fastapi.responses import RedirectResponse
from sqlalchemy.orm import Session

from app.db.session import get_db
from app.core.security import get_optional_user
from app.db.models.user import User
from app.api.auth.schemas import UserOut
from app.api.todo.label.schemas import LabelOut
from app.api.todo.label import services as label_services
from app.api.todo.task import services as task_services
from . import schemas, services

router = APIRouter()

FilterKey = Literal["all", "todo", "in_progress", "in-progress", "completed", "done"]


@router.get("", response_model=schemas.DashboardOut)
def dashboard(
    filter: FilterKey = "all",
    db: Session = Depends(get_db),
    current_user: Optional[User] = Depends(get_optional_user),
):
    """
    Signed-in view of the task board. Without an identity nothing is rendered
    and the visitor is sent back to the welcome page.
    """
    if current_user is None:
        return RedirectResponse("/", status_code=status.HTTP_302_FOUND)

    labels = [LabelOut.model_validate(label) for label in label_services.list_labels(db)]
    # Tasks are only fetched once the identity is known
    tasks = task_services.list_tasks(db, current_user.id)
    return services.build_dashboard(UserOut.model_validate(current_user), labels, tasks, filter)
