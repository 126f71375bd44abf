from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session
from app.db.session import get_db
from app.core.security import get_current_user
from app.db.models.user import User
from . import schemas, services

router = APIRouter()

# Every mutation answers with the freshly re-fetched task list


@router.get("/", response_model=list[schemas.TaskOut])
def get_my_tasks(
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    return services.list_tasks(db, current_user.id)

@router.post("/", response_model=list[schemas.TaskOut], status_code=status.HTTP_201_CREATED)
def create_task(
    task: schemas.TaskCreate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    return services.create_task(db, task, current_user.id)

@router.patch("/{task_id}", response_model=list[schemas.TaskOut])
def update_task(
    task_id: int,
    task: schemas.TaskUpdate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    return services.update_task(db, task_id, task, current_user.id)

@router.delete("/{task_id}", response_model=list[schemas.TaskOut])
def delete_task(
    task_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    return services.delete_task(db, task_id, current_user.id)
