import logging
from datetime import date
from fastapi import HTTPException
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, selectinload

from app.db.models.todo.task import Task
from app.db.models.todo.task_label import TaskLabel
from app.api.todo.label.schemas import LabelOut
from app.api.todo.task_label import services as task_label_services
from . import schemas


def flatten_task(task: Task) -> schemas.TaskOut:
    """Collapse the task -> task_labels -> label join into a flat label list."""
    return schemas.TaskOut(
        id=task.id,
        title=task.title,
        description=task.description or "",
        status=task.status,
        due_date=task.due_date,
        created_at=task.created_at,
        labels=[LabelOut.model_validate(tl.label) for tl in task.task_labels if tl.label is not None],
    )


def list_tasks(db: Session, user_id: int) -> list[schemas.TaskOut]:
    # No ordering: rows come back however the database returns them
    try:
        tasks = (
            db.query(Task)
            .options(selectinload(Task.task_labels).selectinload(TaskLabel.label))
            .filter(Task.user_id == user_id)
            .all()
        )
    except SQLAlchemyError as e:
        db.rollback()
        logging.warning("Error listing tasks for user %s: %s", user_id, e)
        return []
    return [flatten_task(task) for task in tasks]


def get_task(db: Session, task_id: int, user_id: int):
    return db.query(Task).filter(Task.id == task_id, Task.user_id == user_id).first()


def create_task(db: Session, task: schemas.TaskCreate, user_id: int) -> list[schemas.TaskOut]:
    data = task.model_dump(exclude={"label_ids"})
    data["due_date"] = data["due_date"] or date.today()
    db_task = Task(**data, user_id=user_id)
    try:
        db.add(db_task)
        db.commit()
    except SQLAlchemyError as e:
        db.rollback()
        logging.error("Error creating task: %s", e)
        raise HTTPException(status_code=400, detail="Could not create task")
    db.refresh(db_task)

    if task.label_ids:
        try:
            task_label_services.assign_labels_to_task(db, db_task.id, task.label_ids)
        except SQLAlchemyError as e:
            # The task row stays; it simply ends up without labels
            db.rollback()
            logging.error("Error assigning labels %s to task %s: %s", task.label_ids, db_task.id, e)

    return list_tasks(db, user_id)


def update_task(db: Session, task_id: int, task: schemas.TaskUpdate, user_id: int) -> list[schemas.TaskOut]:
    db_task = get_task(db, task_id, user_id)
    if not db_task:
        logging.error("Error updating task %s: not found", task_id)
        raise HTTPException(status_code=404, detail="Task not found")

    for key, value in task.model_dump(exclude_unset=True, exclude_none=True).items():
        setattr(db_task, key, value)
    try:
        db.commit()
    except SQLAlchemyError as e:
        db.rollback()
        logging.error("Error updating task %s: %s", task_id, e)
        raise HTTPException(status_code=400, detail="Could not update task")

    return list_tasks(db, user_id)


def delete_task(db: Session, task_id: int, user_id: int) -> list[schemas.TaskOut]:
    try:
        db_task = get_task(db, task_id, user_id)
        if db_task:
            db.delete(db_task)
            db.commit()
    except SQLAlchemyError as e:
        db.rollback()
        logging.warning("Error deleting task %s: %s", task_id, e)

    return list_tasks(db, user_id)
