from sqlalchemy.orm import Session
from app.db.models.todo.task_label import TaskLabel

def assign_labels_to_task(db: Session, task_id: int, label_ids: list[int]):
    """Insert one association row per distinct label id, as a single batch."""
    # Prevent duplicates
    unique_ids = list(dict.fromkeys(label_ids))
    task_labels = [TaskLabel(task_id=task_id, label_id=label_id) for label_id in unique_ids]
    db.add_all(task_labels)
    db.commit()
    return task_labels
