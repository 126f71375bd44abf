import logging
from fastapi import HTTPException
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session
from app.db.models.todo.label import Label
from . import schemas

def create_label(db: Session, label: schemas.LabelCreate):
    db_label = Label(**label.model_dump())
    try:
        db.add(db_label)
        db.commit()
    except SQLAlchemyError as e:
        db.rollback()
        logging.error("Error creating label %r: %s", label.name, e)
        raise HTTPException(status_code=400, detail="Could not create label")
    db.refresh(db_label)
    return db_label

def list_labels(db: Session):
    """All labels, unfiltered. A failed read yields an empty list."""
    try:
        return db.query(Label).all()
    except SQLAlchemyError as e:
        db.rollback()
        logging.warning("Error listing labels: %s", e)
        return []
