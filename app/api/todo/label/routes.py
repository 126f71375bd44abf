from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session
from app.db.session import get_db
from app.core.security import get_current_user
from app.db.models.user import User
from . import schemas, services

router = APIRouter()

@router.post("/", response_model=schemas.LabelOut, status_code=status.HTTP_201_CREATED)
def create_label(
    label: schemas.LabelCreate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    return services.create_label(db, label)

@router.get("/", response_model=list[schemas.LabelOut])
def get_labels(
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    return services.list_labels(db)
