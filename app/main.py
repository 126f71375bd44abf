import logging
from typing import Optional

from fastapi import Depends, FastAPI, status
from fastapi.responses import RedirectResponse

from app.config import settings
from app.core.security import get_optional_user
from app.db import models  # noqa: F401  registers every mapped table
from app.db.models.user import User

from app.api.auth.routes import router as auth_router
from app.api.dashboard.routes import router as dashboard_router
from app.api.todo.task.routes import router as todo_task_router
from app.api.todo.label.routes import router as todo_label_router

logging.basicConfig(
    level=settings.LOG_LEVEL.upper(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)

app = FastAPI(title="Task Board")

# Routers
app.include_router(auth_router, prefix="/auth", tags=["Auth"])
app.include_router(dashboard_router, prefix="/dashboard", tags=["Dashboard"])

app.include_router(todo_task_router, prefix="/todo/tasks", tags=["Todo Tasks"])
app.include_router(todo_label_router, prefix="/todo/labels", tags=["Todo Labels"])


@app.get("/ping")
def ping():
    return {"message": "pong"}


@app.get("/")
def welcome(current_user: Optional[User] = Depends(get_optional_user)):
    # Already signed in: straight to the board
    if current_user is not None:
        return RedirectResponse("/dashboard", status_code=status.HTTP_302_FOUND)
    return {
        "message": "Organize your tasks efficiently and boost your productivity",
        "sign_in_url": "/auth/google/login",
    }
