from sqlalchemy import Column, Integer, String
from sqlalchemy.orm import relationship
from app.db.session import Base

DEFAULT_LABEL_COLOR = "59 130 246"

class Label(Base):
    __tablename__ = "labels"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String, nullable=False)
    color = Column(String, nullable=False, default=DEFAULT_LABEL_COLOR)  # "R G B"

    # Labels are shared across users, so there is no owner column
    tasks = relationship("TaskLabel", back_populates="label", cascade="all, delete")
