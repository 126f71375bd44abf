from sqlalchemy import Column, Integer, String
from sqlalchemy.orm import relationship
from app.db.session import Base

class User(Base):
    __tablename__ = "users"

    id = Column(Integer, primary_key=True, index=True)
    email = Column(String, unique=True, index=True, nullable=False)
    name = Column(String, nullable=True)
    avatar_url = Column(String, nullable=True)
    auth_provider = Column(String, default="google")
    provider_user_id = Column(String, nullable=True)

    # todo relationships
    tasks = relationship("Task", back_populates="owner", cascade="all, delete", lazy="dynamic")
