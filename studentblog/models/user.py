"""
User model
"""
from sqlalchemy import Column, Integer, String, Boolean
from studentblog.db.database import Base


class User(Base):
    __tablename__ = "users"

    id = Column(Integer, primary_key=True, autoincrement=True)
    username = Column(String(64), unique=True, nullable=False)
    password = Column(String(255), nullable=False)  # passlib hash
    is_admin = Column(Boolean, nullable=False, default=False)
