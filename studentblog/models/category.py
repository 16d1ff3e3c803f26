"""
Category model
"""
from sqlalchemy import Column, Integer, String, Text
from studentblog.db.database import Base


class Category(Base):
    __tablename__ = "categories"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(100), unique=True, nullable=False)
    slug = Column(String(120), unique=True, nullable=False)
    description = Column(Text, nullable=False)
    icon = Column(String(64), nullable=False)  # icon component name used by the client
