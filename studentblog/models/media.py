"""
Media model
"""
from sqlalchemy import Column, Integer, String, TIMESTAMP, ForeignKey, func
from studentblog.db.database import Base


class Media(Base):
    __tablename__ = "media"

    id = Column(Integer, primary_key=True, autoincrement=True)
    filename = Column(String(255), nullable=False)
    original_filename = Column(String(255), nullable=False)
    mimetype = Column(String(128), nullable=False)
    size = Column(Integer, nullable=False)
    path = Column(String(512), nullable=False)  # public URL path, /uploads/<filename>
    uploaded_at = Column(TIMESTAMP, nullable=False, server_default=func.now())
    uploaded_by = Column(Integer, ForeignKey('users.id'), nullable=False)
