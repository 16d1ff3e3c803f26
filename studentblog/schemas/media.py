"""
Media schemas
"""
from pydantic import BaseModel
from datetime import datetime


class MediaResponse(BaseModel):
    """Uploaded media record"""
    id: int
    filename: str
    originalFilename: str
    mimetype: str
    size: int
    path: str
    uploadedAt: datetime
    uploadedBy: int
