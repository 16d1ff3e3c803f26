"""
Category schemas
"""
from pydantic import BaseModel


class CategoryResponse(BaseModel):
    """Category response"""
    id: int
    name: str
    slug: str
    description: str
    icon: str

    class Config:
        from_attributes = True
