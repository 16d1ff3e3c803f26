"""
Post schemas
"""
from pydantic import BaseModel, Field, field_validator
from typing import Optional, List
from datetime import datetime

from studentblog.services.publishing import parse_published_at
from studentblog.services.slug import SLUG_PATTERN, SLUG_MIN_LENGTH, SLUG_MAX_LENGTH


class PostWriteMixin(BaseModel):
    """Input coercion shared by create and update"""

    @field_validator("publishedAt", mode="before", check_fields=False)
    @classmethod
    def coerce_published_at(cls, value):
        return parse_published_at(value)

    @field_validator("slug", mode="before", check_fields=False)
    @classmethod
    def blank_slug_is_missing(cls, value):
        if isinstance(value, str) and not value.strip():
            return None
        return value


class PostCreate(PostWriteMixin):
    """Create post request"""
    title: str = Field(..., min_length=1, max_length=255, description="Post title")
    content: str = Field(..., description="Editor HTML")
    slug: Optional[str] = Field(
        None, min_length=SLUG_MIN_LENGTH, max_length=SLUG_MAX_LENGTH, pattern=SLUG_PATTERN,
        description="URL slug, derived from the title when omitted"
    )
    categoryId: int = Field(..., ge=1, description="Category ID")
    isDraft: bool = Field(True, description="Drafts are hidden from public listings")
    publishedAt: Optional[datetime] = Field(None, description="Publish time, ISO-8601")
    featuredImage: Optional[str] = Field(None, description="URL of an uploaded image")


class PostUpdate(PostWriteMixin):
    """Update post request, only the fields sent are changed"""
    title: Optional[str] = Field(None, min_length=1, max_length=255)
    content: Optional[str] = None
    slug: Optional[str] = Field(None, min_length=SLUG_MIN_LENGTH, max_length=SLUG_MAX_LENGTH, pattern=SLUG_PATTERN)
    categoryId: Optional[int] = Field(None, ge=1)
    isDraft: Optional[bool] = None
    publishedAt: Optional[datetime] = None
    featuredImage: Optional[str] = None


class PostResponse(BaseModel):
    """Post response"""
    id: int
    title: str
    slug: str
    content: str
    categoryId: int
    authorId: int
    publishedAt: Optional[datetime] = None
    createdAt: datetime
    isDraft: bool
    featuredImage: Optional[str] = None


class AdminPostsResponse(BaseModel):
    """Dashboard listing"""
    published: List[PostResponse]
    drafts: List[PostResponse]
