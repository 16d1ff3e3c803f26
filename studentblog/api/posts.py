"""
Public post API
"""
from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.ext.asyncio import AsyncSession

from studentblog.db.database import get_db
from studentblog.models.post import Post
from studentblog.schemas.common import ResponseModel
from studentblog.schemas.post import PostResponse
from studentblog.services.category_service import CategoryService
from studentblog.services.post_service import PostService

router = APIRouter(prefix="/api", tags=["Posts"])


def build_post_response(post: Post) -> PostResponse:
    return PostResponse(
        id=post.id,
        title=post.title,
        slug=post.slug,
        content=post.content,
        categoryId=post.category_id,
        authorId=post.author_id,
        publishedAt=post.published_at,
        createdAt=post.created_at,
        isDraft=post.is_draft,
        featuredImage=post.featured_image
    )


@router.get("/posts", response_model=ResponseModel)
async def list_published_posts(db: AsyncSession = Depends(get_db)):
    """
    Published posts, newest first (home page)
    """
    posts = await PostService.get_published_posts(db)
    return ResponseModel(code=200, data=[build_post_response(p) for p in posts])


@router.get("/posts/category/{slug}", response_model=ResponseModel)
async def list_posts_by_category(slug: str, db: AsyncSession = Depends(get_db)):
    """
    Published posts of one category (category page)
    """
    category = await CategoryService.get_category_by_slug(db, slug)
    if not category:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Category not found"
        )

    posts = await PostService.get_posts_by_category(db, category.id)
    return ResponseModel(code=200, data=[build_post_response(p) for p in posts])


@router.get("/posts/{slug}", response_model=ResponseModel)
async def get_post(slug: str, db: AsyncSession = Depends(get_db)):
    """
    Published post by slug (post page), drafts are not found
    """
    post = await PostService.get_published_post_by_slug(db, slug)
    if not post:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Post not found"
        )

    return ResponseModel(code=200, data=build_post_response(post))
