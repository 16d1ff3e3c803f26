"""
Admin post API
"""
from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.ext.asyncio import AsyncSession

from studentblog.api.posts import build_post_response
from studentblog.db.database import get_db
from studentblog.models.post import Post
from studentblog.models.user import User
from studentblog.schemas.common import ResponseModel
from studentblog.schemas.post import PostCreate, PostUpdate, AdminPostsResponse
from studentblog.services.category_service import CategoryService
from studentblog.services.post_service import PostService
from studentblog.utils.auth import require_admin

router = APIRouter(prefix="/api/admin", tags=["Admin posts"])


async def get_post_or_404(db: AsyncSession, post_id: int) -> Post:
    post = await PostService.get_post_by_id(db, post_id)
    if not post:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Post not found"
        )
    return post


async def ensure_category_exists(db: AsyncSession, category_id: int) -> None:
    if not await CategoryService.get_category_by_id(db, category_id):
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Category not found"
        )


@router.get("/posts", response_model=ResponseModel)
async def list_admin_posts(
    db: AsyncSession = Depends(get_db),
    admin: User = Depends(require_admin)
):
    """
    Published posts and drafts for the dashboard
    """
    published = await PostService.get_published_posts(db)
    drafts = await PostService.get_draft_posts(db)

    return ResponseModel(
        code=200,
        data=AdminPostsResponse(
            published=[build_post_response(p) for p in published],
            drafts=[build_post_response(p) for p in drafts]
        )
    )


@router.get("/posts/{post_id}", response_model=ResponseModel)
async def get_admin_post(
    post_id: int,
    db: AsyncSession = Depends(get_db),
    admin: User = Depends(require_admin)
):
    """
    Any post by ID, drafts included (editor)
    """
    post = await get_post_or_404(db, post_id)
    return ResponseModel(code=200, data=build_post_response(post))


@router.post("/posts", response_model=ResponseModel, status_code=status.HTTP_201_CREATED)
async def create_post(
    post_data: PostCreate,
    db: AsyncSession = Depends(get_db),
    admin: User = Depends(require_admin)
):
    """
    Create a post authored by the current admin
    """
    await ensure_category_exists(db, post_data.categoryId)

    post = await PostService.create_post(db, post_data, author_id=admin.id)

    return ResponseModel(
        code=201,
        message="Post created",
        data=build_post_response(post)
    )


@router.put("/posts/{post_id}", response_model=ResponseModel)
async def update_post(
    post_id: int,
    post_data: PostUpdate,
    db: AsyncSession = Depends(get_db),
    admin: User = Depends(require_admin)
):
    """
    Partially update a post
    """
    post = await get_post_or_404(db, post_id)
    if post_data.categoryId is not None:
        await ensure_category_exists(db, post_data.categoryId)

    post = await PostService.update_post(db, post, post_data)

    return ResponseModel(
        code=200,
        message="Post updated",
        data=build_post_response(post)
    )


@router.delete("/posts/{post_id}", response_model=ResponseModel)
async def delete_post(
    post_id: int,
    db: AsyncSession = Depends(get_db),
    admin: User = Depends(require_admin)
):
    """
    Permanently delete a post
    """
    post = await get_post_or_404(db, post_id)
    await PostService.delete_post(db, post)

    return ResponseModel(code=200, message="Post deleted")
