"""
Category API
"""
from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.ext.asyncio import AsyncSession

from studentblog.db.database import get_db
from studentblog.schemas.category import CategoryResponse
from studentblog.schemas.common import ResponseModel
from studentblog.services.category_service import CategoryService

router = APIRouter(prefix="/api", tags=["Categories"])


@router.get("/categories", response_model=ResponseModel)
async def list_categories(db: AsyncSession = Depends(get_db)):
    """
    All categories, ordered by name
    """
    categories = await CategoryService.get_categories(db)
    return ResponseModel(
        code=200,
        data=[CategoryResponse.model_validate(c) for c in categories]
    )


@router.get("/categories/{slug}", response_model=ResponseModel)
async def get_category(slug: str, db: AsyncSession = Depends(get_db)):
    """
    Category by slug
    """
    category = await CategoryService.get_category_by_slug(db, slug)
    if not category:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Category not found"
        )

    return ResponseModel(code=200, data=CategoryResponse.model_validate(category))
