"""
Category service
"""
import logging
from typing import Optional, List, Dict
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select, func
from studentblog.models.category import Category

logger = logging.getLogger(__name__)


class CategoryService:
    """Read access to categories plus the one-time seed"""

    @staticmethod
    async def get_categories(db: AsyncSession) -> List[Category]:
        result = await db.execute(select(Category).order_by(Category.name.asc()))
        return list(result.scalars().all())

    @staticmethod
    async def get_category_by_slug(db: AsyncSession, slug: str) -> Optional[Category]:
        result = await db.execute(select(Category).where(Category.slug == slug))
        return result.scalar_one_or_none()

    @staticmethod
    async def get_category_by_id(db: AsyncSession, category_id: int) -> Optional[Category]:
        return await db.get(Category, category_id)

    @staticmethod
    async def create_category(db: AsyncSession, data: Dict[str, str]) -> Category:
        category = Category(
            name=data["name"],
            slug=data["slug"],
            description=data["description"],
            icon=data["icon"]
        )
        db.add(category)
        await db.commit()
        await db.refresh(category)
        return category

    @classmethod
    async def seed_categories(cls, db: AsyncSession, categories: List[Dict[str, str]]) -> int:
        """
        Insert the given categories when the table is empty

        Args:
            db: database session
            categories: dicts with name, slug, description and icon

        Returns:
            int: number of categories inserted, 0 when already seeded
        """
        count = (await db.execute(select(func.count()).select_from(Category))).scalar()
        if count:
            logger.info("Categories already present (%d), skipping seed", count)
            return 0

        for data in categories:
            await cls.create_category(db, data)

        logger.info("Seeded %d categories", len(categories))
        return len(categories)
