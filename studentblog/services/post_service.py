"""
Post service
"""
import logging
from functools import partial
from typing import Optional, List, Dict, Any
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select, and_
from sqlalchemy.exc import IntegrityError
from studentblog.core.exceptions import SlugConflictError
from studentblog.models.post import Post
from studentblog.schemas.post import PostCreate, PostUpdate
from studentblog.services.publishing import normalize_published_at
from studentblog.services.slug import resolve_unique_slug, slugify

logger = logging.getLogger(__name__)

# How many times a write is re-resolved after losing a slug race
SLUG_RACE_RETRIES = 1

# request field -> column
UPDATABLE_FIELDS = {
    "title": "title",
    "content": "content",
    "categoryId": "category_id",
    "isDraft": "is_draft",
    "publishedAt": "published_at",
    "featuredImage": "featured_image",
}
NULLABLE_FIELDS = {"publishedAt", "featuredImage"}


class PostService:
    """Post reads and writes, with slug uniqueness and publish dates handled on write"""

    @classmethod
    async def slug_exists(cls, db: AsyncSession, slug: str, exclude_id: Optional[int] = None) -> bool:
        """
        Whether a post other than exclude_id uses slug
        """
        return await cls._slug_holder(db, slug, exclude_id) is not None

    @staticmethod
    async def _slug_holder(db: AsyncSession, slug: str, exclude_id: Optional[int] = None) -> Optional[int]:
        """ID of a post other than exclude_id that uses slug"""
        conditions = [Post.slug == slug]
        if exclude_id is not None:
            conditions.append(Post.id != exclude_id)
        result = await db.execute(select(Post.id).where(and_(*conditions)).limit(1))
        return result.scalar_one_or_none()

    @classmethod
    async def _commit_unless_slug_raced(
        cls,
        db: AsyncSession,
        slug: Optional[str],
        exclude_id: Optional[int] = None
    ) -> bool:
        """
        Commit the pending write

        Returns:
            bool: True when committed, False when another post took slug first

        Raises:
            IntegrityError: the write violated some other constraint
        """
        try:
            await db.commit()
            return True
        except IntegrityError:
            await db.rollback()
            if slug is not None and await cls._slug_holder(db, slug, exclude_id) is not None:
                return False
            raise

    @classmethod
    async def create_post(cls, db: AsyncSession, data: PostCreate, author_id: int) -> Post:
        """
        Create a post

        The slug defaults to the slugified title and is suffixed until unique.
        A post created as published without a date is stamped with the
        current time.

        Args:
            db: database session
            data: validated request
            author_id: the authenticated admin

        Returns:
            Post: the stored post

        Raises:
            SlugConflictError: the slug was taken concurrently on every attempt
        """
        candidate = data.slug or slugify(data.title)
        published_at = normalize_published_at(data.isDraft, data.publishedAt)

        for attempt in range(SLUG_RACE_RETRIES + 1):
            slug = await resolve_unique_slug(candidate, partial(cls.slug_exists, db))
            post = Post(
                title=data.title,
                slug=slug,
                content=data.content,
                category_id=data.categoryId,
                author_id=author_id,
                published_at=published_at,
                is_draft=data.isDraft,
                featured_image=data.featuredImage
            )
            db.add(post)

            if await cls._commit_unless_slug_raced(db, slug):
                await db.refresh(post)
                logger.info("Created post %d '%s' (draft=%s)", post.id, post.slug, post.is_draft)
                return post

            logger.warning("Slug '%s' was taken concurrently (attempt %d)", slug, attempt + 1)

        raise SlugConflictError(slug)

    @classmethod
    async def update_post(cls, db: AsyncSession, post: Post, data: PostUpdate) -> Post:
        """
        Apply a partial update

        A new slug is made unique against every other post, so sending the
        post's own slug back leaves it unchanged. When the update leaves the
        post published without a date, the current time is stamped.

        Raises:
            SlugConflictError: the slug was taken concurrently on every attempt
        """
        changes: Dict[str, Any] = {
            field: value
            for field, value in data.model_dump(exclude_unset=True).items()
            if value is not None or field in NULLABLE_FIELDS
        }
        candidate = changes.pop("slug", None)
        post_id = post.id
        slug = None

        for attempt in range(SLUG_RACE_RETRIES + 1):
            for field, value in changes.items():
                setattr(post, UPDATABLE_FIELDS[field], value)

            if candidate:
                slug = await resolve_unique_slug(candidate, partial(cls.slug_exists, db), exclude_id=post_id)
                post.slug = slug

            post.published_at = normalize_published_at(post.is_draft, post.published_at)

            if await cls._commit_unless_slug_raced(db, slug, exclude_id=post_id):
                await db.refresh(post)
                logger.info("Updated post %d '%s' (draft=%s)", post.id, post.slug, post.is_draft)
                return post

            logger.warning("Slug '%s' was taken concurrently (attempt %d)", slug, attempt + 1)
            # rollback expired the instance, reload before re-applying
            await db.refresh(post)

        raise SlugConflictError(slug)

    @staticmethod
    async def delete_post(db: AsyncSession, post: Post) -> None:
        post_id = post.id
        await db.delete(post)
        await db.commit()
        logger.info("Deleted post %d", post_id)

    @staticmethod
    async def get_post_by_id(db: AsyncSession, post_id: int) -> Optional[Post]:
        return await db.get(Post, post_id)

    @staticmethod
    async def get_published_post_by_slug(db: AsyncSession, slug: str) -> Optional[Post]:
        result = await db.execute(
            select(Post).where(
                and_(
                    Post.slug == slug,
                    Post.is_draft == False
                )
            )
        )
        return result.scalar_one_or_none()

    @staticmethod
    async def get_published_posts(db: AsyncSession) -> List[Post]:
        result = await db.execute(
            select(Post).where(
                and_(
                    Post.is_draft == False,
                    Post.published_at.isnot(None)
                )
            ).order_by(Post.published_at.desc())
        )
        return list(result.scalars().all())

    @staticmethod
    async def get_draft_posts(db: AsyncSession) -> List[Post]:
        result = await db.execute(
            select(Post).where(Post.is_draft == True).order_by(Post.created_at.desc())
        )
        return list(result.scalars().all())

    @staticmethod
    async def get_posts_by_category(db: AsyncSession, category_id: int) -> List[Post]:
        result = await db.execute(
            select(Post).where(
                and_(
                    Post.category_id == category_id,
                    Post.is_draft == False,
                    Post.published_at.isnot(None)
                )
            ).order_by(Post.published_at.desc())
        )
        return list(result.scalars().all())
