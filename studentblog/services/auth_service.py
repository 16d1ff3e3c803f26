"""
Account service
"""
import logging
from typing import Optional
from passlib.context import CryptContext
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select
from studentblog.models.user import User

logger = logging.getLogger(__name__)

pwd_context = CryptContext(schemes=["pbkdf2_sha256"], deprecated="auto")


class AuthService:
    """Account lookups, password checks and the seeded admin"""

    @staticmethod
    def hash_password(password: str) -> str:
        return pwd_context.hash(password)

    @staticmethod
    def verify_password(password: str, hashed: str) -> bool:
        return pwd_context.verify(password, hashed)

    @staticmethod
    async def get_user(db: AsyncSession, user_id: int) -> Optional[User]:
        return await db.get(User, user_id)

    @staticmethod
    async def get_user_by_username(db: AsyncSession, username: str) -> Optional[User]:
        result = await db.execute(select(User).where(User.username == username))
        return result.scalar_one_or_none()

    @classmethod
    async def create_user(
        cls,
        db: AsyncSession,
        username: str,
        password: str,
        is_admin: bool = False
    ) -> User:
        """
        Create an account with a hashed password

        Args:
            db: database session
            username: unique account name
            password: plain password
            is_admin: whether the account may use the admin API

        Returns:
            User: the stored account
        """
        user = User(
            username=username,
            password=cls.hash_password(password),
            is_admin=is_admin
        )
        db.add(user)
        await db.commit()
        await db.refresh(user)

        logger.info("Created account '%s' (admin=%s)", username, is_admin)
        return user

    @classmethod
    async def authenticate(cls, db: AsyncSession, username: str, password: str) -> Optional[User]:
        """
        Check credentials

        Returns:
            User: the account when the password matches, None otherwise
        """
        user = await cls.get_user_by_username(db, username)
        if not user or not cls.verify_password(password, user.password):
            logger.info("Failed login for '%s'", username)
            return None
        return user

    @classmethod
    async def ensure_admin(cls, db: AsyncSession, username: str, password: str) -> User:
        """
        Return the admin account, creating it on first deployment
        """
        user = await cls.get_user_by_username(db, username)
        if user:
            if not user.is_admin:
                user.is_admin = True
                await db.commit()
                logger.info("Promoted '%s' to admin", username)
            return user

        return await cls.create_user(db, username, password, is_admin=True)
