"""
Authentication helpers
"""
from datetime import datetime, timedelta, timezone
from typing import Optional, Dict, Any
from jose import JWTError, jwt
from fastapi import Depends, Header, HTTPException, status
from sqlalchemy.ext.asyncio import AsyncSession
from studentblog.core.config import settings
from studentblog.db.database import get_db
from studentblog.models.user import User
from studentblog.services.auth_service import AuthService


def create_access_token(data: Dict[str, Any], expires_delta: Optional[timedelta] = None) -> str:
    """
    Create a JWT access token

    Args:
        data: claims to encode
        expires_delta: lifetime, defaults to ACCESS_TOKEN_EXPIRE_MINUTES

    Returns:
        str: encoded token
    """
    to_encode = data.copy()

    if expires_delta:
        expire = datetime.now(timezone.utc) + expires_delta
    else:
        expire = datetime.now(timezone.utc) + timedelta(minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES)

    to_encode.update({"exp": expire})
    return jwt.encode(to_encode, settings.SECRET_KEY, algorithm=settings.ALGORITHM)


def verify_token(token: str) -> Dict[str, Any]:
    """
    Decode a JWT token

    Raises:
        HTTPException: invalid or expired token
    """
    try:
        return jwt.decode(token, settings.SECRET_KEY, algorithms=[settings.ALGORITHM])
    except JWTError:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid or expired token",
            headers={"WWW-Authenticate": "Bearer"},
        )


def _unauthorized(detail: str) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail=detail,
        headers={"WWW-Authenticate": "Bearer"},
    )


async def get_current_user(
    authorization: Optional[str] = Header(None),
    db: AsyncSession = Depends(get_db)
) -> User:
    """
    Resolve the account behind an "Authorization: Bearer {token}" header
    """
    if not authorization or not authorization.strip():
        raise _unauthorized("Not authenticated")

    parts = authorization.split()
    if len(parts) != 2 or parts[0].lower() != "bearer":
        raise _unauthorized("Authorization header must be: Bearer {token}")

    payload = verify_token(parts[1])
    user_id = payload.get("sub")
    if user_id is None:
        raise _unauthorized("Token has no subject")

    try:
        user = await AuthService.get_user(db, int(user_id))
    except ValueError:
        raise _unauthorized("Token subject is not a user ID")

    if not user:
        raise _unauthorized("Account no longer exists")
    return user


async def require_admin(user: User = Depends(get_current_user)) -> User:
    """
    Admin-only routes
    """
    if not user.is_admin:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Admin access required"
        )
    return user
