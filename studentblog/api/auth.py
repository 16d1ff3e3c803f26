"""
Authentication API
"""
import logging
from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.ext.asyncio import AsyncSession

from studentblog.core.config import settings
from studentblog.db.database import get_db
from studentblog.models.user import User
from studentblog.schemas.common import ResponseModel
from studentblog.schemas.user import LoginRequest, RegisterRequest, TokenResponse, UserResponse
from studentblog.services.auth_service import AuthService
from studentblog.utils.auth import create_access_token, get_current_user

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["Auth"])


def build_user_response(user: User) -> UserResponse:
    return UserResponse(id=user.id, username=user.username, isAdmin=user.is_admin)


def build_token_response(user: User) -> TokenResponse:
    token = create_access_token(data={"sub": str(user.id)})
    return TokenResponse(token=token, user=build_user_response(user))


@router.post("/register", response_model=ResponseModel, status_code=status.HTTP_201_CREATED)
async def register(
    request: RegisterRequest,
    db: AsyncSession = Depends(get_db)
):
    """
    Create an admin account, only while ALLOW_REGISTRATION is on
    """
    if not settings.ALLOW_REGISTRATION:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Registration is disabled"
        )

    if await AuthService.get_user_by_username(db, request.username):
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Username already exists"
        )

    user = await AuthService.create_user(db, request.username, request.password, is_admin=True)

    return ResponseModel(code=201, message="Account created", data=build_token_response(user))


@router.post("/login", response_model=ResponseModel)
async def login(
    request: LoginRequest,
    db: AsyncSession = Depends(get_db)
):
    """
    Exchange credentials for a bearer token
    """
    user = await AuthService.authenticate(db, request.username, request.password)
    if not user:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid username or password"
        )

    logger.info("User '%s' logged in", user.username)
    return ResponseModel(code=200, message="Logged in", data=build_token_response(user))


@router.post("/logout", response_model=ResponseModel)
async def logout():
    """
    Tokens are stateless, the client just discards its token
    """
    return ResponseModel(code=200, message="Logged out")


@router.get("/user", response_model=ResponseModel)
async def current_user(user: User = Depends(get_current_user)):
    return ResponseModel(code=200, data=build_user_response(user))
