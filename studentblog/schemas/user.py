"""
Account and login schemas
"""
from pydantic import BaseModel, Field


class LoginRequest(BaseModel):
    """Login request"""
    username: str = Field(..., min_length=1, max_length=64)
    password: str = Field(..., min_length=1)


class RegisterRequest(BaseModel):
    """Registration request"""
    username: str = Field(..., min_length=3, max_length=64, description="Account name")
    password: str = Field(..., min_length=6, description="Plain password, hashed before storage")


class UserResponse(BaseModel):
    """Account response, never includes the password hash"""
    id: int
    username: str
    isAdmin: bool


class TokenResponse(BaseModel):
    """Login result"""
    token: str
    user: UserResponse
