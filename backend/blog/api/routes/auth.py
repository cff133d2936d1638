"""Auth Routes — register, login, and current-user lookup.

Invariants:
    - Responses use the public user projection (password hash never serialized)
    - Duplicate email surfaces as 400 with code CONFLICT from the service layer
"""

import logging

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from blog.api.dependencies import get_current_user
from blog.infrastructure.database import get_db
from blog.infrastructure.security import create_access_token
from blog.models.user import User
from blog.schemas.auth import (
    LoginRequest, LoginResponse, RegisterRequest, UserPublic,
)
from blog.services import user_service

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/auth", tags=["auth"])


@router.post("/register", response_model=UserPublic)
async def register(body: RegisterRequest, db: AsyncSession = Depends(get_db)):
    """Create a user account."""
    user = await user_service.register_user(db, body)
    return UserPublic.model_validate(user)


@router.post("/login", response_model=LoginResponse)
async def login(body: LoginRequest, db: AsyncSession = Depends(get_db)):
    """Exchange email/password for an access token."""
    user = await user_service.authenticate_user(db, body.email, body.password)
    return LoginResponse(
        token=create_access_token(user.id),
        user=UserPublic.model_validate(user),
    )


@router.get("/me", response_model=UserPublic)
async def me(user: User = Depends(get_current_user)):
    return UserPublic.model_validate(user)
