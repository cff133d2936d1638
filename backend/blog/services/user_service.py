"""User Service — registration and credential checks against the users table.

Invariants:
    - Email uniqueness is decided by the database unique index, never by a prior SELECT
    - A duplicate email rolls back the insert and raises ConflictError
    - authenticate_user gives the same error for unknown email and wrong password
    - bcrypt hashing and checking run in the threadpool, never on the event loop
"""

import logging

from fastapi.concurrency import run_in_threadpool
from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from blog.core.domain_types import UserId
from blog.core.errors import AuthenticationError, ConflictError
from blog.infrastructure.security import hash_password, verify_password
from blog.models.user import User
from blog.schemas.auth import RegisterRequest

logger = logging.getLogger(__name__)


async def register_user(db: AsyncSession, body: RegisterRequest) -> User:
    """Insert a new user with a hashed password."""
    user = User(
        name=body.name,
        email=body.email,
        password=await run_in_threadpool(hash_password, body.password),
    )
    db.add(user)
    try:
        await db.commit()
    except IntegrityError:
        await db.rollback()
        logger.info("Registration rejected: email already in use")
        raise ConflictError(
            "User with this email already exists", field="email",
        )
    logger.info("User registered", extra={"user_id": user.id})
    return user


async def get_user_by_email(db: AsyncSession, email: str) -> User | None:
    result = await db.execute(select(User).where(User.email == email))
    return result.scalar_one_or_none()


async def get_user_by_id(db: AsyncSession, user_id: UserId) -> User | None:
    return await db.get(User, user_id)


async def authenticate_user(db: AsyncSession, email: str, password: str) -> User:
    """Return the user for valid credentials or raise AuthenticationError."""
    user = await get_user_by_email(db, email)
    if user is None or not await run_in_threadpool(
        verify_password, password, user.password,
    ):
        logger.warning("Login failed")
        raise AuthenticationError("Invalid email or password")
    logger.info("User authenticated", extra={"user_id": user.id})
    return user
