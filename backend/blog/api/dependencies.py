"""Request Dependencies — resolve the authenticated user from a bearer token.

Invariants:
    - Write endpoints attribute authorship to the user returned here, never to body fields
    - Missing, malformed or expired tokens and deleted users all raise AuthenticationError
"""

import logging

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.ext.asyncio import AsyncSession

from blog.core.errors import AuthenticationError
from blog.infrastructure.database import get_db
from blog.infrastructure.security import decode_access_token
from blog.models.user import User
from blog.services.user_service import get_user_by_id

logger = logging.getLogger(__name__)

bearer_scheme = HTTPBearer(auto_error=False)


async def get_current_user(
    credentials: HTTPAuthorizationCredentials | None = Depends(bearer_scheme),
    db: AsyncSession = Depends(get_db),
) -> User:
    if credentials is None:
        raise AuthenticationError()
    user_id = decode_access_token(credentials.credentials)
    if user_id is None:
        raise AuthenticationError("Invalid or expired token")
    user = await get_user_by_id(db, user_id)
    if user is None:
        logger.warning("Token refers to a missing user", extra={"user_id": user_id})
        raise AuthenticationError("Invalid or expired token")
    return user
