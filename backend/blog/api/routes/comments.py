"""Comment Routes — add a comment to a post as the authenticated user."""

import logging

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from blog.api.dependencies import get_current_user
from blog.infrastructure.database import get_db
from blog.models.user import User
from blog.schemas.comment import CommentCreate, CommentResponse
from blog.services import comment_service

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/comments", tags=["comments"])


@router.post("", response_model=CommentResponse)
async def create_comment(
    body: CommentCreate,
    user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    comment = await comment_service.create_comment(db, user, body)
    return CommentResponse.model_validate(comment)
