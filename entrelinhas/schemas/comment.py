"""Pydantic schemas for Comment."""
from pydantic import BaseModel, Field

from entrelinhas.schemas.common import CamelModel, ObjectIdStr, UtcDatetime


class CommentCreate(BaseModel):
    content: str | None = None


class CommentResponse(CamelModel):
    id: ObjectIdStr = Field(alias="_id")
    user_id: ObjectIdStr
    username: str | None = None
    content: str
    created_at: UtcDatetime


class HistoryCommentResponse(CommentResponse):
    post_id: ObjectIdStr


class CommentCreated(BaseModel):
    message: str
    comment: CommentResponse
