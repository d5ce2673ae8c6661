"""Pydantic schemas for Post."""
from pydantic import BaseModel, Field

from entrelinhas.schemas.comment import CommentResponse, HistoryCommentResponse
from entrelinhas.schemas.common import CamelModel, ObjectIdStr, UtcDatetime


class PostCreate(CamelModel):
    content: str | None = None
    anonymous: bool | None = False
    hide_likes: bool | None = False
    mood: str | None = None


class PostResponse(CamelModel):
    id: ObjectIdStr = Field(alias="_id")
    user_id: ObjectIdStr
    username: str | None = None
    content: str
    anonymous: bool | None = False
    hide_likes: bool | None = False
    mood: str | None = None
    likes: list[ObjectIdStr] = []
    reports: list[ObjectIdStr] = []
    comments: list[CommentResponse] = []
    hidden: bool = False
    created_at: UtcDatetime


class LikeResponse(CamelModel):
    likes: int
    liked: bool
    post_id: ObjectIdStr


class ReportResponse(BaseModel):
    message: str
    reports: int
    hidden: bool = False
    removed: bool = False


class HistoryResponse(BaseModel):
    posts: list[PostResponse]
    comments: list[HistoryCommentResponse]
