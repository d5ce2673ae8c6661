"""Posts: feed, create, delete, likes, comments, reports."""
from collections.abc import Callable
from datetime import datetime

from fastapi import APIRouter, Depends
from motor.motor_asyncio import AsyncIOMotorDatabase

from entrelinhas.api.deps import get_clock, get_current_user
from entrelinhas.db.client import get_db
from entrelinhas.schemas.comment import CommentCreate, CommentCreated
from entrelinhas.schemas.common import MessageResponse
from entrelinhas.schemas.post import LikeResponse, PostCreate, PostResponse, ReportResponse
from entrelinhas.services import post_service

router = APIRouter(prefix="/posts", tags=["posts"])


@router.get("", response_model=list[PostResponse])
async def list_posts(db: AsyncIOMotorDatabase = Depends(get_db)):
    return await post_service.list_visible_posts(db)


@router.post("", response_model=PostResponse)
async def create_post(
    data: PostCreate,
    current_user: dict = Depends(get_current_user),
    db: AsyncIOMotorDatabase = Depends(get_db),
    clock: Callable[[], datetime] = Depends(get_clock),
):
    return await post_service.create_post(db, current_user, data, now=clock())


@router.delete("/{post_id}", response_model=MessageResponse)
async def delete_post(
    post_id: str,
    current_user: dict = Depends(get_current_user),
    db: AsyncIOMotorDatabase = Depends(get_db),
):
    await post_service.delete_post(db, current_user, post_id)
    return MessageResponse(message="Post apagado")


@router.post("/{post_id}/like", response_model=LikeResponse)
async def like_post(
    post_id: str,
    current_user: dict = Depends(get_current_user),
    db: AsyncIOMotorDatabase = Depends(get_db),
):
    post, liked = await post_service.toggle_like(db, current_user, post_id)
    return LikeResponse(likes=len(post["likes"]), liked=liked, post_id=post["_id"])


@router.post("/{post_id}/comment", response_model=CommentCreated)
async def create_comment(
    post_id: str,
    data: CommentCreate,
    current_user: dict = Depends(get_current_user),
    db: AsyncIOMotorDatabase = Depends(get_db),
    clock: Callable[[], datetime] = Depends(get_clock),
):
    comment = await post_service.add_comment(db, current_user, post_id, data.content, now=clock())
    return {"message": "Comentário adicionado", "comment": comment}


@router.delete("/{post_id}/comment/{comment_id}", response_model=MessageResponse)
@router.delete("/{post_id}/comments/{comment_id}", response_model=MessageResponse, include_in_schema=False)
async def delete_comment(
    post_id: str,
    comment_id: str,
    current_user: dict = Depends(get_current_user),
    db: AsyncIOMotorDatabase = Depends(get_db),
):
    await post_service.delete_comment(db, current_user, post_id, comment_id)
    return MessageResponse(message="Comentário apagado")


@router.post("/{post_id}/report", response_model=ReportResponse)
async def report_post(
    post_id: str,
    current_user: dict = Depends(get_current_user),
    db: AsyncIOMotorDatabase = Depends(get_db),
):
    return await post_service.report_post(db, current_user, post_id)
