"""Endpoints about the authenticated user."""
from fastapi import APIRouter, Depends
from motor.motor_asyncio import AsyncIOMotorDatabase

from entrelinhas.api.deps import get_current_user
from entrelinhas.db.client import get_db
from entrelinhas.schemas.post import HistoryResponse
from entrelinhas.services import post_service

router = APIRouter(prefix="/me", tags=["me"])


@router.get("/history", response_model=HistoryResponse)
async def history(
    current_user: dict = Depends(get_current_user),
    db: AsyncIOMotorDatabase = Depends(get_db),
):
    """Every post the user wrote and every comment they left, on any post."""
    return await post_service.get_history(db, current_user)
