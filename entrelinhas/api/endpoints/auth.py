"""Auth endpoints: register, login."""
from fastapi import APIRouter, Depends
from motor.motor_asyncio import AsyncIOMotorDatabase

from entrelinhas.db.client import get_db
from entrelinhas.schemas.common import MessageResponse
from entrelinhas.schemas.user import LoginRequest, Token, UserCreate
from entrelinhas.services import auth_service


def _log(msg: str, *args):
    print(f"[Auth] {msg}", *args)


router = APIRouter(prefix="/auth", tags=["auth"])


@router.post("/register", response_model=MessageResponse)
async def register(
    data: UserCreate,
    db: AsyncIOMotorDatabase = Depends(get_db),
):
    _log("Register attempt:", data.username, data.email)
    user = await auth_service.create_user(db, data)
    _log("Register success:", user["_id"], user["username"])
    return MessageResponse(message="Conta criada")


@router.post("/login", response_model=Token)
async def login(
    data: LoginRequest,
    db: AsyncIOMotorDatabase = Depends(get_db),
):
    _log("Login attempt:", data.email)
    token = await auth_service.login(db, data)
    _log("Login success:", token.user_id, token.username)
    return token
