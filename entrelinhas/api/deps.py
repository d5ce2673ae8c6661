"""API dependencies: auth, db, clock."""
from collections.abc import Callable
from datetime import datetime

from fastapi import Depends
from fastapi.security import APIKeyHeader
from motor.motor_asyncio import AsyncIOMotorDatabase

from entrelinhas.core.clock import local_now
from entrelinhas.core.errors import InvalidToken, Unauthenticated
from entrelinhas.core.security import decode_token
from entrelinhas.db.client import get_db, to_object_id
from entrelinhas.services.auth_service import get_user_by_id

# Plain header rather than HTTPBearer: clients may send the bare token.
authorization_header = APIKeyHeader(name="Authorization", auto_error=False)


def get_clock() -> Callable[[], datetime]:
    return local_now


def _strip_bearer(value: str) -> str:
    return value[len("Bearer "):] if value.startswith("Bearer ") else value


async def get_current_user(
    authorization: str | None = Depends(authorization_header),
    db: AsyncIOMotorDatabase = Depends(get_db),
) -> dict:
    if not authorization:
        raise Unauthenticated("Token necessário")
    token = _strip_bearer(authorization).strip()
    if not token:
        raise Unauthenticated("Token necessário")
    payload = decode_token(token)
    if not payload or payload.get("type") != "access":
        raise InvalidToken("Token inválido")
    user_id = to_object_id(payload.get("sub"))
    if user_id is None:
        raise InvalidToken("Token inválido")
    user = await get_user_by_id(db, user_id)
    if user is None:
        raise InvalidToken("Usuário não encontrado")
    return user
