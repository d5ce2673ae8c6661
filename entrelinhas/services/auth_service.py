"""Authentication business logic."""
from bson import ObjectId
from motor.motor_asyncio import AsyncIOMotorDatabase
from pymongo.errors import DuplicateKeyError, PyMongoError

from entrelinhas.core.errors import Conflict, InternalError, InvalidCredentials, ValidationError
from entrelinhas.core.security import create_access_token, get_password_hash, verify_password
from entrelinhas.models.user import USERS, new_user_document
from entrelinhas.schemas.user import LoginRequest, Token, UserCreate


def _log(msg: str, *args):
    print(f"[Auth] {msg}", *args)


async def get_user_by_id(db: AsyncIOMotorDatabase, user_id: ObjectId) -> dict | None:
    return await db[USERS].find_one({"_id": user_id})


async def get_user_by_email(db: AsyncIOMotorDatabase, email: str) -> dict | None:
    return await db[USERS].find_one({"email": email})


async def create_user(db: AsyncIOMotorDatabase, data: UserCreate) -> dict:
    if not all([data.email, data.username, data.password, data.grade, data.region]):
        raise ValidationError("Preencha todos os campos")
    user = new_user_document(
        email=data.email,
        username=data.username,
        password_hash=get_password_hash(data.password),
        grade=data.grade,
        region=data.region,
    )
    try:
        result = await db[USERS].insert_one(user)
    except DuplicateKeyError:
        raise Conflict("Email ou username já cadastrado")
    except PyMongoError as e:
        _log("Register failed:", e)
        raise InternalError("Erro no servidor") from e
    user["_id"] = result.inserted_id
    return user


async def authenticate_user(db: AsyncIOMotorDatabase, email: str | None, password: str | None) -> dict:
    if not email or not password:
        raise InvalidCredentials("Credenciais inválidas")
    user = await get_user_by_email(db, email)
    if not user or not user.get("password"):
        raise InvalidCredentials("Credenciais inválidas")
    matches, new_hash = verify_password(password, user["password"])
    if not matches:
        raise InvalidCredentials("Credenciais inválidas")
    if new_hash:
        await db[USERS].update_one({"_id": user["_id"]}, {"$set": {"password": new_hash}})
        user["password"] = new_hash
        _log("Upgraded legacy password for:", user["_id"])
    return user


async def login(db: AsyncIOMotorDatabase, data: LoginRequest) -> Token:
    user = await authenticate_user(db, data.email, data.password)
    return Token(
        token=create_access_token(user["_id"], user["username"]),
        user_id=user["_id"],
        username=user["username"],
    )
