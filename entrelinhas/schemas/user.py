"""Pydantic schemas for User and auth."""
from pydantic import BaseModel

from entrelinhas.schemas.common import CamelModel, ObjectIdStr


class UserCreate(BaseModel):
    # Presence is checked by the service so every missing field gets the same message.
    email: str | None = None
    username: str | None = None
    password: str | None = None
    grade: str | None = None
    region: str | None = None


class LoginRequest(BaseModel):
    email: str | None = None
    password: str | None = None


class Token(CamelModel):
    token: str
    user_id: ObjectIdStr
    username: str
