"""Security utilities: password hashing and JWT token handling."""
from datetime import datetime, timedelta, timezone

from bson import ObjectId
from jose import JWTError, jwt
from passlib.context import CryptContext

from entrelinhas.core.config import settings

# "plaintext" stays last so older accounts still verify; passlib flags them for rehash.
pwd_context = CryptContext(
    schemes=["bcrypt", "plaintext"],
    deprecated=["plaintext"],
    bcrypt__rounds=settings.BCRYPT_ROUNDS,
)


def get_password_hash(password: str) -> str:
    return pwd_context.hash(password)


def verify_password(plain_password: str, stored_password: str) -> tuple[bool, str | None]:
    """Check a password against its stored form.

    Returns ``(matches, new_hash)``; ``new_hash`` is set when the stored value
    uses a deprecated scheme and should be replaced.
    """
    return pwd_context.verify_and_update(plain_password, stored_password)


def create_access_token(user_id: str | ObjectId, username: str) -> str:
    to_encode = {"sub": str(user_id), "username": username, "type": "access"}
    if settings.ACCESS_TOKEN_EXPIRE_MINUTES:
        to_encode["exp"] = datetime.now(timezone.utc) + timedelta(minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES)
    return jwt.encode(to_encode, settings.JWT_SECRET_KEY, algorithm=settings.JWT_ALGORITHM)


def decode_token(token: str) -> dict | None:
    try:
        payload = jwt.decode(token, settings.JWT_SECRET_KEY, algorithms=[settings.JWT_ALGORITHM])
        return payload
    except JWTError:
        return None
