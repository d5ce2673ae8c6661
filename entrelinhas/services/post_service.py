"""Post, like, comment and report business logic.

Likes, reports and comments live inside the post document, so every change to
them is a single atomic update on that document rather than a read followed by
a save.
"""
import re
from datetime import datetime

from bson import ObjectId
from motor.motor_asyncio import AsyncIOMotorDatabase
from pymongo import DESCENDING, ReturnDocument

from entrelinhas.core.clock import start_of_day, to_storage
from entrelinhas.core.config import settings
from entrelinhas.core.errors import Conflict, Forbidden, NotFound, ValidationError
from entrelinhas.db.client import to_object_id
from entrelinhas.models.post import POSTS, VISIBLE_FILTER, find_comment, new_comment_document, new_post_document
from entrelinhas.schemas.post import PostCreate, ReportResponse

LINK_PATTERN = re.compile(r"(http|www|\.com|\.net|\.org)", re.IGNORECASE)

POST_NOT_FOUND = "Post não encontrado"
COMMENT_NOT_FOUND = "Comentário não encontrado"

# Attempts for a like toggle that keeps losing to a concurrent toggle.
LIKE_ATTEMPTS = 3


def _log(msg: str, *args):
    print(f"[Posts] {msg}", *args)


def text_length(content: str) -> int:
    """Length in UTF-16 code units, the unit browsers count in."""
    return len(content.encode("utf-16-le")) // 2


def validate_content(content: str | None, max_length: int, invalid_message: str) -> str:
    if not content or text_length(content) > max_length:
        raise ValidationError(invalid_message)
    if LINK_PATTERN.search(content):
        raise ValidationError("Links não permitidos")
    return content


def _post_id(post_id: str | ObjectId) -> ObjectId:
    oid = to_object_id(post_id)
    if oid is None:
        raise NotFound(POST_NOT_FOUND)
    return oid


async def _post_exists(db: AsyncIOMotorDatabase, post_id: ObjectId) -> bool:
    return await db[POSTS].find_one({"_id": post_id}, {"_id": 1}) is not None


async def get_post(db: AsyncIOMotorDatabase, post_id: str | ObjectId) -> dict:
    post = await db[POSTS].find_one({"_id": _post_id(post_id)})
    if not post:
        raise NotFound(POST_NOT_FOUND)
    return post


async def list_visible_posts(db: AsyncIOMotorDatabase) -> list[dict]:
    cursor = db[POSTS].find(VISIBLE_FILTER).sort("createdAt", DESCENDING)
    return await cursor.to_list(length=None)


async def create_post(db: AsyncIOMotorDatabase, user: dict, data: PostCreate, now: datetime) -> dict:
    content = validate_content(
        data.content,
        settings.POST_MAX_LENGTH,
        f"Conteúdo inválido (máx {settings.POST_MAX_LENGTH} caracteres)",
    )
    already_posted_today = await db[POSTS].find_one(
        {"userId": user["_id"], "createdAt": {"$gte": to_storage(start_of_day(now))}},
        {"_id": 1},
    )
    if already_posted_today:
        raise Conflict("Você já postou hoje")

    post = new_post_document(
        user,
        content,
        created_at=now,
        anonymous=bool(data.anonymous),
        hide_likes=bool(data.hide_likes),
        mood=data.mood,
    )
    result = await db[POSTS].insert_one(post)
    post["_id"] = result.inserted_id
    _log("Post created:", post["_id"], "by", user["_id"])
    return post


async def delete_post(db: AsyncIOMotorDatabase, user: dict, post_id: str) -> None:
    post = await get_post(db, post_id)
    if post.get("userId") != user["_id"]:
        raise Forbidden("Você não pode apagar este post")
    await db[POSTS].delete_one({"_id": post["_id"], "userId": user["_id"]})
    _log("Post deleted:", post["_id"])


async def toggle_like(db: AsyncIOMotorDatabase, user: dict, post_id: str) -> tuple[dict, bool]:
    """Add the user to the post's likes, or remove them if already there.

    Returns the updated post and whether the user now likes it.
    """
    oid = _post_id(post_id)
    user_id = user["_id"]
    for _ in range(LIKE_ATTEMPTS):
        post = await db[POSTS].find_one_and_update(
            {"_id": oid, "likes": {"$ne": user_id}},
            {"$addToSet": {"likes": user_id}},
            return_document=ReturnDocument.AFTER,
        )
        if post is not None:
            return post, True
        post = await db[POSTS].find_one_and_update(
            {"_id": oid, "likes": user_id},
            {"$pull": {"likes": user_id}},
            return_document=ReturnDocument.AFTER,
        )
        if post is not None:
            return post, False
        if not await _post_exists(db, oid):
            break
    raise NotFound(POST_NOT_FOUND)


async def add_comment(db: AsyncIOMotorDatabase, user: dict, post_id: str, content: str | None, now: datetime) -> dict:
    content = validate_content(
        content,
        settings.COMMENT_MAX_LENGTH,
        f"Comentário inválido (máx {settings.COMMENT_MAX_LENGTH} caracteres)",
    )
    oid = _post_id(post_id)
    comment = new_comment_document(user, content, created_at=now)
    result = await db[POSTS].update_one({"_id": oid}, {"$push": {"comments": comment}})
    if result.matched_count == 0:
        raise NotFound(POST_NOT_FOUND)
    return comment


async def delete_comment(db: AsyncIOMotorDatabase, user: dict, post_id: str, comment_id: str) -> None:
    post = await get_post(db, post_id)
    cid = to_object_id(comment_id)
    comment = find_comment(post, cid) if cid is not None else None
    if comment is None:
        raise NotFound(COMMENT_NOT_FOUND)
    if comment.get("userId") != user["_id"]:
        raise Forbidden("Você não pode apagar este comentário")
    await db[POSTS].update_one(
        {"_id": post["_id"]},
        {"$pull": {"comments": {"_id": cid, "userId": user["_id"]}}},
    )


async def report_post(db: AsyncIOMotorDatabase, user: dict, post_id: str) -> ReportResponse:
    oid = _post_id(post_id)
    post = await db[POSTS].find_one_and_update(
        {"_id": oid, "reports": {"$ne": user["_id"]}},
        {"$addToSet": {"reports": user["_id"]}},
        return_document=ReturnDocument.AFTER,
    )
    if post is None:
        if await _post_exists(db, oid):
            raise Conflict("Você já denunciou este post")
        raise NotFound(POST_NOT_FOUND)

    count = len(post["reports"])
    if count < settings.REPORT_THRESHOLD:
        return ReportResponse(message="Denúncia registrada", reports=count, hidden=bool(post.get("hidden")))
    if settings.REPORT_ACTION == "delete":
        await db[POSTS].delete_one({"_id": oid})
        _log(f"Post removed after {count} reports:", oid)
        return ReportResponse(message="Post removido por denúncias", reports=count, removed=True)
    await db[POSTS].update_one({"_id": oid}, {"$set": {"hidden": True}})
    _log(f"Post hidden after {count} reports:", oid)
    return ReportResponse(message="Post ocultado por denúncias", reports=count, hidden=True)


async def get_history(db: AsyncIOMotorDatabase, user: dict) -> dict:
    user_id = user["_id"]
    posts = await db[POSTS].find({"userId": user_id}).sort("createdAt", DESCENDING).to_list(length=None)
    comments = []
    async for post in db[POSTS].find({"comments.userId": user_id}):
        for comment in post.get("comments") or []:
            if comment.get("userId") == user_id:
                comments.append({"postId": post["_id"], **comment})
    return {"posts": posts, "comments": comments}
